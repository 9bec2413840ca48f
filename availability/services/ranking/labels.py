from collections import namedtuple
from enum import Enum


class Label(str, Enum):
    BEST_OVERALL = "Best Overall"
    SECOND_BEST = "Second Best"
    MOST_PREFERRED = "Most Preferred"
    FEWEST_NOS = "Fewest Nos"
    FEWEST_NOS_AND_MAYBES = "Fewest Nos and Maybes"
    SUBOPTIMAL = "Suboptimal"
    NOTHING = "Nothing"


Badge = namedtuple("Badge", ["glyph", "background", "foreground"])

LABEL_BADGES = {
    Label.BEST_OVERALL: Badge("\U0001F3C6", "bg-amber-200", "text-amber-800"),
    Label.SECOND_BEST: Badge("\U0001F948", "bg-slate-200", "text-slate-800"),
    Label.MOST_PREFERRED: Badge("\U0001F60D", "bg-sky-200", "text-sky-800"),
    Label.FEWEST_NOS: Badge("\U0001F44D", "bg-green-200", "text-green-800"),
    Label.FEWEST_NOS_AND_MAYBES: Badge("✅", "bg-emerald-200", "text-emerald-800"),
    Label.SUBOPTIMAL: Badge("⚠️", "bg-red-200", "text-red-800"),
}


def select_label(ranks, number_of_options):
    if ranks.overall_rank == 0:
        return Label.BEST_OVERALL
    if ranks.overall_rank == 1 and number_of_options > 2:
        return Label.SECOND_BEST
    if ranks.best_score_rank == 0:
        return Label.MOST_PREFERRED
    if ranks.least_number_of_nos_rank == 0:
        return Label.FEWEST_NOS
    if ranks.least_number_of_nos_maybes_rank == 0:
        return Label.FEWEST_NOS_AND_MAYBES
    if ranks.strictly_superior_rank > 0:
        return Label.SUBOPTIMAL
    return Label.NOTHING


def label_badge(label):
    return LABEL_BADGES.get(Label(label))


def label_rankings(rankings):
    number_of_options = len(rankings)
    return {
        option_id: select_label(ranks, number_of_options)
        for option_id, ranks in rankings.items()
    }
