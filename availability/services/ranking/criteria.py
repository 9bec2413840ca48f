import logging
from dataclasses import dataclass

from availability.models.preference import MAYBE, NO
from availability.services.ranking.errors import RankingInvariantError
from availability.services.ranking.order import rank_items
from availability.services.ranking.tally import iter_selections, tally_preferences

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RankLabels:
    least_number_of_nos_rank: int
    least_number_of_nos_maybes_rank: int
    best_score_rank: int
    overall_rank: int
    strictly_superior_rank: int

    def to_dict(self):
        return {
            "leastNumberOfNosRank": self.least_number_of_nos_rank,
            "leastNumberOfNosMaybesRank": self.least_number_of_nos_maybes_rank,
            "bestScoreRank": self.best_score_rank,
            "overallRank": self.overall_rank,
            "strictlySuperiorRank": self.strictly_superior_rank,
        }


def nos_key(counts):
    if counts is None:
        return None
    return counts.get(NO, 0)


def nos_maybes_key(counts):
    if counts is None:
        return None
    return counts.get(NO, 0) + counts.get(MAYBE, 0)


def best_score_key(counts):
    if counts is None:
        return None
    return -sum(preference * count for preference, count in counts.items())


def compare_dominance(a, b):
    """Three-way compare of two rank tuples; mixed directions compare equal."""
    better = any(x < y for x, y in zip(a, b))
    worse = any(x > y for x, y in zip(a, b))
    if better and not worse:
        return -1
    if worse and not better:
        return 1
    return 0


class RankIndex:
    """Ranks of one criterion keyed by option id."""

    def __init__(self, criterion, ranked):
        self.criterion = criterion
        self._ranks = {entry.item.id: entry.rank for entry in ranked}

    def rank_of(self, option_id):
        try:
            return self._ranks[option_id]
        except KeyError:
            raise RankingInvariantError(
                f"Option {option_id!r} missing from {self.criterion} ranking"
            ) from None


def compute_rankings(options, responses):
    options = list(options)
    number_of_options = len(options)
    if not options:
        return {}

    option_ids = {option.id for option in options}
    tallies = tally_preferences(iter_selections(responses), option_ids)

    nos = RankIndex(
        "fewest nos",
        rank_items(options, key=lambda o: nos_key(tallies.get(o.id))),
    )
    nos_maybes = RankIndex(
        "fewest nos and maybes",
        rank_items(options, key=lambda o: nos_maybes_key(tallies.get(o.id))),
    )
    best_score = RankIndex(
        "best score",
        rank_items(options, key=lambda o: best_score_key(tallies.get(o.id))),
    )

    # Positional sum, weakest component first. Kept as-is: the label
    # thresholds on overall rank are tuned to this arithmetic.
    def aggregate_rank_score(option):
        components = (
            nos_maybes.rank_of(option.id),
            best_score.rank_of(option.id),
            nos.rank_of(option.id),
        )
        return sum(
            position * number_of_options + rank
            for position, rank in enumerate(components)
        )

    overall = RankIndex("overall", rank_items(options, key=aggregate_rank_score))

    def dominance_components(option):
        return (
            nos.rank_of(option.id),
            nos_maybes.rank_of(option.id),
            best_score.rank_of(option.id),
        )

    # Incomparable pairs compare equal, so the comparator is not transitive.
    # Ordering by component sum first puts every option ahead of the options
    # it dominates, and the sort keeps that order.
    by_component_sum = sorted(options, key=lambda o: sum(dominance_components(o)))
    dominance = RankIndex(
        "dominance",
        rank_items(
            by_component_sum,
            compare=lambda a, b: compare_dominance(
                dominance_components(a), dominance_components(b)
            ),
        ),
    )

    results = {}
    for option in options:
        results[option.id] = RankLabels(
            least_number_of_nos_rank=nos.rank_of(option.id),
            least_number_of_nos_maybes_rank=nos_maybes.rank_of(option.id),
            best_score_rank=best_score.rank_of(option.id),
            overall_rank=overall.rank_of(option.id),
            strictly_superior_rank=dominance.rank_of(option.id),
        )

    logger.debug(
        "Ranked %d options (%d with selections)", number_of_options, len(tallies)
    )
    return results


def rankings_to_dict(rankings):
    return {option_id: ranks.to_dict() for option_id, ranks in rankings.items()}
