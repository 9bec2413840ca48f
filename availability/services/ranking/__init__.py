from availability.services.ranking.criteria import (
    RankLabels,
    compute_rankings,
    rankings_to_dict,
)
from availability.services.ranking.errors import RankingInvariantError
from availability.services.ranking.labels import (
    LABEL_BADGES,
    Label,
    label_badge,
    label_rankings,
    select_label,
)
from availability.services.ranking.order import rank_items
from availability.services.ranking.tally import tally_preferences

__all__ = [
    "LABEL_BADGES",
    "Label",
    "RankLabels",
    "RankingInvariantError",
    "compute_rankings",
    "label_badge",
    "label_rankings",
    "rank_items",
    "rankings_to_dict",
    "select_label",
    "tally_preferences",
]
