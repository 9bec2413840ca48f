from availability.services.ranking import compute_rankings, select_label
from availability.services.summary import group_selections_by_date, summarize_event

__all__ = [
    "compute_rankings",
    "group_selections_by_date",
    "select_label",
    "summarize_event",
]
