from availability.models.draft import ResponseDraft
from availability.models.option import Option, sort_options_by_date, to_iso_date
from availability.models.preference import PREFERENCE_OPTIONS, PreferenceOption
from availability.models.response import Respondent, Response, SelectedOption

__all__ = [
    "Option",
    "Respondent",
    "Response",
    "SelectedOption",
    "ResponseDraft",
    "PreferenceOption",
    "PREFERENCE_OPTIONS",
    "sort_options_by_date",
    "to_iso_date",
]
