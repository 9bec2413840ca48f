from dataclasses import dataclass
from datetime import date, datetime


def to_iso_date(value):
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return value.isoformat()
    return str(value)[:10]


@dataclass(frozen=True)
class Option:
    id: str
    date: str

    @classmethod
    def from_dict(cls, data):
        return cls(id=str(data["id"]), date=to_iso_date(data["date"]))


def sort_options_by_date(options):
    return sorted(options, key=lambda option: option.date)
