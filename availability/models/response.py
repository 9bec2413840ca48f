from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class Respondent:
    id: Optional[str] = None
    name: Optional[str] = None
    user_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        data = data or {}
        return cls(
            id=data.get("id"),
            name=data.get("name"),
            user_id=data.get("userId"),
        )


@dataclass(frozen=True)
class SelectedOption:
    option_id: str
    preference: int
    uncertain: bool = False

    @classmethod
    def from_dict(cls, data):
        return cls(
            option_id=str(data["optionId"]),
            preference=int(data["preference"]),
            uncertain=bool(data.get("uncertain", False)),
        )

    def to_dict(self):
        return {
            "optionId": self.option_id,
            "preference": self.preference,
            "uncertain": self.uncertain,
        }


@dataclass(frozen=True)
class Response:
    respondent: Respondent = field(default_factory=Respondent)
    selected_options: Tuple[SelectedOption, ...] = ()
    id: Optional[str] = None
    event_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data.get("id"),
            event_id=data.get("eventId"),
            respondent=Respondent.from_dict(data.get("respondent")),
            selected_options=tuple(
                SelectedOption.from_dict(item)
                for item in data.get("selectedOptions", ())
            ),
        )
