from dataclasses import replace

from availability.models.preference import MAYBE, next_preference, previous_preference
from availability.models.response import SelectedOption


class ResponseDraft:
    """Selections being collected for one response, one per option."""

    def __init__(self):
        self._by_option = {}

    def toggle(self, option_id, reverse=False):
        current = self._by_option.get(option_id)
        if current is None:
            selection = SelectedOption(option_id=option_id, preference=MAYBE)
        else:
            step = previous_preference if reverse else next_preference
            selection = replace(current, preference=step(current.preference).value)
        self._by_option[option_id] = selection
        return selection

    def set_uncertain(self, option_id, uncertain):
        current = self._by_option.get(option_id)
        if current is None:
            raise KeyError(option_id)
        self._by_option[option_id] = replace(current, uncertain=bool(uncertain))
        return self._by_option[option_id]

    def selections(self):
        return sorted(self._by_option.values(), key=lambda s: s.preference)

    def is_ready(self):
        return len(self._by_option) > 0

    def to_payload(self, event_id, name):
        return {
            "eventId": event_id,
            "name": name,
            "options": [selection.to_dict() for selection in self.selections()],
        }
