"""The closed preference scale and its display metadata.

Ranking treats a preference as a plain signed integer; this table only
matters for showing a selection to a person. Values outside the table are
accepted everywhere and fall back to an "unknown" rendering.
"""
from collections import namedtuple

PreferenceOption = namedtuple(
    "PreferenceOption", ["value", "label", "emoji", "background", "foreground"]
)

NO = -1
MAYBE = 0

PREFERENCE_OPTIONS = (
    PreferenceOption(-1, "Doesn't work for me", "\U0001F44E", "bg-red-200", "text-red-800"),
    PreferenceOption(0, "Preferably not", "\U0001F610", "bg-yellow-200", "text-yellow-800"),
    PreferenceOption(1, "Okay", "\U0001F642", "bg-green-200", "text-green-800"),
    PreferenceOption(2, "Good", "\U0001F604", "bg-emerald-200", "text-emerald-800"),
    PreferenceOption(3, "Great", "\U0001F60D", "bg-teal-200", "text-teal-800"),
    PreferenceOption(4, "Amazing", "\U0001F929", "bg-sky-200", "text-sky-800"),
)

UNKNOWN_EMOJI = "❓"
UNKNOWN_CLASSES = "bg-gray-200"

_OPTIONS_BY_VALUE = {option.value: option for option in PREFERENCE_OPTIONS}


def preference_option(value):
    return _OPTIONS_BY_VALUE.get(value)


def preference_emoji(value):
    option = preference_option(value)
    return option.emoji if option else UNKNOWN_EMOJI


def uncertainty_emoji(uncertain):
    return UNKNOWN_EMOJI if uncertain else ""


def preference_title(value):
    if value is None:
        return "Not answered"
    option = preference_option(value)
    return option.label if option else "?"


def preference_classes(value):
    option = preference_option(value) if value is not None else None
    if option is None:
        return UNKNOWN_CLASSES
    return f"{option.background} {option.foreground}"


def next_preference(value):
    option = preference_option(value)
    if option is None:
        return PREFERENCE_OPTIONS[0]
    index = PREFERENCE_OPTIONS.index(option)
    return PREFERENCE_OPTIONS[(index + 1) % len(PREFERENCE_OPTIONS)]


def previous_preference(value):
    option = preference_option(value)
    if option is None:
        return PREFERENCE_OPTIONS[0]
    index = PREFERENCE_OPTIONS.index(option)
    return PREFERENCE_OPTIONS[(index - 1) % len(PREFERENCE_OPTIONS)]
