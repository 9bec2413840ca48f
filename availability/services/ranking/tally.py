import logging

logger = logging.getLogger(__name__)


def iter_selections(responses):
    for response in responses:
        yield from response.selected_options


def tally_preferences(selections, option_ids=None):
    tallies = {}
    skipped = 0

    for selection in selections:
        if option_ids is not None and selection.option_id not in option_ids:
            skipped += 1
            continue
        counts = tallies.setdefault(selection.option_id, {})
        counts[selection.preference] = counts.get(selection.preference, 0) + 1

    if skipped:
        logger.debug("Ignored %d selections for unknown options", skipped)
    return tallies
