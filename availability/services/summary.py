from availability.config import Config
from availability.services.ranking import (
    Label,
    compute_rankings,
    label_badge,
    select_label,
)


def group_selections_by_date(options, responses):
    options_by_id = {option.id: option for option in options}
    grouped = {}

    for response in responses:
        for selection in response.selected_options:
            option = options_by_id.get(selection.option_id)
            if option is None:
                continue
            grouped.setdefault(option.date, []).append(
                (selection, response.respondent)
            )

    return grouped


def summarize_event(options, responses, min_responses=None):
    options = list(options)
    responses = list(responses)
    if min_responses is None:
        min_responses = Config.AVAILABILITY_SUMMARY_MIN_RESPONSES

    rankings = compute_rankings(options, responses)
    number_of_options = len(options)

    option_results = []
    for option in options:
        ranks = rankings[option.id]
        label = select_label(ranks, number_of_options)
        option_results.append(
            {
                "option": option,
                "ranks": ranks,
                "label": label,
                "badge": label_badge(label),
            }
        )

    return {
        "total_responses": len(responses),
        "option_results": option_results,
        "best_overall": [
            row["option"] for row in option_results if row["label"] is Label.BEST_OVERALL
        ],
        "show_summary": len(responses) > min_responses,
    }
