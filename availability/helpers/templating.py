from availability.models.preference import (
    preference_classes,
    preference_emoji,
    preference_title,
    uncertainty_emoji,
)
from availability.services import compute_rankings, summarize_event
from availability.services.ranking import label_badge


def register_template_helpers(app):
    app.add_template_filter(preference_emoji, "preference_emoji")
    app.add_template_filter(preference_title, "preference_title")
    app.add_template_filter(preference_classes, "preference_classes")
    app.add_template_filter(uncertainty_emoji, "uncertainty_emoji")

    def summarize(options, responses):
        return summarize_event(
            options,
            responses,
            min_responses=app.config["AVAILABILITY_SUMMARY_MIN_RESPONSES"],
        )

    app.add_template_global(label_badge, "label_badge")
    app.add_template_global(compute_rankings, "compute_rankings")
    app.add_template_global(summarize, "summarize_event")
