import logging

from flask import Flask

from availability import Config, init_app
from availability.models import Option, Respondent, Response, SelectedOption


def test_init_app_registers_filters_and_globals(app):
    for name in ("preference_emoji", "preference_title", "preference_classes", "uncertainty_emoji"):
        assert name in app.jinja_env.filters
    for name in ("label_badge", "compute_rankings", "summarize_event"):
        assert name in app.jinja_env.globals
    assert "availability" in app.extensions


def test_init_app_keeps_host_config(app):
    assert app.config["AVAILABILITY_SUMMARY_MIN_RESPONSES"] == 1
    assert app.config["AVAILABILITY_LOG_LEVEL"] == Config.AVAILABILITY_LOG_LEVEL


def test_filters_render_in_templates(app):
    template = app.jinja_env.from_string(
        "{{ value|preference_title }}|{{ value|preference_classes }}|{{ flag|uncertainty_emoji }}"
    )

    assert template.render(value=2, flag=False) == "Good|bg-emerald-200 text-emerald-800|"


def test_summarize_event_global_uses_app_threshold(app):
    options = [Option("a", "2026-11-01")]
    responses = [
        Response(respondent=Respondent(name=name), selected_options=(SelectedOption("a", 2),))
        for name in ("Ann", "Bob")
    ]

    summary = app.jinja_env.globals["summarize_event"](options, responses)

    assert summary["show_summary"] is True
    badge = app.jinja_env.globals["label_badge"](summary["option_results"][0]["label"])
    assert badge.glyph


def test_init_app_accepts_lowercase_log_level():
    app = Flask(__name__)
    app.config["AVAILABILITY_LOG_LEVEL"] = "debug"
    logger = logging.getLogger("availability")
    previous = logger.level
    try:
        init_app(app)
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(previous)
