import logging

from availability.config import Config
from availability.helpers import register_template_helpers
from availability.services import compute_rankings, summarize_event


def init_app(app):
    for key in ("AVAILABILITY_SUMMARY_MIN_RESPONSES", "AVAILABILITY_LOG_LEVEL"):
        app.config.setdefault(key, getattr(Config, key))

    level = app.config["AVAILABILITY_LOG_LEVEL"].upper()
    logging.getLogger("availability").setLevel(level)
    register_template_helpers(app)
    app.extensions["availability"] = True
    app.logger.info("Availability ranking helpers registered")
    return app


__all__ = ["Config", "compute_rankings", "init_app", "summarize_event"]
