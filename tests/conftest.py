from pathlib import Path
import sys

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from flask import Flask

from availability import init_app
from availability.models import Option, Respondent, Response, SelectedOption


@pytest.fixture()
def app():
    app = Flask(__name__)
    app.config.update({"TESTING": True, "AVAILABILITY_SUMMARY_MIN_RESPONSES": 1})
    init_app(app)
    with app.app_context():
        yield app


@pytest.fixture()
def make_options():
    def build(*ids):
        return [
            Option(id=option_id, date=f"2026-11-{index + 1:02d}")
            for index, option_id in enumerate(ids)
        ]

    return build


@pytest.fixture()
def make_response():
    def build(name, votes):
        return Response(
            respondent=Respondent(name=name),
            selected_options=tuple(
                SelectedOption(option_id=option_id, preference=preference)
                for option_id, preference in votes.items()
            ),
        )

    return build
