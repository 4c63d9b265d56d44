from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from savings_goal.app import create_app
from savings_goal.config import Settings
from savings_goal.schemas.plan import PlanInputs


@pytest.fixture()
def client() -> FlaskClient:
    flask_app = create_app(Settings(SAVINGS_GOAL_APP_NAME="savings-goal-test"))
    flask_app.config["TESTING"] = True
    with flask_app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def couple_plan() -> PlanInputs:
    """Two people saving 2000 per period for 24 periods towards 100000."""
    return PlanInputs(
        present_value=0,
        periodic_contribution=2000,
        periods=24,
        target_future_value=100000,
        participants=2,
    )
