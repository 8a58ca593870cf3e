from __future__ import annotations

from datetime import date

import pytest
from flask.testing import FlaskClient

from heloc.app import create_app
from heloc.app.api import routes as api_routes
from heloc.app.ui import routes as ui_routes
from heloc.config import Settings

TODAY = date(2025, 3, 15)


@pytest.fixture()
def app(monkeypatch):
    monkeypatch.setattr(api_routes, "today", lambda: TODAY)
    monkeypatch.setattr(ui_routes, "today", lambda: TODAY)
    flask_app = create_app(Settings(log_format="text", log_level="WARNING"))
    flask_app.config.update(TESTING=True)
    yield flask_app


@pytest.fixture()
def client(app) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
