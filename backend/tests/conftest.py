from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from backend.app import create_app
from backend.app.config import Settings


@pytest.fixture()
def app():
    return create_app(Settings(env="test", log_level="WARNING"))


@pytest.fixture()
def client(app) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
