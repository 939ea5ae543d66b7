import pytest
from flask.testing import FlaskClient

from firecalc.app import create_app
from firecalc.config import AppConfig


@pytest.fixture()
def app():
    return create_app(AppConfig(log_level="WARNING"))


@pytest.fixture()
def client(app) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
