from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient, FlaskCliRunner

from compound_interest.app import create_app
from compound_interest.app.config import Settings


@pytest.fixture()
def app() -> Flask:
    flask_app = create_app(Settings(LOG_LEVEL="DEBUG", DEFAULT_LANGUAGE="es"))
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def runner(app: Flask) -> FlaskCliRunner:
    return app.test_cli_runner()
