import os

import pytest

os.environ.setdefault("FLASK_CONFIG", "testing")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from app import create_app  # noqa: E402


@pytest.fixture
def app():
    app = create_app("testing")
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def runner():
    from click.testing import CliRunner

    return CliRunner()
