import os
import tempfile

# Keep test log files out of the source tree
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="hello-service-logs-")
os.environ["LOG_LEVEL"] = "DEBUG"

import pytest
from app import create_app


@pytest.fixture(scope="session")
def app():
    application = create_app()
    application.config["TESTING"] = True
    yield application


@pytest.fixture()
def client(app):
    return app.test_client()
