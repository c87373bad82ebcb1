"""Root pytest configuration for all tests."""

import logging

import pytest

# notion-client logs every request at DEBUG through httpx; keep test output quiet.
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("notion_client").setLevel(logging.WARNING)


@pytest.fixture(autouse=True)
def _no_ambient_api_key(monkeypatch):
    """Keep a developer's NOTION_API_KEY or .env out of the tests."""
    monkeypatch.delenv("NOTION_API_KEY", raising=False)
    monkeypatch.setattr("src.notion_api.auth.load_dotenv", lambda *args, **kwargs: False)


@pytest.fixture(autouse=True)
def _reset_app_logger():
    """Drop handlers the CLI attaches to the 'src' logger during a test."""
    yield
    app_logger = logging.getLogger("src")
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()
    app_logger.setLevel(logging.NOTSET)
