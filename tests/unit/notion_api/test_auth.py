"""Unit tests for notion_api.auth module."""

import pytest
from unittest.mock import patch

from src.notion_api.auth import (
    Authenticator,
    Credentials,
    mask_api_key,
    validate_api_key_format,
)
from src.notion_api.errors import InvalidCredentialsError


class TestValidateApiKeyFormat:
    """Test cases for validate_api_key_format."""

    @pytest.mark.parametrize("api_key", ["secret_abc123", "ntn_abc123"])
    def test_accepts_known_prefixes(self, api_key):
        assert validate_api_key_format(api_key) is None

    @pytest.mark.parametrize("api_key", ["", "   ", None])
    def test_rejects_empty(self, api_key):
        assert validate_api_key_format(api_key) == "API key is required"

    def test_rejects_unknown_prefix(self):
        assert validate_api_key_format("sk-123") == 'API key should start with "secret_" or "ntn_"'


class TestMaskApiKey:
    """Test cases for mask_api_key."""

    def test_shows_first_ten_and_last_four(self):
        assert mask_api_key("ntn_1234567890abcdefWXYZ") == "ntn_123456...WXYZ"


class TestAuthenticator:
    """Test cases for Authenticator."""

    @patch('src.notion_api.auth.load_dotenv')
    def test_init_loads_dotenv(self, mock_load_dotenv):
        Authenticator()
        mock_load_dotenv.assert_called_once()

    def test_explicit_key_is_used(self):
        creds = Authenticator(api_key="ntn_explicit").get_credentials()

        assert creds == Credentials(api_key="ntn_explicit")

    def test_explicit_key_wins_over_environment(self, monkeypatch):
        monkeypatch.setenv("NOTION_API_KEY", "ntn_env")

        assert Authenticator(api_key="ntn_explicit").get_credentials().api_key == "ntn_explicit"

    def test_environment_key_is_used(self, monkeypatch):
        monkeypatch.setenv("NOTION_API_KEY", "ntn_env")
        auth = Authenticator()

        assert auth.has_credentials is True
        assert auth.get_credentials().api_key == "ntn_env"

    def test_missing_key_raises(self):
        auth = Authenticator()

        assert auth.has_credentials is False
        with pytest.raises(InvalidCredentialsError) as exc_info:
            auth.get_credentials()

        assert "NOTION_API_KEY" in str(exc_info.value)

    def test_credentials_are_immutable(self):
        creds = Credentials(api_key="ntn_x")
        with pytest.raises(AttributeError):
            creds.api_key = "other"
