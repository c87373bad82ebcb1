"""Credential provider for the Notion API.

The API key comes from an explicit value (command line or prompt) or the
NOTION_API_KEY environment variable, loaded from a .env file via
python-dotenv. The key is never logged.
"""

import os
from typing import NamedTuple, Optional

from dotenv import load_dotenv

from .errors import InvalidCredentialsError

API_KEY_ENV_VAR = 'NOTION_API_KEY'
API_KEY_PREFIXES = ('secret_', 'ntn_')


class Credentials(NamedTuple):
    """Notion API credentials."""
    api_key: str


def validate_api_key_format(api_key: Optional[str]) -> Optional[str]:
    """Check that an API key looks like a Notion integration token.

    Returns:
        An error message, or None if the key is acceptable
    """
    if not api_key or not api_key.strip():
        return "API key is required"
    if not api_key.startswith(API_KEY_PREFIXES):
        return 'API key should start with "secret_" or "ntn_"'
    return None


def mask_api_key(api_key: str) -> str:
    """Show only the first 10 and last 4 characters of a key."""
    return f"{api_key[:10]}...{api_key[-4:]}"


class Authenticator:
    """Supplies the Notion API key to the API wrapper.

    An explicitly provided key wins over the environment. The authenticator
    never touches the on-disk credential store; the CLI decides which key
    to inject.

    Example:
        >>> auth = Authenticator(api_key="ntn_abc...")
        >>> creds = auth.get_credentials()
    """

    def __init__(self, api_key: Optional[str] = None):
        """Initialize the authenticator, loading variables from a .env file.

        Args:
            api_key: Explicit API key; falls back to NOTION_API_KEY when None
        """
        load_dotenv()
        self._api_key = api_key

    @property
    def has_credentials(self) -> bool:
        return bool(self._api_key or os.getenv(API_KEY_ENV_VAR))

    def get_credentials(self) -> Credentials:
        """Get the Notion API key.

        Returns:
            Credentials: Named tuple holding the API key

        Raises:
            InvalidCredentialsError: If no key is configured
        """
        api_key = self._api_key or os.getenv(API_KEY_ENV_VAR)
        if not api_key:
            raise InvalidCredentialsError(
                f"No API key configured (set {API_KEY_ENV_VAR} or enter one when prompted)"
            )
        return Credentials(api_key=api_key)
