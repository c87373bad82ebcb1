"""Credential store for the Notion API key.

The key entered at the prompt is kept in a small YAML file in the user's
config directory so later runs can offer to reuse it. The file holds a
single field:

    notion_api_key: "ntn_..."

A missing or empty file means no key is stored.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError, ConfigFilesystemError

logger = logging.getLogger(__name__)

API_KEY_FIELD = 'notion_api_key'


class CredentialStore:
    """Loads, saves and clears the stored Notion API key.

    Example:
        >>> store = CredentialStore()
        >>> store.store_api_key("ntn_abc...")
        >>> store.get_api_key()
        'ntn_abc...'
    """

    DEFAULT_CONFIG_DIR = Path.home() / '.config' / 'notion-notebooklm-sync'
    DEFAULT_CONFIG_FILE = 'config.yaml'

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path or str(self.DEFAULT_CONFIG_DIR / self.DEFAULT_CONFIG_FILE)

    def _load(self) -> Dict[str, Any]:
        """Read the config file.

        Raises:
            ConfigFilesystemError: If the file exists but cannot be read
            ConfigError: If the file is not a YAML mapping
        """
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            return {}
        except PermissionError:
            raise ConfigFilesystemError(self.config_path, 'read', 'Permission denied')
        except OSError as e:
            raise ConfigFilesystemError(self.config_path, 'read', str(e))

        if not content.strip():
            return {}

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax: {str(e)}")

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Config must be a YAML dictionary, got {type(data).__name__}"
            )
        return data

    def _save(self, data: Dict[str, Any]) -> None:
        """Write the config file, creating its directory.

        Raises:
            ConfigFilesystemError: If the directory or file cannot be written
        """
        config_dir = os.path.dirname(self.config_path)
        if config_dir:
            try:
                os.makedirs(config_dir, exist_ok=True)
            except OSError as e:
                raise ConfigFilesystemError(config_dir, 'create_directory', str(e))

        yaml_str = yaml.safe_dump(
            data,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False
        )
        try:
            with open(self.config_path, 'w', encoding='utf-8') as f:
                f.write(yaml_str)
        except PermissionError:
            raise ConfigFilesystemError(self.config_path, 'write', 'Permission denied')
        except OSError as e:
            raise ConfigFilesystemError(self.config_path, 'write', str(e))

    def get_api_key(self) -> Optional[str]:
        """Return the stored API key, or None if there is none.

        Raises:
            ConfigError: If the stored value is not a string
        """
        api_key = self._load().get(API_KEY_FIELD)
        if api_key is None:
            return None
        if not isinstance(api_key, str):
            raise ConfigError(
                f"must be a string, got {type(api_key).__name__}",
                API_KEY_FIELD
            )
        return api_key.strip() or None

    def store_api_key(self, api_key: str) -> None:
        data = self._load()
        data[API_KEY_FIELD] = api_key
        self._save(data)
        logger.info(f"Stored API key in {self.config_path}")

    def clear_api_key(self) -> None:
        """Remove the stored key; a store without a key is left untouched."""
        data = self._load()
        if API_KEY_FIELD not in data:
            return
        del data[API_KEY_FIELD]
        self._save(data)
        logger.info(f"Cleared stored API key from {self.config_path}")
