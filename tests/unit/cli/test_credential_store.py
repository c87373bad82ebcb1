"""Unit tests for cli.config module."""

import pytest
import yaml

from src.cli.config import CredentialStore
from src.cli.errors import ConfigError, ConfigFilesystemError


@pytest.fixture
def store(tmp_path):
    return CredentialStore(str(tmp_path / "notion-notebooklm-sync" / "config.yaml"))


class TestGetApiKey:
    """Test cases for reading the stored key."""

    def test_missing_file_means_no_key(self, store):
        assert store.get_api_key() is None

    def test_empty_file_means_no_key(self, store, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("   \n", encoding="utf-8")

        assert CredentialStore(str(path)).get_api_key() is None

    def test_reads_stored_key(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("notion_api_key: ntn_saved\n", encoding="utf-8")

        assert CredentialStore(str(path)).get_api_key() == "ntn_saved"

    def test_blank_key_means_no_key(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("notion_api_key: ''\n", encoding="utf-8")

        assert CredentialStore(str(path)).get_api_key() is None

    def test_invalid_yaml_raises_config_error(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("notion_api_key: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            CredentialStore(str(path)).get_api_key()

        assert "Invalid YAML syntax" in str(exc_info.value)

    def test_non_mapping_raises_config_error(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")

        with pytest.raises(ConfigError):
            CredentialStore(str(path)).get_api_key()

    def test_non_string_key_raises_config_error(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("notion_api_key: 12345\n", encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            CredentialStore(str(path)).get_api_key()

        assert exc_info.value.config_field == "notion_api_key"

    def test_unreadable_path_raises_filesystem_error(self, tmp_path):
        # A directory where the file should be cannot be opened for reading.
        path = tmp_path / "config.yaml"
        path.mkdir()

        with pytest.raises(ConfigFilesystemError):
            CredentialStore(str(path)).get_api_key()


class TestStoreAndClear:
    """Test cases for saving and clearing the key."""

    def test_store_creates_directory_and_file(self, store):
        store.store_api_key("ntn_new")

        with open(store.config_path, encoding="utf-8") as f:
            assert yaml.safe_load(f) == {"notion_api_key": "ntn_new"}
        assert store.get_api_key() == "ntn_new"

    def test_store_keeps_other_fields(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("other: value\n", encoding="utf-8")
        store = CredentialStore(str(path))

        store.store_api_key("ntn_new")

        assert yaml.safe_load(path.read_text(encoding="utf-8")) == {
            "other": "value",
            "notion_api_key": "ntn_new",
        }

    def test_clear_removes_key(self, store):
        store.store_api_key("ntn_new")

        store.clear_api_key()

        assert store.get_api_key() is None

    def test_clear_without_file_does_not_create_one(self, store):
        store.clear_api_key()

        assert store.get_api_key() is None
        with pytest.raises(FileNotFoundError):
            open(store.config_path, encoding="utf-8")

    def test_default_path_is_in_user_config_dir(self):
        store = CredentialStore()

        assert store.config_path.endswith("notion-notebooklm-sync/config.yaml")
