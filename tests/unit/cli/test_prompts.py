"""Unit tests for cli.prompts module."""

from unittest.mock import Mock, patch

from src.cli.prompts import (
    prompt_for_api_key,
    prompt_for_database,
    prompt_for_output_filename,
)
from src.models import Database


def _database(title):
    return Database(id=f"id-{title}", title=title, description="", url="")


class TestPromptForApiKey:
    """Test cases for prompt_for_api_key."""

    @patch('src.cli.prompts.Prompt.ask')
    @patch('src.cli.prompts.Confirm.ask')
    def test_reuses_existing_key_when_confirmed(self, mock_confirm, mock_prompt):
        mock_confirm.return_value = True

        result = prompt_for_api_key(Mock(), "ntn_1234567890abcdef")

        assert result == "ntn_1234567890abcdef"
        mock_prompt.assert_not_called()
        assert "ntn_123456...cdef" in mock_confirm.call_args[0][0]

    @patch('src.cli.prompts.Prompt.ask')
    @patch('src.cli.prompts.Confirm.ask')
    def test_asks_for_new_key_when_declined(self, mock_confirm, mock_prompt):
        mock_confirm.return_value = False
        mock_prompt.return_value = "secret_new"

        assert prompt_for_api_key(Mock(), "ntn_old_key_value") == "secret_new"

    @patch('src.cli.prompts.Confirm.ask')
    @patch('src.cli.prompts.Prompt.ask')
    def test_no_existing_key_skips_confirm(self, mock_prompt, mock_confirm):
        mock_prompt.return_value = "ntn_abc"

        assert prompt_for_api_key(Mock()) == "ntn_abc"
        mock_confirm.assert_not_called()

    @patch('src.cli.prompts.Prompt.ask')
    def test_reasks_until_format_is_valid(self, mock_prompt):
        console = Mock()
        mock_prompt.side_effect = ["", "sk-wrong", "ntn_good"]

        assert prompt_for_api_key(console) == "ntn_good"
        messages = [c[0][0] for c in console.print.call_args_list]
        assert "API key is required" in messages[0]
        assert 'should start with "secret_" or "ntn_"' in messages[1]


class TestPromptForDatabase:
    """Test cases for prompt_for_database."""

    @patch('src.cli.prompts.IntPrompt.ask')
    def test_returns_selected_database(self, mock_prompt):
        databases = [_database("One"), _database("Two")]
        mock_prompt.return_value = 2

        assert prompt_for_database(Mock(), databases) is databases[1]

    @patch('src.cli.prompts.IntPrompt.ask')
    def test_out_of_range_choice_reasks(self, mock_prompt):
        console = Mock()
        databases = [_database("One"), _database("Two")]
        mock_prompt.side_effect = [0, 3, 1]

        assert prompt_for_database(console, databases) is databases[0]
        assert mock_prompt.call_count == 3
        assert "between 1 and 2" in console.print.call_args[0][0]


class TestPromptForOutputFilename:
    """Test cases for prompt_for_output_filename."""

    @patch('src.cli.prompts.Prompt.ask')
    def test_default_is_offered(self, mock_prompt):
        mock_prompt.side_effect = lambda *args, **kwargs: kwargs["default"]

        assert prompt_for_output_filename(Mock(), "reading-list.md") == "reading-list.md"

    @patch('src.cli.prompts.Prompt.ask')
    def test_appends_md_extension(self, mock_prompt):
        mock_prompt.return_value = "notes"

        assert prompt_for_output_filename(Mock(), "default.md") == "notes.md"

    @patch('src.cli.prompts.Prompt.ask')
    def test_invalid_name_reasks(self, mock_prompt):
        console = Mock()
        mock_prompt.side_effect = ["bad/name", "good"]

        assert prompt_for_output_filename(console, "default.md") == "good.md"
        assert "invalid characters" in console.print.call_args[0][0]
