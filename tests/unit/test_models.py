"""Unit tests for models module."""

from datetime import date

import pytest

from src.models import Block, Database, ExportDocument, Page, Property, RichTextSpan
from tests.fixtures import (
    PAGE_ID,
    PAGE_URL,
    block,
    checkbox_property,
    database,
    page,
    rich_text,
    title_property,
)


class TestRichTextSpan:
    """Test cases for RichTextSpan parsing."""

    def test_from_api(self):
        span = RichTextSpan.from_api(rich_text("hi", bold=True, href="https://x.y"))

        assert span.plain_text == "hi"
        assert span.annotations.bold is True
        assert span.annotations.italic is False
        assert span.href == "https://x.y"

    def test_is_immutable(self):
        span = RichTextSpan("hi")
        with pytest.raises(AttributeError):
            span.plain_text = "changed"


class TestProperty:
    """Test cases for Property parsing."""

    def test_from_api_keeps_kind_payload(self):
        prop = Property.from_api("Done", checkbox_property(True))

        assert prop.name == "Done"
        assert prop.kind == "checkbox"
        assert prop.value is True
        assert prop.is_title is False

    def test_missing_type_is_unknown(self):
        assert Property.from_api("X", {"id": "x"}).kind == "unknown"


class TestBlock:
    """Test cases for Block parsing."""

    def test_from_api(self):
        parsed = Block.from_api(block("to_do", "b1", has_children=True, checked=True, rich_text=[]))

        assert parsed.id == "b1"
        assert parsed.kind == "to_do"
        assert parsed.payload == {"checked": True, "rich_text": []}
        assert parsed.has_children is True

    def test_missing_payload_defaults_to_empty(self):
        parsed = Block.from_api({"id": "b2", "type": "divider"})

        assert parsed.payload == {}
        assert parsed.has_children is False


class TestPage:
    """Test cases for Page parsing."""

    def test_from_api_preserves_property_order(self):
        parsed = Page.from_api(page({
            "Done": checkbox_property(True),
            "Name": title_property("Test"),
            "Also": checkbox_property(False),
        }))

        assert list(parsed.properties) == ["Done", "Name", "Also"]
        assert parsed.id == PAGE_ID
        assert parsed.url == PAGE_URL
        assert parsed.root_block_id == PAGE_ID

    def test_title_property(self):
        parsed = Page.from_api(page({"Done": checkbox_property(True), "Name": title_property("T")}))

        assert parsed.title_property.name == "Name"

    def test_title_property_missing(self):
        assert Page.from_api(page({"Done": checkbox_property(True)})).title_property is None


class TestDatabase:
    """Test cases for Database parsing."""

    def test_from_api(self):
        parsed = Database.from_api(database("Tasks", "Team work"))

        assert parsed.title == "Tasks"
        assert parsed.description == "Team work"
        assert parsed.display_name == "Tasks (Team work)"

    def test_untitled_database(self):
        parsed = Database.from_api(database(""))

        assert parsed.title == "Untitled Database"
        assert parsed.display_name == "Untitled Database"


class TestExportDocument:
    """Test cases for ExportDocument rendering."""

    def test_to_markdown_joins_sections(self):
        document = ExportDocument(
            title="Tasks",
            exported_on=date(2024, 1, 2),
            entry_count=2,
            source_url="https://n.so/db",
            sections=("# A", "# B"),
        )

        assert document.to_markdown() == (
            "# Tasks\n\nExported on: 2024-01-02\nTotal entries: 2\n"
            "Source: https://n.so/db\n\n---\n\n# A\n\n---\n\n# B"
        )
