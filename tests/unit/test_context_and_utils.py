"""Tests for EditorContext and utils_structure.

Covers edge cases for context state management and structure summaries.
"""

import json

import pytest
from pydantic import ValidationError
from table_block_editor.context import EditorContext, EditorState
from table_block_editor.services import state as state_service
from table_block_editor.utils_structure import extract_structure


@pytest.fixture
def context():
    """Fresh context for each test."""
    ctx = EditorContext.get_instance()
    ctx.reset()
    return ctx


@pytest.fixture
def attributes_json():
    return json.dumps(
        {
            "hasFixedLayout": True,
            "backgroundColor": "subtle-pale-blue",
            "body": [
                {"cells": [{"content": "A", "tag": "td"}, {"content": "B", "tag": "td"}]}
            ],
        }
    )


class TestEditorContext:
    """Tests for EditorContext singleton and state management."""

    def test_singleton_instance(self):
        """Should return same instance."""
        ctx1 = EditorContext.get_instance()
        ctx2 = EditorContext.get_instance()
        assert ctx1 is ctx2

    def test_reset_clears_state(self, context):
        """Reset should clear all state."""
        context.attributes = state_service.create_table(1, 1)
        context.selection = {"type": "cell", "section": "body", "rowIndex": 0, "columnIndex": 0}
        context.config = "{}"
        context.is_selected = True

        context.reset()

        assert context.attributes is None
        assert context.selection is None
        assert context.config is None
        assert context.is_selected is False

    def test_update_state_partial(self, context):
        """update_state can update individual fields."""
        context.update_state(config="{}")
        assert context.config == "{}"
        assert context.attributes is None  # Not updated

        table = state_service.create_table(1, 1)
        context.update_state(attributes=table, is_selected=True)
        assert context.attributes == table
        assert context.is_selected
        assert context.config == "{}"  # Still set

    def test_update_attributes_merges(self, context):
        context.attributes = state_service.create_table(2, 2)
        merged = context.update_attributes({"foot": [], "hasFixedLayout": True})

        assert merged is context.attributes
        assert len(merged["body"]) == 2
        assert merged["hasFixedLayout"] is True

    def test_update_attributes_without_table(self, context):
        context.update_attributes({"body": []})
        assert context.attributes == {"body": []}

    def test_clear_selection(self, context):
        context.set_selection({"type": "cell", "section": "body", "rowIndex": 0, "columnIndex": 0})
        context.clear_selection()
        assert context.selection is None

    def test_get_full_state_dict_no_table(self, context):
        parsed = json.loads(context.get_full_state_dict())
        assert parsed == {"attributes": None, "structure": None, "selection": None}

    def test_get_full_state_dict_with_table(self, context):
        context.attributes = state_service.create_table(2, 3)

        parsed = json.loads(context.get_full_state_dict())

        assert len(parsed["attributes"]["body"]) == 2
        assert parsed["structure"]["sections"][1] == {
            "type": "body",
            "rowCount": 2,
            "columnCounts": [3],
        }
        assert parsed["selection"] is None

    def test_get_state_alias(self, context):
        """get_state is alias for get_full_state_dict."""
        assert context.get_state() == context.get_full_state_dict()


class TestInitializeTable:
    def test_initialize_fills_missing_sections(self, context, attributes_json):
        context.initialize_table(attributes_json, json.dumps({"initialRowCount": 3}))

        assert context.attributes["head"] == []
        assert context.attributes["foot"] == []
        assert context.attributes["body"][0]["cells"][1]["content"] == "B"
        assert context.config == json.dumps({"initialRowCount": 3})

    def test_initialize_keeps_host_attributes(self, context, attributes_json):
        context.initialize_table(attributes_json, "")

        assert context.attributes["backgroundColor"] == "subtle-pale-blue"
        assert context.attributes["hasFixedLayout"] is True

    def test_initialize_drops_selection(self, context, attributes_json):
        context.selection = {"type": "cell", "section": "body", "rowIndex": 0, "columnIndex": 0}
        context.initialize_table(attributes_json, "")
        assert context.selection is None

    def test_initialize_empty(self, context):
        context.initialize_table("", "")
        assert context.attributes == {"head": [], "body": [], "foot": []}

    def test_initialize_rejects_bad_tag(self, context):
        bad = json.dumps({"body": [{"cells": [{"content": "", "tag": "div"}]}]})
        with pytest.raises(ValidationError):
            context.initialize_table(bad, "")
        assert context.attributes is None

    def test_initialize_rejects_bad_layout_flag(self, context):
        with pytest.raises(ValidationError):
            context.initialize_table(json.dumps({"hasFixedLayout": "yes"}), "")

    def test_initialize_rejects_invalid_json(self, context):
        with pytest.raises(json.JSONDecodeError):
            context.initialize_table("{not json", "")


class TestEditorState:
    """Tests for EditorState dataclass."""

    def test_default_values(self):
        """EditorState has proper defaults."""
        state = EditorState()
        assert state.attributes is None
        assert state.selection is None
        assert state.config is None
        assert state.is_selected is False


class TestExtractStructure:
    def test_empty(self):
        structure = extract_structure({})
        assert structure["isEmpty"]
        assert structure["isRectangular"]
        assert structure["hasConsistentColumns"]
        assert [s["type"] for s in structure["sections"]] == ["head", "body", "foot"]

    def test_consistent_table(self):
        table = state_service.create_table(3, 2)
        table = state_service.merge_update(
            table, state_service.toggle_section(table, "head")
        )
        table = state_service.merge_update(table, state_service.insert_column(table, 0))

        structure = extract_structure(table)
        assert not structure["isEmpty"]
        assert structure["hasConsistentColumns"]
        assert structure["sections"][0]["columnCounts"] == [3]
        assert structure["sections"][1]["rowCount"] == 3

    def test_delete_column_breaks_cross_section_consistency(self):
        table = state_service.create_table(2, 2)
        table = state_service.merge_update(
            table, state_service.toggle_section(table, "head")
        )
        table = state_service.merge_update(
            table, state_service.delete_column(table, "body", 0)
        )

        structure = extract_structure(table)
        assert structure["isRectangular"]
        assert not structure["hasConsistentColumns"]

    def test_ragged_section(self):
        table = {
            "body": [
                {"cells": [{"content": "", "tag": "td"}]},
                {"cells": [{"content": "", "tag": "td"}] * 2},
            ]
        }
        structure = extract_structure(table)
        assert not structure["isRectangular"]
        assert structure["sections"][1]["columnCounts"] == [1, 2]
