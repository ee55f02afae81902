"""Tests for marker insertion."""

import pytest

from kana_render.core.commands import MARKER_COMMANDS, insert_marker
from kana_render.markers.ir import TagDefinition
from kana_render.markers.tags import default_tag_definitions


class TestInsertMarker:
    """Tests for insert_marker."""

    @pytest.fixture
    def hg(self) -> TagDefinition:
        return default_tag_definitions()[0]

    def test_insert_in_middle(self, hg: TagDefinition):
        """Test inserting between two characters."""
        result = insert_marker("ab", 1, hg)

        assert result.text == "a{hg}{/hg}b"
        assert result.caret == 5

    def test_insert_at_edges(self, hg: TagDefinition):
        """Test inserting at the start and end of the text."""
        assert insert_marker("ab", 0, hg).text == "{hg}{/hg}ab"
        assert insert_marker("ab", 2, hg).text == "ab{hg}{/hg}"

    def test_insert_into_empty_text(self, hg: TagDefinition):
        """Test inserting into an empty document."""
        result = insert_marker("", 0, hg)

        assert result.text == "{hg}{/hg}"
        assert result.caret == 4

    def test_caret_lands_between_delimiters(self, hg: TagDefinition):
        """Test that text typed at the new caret ends up inside the marker."""
        result = insert_marker("x", 1, hg)
        typed = result.text[:result.caret] + "neko" + result.text[result.caret:]

        assert typed == "x{hg}neko{/hg}"

    @pytest.mark.parametrize("caret", [-1, 3])
    def test_caret_out_of_range(self, hg: TagDefinition, caret: int):
        """Test error when the caret lies outside the text."""
        with pytest.raises(ValueError, match="outside"):
            insert_marker("ab", caret, hg)


class TestMarkerCommands:
    """Tests for the command table."""

    def test_command_per_builtin_tag(self):
        """Test that every built-in tag has a command."""
        assert set(MARKER_COMMANDS) == {"hg", "kk", "hk"}

    def test_hotkeys(self):
        """Test the default key bindings."""
        assert MARKER_COMMANDS["hg"].hotkey == "Ctrl+Shift+H"
        assert MARKER_COMMANDS["kk"].hotkey == "Ctrl+Shift+K"
        assert MARKER_COMMANDS["hk"].hotkey == "Ctrl+Alt+K"
        assert MARKER_COMMANDS["hk"].id == "insert-kana-balise"
