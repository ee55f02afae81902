"""Tests for the marker scanner."""

import pytest

from kana_render.markers.ir import TagDefinition
from kana_render.markers.scanner import MarkerScanner, scan


class TestMarkerScanner:
    """Tests for the MarkerScanner class."""

    @pytest.fixture
    def scanner(self, stub_tags: list[TagDefinition]) -> MarkerScanner:
        """Create a scanner over the stub tags."""
        return MarkerScanner(stub_tags)

    def test_scan_plain_text(self, scanner: MarkerScanner):
        """Test that text without markers yields no spans."""
        assert scanner.scan("Hello, world!") == []
        assert scanner.scan("") == []

    def test_scan_scenario_offsets(self, scanner: MarkerScanner, scenario_text: str):
        """Test offsets and display text of two markers."""
        spans = scanner.scan(scenario_text)

        assert len(spans) == 2

        hg, kk = spans
        assert (hg.start, hg.end) == (1, 20)
        assert hg.tag_name == "hg"
        assert hg.raw_inner == "konnichiha"
        assert hg.display == "こんにちは"
        assert scenario_text[hg.start:hg.end] == "{hg}konnichiha{/hg}"

        assert (kk.start, kk.end) == (21, 34)
        assert kk.tag_name == "kk"
        assert kk.display == "コーヒー"

    def test_scan_groups_by_tag_order(self, scanner: MarkerScanner):
        """Test that matches are produced tag by tag, not by offset."""
        spans = scanner.scan("{kk}a{/kk} {hg}b{/hg}")

        assert [s.tag_name for s in spans] == ["hg", "kk"]

    def test_scan_multiple_matches_same_tag(self, scanner: MarkerScanner):
        """Test that scanning resumes after each closing delimiter."""
        spans = scanner.scan("{hg}a{/hg}{hg}b{/hg}")

        assert [(s.start, s.end) for s in spans] == [(0, 10), (10, 20)]
        assert [s.raw_inner for s in spans] == ["a", "b"]

    def test_scan_multiline_inner(self, scanner: MarkerScanner):
        """Test that inner text may contain newlines."""
        spans = scanner.scan("{hg}first\nsecond{/hg}")

        assert len(spans) == 1
        assert spans[0].raw_inner == "first\nsecond"

    def test_scan_unclosed_marker(self, scanner: MarkerScanner):
        """Test that an opening without a closing produces nothing."""
        assert scanner.scan("{hg}never closed") == []

    def test_scan_unclosed_then_valid(self, scanner: MarkerScanner):
        """Test that an unclosed marker does not hide a later valid one."""
        spans = scanner.scan("{kk}open {hg}neko{/hg}")

        assert len(spans) == 1
        assert spans[0].tag_name == "hg"
        assert spans[0].start == 9

    def test_scan_first_closing_wins(self, scanner: MarkerScanner):
        """Test that the nearest closing delimiter ends the span."""
        spans = scanner.scan("{hg}a{/hg}b{/hg}")

        assert len(spans) == 1
        assert spans[0].raw_inner == "a"
        assert spans[0].end == 10

    def test_scan_nested_opening_is_content(self, scanner: MarkerScanner):
        """Test that a second opening inside a span is plain content."""
        spans = scanner.scan("{hg}a{hg}b{/hg}")

        assert len(spans) == 1
        assert spans[0].start == 0
        assert spans[0].raw_inner == "a{hg}b"

    def test_scan_empty_marker(self, scanner: MarkerScanner):
        """Test that an empty marker still forms a span."""
        spans = scanner.scan("{hg}{/hg}")

        assert len(spans) == 1
        assert spans[0].raw_inner == ""
        assert spans[0].start < spans[0].end

    def test_scan_conversion_failure_isolated(self, failing_tags: list[TagDefinition]):
        """Test that a failing conversion drops only its own span."""
        spans = scan("{hg}good{/hg} {hg}bad{/hg} {hg}fine{/hg}", failing_tags)

        assert [s.raw_inner for s in spans] == ["good", "fine"]

    def test_scan_is_deterministic(self, scanner: MarkerScanner, scenario_text: str):
        """Test that repeated scans give identical results."""
        assert scanner.scan(scenario_text) == scanner.scan(scenario_text)

    def test_scan_custom_delimiters(self):
        """Test that non-brace delimiters work without scanner changes."""
        tag = TagDefinition(name="ruby", opening="<<", closing=">>", convert=str.upper)

        spans = scan("x<<abc>>y", [tag])

        assert len(spans) == 1
        assert (spans[0].start, spans[0].end) == (1, 8)
        assert spans[0].display == "ABC"

    def test_scan_delimiters_are_literal(self):
        """Test that regex metacharacters in delimiters are matched literally."""
        tag = TagDefinition(name="dot", opening=".(", closing=").", convert=str.upper)

        assert scan("a(b)c", [tag]) == []
        assert len(scan("a.(b).c", [tag])) == 1

    def test_duplicate_tag_names_rejected(self, stub_tags: list[TagDefinition]):
        """Test that a tag set with repeated names is refused."""
        with pytest.raises(ValueError, match="Duplicate"):
            MarkerScanner(stub_tags + stub_tags[:1])

    def test_rendered_output_rescans_empty(self, scanner: MarkerScanner, scenario_text: str):
        """Test that text with markers replaced yields no further spans."""
        spans = scanner.scan(scenario_text)
        rendered = scenario_text
        for span in sorted(spans, key=lambda s: s.start, reverse=True):
            rendered = rendered[:span.start] + span.display + rendered[span.end:]

        assert scanner.scan(rendered) == []
