"""Pytest fixtures for Kana Render tests."""

import pytest
from pathlib import Path

from kana_render.markers.ir import TagDefinition


# Fixed readings so tests do not depend on a transliteration library
STUB_READINGS = {
    "konnichiha": "こんにちは",
    "kohi": "コーヒー",
    "neko": "ねこ",
}


def _stub_convert(text: str) -> str:
    return STUB_READINGS.get(text, text.upper())


@pytest.fixture
def scenario_text() -> str:
    """Text with one hiragana and one katakana marker."""
    return "A{hg}konnichiha{/hg}B{kk}kohi{/kk}C"


@pytest.fixture
def stub_tags() -> list[TagDefinition]:
    """hg, kk and hk tags backed by the stub readings."""
    return [
        TagDefinition.braced("hg", _stub_convert),
        TagDefinition.braced("kk", _stub_convert),
        TagDefinition.braced("hk", _stub_convert),
    ]


@pytest.fixture
def failing_tags() -> list[TagDefinition]:
    """An hg tag whose converter fails on the text "bad"."""

    def convert(text: str) -> str:
        if text == "bad":
            raise ValueError("cannot convert")
        return text.upper()

    return [TagDefinition.braced("hg", convert)]


@pytest.fixture
def tmp_marker_file(tmp_path: Path) -> Path:
    """Create a temporary text file containing markers."""
    file_path = tmp_path / "notes.txt"
    file_path.write_text("猫は{hg}neko{/hg}です", encoding="utf-8")
    return file_path
