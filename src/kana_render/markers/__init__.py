"""Marker definitions, scanning and built-in tags."""

from kana_render.markers.ir import (
    TagDefinition,
    MarkerSpan,
    Widget,
    KanaWidget,
    Decoration,
    validate_tag_set,
)
from kana_render.markers.scanner import MarkerScanner, scan
from kana_render.markers.tags import (
    to_hiragana,
    to_katakana,
    to_kana,
    default_tag_definitions,
    build_tag_definitions,
)

__all__ = [
    "TagDefinition",
    "MarkerSpan",
    "Widget",
    "KanaWidget",
    "Decoration",
    "validate_tag_set",
    "MarkerScanner",
    "scan",
    "to_hiragana",
    "to_katakana",
    "to_kana",
    "default_tag_definitions",
    "build_tag_definitions",
]
