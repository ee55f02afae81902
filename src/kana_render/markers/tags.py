"""Built-in tag vocabulary and its romaji-to-kana converters."""

import re
from typing import Iterable

import jaconv

from kana_render.markers.ir import TagDefinition

# Romaji words versus everything between them
_WORD_PATTERN = re.compile(r"[A-Za-z']+|[^A-Za-z']+")


def to_hiragana(text: str) -> str:
    """Convert romaji (and any katakana) to hiragana."""
    return jaconv.kata2hira(jaconv.alphabet2kana(text.lower()))


def to_katakana(text: str) -> str:
    """Convert romaji (and any hiragana) to katakana."""
    return jaconv.hira2kata(jaconv.alphabet2kana(text.lower()))


def to_kana(text: str) -> str:
    """Convert romaji to kana, picking the script per word.

    A word written entirely in upper case becomes katakana; any other
    word becomes hiragana. Kana already present is kept as written.

    Examples:
        "neko" -> "ねこ"
        "NEKO" -> "ネコ"
        "Tokyo" -> "ときょ"
    """
    parts: list[str] = []
    for run in _WORD_PATTERN.findall(text):
        if run.isupper():
            parts.append(jaconv.hira2kata(jaconv.alphabet2kana(run.lower())))
        else:
            parts.append(jaconv.alphabet2kana(run.lower()))
    return "".join(parts)


# Tag name -> converter, in default priority order
BUILTIN_CONVERTERS = {
    "hg": to_hiragana,
    "kk": to_katakana,
    "hk": to_kana,
}

BUILTIN_TAG_NAMES = tuple(BUILTIN_CONVERTERS.keys())


def default_tag_definitions() -> list[TagDefinition]:
    """Return the hiragana, katakana and auto-kana tags, in that order."""
    return build_tag_definitions(BUILTIN_TAG_NAMES)


def build_tag_definitions(names: Iterable[str]) -> list[TagDefinition]:
    """Build built-in tag definitions by name, keeping the given order.

    Raises:
        ValueError: If a name is not a built-in tag
    """
    tags: list[TagDefinition] = []
    for name in names:
        name = name.strip()
        if not name:
            continue
        if name not in BUILTIN_CONVERTERS:
            raise ValueError(
                f"Unknown tag: {name}. "
                f"Available tags: {', '.join(BUILTIN_TAG_NAMES)}"
            )
        tags.append(TagDefinition.braced(name, BUILTIN_CONVERTERS[name]))
    return tags
