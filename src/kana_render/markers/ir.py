"""Data structures for kana markers and their decorations.

A marker is a flat, tag-typed span such as ``{hg}konnichiha{/hg}``. The
scanner turns marker syntax into ``MarkerSpan`` values, and the reconciler
turns the spans it keeps into ``Decoration`` values that a host renderer can
draw over the untouched source text.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Iterable

from bs4 import BeautifulSoup
from bs4.element import Tag


DEFAULT_CSS_CLASS = "japanese-render"

# Factory for standalone widget elements
_WIDGET_SOUP = BeautifulSoup("", "html.parser")


@dataclass(frozen=True)
class TagDefinition:
    """A marker tag: delimiter pair plus the conversion applied to its content.

    Attributes:
        name: Short tag identifier (e.g. "hg")
        opening: Literal opening delimiter (e.g. "{hg}")
        closing: Literal closing delimiter (e.g. "{/hg}")
        convert: Transliteration oracle applied to the raw inner text
    """

    name: str
    opening: str
    closing: str
    convert: Callable[[str], str]

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Tag name must not be empty")
        if not self.opening or not self.closing:
            raise ValueError(f"Tag '{self.name}' needs non-empty delimiters")

    @classmethod
    def braced(cls, name: str, convert: Callable[[str], str]) -> "TagDefinition":
        """Create a tag using the ``{name}...{/name}`` delimiter convention."""
        return cls(
            name=name,
            opening=f"{{{name}}}",
            closing=f"{{/{name}}}",
            convert=convert,
        )

    @property
    def pattern(self) -> re.Pattern[str]:
        """Shortest-match pattern; group 1 is the inner text (may span lines)."""
        return re.compile(
            re.escape(self.opening) + r"(.*?)" + re.escape(self.closing),
            re.DOTALL,
        )

    def wrap(self, content: str = "") -> str:
        """Return ``content`` enclosed in this tag's delimiters."""
        return f"{self.opening}{content}{self.closing}"


def validate_tag_set(tag_defs: Iterable[TagDefinition]) -> tuple[TagDefinition, ...]:
    """Freeze a tag list, rejecting duplicate names.

    Order is preserved: it is the tie-break priority for spans that
    start at the same offset.
    """
    tags = tuple(tag_defs)
    seen: set[str] = set()
    for tag in tags:
        if tag.name in seen:
            raise ValueError(f"Duplicate tag definition: {tag.name}")
        seen.add(tag.name)
    return tags


@dataclass(frozen=True)
class MarkerSpan:
    """A matched marker in the source text.

    Attributes:
        start: Offset of the first character of the opening delimiter
        end: Offset just past the closing delimiter (exclusive)
        tag_name: Name of the tag that matched
        raw_inner: Text between the delimiters, verbatim
        display: Converted text shown in place of the marker
    """

    start: int
    end: int
    tag_name: str
    raw_inner: str
    display: str

    def touches(self, offset: int) -> bool:
        """Check if ``offset`` lies inside the span or on either edge."""
        return self.start <= offset <= self.end

    def overlaps(self, other: "MarkerSpan") -> bool:
        """Check if the half-open ranges of two spans intersect."""
        return self.start < other.end and other.start < self.end


class Widget(ABC):
    """Something a host renderer can draw in place of a text range."""

    @abstractmethod
    def render(self) -> str:
        """Produce the renderable content for this widget."""
        ...


@dataclass(frozen=True)
class KanaWidget(Widget):
    """Inline widget showing converted kana.

    Widgets compare equal by content, so a host may reuse an existing
    widget instead of redrawing it.
    """

    content: str
    css_class: str = DEFAULT_CSS_CLASS

    def to_tag(self, soup: BeautifulSoup) -> Tag:
        """Build the ``<span>`` element inside ``soup``."""
        span = soup.new_tag("span", attrs={"class": self.css_class})
        span.string = self.content
        return span

    def render(self) -> str:
        """Render as an HTML ``<span>`` with the content escaped."""
        return str(self.to_tag(_WIDGET_SOUP))


@dataclass(frozen=True)
class Decoration:
    """Instruction to replace ``[start, end)`` with ``widget`` on screen.

    The underlying text is never modified.
    """

    start: int
    end: int
    widget: Widget

    @property
    def range(self) -> tuple[int, int]:
        return (self.start, self.end)
