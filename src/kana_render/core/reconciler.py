"""Turn scanned markers into the decoration set shown by an editor.

Decorations are recomputed from scratch on every text or caret change.
Nothing is cached between calls, so the caret rule always reflects the
current caret exactly.
"""

import logging
from typing import Iterable, Optional

from kana_render.markers.ir import (
    DEFAULT_CSS_CLASS,
    Decoration,
    KanaWidget,
    MarkerSpan,
    TagDefinition,
)
from kana_render.markers.scanner import MarkerScanner

logger = logging.getLogger(__name__)


def order_spans(
    spans: Iterable[MarkerSpan],
    tag_defs: Iterable[TagDefinition],
) -> list[MarkerSpan]:
    """Sort spans by start offset, breaking ties by tag list position."""
    priority = {tag.name: index for index, tag in enumerate(tag_defs)}
    return sorted(spans, key=lambda span: (span.start, priority[span.tag_name]))


def drop_overlaps(ordered: Iterable[MarkerSpan]) -> list[MarkerSpan]:
    """Keep the first of any overlapping spans, walking left to right.

    Args:
        ordered: Spans already sorted by ``order_spans``

    Returns:
        Pairwise non-overlapping spans
    """
    kept: list[MarkerSpan] = []
    for span in ordered:
        if kept and kept[-1].overlaps(span):
            logger.debug(
                "Dropping {%s} marker at %d: overlaps {%s} marker at %d",
                span.tag_name, span.start, kept[-1].tag_name, kept[-1].start,
            )
            continue
        kept.append(span)
    return kept


class DecorationReconciler:
    """Decide which markers get replaced by kana on screen.

    Pipeline:
    1. Scan the text for every marker
    2. Drop markers touching the caret so their raw syntax stays editable
    3. Sort by offset (tag order breaks ties)
    4. Drop markers overlapping an earlier one
    5. Wrap each survivor in a replacement decoration
    """

    def __init__(
        self,
        tag_defs: Iterable[TagDefinition],
        css_class: str = DEFAULT_CSS_CLASS,
    ) -> None:
        self.scanner = MarkerScanner(tag_defs)
        self.css_class = css_class

    @property
    def tag_defs(self) -> tuple[TagDefinition, ...]:
        return self.scanner.tag_defs

    def select(self, text: str, caret: Optional[int] = None) -> list[MarkerSpan]:
        """Return the spans that should be shown converted.

        Args:
            text: The document text
            caret: Caret offset, or None to skip caret exclusion

        Returns:
            Sorted, non-overlapping spans
        """
        spans = self.scanner.scan(text)
        if caret is not None:
            spans = [span for span in spans if not span.touches(caret)]
        return drop_overlaps(order_spans(spans, self.tag_defs))

    def reconcile(self, text: str, caret: int) -> list[Decoration]:
        """Build the replacement decorations for the current text and caret."""
        return [
            Decoration(
                start=span.start,
                end=span.end,
                widget=KanaWidget(span.display, css_class=self.css_class),
            )
            for span in self.select(text, caret)
        ]


def reconcile(
    text: str,
    caret: int,
    tag_defs: Iterable[TagDefinition],
    css_class: str = DEFAULT_CSS_CLASS,
) -> list[Decoration]:
    """Build decorations for ``text`` with the caret at ``caret``."""
    return DecorationReconciler(tag_defs, css_class=css_class).reconcile(text, caret)


class LivePreview:
    """Editor-side view that keeps the decorations for the latest state.

    The host calls ``update`` after every document change or caret move.
    Each update replaces ``decorations`` wholesale.
    """

    def __init__(
        self,
        tag_defs: Iterable[TagDefinition],
        text: str = "",
        caret: int = 0,
        css_class: str = DEFAULT_CSS_CLASS,
    ) -> None:
        self.reconciler = DecorationReconciler(tag_defs, css_class=css_class)
        self.decorations: list[Decoration] = self.reconciler.reconcile(text, caret)

    def update(self, text: str, caret: int) -> list[Decoration]:
        """Recompute decorations for the new text and caret."""
        self.decorations = self.reconciler.reconcile(text, caret)
        return self.decorations
