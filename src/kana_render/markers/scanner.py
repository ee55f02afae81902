"""Scanner that finds kana markers in raw text."""

import logging
from typing import Iterable

from kana_render.markers.ir import MarkerSpan, TagDefinition, validate_tag_set

logger = logging.getLogger(__name__)


class MarkerScanner:
    """Find every marker span for a fixed set of tag definitions.

    The scanner holds only the tag list; each call to ``scan`` works on
    its own text, so one instance can be shared freely.
    """

    def __init__(self, tag_defs: Iterable[TagDefinition]) -> None:
        self.tag_defs = validate_tag_set(tag_defs)

    def scan(self, text: str) -> list[MarkerSpan]:
        """Scan text for markers.

        Tags are searched one after another, so the result is grouped by
        tag in configuration order and by offset within each tag. Spans of
        different tags may overlap; resolving that is left to the caller.

        Args:
            text: The document text

        Returns:
            List of MarkerSpan objects with converted display text
        """
        spans: list[MarkerSpan] = []
        for tag in self.tag_defs:
            spans.extend(self._scan_tag(text, tag))
        return spans

    def _scan_tag(self, text: str, tag: TagDefinition) -> list[MarkerSpan]:
        """Collect the non-overlapping matches of a single tag."""
        spans: list[MarkerSpan] = []

        # An opening with no closing simply fails to match at that offset,
        # and the search moves on to the next character.
        for match in tag.pattern.finditer(text):
            inner = match.group(1)
            try:
                display = tag.convert(inner)
            except Exception as e:
                logger.debug(
                    "Dropping {%s} marker at %d: conversion failed (%s)",
                    tag.name, match.start(), e,
                )
                continue

            spans.append(
                MarkerSpan(
                    start=match.start(),
                    end=match.end(),
                    tag_name=tag.name,
                    raw_inner=inner,
                    display=display,
                )
            )

        return spans


def scan(text: str, tag_defs: Iterable[TagDefinition]) -> list[MarkerSpan]:
    """Scan ``text`` for the markers of ``tag_defs``."""
    return MarkerScanner(tag_defs).scan(text)
