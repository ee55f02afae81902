"""Core reconciliation and rendering logic for Kana Render."""

from kana_render.core.reconciler import (
    DecorationReconciler,
    LivePreview,
    reconcile,
    order_spans,
    drop_overlaps,
)
from kana_render.core.renderer import StaticRenderer, build_stylesheet
from kana_render.core.commands import (
    MARKER_COMMANDS,
    MarkerCommand,
    MarkerInsertion,
    insert_marker,
)

__all__ = [
    "DecorationReconciler",
    "LivePreview",
    "reconcile",
    "order_spans",
    "drop_overlaps",
    "StaticRenderer",
    "build_stylesheet",
    "MARKER_COMMANDS",
    "MarkerCommand",
    "MarkerInsertion",
    "insert_marker",
]
