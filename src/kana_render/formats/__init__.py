"""Document format handlers for Kana Render."""

from kana_render.formats.base import FormatHandler
from kana_render.formats.txt_handler import TXTHandler
from kana_render.formats.html_handler import HTMLHandler

__all__ = [
    "FormatHandler",
    "TXTHandler",
    "HTMLHandler",
]

# Map file extensions to handlers
HANDLER_MAP: dict[str, type[FormatHandler]] = {
    ".txt": TXTHandler,
    ".md": TXTHandler,
    ".markdown": TXTHandler,
    ".html": HTMLHandler,
    ".htm": HTMLHandler,
}

SUPPORTED_EXTENSIONS = tuple(HANDLER_MAP.keys())


def get_handler(extension: str) -> type[FormatHandler]:
    """Get the appropriate handler class for a file extension."""
    ext = extension.lower()
    if ext not in HANDLER_MAP:
        raise ValueError(
            f"Unsupported file format: {ext}. "
            f"Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}"
        )
    return HANDLER_MAP[ext]
