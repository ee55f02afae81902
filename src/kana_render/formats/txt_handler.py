"""Plain text and markdown file handler."""

from kana_render.core.renderer import StaticRenderer
from kana_render.formats.base import FormatHandler


class TXTHandler(FormatHandler):
    """Handler for plain text and markdown files.

    Markers are replaced in place; everything else, including markdown
    syntax, is written back unchanged.
    """

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".txt", ".md", ".markdown")

    def render(self, content: str, renderer: StaticRenderer) -> tuple[str, int]:
        """Replace markers in the raw text."""
        return renderer.render_counted(content)
