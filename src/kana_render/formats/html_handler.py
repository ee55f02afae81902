"""HTML file handler."""

from typing import Optional

from bs4 import BeautifulSoup

from kana_render.config import Settings
from kana_render.core.renderer import (
    STYLE_ELEMENT_ID,
    StaticRenderer,
    build_stylesheet,
)
from kana_render.formats.base import FormatHandler


class HTMLHandler(FormatHandler):
    """Handler for HTML (.html, .htm) files.

    Markers are replaced inside text nodes only, so tags and attributes
    are never rewritten. When the document has a ``<head>``, the kana
    stylesheet is added to it once.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".html", ".htm")

    def render(self, content: str, renderer: StaticRenderer) -> tuple[str, int]:
        """Replace markers in text nodes and inject the stylesheet."""
        rendered, count = renderer.render_html_counted(content)
        if not count:
            return rendered, 0
        return self._inject_stylesheet(rendered), count

    def _inject_stylesheet(self, markup: str) -> str:
        """Add the kana ``<style>`` element to ``<head>`` if missing."""
        soup = BeautifulSoup(markup, "html.parser")
        if soup.head is None or soup.find(id=STYLE_ELEMENT_ID) is not None:
            return markup

        style = soup.new_tag("style", id=STYLE_ELEMENT_ID)
        style.string = build_stylesheet(self.settings)
        soup.head.append(style)
        return str(soup)
