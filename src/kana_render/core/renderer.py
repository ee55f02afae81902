"""One-shot rendering of markers into plain text or HTML."""

from typing import Iterable, Optional

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement

from kana_render.config import Settings, get_settings
from kana_render.core.reconciler import DecorationReconciler
from kana_render.markers.ir import DEFAULT_CSS_CLASS, KanaWidget, TagDefinition

STYLE_ELEMENT_ID = "japanese-render-style"

# Text inside these elements is never rewritten
SKIPPED_HTML_TAGS = {"script", "style"}


def build_stylesheet(settings: Optional[Settings] = None) -> str:
    """Build the CSS applied to rendered kana."""
    settings = settings or get_settings()
    font_query = settings.font_family.replace(" ", "+")
    return (
        f"@import url('https://fonts.googleapis.com/css2?family={font_query}"
        f":wght@100..900&display=swap');\n"
        f"\n"
        f".{settings.css_class} {{\n"
        f"\tfont-family: \"{settings.font_family}\", sans-serif !important;\n"
        f"\tfont-optical-sizing: auto !important;\n"
        f"\tfont-style: normal !important;\n"
        f"}}\n"
    )


class StaticRenderer:
    """Replace markers with their kana for non-interactive output.

    Same span selection as the live preview, minus the caret rule: every
    marker that survives the overlap guard is substituted.
    """

    def __init__(
        self,
        tag_defs: Iterable[TagDefinition],
        css_class: str = DEFAULT_CSS_CLASS,
    ) -> None:
        self.reconciler = DecorationReconciler(tag_defs, css_class=css_class)
        self.css_class = css_class

    def replacements(self, text: str) -> list[tuple[tuple[int, int], str]]:
        """Return ``((start, end), display)`` pairs in document order."""
        return [
            ((span.start, span.end), span.display)
            for span in self.reconciler.select(text)
        ]

    def render(self, text: str) -> str:
        """Return ``text`` with every marker replaced by its kana."""
        rendered, _ = self.render_counted(text)
        return rendered

    def render_counted(self, text: str) -> tuple[str, int]:
        """Render text and report how many markers were replaced."""
        replacements = self.replacements(text)
        if not replacements:
            return text, 0

        parts: list[str] = []
        pos = 0
        for (start, end), display in replacements:
            parts.append(text[pos:start])
            parts.append(display)
            pos = end
        parts.append(text[pos:])

        return "".join(parts), len(replacements)

    def render_html(self, markup: str) -> str:
        """Render markers found in the text nodes of an HTML document."""
        rendered, _ = self.render_html_counted(markup)
        return rendered

    def render_html_counted(self, markup: str) -> tuple[str, int]:
        """Render HTML text nodes and report how many markers were replaced.

        Each marker becomes a kana widget ``<span>`` carrying the CSS class,
        so the injected stylesheet applies to it. Each text node is rendered
        on its own, so a marker split by an element boundary
        (``{hg}ko<b>n</b>{/hg}``) is left untouched.
        """
        soup = BeautifulSoup(markup, "html.parser")
        total = 0

        # Collect first: replacing nodes while iterating invalidates the walk
        nodes = [
            node
            for node in soup.find_all(string=True)
            if type(node) is NavigableString
            and node.parent is not None
            and node.parent.name not in SKIPPED_HTML_TAGS
        ]
        for node in nodes:
            text = str(node)
            replacements = self.replacements(text)
            if not replacements:
                continue

            pieces: list[PageElement] = []
            pos = 0
            for (start, end), display in replacements:
                if start > pos:
                    pieces.append(NavigableString(text[pos:start]))
                widget = KanaWidget(display, css_class=self.css_class)
                pieces.append(widget.to_tag(soup))
                pos = end
            if pos < len(text):
                pieces.append(NavigableString(text[pos:]))

            node.replace_with(*pieces)
            total += len(replacements)

        if not total:
            return markup, 0
        return str(soup), total
