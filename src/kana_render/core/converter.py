"""File-level marker rendering."""

import logging
from pathlib import Path
from typing import Iterable, Optional

from kana_render.config import get_settings
from kana_render.core.renderer import StaticRenderer
from kana_render.formats import get_handler, SUPPORTED_EXTENSIONS
from kana_render.markers.ir import TagDefinition
from kana_render.markers.tags import build_tag_definitions

logger = logging.getLogger(__name__)


class RenderError(Exception):
    """Error while rendering a document file."""

    pass


class DocumentConverter:
    """Render the markers of whole documents.

    Pipeline:
    1. Pick a handler from the input extension
    2. Read the source text
    3. Replace every marker with its kana
    4. Write the result with the handler for the output extension
    """

    def __init__(self, tag_defs: Optional[Iterable[TagDefinition]] = None) -> None:
        """Initialize the converter.

        Args:
            tag_defs: Tags to render; defaults to the configured tags
        """
        settings = get_settings()
        if tag_defs is None:
            tag_defs = build_tag_definitions(settings.tag_names)
        self.renderer = StaticRenderer(tag_defs, css_class=settings.css_class)

    def convert_file(self, input_path: Path, output_path: Path) -> int:
        """Render a document file.

        Args:
            input_path: Path to input document
            output_path: Path for output document

        Returns:
            Number of markers replaced

        Raises:
            RenderError: If the input is missing or its format unsupported
        """
        if not input_path.exists():
            raise RenderError(f"Input file not found: {input_path}")

        ext = input_path.suffix.lower()
        if ext not in SUPPORTED_EXTENSIONS:
            raise RenderError(
                f"Unsupported format: {ext}. "
                f"Supported: {', '.join(SUPPORTED_EXTENSIONS)}"
            )

        handler = get_handler(ext)()
        content = handler.read(input_path)
        rendered, count = handler.render(content, self.renderer)
        logger.debug("Replaced %d marker(s) in %s", count, input_path)

        try:
            output_handler = get_handler(output_path.suffix.lower())()
        except ValueError as e:
            raise RenderError(str(e)) from e
        output_handler.write(rendered, output_path)

        return count
