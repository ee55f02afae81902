"""Abstract base class for document format handlers."""

from abc import ABC, abstractmethod
from pathlib import Path

from kana_render.core.renderer import StaticRenderer


class FormatHandler(ABC):
    """Abstract base class for document format handlers.

    Each handler reads a document's source text, renders its markers,
    and writes the result back in the same format.
    """

    @property
    @abstractmethod
    def supported_extensions(self) -> tuple[str, ...]:
        """Return tuple of supported file extensions (e.g., ('.txt',))."""
        ...

    def read(self, path: Path) -> str:
        """Read the document source.

        Args:
            path: Path to the input document

        Returns:
            Text content of the document, markers included
        """
        return path.read_text(encoding="utf-8")

    def write(self, content: str, path: Path) -> None:
        """Write rendered content to file.

        Args:
            content: The rendered document content
            path: Path to write the output document
        """
        path.write_text(content, encoding="utf-8")

    @abstractmethod
    def render(self, content: str, renderer: StaticRenderer) -> tuple[str, int]:
        """Render markers in document content.

        Args:
            content: Document content as returned by ``read``
            renderer: The renderer holding the active tags

        Returns:
            Tuple of (rendered_content, markers_replaced)
        """
        ...
