"""Editor commands for inserting empty markers at the caret."""

from dataclasses import dataclass

from kana_render.markers.ir import TagDefinition


@dataclass(frozen=True)
class MarkerCommand:
    """An editor command that inserts one tag's marker.

    Attributes:
        id: Stable command identifier
        name: Human-readable command label
        tag_name: Tag whose delimiters get inserted
        hotkey: Default key binding (e.g. "Ctrl+Shift+H")
    """

    id: str
    name: str
    tag_name: str
    hotkey: str


MARKER_COMMANDS: dict[str, MarkerCommand] = {
    "hg": MarkerCommand(
        id="insert-hiragana-balise",
        name="Insert Hiragana balise ({hg} {/hg})",
        tag_name="hg",
        hotkey="Ctrl+Shift+H",
    ),
    "kk": MarkerCommand(
        id="insert-katakana-balise",
        name="Insert Katakana balise ({kk} {/kk})",
        tag_name="kk",
        hotkey="Ctrl+Shift+K",
    ),
    "hk": MarkerCommand(
        id="insert-kana-balise",
        name="Insert Kana balise ({hk} {/hk})",
        tag_name="hk",
        hotkey="Ctrl+Alt+K",
    ),
}


@dataclass(frozen=True)
class MarkerInsertion:
    """Result of inserting a marker: the new text and where the caret goes."""

    text: str
    caret: int


def insert_marker(text: str, caret: int, tag: TagDefinition) -> MarkerInsertion:
    """Insert an empty marker at the caret.

    The caret ends up between the two delimiters, ready for typing.

    Args:
        text: Current document text
        caret: Caret offset where the marker goes
        tag: Tag whose delimiters are inserted

    Returns:
        MarkerInsertion with the edited text and new caret offset

    Raises:
        ValueError: If the caret lies outside the text
    """
    if not 0 <= caret <= len(text):
        raise ValueError(f"Caret {caret} is outside the text (length {len(text)})")

    return MarkerInsertion(
        text=text[:caret] + tag.wrap() + text[caret:],
        caret=caret + len(tag.opening),
    )
