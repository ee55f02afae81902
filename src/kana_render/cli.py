"""Command-line interface for Kana Render."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from kana_render import __version__
from kana_render.config import get_settings, load_settings
from kana_render.core.commands import MARKER_COMMANDS, insert_marker
from kana_render.core.converter import DocumentConverter
from kana_render.core.reconciler import LivePreview
from kana_render.formats import SUPPORTED_EXTENSIONS
from kana_render.markers.ir import TagDefinition
from kana_render.markers.tags import build_tag_definitions

app = typer.Typer(
    name="kana-render",
    help="Render {hg}, {kk} and {hk} romaji markers as Japanese kana.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Kana Render v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route library debug logging through rich when verbose."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def resolve_tags(tags: Optional[str]) -> list[TagDefinition]:
    """Build tag definitions from a comma list, or from settings if None."""
    names = tags.split(",") if tags else get_settings().tag_names
    try:
        return build_tag_definitions(names)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--tags")


def generate_output_path(
    input_path: Path,
    output_dir: Optional[Path] = None,
    suffix: Optional[str] = None,
) -> Path:
    """Generate output path with the rendered-file suffix."""
    if suffix is None:
        suffix = get_settings().output_suffix
    output_name = f"{input_path.stem}{suffix}{input_path.suffix}"

    if output_dir:
        return output_dir / output_name
    return input_path.parent / output_name


def process_file(
    input_path: Path,
    output_path: Optional[Path],
    converter: DocumentConverter,
    verbose: bool,
) -> bool:
    """Render a single file. Returns True on success."""
    if not input_path.exists():
        console.print(f"[red]Error:[/red] File not found: {input_path}")
        return False

    ext = input_path.suffix.lower()
    if ext not in SUPPORTED_EXTENSIONS:
        console.print(
            f"[yellow]Skipping:[/yellow] {input_path.name} "
            f"(unsupported format: {ext})"
        )
        return False

    if output_path is None:
        output_path = generate_output_path(input_path)

    if verbose:
        console.print(f"[blue]Processing:[/blue] {input_path}")
        console.print(f"[blue]Output:[/blue] {output_path}")

    try:
        count = converter.convert_file(input_path, output_path)
        console.print(f"[green]Success:[/green] {output_path} ({count} marker(s))")
        return True
    except Exception as e:
        console.print(f"[red]Error processing {input_path.name}:[/red] {e}")
        if verbose:
            console.print_exception()
        return False


def process_folder(
    folder_path: Path,
    converter: DocumentConverter,
    verbose: bool,
    recursive: bool = True,
) -> tuple[int, int]:
    """Render all supported files in a folder. Returns (success_count, fail_count)."""
    if not folder_path.is_dir():
        console.print(f"[red]Error:[/red] Not a directory: {folder_path}")
        return 0, 0

    files: list[Path] = []
    for ext in SUPPORTED_EXTENSIONS:
        if recursive:
            files.extend(folder_path.rglob(f"*{ext}"))
        else:
            files.extend(folder_path.glob(f"*{ext}"))

    # Skip files that are themselves rendered output
    suffix = get_settings().output_suffix
    files = sorted(f for f in files if not f.stem.endswith(suffix))

    if not files:
        console.print(
            f"[yellow]No supported files found in {folder_path}[/yellow]\n"
            f"Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}"
        )
        return 0, 0

    console.print(f"[blue]Found {len(files)} file(s) to process[/blue]")

    success_count = 0
    fail_count = 0

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Rendering files...", total=len(files))

        for file_path in files:
            progress.update(task, description=f"Rendering {file_path.name}...")
            if process_file(file_path, None, converter, verbose):
                success_count += 1
            else:
                fail_count += 1
            progress.advance(task)

    return success_count, fail_count


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    env_file: Optional[Path] = typer.Option(
        None,
        "--env-file",
        exists=True,
        dir_okay=False,
        help="Read KANA_RENDER_* settings from this .env file",
    ),
) -> None:
    """
    Render romaji kana markers as Japanese kana.

    Examples:

        python kana.py render notes.md

        python kana.py render /path/to/folder --tags hg,kk

        python kana.py preview notes.md --caret 12

        python kana.py insert notes.md hg --caret 0

        python kana.py --env-file kana.env render notes.md
    """
    if env_file:
        load_settings(env_file)


@app.command()
def render(
    path: Path = typer.Argument(
        ...,
        help="File or folder to render",
        exists=True,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path (for single file only)",
    ),
    tags: Optional[str] = typer.Option(
        None,
        "--tags",
        "-t",
        help="Comma-separated tags to render, highest priority first (default: hg,kk,hk)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """Replace every marker in a file or folder with its kana."""
    configure_logging(verbose)
    converter = DocumentConverter(resolve_tags(tags))

    if path.is_file():
        success = process_file(path, output, converter, verbose)
        raise typer.Exit(0 if success else 1)

    if output is not None:
        console.print(
            "[yellow]Warning:[/yellow] --output is ignored in folder mode. "
            "Files will be saved alongside originals."
        )

    success, fail = process_folder(path, converter, verbose)
    console.print(f"\n[bold]Complete:[/bold] {success} succeeded, {fail} failed")
    raise typer.Exit(0 if fail == 0 else 1)


@app.command()
def preview(
    path: Path = typer.Argument(
        ...,
        help="File to preview",
        exists=True,
        dir_okay=False,
    ),
    caret: int = typer.Option(
        0,
        "--caret",
        "-c",
        min=0,
        help="Caret offset; markers touching it stay as raw text",
    ),
    tags: Optional[str] = typer.Option(
        None,
        "--tags",
        "-t",
        help="Comma-separated tags to render, highest priority first",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """Show the decorations an editor would draw at a caret position."""
    configure_logging(verbose)
    text = path.read_text(encoding="utf-8")
    live = LivePreview(
        resolve_tags(tags),
        text=text,
        caret=caret,
        css_class=get_settings().css_class,
    )

    if not live.decorations:
        console.print("[yellow]No decorations at this caret position[/yellow]")
        return

    table = Table(title=f"Decorations (caret {caret})")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    table.add_column("Source")
    table.add_column("Widget")
    for decoration in live.decorations:
        table.add_row(
            str(decoration.start),
            str(decoration.end),
            escape(text[decoration.start:decoration.end]),
            escape(decoration.widget.render()),
        )
    console.print(table)


@app.command()
def insert(
    path: Path = typer.Argument(
        ...,
        help="File to edit in place",
        exists=True,
        dir_okay=False,
    ),
    tag: str = typer.Argument(..., help="Tag to insert (hg, kk or hk)"),
    caret: int = typer.Option(
        0,
        "--caret",
        "-c",
        min=0,
        help="Offset at which to insert the marker",
    ),
) -> None:
    """Insert an empty marker and report where the caret lands."""
    tag_defs = resolve_tags(tag)
    if len(tag_defs) != 1:
        raise typer.BadParameter("Exactly one tag is required", param_hint="TAG")
    tag_def = tag_defs[0]
    text = path.read_text(encoding="utf-8")

    try:
        result = insert_marker(text, caret, tag_def)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    path.write_text(result.text, encoding="utf-8")
    console.print(
        f"[green]Inserted[/green] {escape(tag_def.wrap())} at {caret}; "
        f"caret now at {result.caret}"
    )


@app.command(name="tags")
def list_tags() -> None:
    """List the configured tags and their editor commands."""
    table = Table(title="Kana tags")
    table.add_column("Tag")
    table.add_column("Opening")
    table.add_column("Closing")
    table.add_column("Command")
    table.add_column("Hotkey")
    for tag_def in resolve_tags(None):
        command = MARKER_COMMANDS.get(tag_def.name)
        table.add_row(
            tag_def.name,
            escape(tag_def.opening),
            escape(tag_def.closing),
            command.id if command else "",
            command.hotkey if command else "",
        )
    console.print(table)


if __name__ == "__main__":
    app()
