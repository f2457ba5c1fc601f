"""Command-line interface for brandset."""

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from brandset.authors import normalize_authors
from brandset.config.defaults import DEFAULT_CONFIG_YAML
from brandset.config.loader import find_config_file, load_config
from brandset.config.models import BrandsetConfig
from brandset.parser.docx_parser import DocxParser
from brandset.renderers.pdf.renderer import PdfRenderer
from brandset.theme import css_color

app = typer.Typer(
    name="brandset",
    help="Render Word documents as branded PDFs with a styled title page.",
    add_completion=True,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _load(config: Optional[Path]) -> BrandsetConfig:
    if config:
        if not config.exists():
            console.print(f"[red]Configuration file not found: {config}[/red]")
            raise typer.Exit(1)
        return load_config(config)

    auto_config = find_config_file(Path.cwd())
    if auto_config:
        console.print(f"[dim]Using configuration: {auto_config}[/dim]")
        return load_config(auto_config)
    return BrandsetConfig()


@app.command()
def convert(
    input_file: Path = typer.Argument(
        ...,
        help="Input Word document (.docx)",
        exists=True,
        readable=True,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output directory (default: ./output)",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (YAML)",
    ),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Override document title"),
    author: Optional[list[str]] = typer.Option(
        None, "--author", "-a", help="Override author (repeat for several)"
    ),
    main_color: Optional[str] = typer.Option(
        None, "--main-color", help="Override the main theme color (hex)"
    ),
    lang: Optional[str] = typer.Option(None, "--lang", help="Override the document language"),
    write_html: bool = typer.Option(
        False, "--html", help="Also write the intermediate HTML next to the PDF"
    ),
) -> None:
    """
    Convert a Word document to a branded PDF.

    Examples:
        brandset convert report.docx
        brandset convert report.docx -c brand.yaml -o ./dist
        brandset convert report.docx --main-color 0000FF -a Alice -a Bob
    """
    try:
        cfg = _load(config)
    except (ValidationError, ValueError) as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(1)

    if title:
        cfg.metadata.title = title
    if author:
        cfg.metadata.author = author
    if main_color:
        cfg.theme.main_color = main_color
    if lang:
        cfg.theme.lang = lang
    if output:
        cfg.output_dir = output

    cfg.output_dir.mkdir(parents=True, exist_ok=True)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Parsing document...", total=None)
        try:
            document = DocxParser(cfg.style_mapping).parse(input_file)
        except Exception as e:
            progress.update(task, description=f"[red]Parse error: {e}[/red]")
            raise typer.Exit(1)

        # Fill what the configuration leaves open from the document itself
        if not cfg.metadata.title and document.metadata.title:
            cfg.metadata.title = document.metadata.title
        if not cfg.metadata.author and document.metadata.authors:
            cfg.metadata.author = list(document.metadata.authors)
        progress.update(task, description="[green]Document parsed[/green]")

        task = progress.add_task("Generating PDF...", total=None)
        renderer = PdfRenderer(cfg)
        pdf_path = renderer.output_path(cfg.output_dir, cfg.metadata.resolved_title, input_file.stem)
        try:
            if write_html:
                html_path = renderer.write_html(document, pdf_path.with_suffix(".html"))
                console.print(f"[dim]HTML saved: {html_path}[/dim]")
            renderer.render(document, pdf_path)
            progress.update(task, description=f"[green]PDF saved: {pdf_path}[/green]")
        except Exception as e:
            progress.update(task, description=f"[red]PDF error: {e}[/red]")
            console.print_exception()
            raise typer.Exit(1)

    console.print()
    console.print("[bold green]Conversion complete![/bold green]")


@app.command()
def init(
    output: Path = typer.Option(
        Path("./brandset.yaml"),
        "--output",
        "-o",
        help="Output configuration file path",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite existing file",
    ),
) -> None:
    """
    Initialize a new configuration file with defaults.
    """
    if output.exists() and not force:
        console.print(f"[yellow]File already exists: {output}[/yellow]")
        console.print("Use --force to overwrite.")
        raise typer.Exit(1)

    output.write_text(DEFAULT_CONFIG_YAML, encoding="utf-8")
    console.print(f"[green]Configuration file created: {output}[/green]")
    console.print()
    console.print("Edit this file to set your document's branding and cover page.")


@app.command()
def validate(
    config_path: Path = typer.Argument(
        ...,
        help="Configuration file to validate",
        exists=True,
    ),
) -> None:
    """
    Validate a configuration file and show the resolved cover.
    """
    try:
        cfg = load_config(config_path)
        resolved = PdfRenderer(cfg).resolve()
    except (ValidationError, ValueError) as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(1)

    authors, _ = normalize_authors(cfg.metadata.author)
    console.print("[green]Configuration is valid![/green]")
    console.print()
    console.print(f"Title: {cfg.metadata.title or 'Not specified'}")
    console.print(f"Authors: {', '.join(authors) or 'Not specified'}")
    console.print(f"Main color: {resolved.theme.primary.to_hex()}")
    console.print(f"Secondary color: {resolved.theme.secondary.to_hex()}")
    console.print(f"Output directory: {cfg.output_dir}")
    console.print()

    table = Table(title="Cover")
    for column in ("element", "color", "weight", "size", "font"):
        table.add_column(column)
    for key in ("title", "subtitle", "date", "author"):
        spec = resolved.cover.get(key)
        if not isinstance(spec, dict):
            continue
        table.add_row(
            key,
            css_color(spec.get("color")),
            str(spec.get("weight")),
            str(spec.get("size")),
            str(spec.get("font")),
        )
    console.print(table)


@app.command()
def info(
    input_file: Path = typer.Argument(
        ...,
        help="Input Word document (.docx)",
        exists=True,
        readable=True,
    ),
) -> None:
    """
    Show information about a Word document.
    """
    try:
        document = DocxParser().parse(input_file)
    except Exception as e:
        console.print(f"[red]Error reading document: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[bold]Title:[/bold] {document.metadata.title}")
    console.print(f"[bold]Authors:[/bold] {', '.join(document.metadata.authors) or 'Not specified'}")
    console.print(f"[bold]Language:[/bold] {document.metadata.language or 'Not specified'}")
    console.print(f"[bold]Chapters:[/bold] {len(document.chapters)}")
    console.print(f"[bold]Word count:[/bold] ~{document.word_count():,}")
    console.print()

    titled = [c for c in document.chapters if c.title]
    if titled:
        console.print("[bold]Chapter titles:[/bold]")
        for i, chapter in enumerate(titled, 1):
            console.print(f"  {i}. {chapter.title}")


if __name__ == "__main__":
    app()
