"""Command-line interface for Legal Review."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn

from legal_review import __version__
from legal_review.config import get_settings
from legal_review.core.renderer import DocumentRenderer, RenderError
from legal_review.formats import SUPPORTED_FORMATS
from legal_review.research.client import ResearchClient, ResearchError

app = typer.Typer(
    name="legal-review",
    help="Run legal research and render the results as DOCX, PDF or HTML reports.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Legal Review v{__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    """Route library logging through rich when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def generate_output_path(
    input_path: Path, format_name: str, output_dir: Optional[Path] = None
) -> Path:
    """Generate report path with -review suffix and the format's extension."""
    output_name = f"{input_path.stem}-review.{format_name}"

    if output_dir:
        return output_dir / output_name
    return input_path.parent / output_name


def resolve_format(format_name: Optional[str]) -> str:
    """Pick the requested or configured format, exiting if unsupported."""
    name = (format_name or get_settings().default_format).lower().lstrip(".")
    if name not in SUPPORTED_FORMATS:
        console.print(
            f"[red]Error:[/red] Unsupported format: {name}. "
            f"Supported formats: {', '.join(SUPPORTED_FORMATS)}"
        )
        raise typer.Exit(1)
    return name


def write_report(
    content: str,
    output_path: Path,
    format_name: str,
    document_name: str,
    is_plaintiff: bool,
    prompt: Optional[str] = None,
) -> bool:
    """Render content and write the decoded report. Returns True on success."""
    try:
        rendered = DocumentRenderer(format_name).render(
            content, document_name, is_plaintiff, prompt=prompt
        )
    except RenderError as e:
        console.print(f"[red]Error rendering report:[/red] {e}")
        return False

    output_path.write_bytes(rendered.decode())
    console.print(f"[green]Report:[/green] {output_path} ({rendered.mime_type})")
    return True


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
) -> None:
    """
    Legal research relay and report renderer.

    Examples:

        python review.py render answer.md --format pdf --plaintiff

        python review.py research "Is a verbal contract enforceable?" --report review.docx
    """


@app.command()
def render(
    path: Path = typer.Argument(
        ...,
        help="Markdown file with research results",
        exists=True,
        dir_okay=False,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Report path (default: <input>-review.<format>)",
    ),
    format_name: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Report format: docx, pdf or html (default: docx)",
    ),
    name: Optional[str] = typer.Option(
        None,
        "--name",
        "-n",
        help="Document name shown in the report (default: input file name)",
    ),
    plaintiff: bool = typer.Option(
        False,
        "--plaintiff/--defendant",
        help="Report variant",
    ),
    prompt: Optional[str] = typer.Option(
        None,
        "--prompt",
        help="Original research prompt to include in PDF and HTML reports",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """Render a markdown research answer into a report."""
    setup_logging(verbose)
    fmt = resolve_format(format_name)
    output_path = output or generate_output_path(path, fmt)

    if verbose:
        console.print(f"[blue]Input:[/blue] {path}")
        console.print(f"[blue]Output:[/blue] {output_path}")
        console.print(f"[blue]Format:[/blue] {fmt}")

    content = path.read_text(encoding="utf-8")
    success = write_report(
        content, output_path, fmt, name or path.name, plaintiff, prompt=prompt
    )
    raise typer.Exit(0 if success else 1)


@app.command()
def research(
    prompt: str = typer.Argument(..., help="Research question"),
    report: Optional[Path] = typer.Option(
        None,
        "--report",
        "-r",
        help="Also render the answer into this report file",
    ),
    format_name: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Report format (default: taken from the report suffix, else docx)",
    ),
    name: Optional[str] = typer.Option(
        None,
        "--name",
        "-n",
        help="Document name shown in the report",
    ),
    plaintiff: bool = typer.Option(
        False,
        "--plaintiff/--defendant",
        help="Report variant",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """Send a prompt to the legal research API and print the answer."""
    setup_logging(verbose)
    fmt = None
    if report is not None:
        fmt = resolve_format(format_name or report.suffix or None)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task("Researching...", total=None)
        try:
            result = ResearchClient().research(prompt)
        except ResearchError as e:
            console.print(f"[red]Error:[/red] {e}")
            if e.details:
                console.print(e.details, markup=False, highlight=False)
            raise typer.Exit(1)

    console.print(result, markup=False, highlight=False)

    if report is not None:
        success = write_report(
            result, report, fmt, name or "Unknown", plaintiff, prompt=prompt
        )
        raise typer.Exit(0 if success else 1)


if __name__ == "__main__":
    app()
