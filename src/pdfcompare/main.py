"""Main entry point for the pdfcompare CLI."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from pdfcompare import __version__

console = Console()
app = typer.Typer(
    help="Visual page-by-page comparison of PDF documents.",
    no_args_is_help=False,
    invoke_without_command=True,
)

# Exit codes
EXIT_EQUAL = 0
EXIT_DIFFERENT = 1
EXIT_ERROR = 2


def setup_logging(verbose: bool) -> None:
    """Route logging through rich.

    Only pdfcompare loggers go to DEBUG with ``verbose``; third-party
    libraries stay at WARNING.
    """
    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
    logging.getLogger("pdfcompare").setLevel(logging.DEBUG if verbose else logging.WARNING)


def _display_path(path: Path) -> str:
    """Show a path relative to the working directory when possible."""
    try:
        return f"./{path.resolve().relative_to(Path.cwd())}"
    except ValueError:
        return str(path)


# =============================================================================
# CLI Commands
# =============================================================================

@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show pdfcompare version and exit",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log every page verdict",
    ),
) -> None:
    """Render two PDFs page by page and report where they differ."""
    if version:
        console.print(__version__)
        raise typer.Exit(0)
    setup_logging(verbose)
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit(0)


@app.command("compare")
def cmd_compare(
    expected: Path = typer.Argument(..., help="Expected (reference) PDF"),
    actual: Path = typer.Argument(..., help="Actual PDF to check"),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Report directory (default: <output_dir>/<expected>__vs__<actual>__<hash>)",
    ),
    dpi: Optional[int] = typer.Option(
        None, "--dpi", "-d", help="DPI for rasterization (default from config)"
    ),
    pdf: bool = typer.Option(True, "--pdf/--no-pdf", help="Write a diff PDF"),
    images: bool = typer.Option(True, "--images/--no-images", help="Write diff PNGs"),
    sources: bool = typer.Option(
        False,
        "--sources",
        help="Also write the expected and actual renders of differing pages",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every page verdict"),
) -> None:
    """Compare two PDF files.

    Exits with 0 when the documents are identical, 1 when they differ and
    2 on errors.
    """
    from pdfcompare.comparator import compare_pdfs
    from pdfcompare.compare import write_diff_images, write_diff_pdf, write_summary
    from pdfcompare.config import get_dpi, get_output_dir
    from pdfcompare.errors import ConfigError, RenderError
    from pdfcompare.render import validate_dpi
    from pdfcompare.utils import make_report_name

    if verbose:
        setup_logging(True)

    for path in (expected, actual):
        if not path.is_file():
            console.print(f"[red]File not found:[/red] {path}")
            raise typer.Exit(EXIT_ERROR)

    try:
        dpi = validate_dpi(dpi) if dpi is not None else get_dpi()
    except ConfigError as exc:
        console.print(f"[red]Invalid DPI:[/red] {exc}")
        raise typer.Exit(EXIT_ERROR)

    console.print(f"[dim]Expected: {expected.name}[/dim]")
    console.print(f"[dim]Actual:   {actual.name}[/dim]")

    try:
        with console.status(f"[cyan]Comparing at {dpi} DPI...", spinner="dots"):
            result = compare_pdfs(expected, actual, dpi=dpi)
    except RenderError as exc:
        console.print(f"[red]Render failed:[/red] {exc}")
        raise typer.Exit(EXIT_ERROR)

    if result.is_equal:
        console.print(f"[green]Documents are identical[/green] ({result.page_count} page(s))")
        raise typer.Exit(EXIT_EQUAL)

    different = result.different_pages
    console.print(
        f"[yellow]{len(different)} of {result.page_count} page(s) differ[/yellow]"
    )
    for page in different:
        console.print(f"  [dim]•[/dim] page {page.page_index + 1}: {page.kind}")

    report_dir = output or get_output_dir() / make_report_name(expected, actual)
    try:
        written = [write_summary(result, report_dir / "summary.json")]
        if pdf:
            written.append(write_diff_pdf(result, report_dir / "diff.pdf", dpi=dpi))
        if images:
            written.extend(
                write_diff_images(result, report_dir / "pages", include_sources=sources)
            )
    except (OSError, RuntimeError) as exc:
        console.print(f"[red]Could not write report:[/red] {exc}")
        raise typer.Exit(EXIT_ERROR)

    console.print()
    console.print(f"[green]Report written to[/green] {_display_path(report_dir)}")
    console.print(f"[dim]{len(written)} file(s)[/dim]")
    raise typer.Exit(EXIT_DIFFERENT)


# Config subcommand group
config_app = typer.Typer(help="Manage pdfcompare settings")
app.add_typer(config_app, name="config")


@config_app.callback(invoke_without_command=True)
def config_callback(ctx: typer.Context) -> None:
    """Show or manage settings."""
    if ctx.invoked_subcommand is None:
        cmd_config_show()


@config_app.command("show")
def cmd_config_show() -> None:
    """Show the current settings."""
    from pdfcompare.config import get_config, get_config_file

    config = get_config()
    console.print()
    console.print(f"[bold]DPI:[/bold]        {config['dpi']}")
    console.print(f"[bold]Output dir:[/bold] {config['output_dir']}")
    console.print(f"[dim]Config file: {get_config_file()}[/dim]")
    console.print()


@config_app.command("set")
def cmd_config_set(
    dpi: Optional[int] = typer.Option(None, "--dpi", "-d", help="DPI for rasterization"),
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", "-o", help="Directory reports are written to"
    ),
) -> None:
    """Change one or more settings."""
    from pdfcompare.config import set_dpi, set_output_dir
    from pdfcompare.errors import ConfigError

    if dpi is None and output_dir is None:
        console.print("[red]Nothing to set[/red]")
        console.print("[dim]Examples:[/dim]")
        console.print("[dim]  pdfcompare config set --dpi 150[/dim]")
        console.print("[dim]  pdfcompare config set --output-dir ./diffs[/dim]")
        raise typer.Exit(1)

    if dpi is not None:
        try:
            set_dpi(dpi)
        except ConfigError as exc:
            console.print(f"[red]Invalid DPI:[/red] {exc}")
            raise typer.Exit(1)
        console.print(f"[green]DPI set to {dpi}[/green]")

    if output_dir is not None:
        set_output_dir(output_dir)
        console.print(f"[green]Output dir set to {output_dir}[/green]")


@config_app.command("reset")
def cmd_config_reset() -> None:
    """Restore default settings."""
    from pdfcompare.config import reset_config

    reset_config()
    console.print("[green]Settings restored to defaults.[/green]")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
