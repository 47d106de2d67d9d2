"""Main CLI entry point for panelnest."""

import click
from rich.console import Console

from panelnest import __version__
from panelnest.utils import setup_logging

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name="panelnest")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """panelnest - panel extraction and sheet nesting for CNC.

    Detects flat panels in a 3D model, nests them on stock sheets and
    writes CSV and DXF files for cutting.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    setup_logging("DEBUG" if verbose else "WARNING")


# Import and register commands
from panelnest.cli.extract_cmd import extract

cli.add_command(extract)


@cli.command()
def status() -> None:
    """Show configuration."""
    from panelnest.config import get_settings

    settings = get_settings()

    console.print("[bold]panelnest Status[/bold]")
    console.print(f"Version: {__version__}")
    console.print()
    console.print("[bold]Configuration:[/bold]")
    console.print(f"  Output Directory: {settings.output_dir}")
    console.print(f"  Sheet Size: {settings.sheet_width:g} x {settings.sheet_height:g} mm")
    console.print(f"  Thickness Threshold: {settings.thickness_threshold:g} mm")
    console.print(f"  Strict Validation: {settings.strict_validation}")
    console.print(f"  DXF Precision: {settings.dxf_precision}")


if __name__ == "__main__":
    cli()
