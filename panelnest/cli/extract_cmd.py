"""CLI command for extracting and nesting panels."""

import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

console = Console()


@click.command("extract")
@click.argument("model_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--threshold", "-t", type=float, help="Panel thickness threshold in mm")
@click.option("--sheet-width", "-w", type=float, help="Stock sheet width in mm")
@click.option("--sheet-height", "-h", type=float, help="Stock sheet height in mm")
@click.option("--output-dir", "-o", type=click.Path(file_okay=False), help="Directory for CSV/DXF output")
@click.option("--csv/--no-csv", "write_csv", default=True, help="Write panels.csv")
@click.option("--dxf/--no-dxf", "write_dxf", default=True, help="Write panels.dxf")
@click.option("--strict", is_flag=True, help="Reject negative or non-finite extents")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def extract(model_path, threshold, sheet_width, sheet_height, output_dir,
            write_csv, write_dxf, strict, as_json):
    """Extract flat panels from a model and nest them on sheets.

    MODEL_PATH is an .obj, ASCII .stl or .json scene file.

    Example: panelnest extract cabinet.obj --sheet-width 2800 --sheet-height 2070
    """
    from panelnest.config import get_settings
    from panelnest.export.report import format_mm, format_sheet_summary
    from panelnest.panels import SceneReadError, ValidationError, read_scene
    from panelnest.pipeline import extract_panels

    overrides = {
        "thickness_threshold": threshold,
        "sheet_width": sheet_width,
        "sheet_height": sheet_height,
        "output_dir": Path(output_dir) if output_dir else None,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    if strict:
        overrides["strict_validation"] = True
    settings = get_settings().model_copy(update=overrides)

    try:
        objects = read_scene(model_path)
        result = extract_panels(objects, settings)
    except (SceneReadError, ValidationError) as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    written = result.export(settings.output_dir, csv=write_csv, dxf=write_dxf)

    if as_json:
        data = result.to_dict()
        data["files"] = {fmt: str(path) for fmt, path in written.items()}
        click.echo(json.dumps(data, indent=2))
        return

    if not result.nested_panels:
        console.print(f"[yellow]{result.report}[/yellow]")
        return

    table = Table(title=f"Detected Panels - {Path(model_path).name}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Object", style="cyan")
    table.add_column("Sheet", justify="right", style="magenta")
    table.add_column("Width (mm)", justify="right", style="green")
    table.add_column("Height (mm)", justify="right", style="green")
    table.add_column("Thickness (mm)", justify="right", style="yellow")

    for i, panel in enumerate(result.nested_panels):
        table.add_row(
            str(i + 1),
            str(panel.source) if panel.source is not None else "-",
            str(panel.sheet),
            format_mm(panel.width),
            format_mm(panel.height),
            format_mm(panel.thickness),
        )

    console.print(table)
    console.print(format_sheet_summary(result.nesting))

    for fmt, path in written.items():
        console.print(f"[green]✓[/green] {fmt.upper()} saved to {path}")
