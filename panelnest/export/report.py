"""Plain-text panel reports."""

from typing import List

from panelnest.nesting.sheet_nester import NestedPanel, NestingResult

NO_PANELS_MESSAGE = "No panels detected."


def format_mm(value: float) -> str:
    """Format a length in mm with two fixed decimals."""
    return f"{value:.2f}"


def format_report(nested_panels: List[NestedPanel]) -> str:
    """
    Build the summary of detected panels.

    Args:
        nested_panels: Panels in nesting order

    Returns:
        Multi-line report, one line per panel
    """
    if not nested_panels:
        return NO_PANELS_MESSAGE

    lines = ["Detected Panels:"]
    for i, panel in enumerate(nested_panels):
        lines.append(
            f"Panel {i + 1} (Sheet {panel.sheet}): "
            f"Width: {format_mm(panel.width)}mm, "
            f"Height: {format_mm(panel.height)}mm, "
            f"Thickness: {format_mm(panel.thickness)}mm"
        )

    return "\n".join(lines)


def format_sheet_summary(result: NestingResult) -> str:
    """One line per sheet with its panel count and leftover width."""
    if not result.sheets:
        return "No sheets used."

    lines = [
        f"Sheets used: {result.sheet_count} "
        f"({format_mm(result.sheet_width)}x{format_mm(result.sheet_height)}mm)"
    ]
    utilization = result.utilization()
    for sheet in result.sheets:
        count = len(result.panels_on_sheet(sheet.index))
        lines.append(
            f"Sheet {sheet.index}: {count} panel{'s' if count != 1 else ''}, "
            f"remaining width {format_mm(sheet.remaining_width)}mm "
            f"({utilization[sheet.index]:.1f}% used)"
        )

    return "\n".join(lines)
