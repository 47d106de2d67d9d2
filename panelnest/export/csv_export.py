"""CSV export of nested panels."""

import csv
import io
from pathlib import Path
from typing import List, Optional, Union

from panelnest.nesting.sheet_nester import NestedPanel
from panelnest.utils import get_logger

logger = get_logger("export.csv_export")

CSV_HEADER = ["Sheet", "Width (mm)", "Height (mm)", "Thickness (mm)"]


def panels_to_csv_rows(nested_panels: List[NestedPanel], precision: int = 2) -> List[list]:
    """Header plus one row per panel; empty input gives no rows."""
    if not nested_panels:
        return []

    rows = [list(CSV_HEADER)]
    for panel in nested_panels:
        rows.append([
            panel.sheet,
            round(panel.width, precision),
            round(panel.height, precision),
            round(panel.thickness, precision),
        ])
    return rows


class CSVExporter:
    """
    Exports nested panels as a CSV table.

    Usage:
        exporter = CSVExporter()
        content = exporter.panels_to_csv(panels)
        exporter.save(panels, 'panels.csv')
    """

    def __init__(self, precision: int = 2):
        """
        Initialize CSV exporter.

        Args:
            precision: Decimal places for lengths
        """
        self.precision = precision

    def panels_to_csv(self, nested_panels: List[NestedPanel]) -> Optional[str]:
        """Convert panels to CSV text, or None when there are no panels."""
        rows = panels_to_csv_rows(nested_panels, self.precision)
        if not rows:
            return None

        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerows(rows)
        return buffer.getvalue()

    def save(self, nested_panels: List[NestedPanel], filepath: Union[str, Path]) -> Optional[Path]:
        """
        Save panels to a CSV file.

        Args:
            nested_panels: Panels to export
            filepath: Output file path

        Returns:
            Written path, or None if nothing was written
        """
        content = self.panels_to_csv(nested_panels)
        if content is None:
            logger.debug("No panels, skipping CSV export")
            return None

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, 'w', newline='') as f:
            f.write(content)

        logger.info(f"CSV saved to {filepath}")
        return filepath


def panels_to_csv(nested_panels: List[NestedPanel]) -> Optional[str]:
    """
    Convenience function to convert panels to CSV text.

    Args:
        nested_panels: Panels to export

    Returns:
        CSV content, or None for no panels
    """
    return CSVExporter().panels_to_csv(nested_panels)


def export_to_csv(nested_panels: List[NestedPanel], filepath: Union[str, Path]) -> Optional[Path]:
    """Convenience function to export panels to a CSV file."""
    return CSVExporter().save(nested_panels, filepath)
