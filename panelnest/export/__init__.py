"""
Export Module for nested panels.

Provides the text report plus CSV and DXF output for CNC cutting.
"""

from .report import (
    NO_PANELS_MESSAGE,
    format_mm,
    format_report,
    format_sheet_summary,
)
from .csv_export import (
    CSV_HEADER,
    CSVExporter,
    export_to_csv,
    panels_to_csv,
    panels_to_csv_rows,
)
from .dxf_export import (
    DXFExporter,
    export_to_dxf,
    panels_to_dxf,
    rectangle_points,
)

__all__ = [
    # Report
    "NO_PANELS_MESSAGE",
    "format_mm",
    "format_report",
    "format_sheet_summary",
    # CSV Export
    "CSV_HEADER",
    "CSVExporter",
    "export_to_csv",
    "panels_to_csv",
    "panels_to_csv_rows",
    # DXF Export
    "DXFExporter",
    "export_to_dxf",
    "panels_to_dxf",
    "rectangle_points",
]
