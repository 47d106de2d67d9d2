"""
DXF Export for Nested Panels.

Generates DXF (AutoCAD Drawing Exchange Format) files with one closed
rectangle per panel. Every rectangle is drawn from the local origin; sheet
assignment is not reflected in the drawing, so rectangles overlap.
"""

from pathlib import Path
from typing import List, Optional, Tuple, Union

from panelnest.nesting.sheet_nester import NestedPanel
from panelnest.utils import get_logger

logger = get_logger("export.dxf_export")

DEFAULT_LAYER = '0'


class DXFExporter:
    """
    Exports nested panels to DXF format for CNC cutting.

    Usage:
        exporter = DXFExporter()
        dxf_content = exporter.panels_to_dxf(panels)
        exporter.save(panels, 'panels.dxf')
    """

    def __init__(self, precision: int = 2, layer: str = DEFAULT_LAYER):
        """
        Initialize DXF exporter.

        Args:
            precision: Decimal precision for coordinates
            layer: Layer for panel outlines
        """
        self.precision = precision
        self.layer = layer

    def panels_to_dxf(self, nested_panels: List[NestedPanel]) -> Optional[str]:
        """
        Convert panels to DXF string.

        Args:
            nested_panels: Panels to draw

        Returns:
            DXF content, or None when there are no panels
        """
        if not nested_panels:
            return None

        lines = []

        # Empty header, tables and blocks
        for section in ('HEADER', 'TABLES', 'BLOCKS'):
            lines.extend(['0', 'SECTION', '2', section, '0', 'ENDSEC'])

        # Entities section
        lines.extend(['0', 'SECTION', '2', 'ENTITIES'])

        for panel in nested_panels:
            lines.extend(self._rectangle_to_polyline(rectangle_points(panel)))

        lines.extend(['0', 'ENDSEC'])

        # End of file
        lines.extend(['0', 'EOF'])

        return '\n'.join(lines) + '\n'

    def save(self, nested_panels: List[NestedPanel], filepath: Union[str, Path]) -> Optional[Path]:
        """
        Save panels to DXF file.

        Args:
            nested_panels: Panels to draw
            filepath: Output file path

        Returns:
            Written path, or None if nothing was written
        """
        dxf_content = self.panels_to_dxf(nested_panels)
        if dxf_content is None:
            logger.debug("No panels, skipping DXF export")
            return None

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, 'w') as f:
            f.write(dxf_content)

        logger.info(f"DXF saved to {filepath}")
        return filepath

    def _rectangle_to_polyline(self, points: List[Tuple[float, float]]) -> List[str]:
        """Convert rectangle corners to a closed DXF LWPOLYLINE entity."""
        lines = [
            '0', 'LWPOLYLINE',
            '8', self.layer,  # Layer name
            '90', str(len(points)),  # Number of vertices
            '70', '1',  # Closed flag
        ]

        for x, y in points:
            lines.extend([
                '10', f'{x:.{self.precision}f}',
                '20', f'{y:.{self.precision}f}',
            ])

        return lines


def rectangle_points(panel: NestedPanel) -> List[Tuple[float, float]]:
    """Counter-clockwise corners from the origin: (0,0) (w,0) (w,h) (0,h)."""
    return [
        (0.0, 0.0),
        (panel.width, 0.0),
        (panel.width, panel.height),
        (0.0, panel.height),
    ]


def export_to_dxf(nested_panels: List[NestedPanel], filepath: Union[str, Path]) -> Optional[Path]:
    """
    Convenience function to export panels to DXF file.

    Args:
        nested_panels: Panels to draw
        filepath: Output file path
    """
    exporter = DXFExporter()
    return exporter.save(nested_panels, filepath)


def panels_to_dxf(nested_panels: List[NestedPanel]) -> Optional[str]:
    """Convenience function to convert panels to DXF string."""
    exporter = DXFExporter()
    return exporter.panels_to_dxf(nested_panels)
