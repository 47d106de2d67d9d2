"""
Panel extraction pipeline.

Runs the full flow for one model:
1. Classify scene objects as panels
2. Nest panels on stock sheets
3. Build the text report
4. Optionally write CSV and DXF files
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Union

from panelnest.config import Settings, get_settings
from panelnest.export.csv_export import CSVExporter
from panelnest.export.dxf_export import DXFExporter
from panelnest.export.report import format_report
from panelnest.nesting.sheet_nester import NestedPanel, NestingConfig, NestingResult, SheetNester
from panelnest.panels.classifier import Panel, classify_objects
from panelnest.panels.scene import SceneObject
from panelnest.utils import ensure_dir, get_logger

logger = get_logger("pipeline")

CSV_FILENAME = "panels.csv"
DXF_FILENAME = "panels.dxf"


@dataclass
class ExtractionResult:
    """Result of a panel extraction run."""
    object_count: int
    panels: List[Panel] = field(default_factory=list)
    nesting: NestingResult = field(default_factory=NestingResult)
    report: str = ""
    dxf_precision: int = 2

    @property
    def nested_panels(self) -> List[NestedPanel]:
        return self.nesting.nested_panels

    def export(
        self,
        output_dir: Union[str, Path],
        csv: bool = True,
        dxf: bool = True,
    ) -> Dict[str, Path]:
        """
        Write CSV and DXF files for the nested panels.

        Args:
            output_dir: Directory for the output files
            csv: Write panels.csv
            dxf: Write panels.dxf

        Returns:
            Written files keyed by format; empty when there are no panels
        """
        written: Dict[str, Path] = {}
        if not self.nested_panels:
            logger.info("No panels detected, nothing exported")
            return written

        output_dir = ensure_dir(output_dir)
        if csv:
            written["csv"] = CSVExporter().save(self.nested_panels, output_dir / CSV_FILENAME)
        if dxf:
            exporter = DXFExporter(precision=self.dxf_precision)
            written["dxf"] = exporter.save(self.nested_panels, output_dir / DXF_FILENAME)

        return written

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "object_count": self.object_count,
            "panel_count": len(self.panels),
            "nesting": self.nesting.to_dict(),
            "report": self.report,
        }


def extract_panels(
    objects: Iterable[Union[SceneObject, Sequence[float]]],
    settings: Optional[Settings] = None,
) -> ExtractionResult:
    """
    Classify, nest and report the panels among scene objects.

    Args:
        objects: Scene objects or raw extent triples
        settings: Thresholds and sheet size (global settings by default)

    Returns:
        Extraction result
    """
    settings = settings or get_settings()
    objects = list(objects)

    panels = classify_objects(
        objects,
        threshold=settings.thickness_threshold,
        validate=settings.strict_validation,
    )
    nester = SheetNester(NestingConfig(
        sheet_width=settings.sheet_width,
        sheet_height=settings.sheet_height,
    ))
    nesting = nester.nest(panels)

    logger.info(
        f"{len(panels)} of {len(objects)} objects are panels, "
        f"nested on {nesting.sheet_count} sheets"
    )

    return ExtractionResult(
        object_count=len(objects),
        panels=panels,
        nesting=nesting,
        report=format_report(nesting.nested_panels),
        dxf_precision=settings.dxf_precision,
    )
