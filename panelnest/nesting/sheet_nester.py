"""Sheet nesting for panels cut from stock boards.

First-fit decreasing: panels are sorted by their largest dimension and each
goes onto the first sheet with room, opening a new sheet otherwise.

Only the width axis is consumed. A sheet's ``remaining_height`` stays at the
full sheet height, so the height check never accounts for panels already
placed. Panels larger than a sheet still open a new sheet and leave a
negative ``remaining_width``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from panelnest.panels.classifier import Panel
from panelnest.utils import get_logger

logger = get_logger("nesting.sheet_nester")

DEFAULT_SHEET_WIDTH = 2440.0  # mm
DEFAULT_SHEET_HEIGHT = 1220.0  # mm


@dataclass(frozen=True)
class NestedPanel:
    """A panel assigned to a sheet."""
    width: float
    height: float
    thickness: float
    sheet: int  # 1-based sheet index
    source: Any = None

    @classmethod
    def from_panel(cls, panel: Panel, sheet: int) -> "NestedPanel":
        """Tag a panel with its sheet index."""
        return cls(
            width=panel.width,
            height=panel.height,
            thickness=panel.thickness,
            sheet=sheet,
            source=panel.source,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "sheet": self.sheet,
            "width": self.width,
            "height": self.height,
            "thickness": self.thickness,
            "source": str(self.source) if self.source is not None else None,
        }


@dataclass
class Sheet:
    """A stock sheet and its leftover capacity."""
    index: int
    width: float
    height: float
    remaining_width: float
    remaining_height: float

    def accepts(self, panel: Panel) -> bool:
        """Check whether the panel fits the remaining space."""
        return panel.width <= self.remaining_width and panel.height <= self.remaining_height

    def place(self, panel: Panel) -> None:
        """Consume width for a placed panel."""
        self.remaining_width -= panel.width

    @property
    def used_width(self) -> float:
        return self.width - self.remaining_width

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "index": self.index,
            "width": self.width,
            "height": self.height,
            "remaining_width": self.remaining_width,
            "remaining_height": self.remaining_height,
        }


@dataclass
class NestingConfig:
    """Configuration for sheet nesting."""
    # Stock sheet dimensions (mm)
    sheet_width: float = DEFAULT_SHEET_WIDTH
    sheet_height: float = DEFAULT_SHEET_HEIGHT

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "sheet_width": self.sheet_width,
            "sheet_height": self.sheet_height,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "NestingConfig":
        """Create from dictionary."""
        return cls(
            sheet_width=data.get("sheet_width", DEFAULT_SHEET_WIDTH),
            sheet_height=data.get("sheet_height", DEFAULT_SHEET_HEIGHT),
        )


@dataclass
class NestingResult:
    """Result of a nesting run."""
    nested_panels: List[NestedPanel] = field(default_factory=list)
    sheets: List[Sheet] = field(default_factory=list)
    sheet_width: float = DEFAULT_SHEET_WIDTH
    sheet_height: float = DEFAULT_SHEET_HEIGHT

    @property
    def sheet_count(self) -> int:
        return len(self.sheets)

    def panels_on_sheet(self, index: int) -> List[NestedPanel]:
        """Panels assigned to the sheet with the given 1-based index."""
        return [p for p in self.nested_panels if p.sheet == index]

    def utilization(self) -> Dict[int, float]:
        """Percentage of each sheet's width consumed, keyed by sheet index."""
        if self.sheet_width <= 0:
            return {sheet.index: 0.0 for sheet in self.sheets}
        return {
            sheet.index: (sheet.used_width / self.sheet_width) * 100
            for sheet in self.sheets
        }

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "sheet_width": self.sheet_width,
            "sheet_height": self.sheet_height,
            "sheet_count": self.sheet_count,
            "nested_panels": [p.to_dict() for p in self.nested_panels],
            "sheets": [s.to_dict() for s in self.sheets],
        }


class SheetNester:
    """
    First-fit decreasing nester for rectangular panels.

    Usage:
        nester = SheetNester(NestingConfig(sheet_width=2440, sheet_height=1220))
        result = nester.nest(panels)
    """

    def __init__(self, config: Optional[NestingConfig] = None):
        """
        Initialize sheet nester.

        Args:
            config: Nesting configuration
        """
        self.config = config or NestingConfig()

    def nest(self, panels: List[Panel]) -> NestingResult:
        """
        Assign each panel to a sheet.

        Args:
            panels: Panels to nest

        Returns:
            Nesting result with panels in processing order
        """
        result = NestingResult(
            sheet_width=self.config.sheet_width,
            sheet_height=self.config.sheet_height,
        )
        if not panels:
            return result

        for panel in self._sort_panels(panels):
            sheet = self._find_sheet(panel, result.sheets)
            if sheet is None:
                sheet = self._open_sheet(panel, result.sheets)
            else:
                sheet.place(panel)
            result.nested_panels.append(NestedPanel.from_panel(panel, sheet.index))

        logger.debug(
            f"Nested {len(result.nested_panels)} panels on {result.sheet_count} sheets"
        )
        return result

    def _sort_panels(self, panels: List[Panel]) -> List[Panel]:
        """Sort by largest dimension, descending; ties keep input order."""
        return sorted(panels, key=lambda p: max(p.width, p.height), reverse=True)

    def _find_sheet(self, panel: Panel, sheets: List[Sheet]) -> Optional[Sheet]:
        """First sheet, in creation order, with room for the panel."""
        for sheet in sheets:
            if sheet.accepts(panel):
                return sheet
        return None

    def _open_sheet(self, panel: Panel, sheets: List[Sheet]) -> Sheet:
        """Start a new sheet holding the panel."""
        sheet = Sheet(
            index=len(sheets) + 1,
            width=self.config.sheet_width,
            height=self.config.sheet_height,
            remaining_width=self.config.sheet_width - panel.width,
            remaining_height=self.config.sheet_height,
        )
        sheets.append(sheet)
        logger.debug(f"Opened sheet {sheet.index} for {panel.width}x{panel.height} panel")
        return sheet


def nest_panels(
    panels: List[Panel],
    sheet_width: float = DEFAULT_SHEET_WIDTH,
    sheet_height: float = DEFAULT_SHEET_HEIGHT,
) -> List[NestedPanel]:
    """
    Nest panels on standard sheets.

    Args:
        panels: Panels to nest
        sheet_width: Stock sheet width
        sheet_height: Stock sheet height

    Returns:
        Nested panels in processing order
    """
    nester = SheetNester(NestingConfig(sheet_width=sheet_width, sheet_height=sheet_height))
    return nester.nest(panels).nested_panels
