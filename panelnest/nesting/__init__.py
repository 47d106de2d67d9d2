"""Nesting module for assigning panels to stock sheets.

Provides first-fit decreasing nesting over fixed-size sheets.
"""

from panelnest.nesting.sheet_nester import (
    DEFAULT_SHEET_HEIGHT,
    DEFAULT_SHEET_WIDTH,
    NestedPanel,
    NestingConfig,
    NestingResult,
    Sheet,
    SheetNester,
    nest_panels,
)

__all__ = [
    "DEFAULT_SHEET_HEIGHT",
    "DEFAULT_SHEET_WIDTH",
    "NestedPanel",
    "NestingConfig",
    "NestingResult",
    "Sheet",
    "SheetNester",
    "nest_panels",
]
