"""Panel classification from object bounding boxes.

An object counts as a flat panel when the smallest of its three bounding-box
extents is below a thickness threshold. The two larger extents become the
panel's width and height, by sorted position only.
"""

import math
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Union

from panelnest.panels.scene import SceneObject
from panelnest.utils import get_logger

logger = get_logger("panels.classifier")

DEFAULT_THICKNESS_THRESHOLD = 50.0  # mm


class ValidationError(ValueError):
    """Raised when extents are negative or not finite."""


@dataclass(frozen=True)
class Panel:
    """A flat rectangular piece extracted from a 3D object."""
    width: float  # Middle extent
    height: float  # Largest extent
    thickness: float  # Smallest extent
    source: Any = None  # Opaque reference to the originating object

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "thickness": self.thickness,
            "source": str(self.source) if self.source is not None else None,
        }


def validate_extents(extents: Sequence[float]) -> None:
    """Raise ValidationError if any extent is negative or not finite."""
    for value in extents:
        if not math.isfinite(value):
            raise ValidationError(f"Extent is not finite: {value}")
        if value < 0:
            raise ValidationError(f"Extent is negative: {value}")


def classify(
    extent_a: float,
    extent_b: float,
    extent_c: float,
    threshold: float = DEFAULT_THICKNESS_THRESHOLD,
    source: Any = None,
    validate: bool = False,
) -> Optional[Panel]:
    """
    Classify a bounding box as a panel.

    Args:
        extent_a, extent_b, extent_c: Bounding box extents in any order
        threshold: Thickness below which the object is a panel
        source: Reference to the originating object, passed through unchanged
        validate: Reject negative or non-finite extents

    Returns:
        Panel, or None when the object is not a panel
    """
    dims = sorted((extent_a, extent_b, extent_c))
    if validate:
        validate_extents(dims)

    thickness, width, height = dims
    if thickness < threshold:
        return Panel(width=width, height=height, thickness=thickness, source=source)
    return None


def classify_objects(
    objects: Iterable[Union[SceneObject, Sequence[float]]],
    threshold: float = DEFAULT_THICKNESS_THRESHOLD,
    validate: bool = False,
) -> List[Panel]:
    """Classify scene objects (or raw extent triples), keeping only panels."""
    panels = []
    for obj in objects:
        if isinstance(obj, SceneObject):
            extents, source = obj.extents, obj
        else:
            extents, source = tuple(obj), None

        panel = classify(*extents, threshold=threshold, source=source, validate=validate)
        if panel is None:
            logger.debug(f"Skipping {source or extents}: thicker than {threshold}mm")
            continue
        panels.append(panel)

    return panels
