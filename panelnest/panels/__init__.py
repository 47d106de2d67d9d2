"""Panel detection from 3D scene objects.

Reads object bounding boxes and classifies the flat ones as panels.
"""

from panelnest.panels.scene import (
    SceneObject,
    SceneReadError,
    read_scene,
)
from panelnest.panels.classifier import (
    DEFAULT_THICKNESS_THRESHOLD,
    Panel,
    ValidationError,
    classify,
    classify_objects,
)

__all__ = [
    "SceneObject",
    "SceneReadError",
    "read_scene",
    "DEFAULT_THICKNESS_THRESHOLD",
    "Panel",
    "ValidationError",
    "classify",
    "classify_objects",
]
