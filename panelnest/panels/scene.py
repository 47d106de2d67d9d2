"""Scene reading: bounding boxes of the objects in a model file.

Supported inputs:
- Wavefront OBJ: each ``o`` or ``g`` statement starts a new object
- ASCII STL: each ``solid`` block is one object
- JSON: a list of ``{"name": ..., "extents": [a, b, c]}`` entries (or bare
  triples), optionally wrapped as ``{"objects": [...]}``
"""

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union

from panelnest.utils import get_logger

logger = get_logger("panels.scene")

SUPPORTED_SUFFIXES = (".obj", ".stl", ".json")

_STL_SOLID = re.compile(r"^[ \t]*solid\b[ \t]*(.*)$", re.IGNORECASE | re.MULTILINE)
_STL_VERTEX = re.compile(r"vertex\s+([\d.e+-]+)\s+([\d.e+-]+)\s+([\d.e+-]+)", re.IGNORECASE)


class SceneReadError(Exception):
    """Raised when a scene file cannot be read."""


@dataclass(frozen=True)
class SceneObject:
    """A named object and its axis-aligned bounding box extents."""
    name: str
    extents: Tuple[float, float, float]

    def __str__(self) -> str:
        return self.name


class _Bounds:
    """Running axis-aligned bounding box."""

    def __init__(self):
        self.min_x = self.min_y = self.min_z = float('inf')
        self.max_x = self.max_y = self.max_z = float('-inf')

    def add(self, x: float, y: float, z: float) -> None:
        self.min_x, self.max_x = min(self.min_x, x), max(self.max_x, x)
        self.min_y, self.max_y = min(self.min_y, y), max(self.max_y, y)
        self.min_z, self.max_z = min(self.min_z, z), max(self.max_z, z)

    @property
    def empty(self) -> bool:
        return self.min_x == float('inf')

    def extents(self) -> Tuple[float, float, float]:
        return (self.max_x - self.min_x, self.max_y - self.min_y, self.max_z - self.min_z)


def read_scene(path: Union[str, Path]) -> List[SceneObject]:
    """
    Read the objects of a scene file.

    Args:
        path: Path to an .obj, .stl or .json file

    Returns:
        Scene objects in file order

    Raises:
        SceneReadError: If the file is missing, unsupported or malformed
    """
    path = Path(path)
    if not path.exists():
        raise SceneReadError(f"Scene file not found: {path}")

    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise SceneReadError(f"Unsupported scene format: {suffix or path.name}")

    try:
        content = path.read_text()
    except (OSError, UnicodeDecodeError) as e:
        raise SceneReadError(f"Could not read {path}: {e}") from e

    if suffix == ".obj":
        objects = _parse_obj(content, default_name=path.stem)
    elif suffix == ".stl":
        objects = _parse_stl(content, default_name=path.stem)
    else:
        objects = _parse_json(content)

    logger.debug(f"Read {len(objects)} objects from {path.name}")
    return objects


def _parse_obj(content: str, default_name: str) -> List[SceneObject]:
    objects = []
    name = default_name
    bounds = _Bounds()

    for line in content.splitlines():
        parts = line.split()
        if not parts:
            continue
        if parts[0] in ("o", "g"):
            if not bounds.empty:
                objects.append(SceneObject(name, bounds.extents()))
            name = " ".join(parts[1:]) or default_name
            bounds = _Bounds()
        elif parts[0] == "v":
            if len(parts) < 4:
                continue
            try:
                bounds.add(float(parts[1]), float(parts[2]), float(parts[3]))
            except ValueError as e:
                raise SceneReadError(f"Bad vertex line: {line.strip()}") from e

    if not bounds.empty:
        objects.append(SceneObject(name, bounds.extents()))

    return objects


def _parse_stl(content: str, default_name: str) -> List[SceneObject]:
    solids = list(_STL_SOLID.finditer(content))
    if not solids:
        raise SceneReadError("Not an ASCII STL file")

    objects = []
    for i, match in enumerate(solids):
        end = solids[i + 1].start() if i + 1 < len(solids) else len(content)
        bounds = _Bounds()
        for vertex in _STL_VERTEX.finditer(content, match.end(), end):
            try:
                bounds.add(float(vertex.group(1)), float(vertex.group(2)), float(vertex.group(3)))
            except ValueError as e:
                raise SceneReadError(f"Bad vertex: {vertex.group(0)}") from e
        if bounds.empty:
            continue
        name = match.group(1).strip() or (default_name if len(solids) == 1 else f"{default_name}_{i + 1}")
        objects.append(SceneObject(name, bounds.extents()))

    return objects


def _parse_json(content: str) -> List[SceneObject]:
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise SceneReadError(f"Invalid JSON: {e}") from e

    if isinstance(data, dict):
        data = data.get("objects")
    if not isinstance(data, list):
        raise SceneReadError("Expected a list of objects")

    objects = []
    for i, entry in enumerate(data):
        name: Optional[str] = None
        extents = entry
        if isinstance(entry, dict):
            name = entry.get("name")
            extents = entry.get("extents")
        if not isinstance(extents, (list, tuple)) or len(extents) != 3:
            raise SceneReadError(f"Object {i + 1}: extents must be three numbers")
        try:
            triple = (float(extents[0]), float(extents[1]), float(extents[2]))
        except (TypeError, ValueError) as e:
            raise SceneReadError(f"Object {i + 1}: extents must be three numbers") from e
        objects.append(SceneObject(name or f"object_{i + 1}", triple))

    return objects
