"""Tests for scene file reading."""

import json

import pytest

from panelnest.panels.scene import SceneObject, SceneReadError, read_scene


class TestReadObj:
    """Tests for Wavefront OBJ scenes."""

    def test_multiple_objects(self, tmp_path):
        """Test each o statement starts a new object."""
        path = tmp_path / "cabinet.obj"
        path.write_text("""# Cabinet
o side
v 0 0 0
v 18 0 0
v 18 560 720
v 0 560 720
f 1 2 3 4
o block
v 0 0 0
v 100 100 100
""")
        objects = read_scene(path)

        assert objects == [
            SceneObject("side", (18.0, 560.0, 720.0)),
            SceneObject("block", (100.0, 100.0, 100.0)),
        ]

    def test_groups(self, tmp_path):
        """Test g statements also split objects."""
        path = tmp_path / "parts.obj"
        path.write_text("g top\nv 0 0 0\nv 800 18 400\ng back\nv 0 0 0\nv 800 600 6\n")

        objects = read_scene(path)

        assert [o.name for o in objects] == ["top", "back"]
        assert objects[1].extents == (800.0, 600.0, 6.0)

    def test_unnamed_uses_file_stem(self, tmp_path):
        """Test a file without objects becomes one object."""
        path = tmp_path / "board.obj"
        path.write_text("v 10 10 10\nv 610 28 1510\n")

        objects = read_scene(path)

        assert len(objects) == 1
        assert objects[0].name == "board"
        assert objects[0].extents == (600.0, 18.0, 1500.0)

    def test_bad_vertex(self, tmp_path):
        """Test malformed vertex line."""
        path = tmp_path / "bad.obj"
        path.write_text("v 0 0 zero\n")

        with pytest.raises(SceneReadError, match="Bad vertex"):
            read_scene(path)

    def test_bare_group_and_tabs(self, tmp_path):
        """Test unnamed g statements and tab-separated vertices."""
        path = tmp_path / "tabs.obj"
        path.write_text("o side\nv\t0 0 0\nv\t18 560 720\ng\nv 0 0 0\nv\t100\t100\t100\n")

        objects = read_scene(path)

        assert objects == [
            SceneObject("side", (18.0, 560.0, 720.0)),
            SceneObject("tabs", (100.0, 100.0, 100.0)),
        ]


class TestReadStl:
    """Tests for ASCII STL scenes."""

    def test_single_solid(self, tmp_path):
        """Test one solid block."""
        path = tmp_path / "shelf.stl"
        path.write_text("""solid shelf
  facet normal 0 0 1
    outer loop
      vertex 0 0 0
      vertex 800 0 0
      vertex 800 300 18
    endloop
  endfacet
endsolid shelf
""")
        objects = read_scene(path)

        assert objects == [SceneObject("shelf", (800.0, 300.0, 18.0))]

    def test_unnamed_solids(self, tmp_path):
        """Test unnamed solids get numbered names."""
        path = tmp_path / "parts.stl"
        path.write_text(
            "solid\nvertex 0 0 0\nvertex 1 2 3\nendsolid\n"
            "solid\nvertex 0 0 0\nvertex 4 5 6\nendsolid\n"
        )
        objects = read_scene(path)

        assert [o.name for o in objects] == ["parts_1", "parts_2"]
        assert objects[1].extents == (4.0, 5.0, 6.0)

    def test_bad_vertex(self, tmp_path):
        """Test vertex tokens that are not numbers."""
        path = tmp_path / "bad.stl"
        path.write_text("solid bad\nvertex 1.2.3 0 0\nendsolid bad\n")

        with pytest.raises(SceneReadError, match="Bad vertex"):
            read_scene(path)

    def test_not_ascii_stl(self, tmp_path):
        """Test content without solid blocks."""
        path = tmp_path / "junk.stl"
        path.write_text("nothing here")

        with pytest.raises(SceneReadError):
            read_scene(path)


class TestReadJson:
    """Tests for JSON scenes."""

    def test_named_objects(self, tmp_path):
        """Test wrapped list of named objects."""
        path = tmp_path / "scene.json"
        path.write_text(json.dumps({"objects": [
            {"name": "side", "extents": [18, 560, 720]},
            {"extents": [100, 100, 100]},
        ]}))
        objects = read_scene(path)

        assert objects[0] == SceneObject("side", (18.0, 560.0, 720.0))
        assert objects[1].name == "object_2"

    def test_bare_triples(self, tmp_path):
        """Test a plain list of triples."""
        path = tmp_path / "scene.json"
        path.write_text("[[1000, 500, 18], [1500, 600, 18]]")

        objects = read_scene(path)

        assert [o.extents for o in objects] == [(1000.0, 500.0, 18.0), (1500.0, 600.0, 18.0)]

    def test_invalid_json(self, tmp_path):
        """Test unparseable JSON."""
        path = tmp_path / "scene.json"
        path.write_text("{not json")

        with pytest.raises(SceneReadError, match="Invalid JSON"):
            read_scene(path)

    def test_wrong_extent_count(self, tmp_path):
        """Test extents must be a triple."""
        path = tmp_path / "scene.json"
        path.write_text('[{"name": "flat", "extents": [10, 20]}]')

        with pytest.raises(SceneReadError, match="three numbers"):
            read_scene(path)

    def test_non_numeric_extents(self, tmp_path):
        """Test extents must be numbers."""
        path = tmp_path / "scene.json"
        path.write_text('[["a", "b", "c"]]')

        with pytest.raises(SceneReadError):
            read_scene(path)

    def test_not_a_list(self, tmp_path):
        """Test top-level object without objects key."""
        path = tmp_path / "scene.json"
        path.write_text('{"panels": []}')

        with pytest.raises(SceneReadError, match="list"):
            read_scene(path)


class TestReadErrors:
    """Tests for general read errors."""

    def test_missing_file(self, tmp_path):
        """Test non-existent file."""
        with pytest.raises(SceneReadError, match="not found"):
            read_scene(tmp_path / "missing.obj")

    def test_unsupported_suffix(self, tmp_path):
        """Test unsupported format."""
        path = tmp_path / "model.skp"
        path.write_text("binary")

        with pytest.raises(SceneReadError, match="Unsupported"):
            read_scene(path)
