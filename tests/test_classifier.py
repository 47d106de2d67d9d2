"""Tests for panel classification."""

import math

import pytest

from panelnest.panels.classifier import (
    DEFAULT_THICKNESS_THRESHOLD,
    Panel,
    ValidationError,
    classify,
    classify_objects,
)
from panelnest.panels.scene import SceneObject


class TestPanel:
    """Tests for Panel dataclass."""

    def test_create_panel(self):
        """Test creating a panel."""
        panel = Panel(width=600.0, height=1500.0, thickness=18.0)

        assert panel.width == 600.0
        assert panel.height == 1500.0
        assert panel.thickness == 18.0
        assert panel.source is None

    def test_panel_is_immutable(self):
        """Test panels cannot be modified."""
        panel = Panel(600.0, 1500.0, 18.0)

        with pytest.raises(AttributeError):
            panel.width = 10.0

    def test_to_dict(self):
        """Test panel serialization."""
        panel = Panel(600.0, 1500.0, 18.0, source=SceneObject("side", (18, 600, 1500)))
        d = panel.to_dict()

        assert d["width"] == 600.0
        assert d["source"] == "side"


class TestClassify:
    """Tests for classify()."""

    def test_default_threshold(self):
        """Test default threshold is 50mm."""
        assert DEFAULT_THICKNESS_THRESHOLD == 50.0

    def test_thin_object_is_panel(self):
        """Test a thin object becomes a panel with sorted extents."""
        panel = classify(600, 18, 1500)

        assert panel is not None
        assert panel.thickness == 18
        assert panel.width == 600
        assert panel.height == 1500

    def test_extent_order_does_not_matter(self):
        """Test every permutation classifies the same way."""
        expected = classify(18, 600, 1500)
        for triple in [(600, 1500, 18), (1500, 18, 600), (1500, 600, 18)]:
            assert classify(*triple) == expected

    def test_thick_object_is_not_panel(self):
        """Test a cube is not a panel."""
        assert classify(100, 100, 100) is None

    def test_threshold_is_exclusive(self):
        """Test thickness equal to the threshold is not a panel."""
        assert classify(50, 600, 1500) is None
        assert classify(49.99, 600, 1500) is not None

    def test_custom_threshold(self):
        """Test caller-supplied threshold."""
        assert classify(60, 600, 1500) is None
        assert classify(60, 600, 1500, threshold=80) is not None
        assert classify(18, 600, 1500, threshold=10) is None

    def test_width_not_forced_larger(self):
        """Test width is the middle extent, height the largest."""
        panel = classify(18, 2000, 300)

        assert panel.width == 300
        assert panel.height == 2000

    def test_source_passthrough(self):
        """Test source reference is kept unchanged."""
        token = object()
        panel = classify(18, 600, 1500, source=token)

        assert panel.source is token

    def test_degenerate_extents_classified_mechanically(self):
        """Test zero and negative extents without validation."""
        zero = classify(0, 0, 0)
        assert zero == Panel(width=0, height=0, thickness=0)

        negative = classify(-5, 100, 200)
        assert negative.thickness == -5
        assert negative.width == 100

    def test_validate_rejects_negative(self):
        """Test validation of negative extents."""
        with pytest.raises(ValidationError, match="negative"):
            classify(-5, 100, 200, validate=True)

    def test_validate_rejects_non_finite(self):
        """Test validation of nan and inf extents."""
        with pytest.raises(ValidationError, match="not finite"):
            classify(math.nan, 100, 200, validate=True)
        with pytest.raises(ValidationError):
            classify(18, 100, math.inf, validate=True)

    def test_validate_accepts_good_input(self):
        """Test validation passes for normal extents."""
        assert classify(18, 600, 1500, validate=True) is not None

    def test_validation_error_is_value_error(self):
        """Test ValidationError can be caught as ValueError."""
        assert issubclass(ValidationError, ValueError)


class TestClassifyObjects:
    """Tests for classify_objects()."""

    def test_filters_non_panels(self):
        """Test thick objects are dropped and order is kept."""
        objects = [
            SceneObject("side", (18, 560, 720)),
            SceneObject("leg", (60, 60, 700)),
            SceneObject("shelf", (800, 18, 300)),
        ]
        panels = classify_objects(objects)

        assert [p.source.name for p in panels] == ["side", "shelf"]
        assert panels[1].width == 300
        assert panels[1].height == 800

    def test_raw_triples(self):
        """Test plain extent triples are accepted."""
        panels = classify_objects([(18, 600, 1500), (100, 100, 100)])

        assert len(panels) == 1
        assert panels[0].source is None

    def test_threshold_and_validate_forwarded(self):
        """Test options reach classify()."""
        assert classify_objects([(60, 600, 1500)], threshold=80)
        with pytest.raises(ValidationError):
            classify_objects([(-1, 600, 1500)], validate=True)

    def test_empty(self):
        """Test empty input."""
        assert classify_objects([]) == []
