"""Tests for shared pydantic primitives."""

import pytest
from pydantic import ValidationError

from models import EventType, Point2D, Resolution, Vector2D


class TestPoint2D:

    def test_as_tuple(self):
        assert Point2D(x=1.5, y=-2.0).as_tuple() == (1.5, -2.0)

    def test_frozen(self):
        point = Point2D(x=0.0, y=0.0)
        with pytest.raises(ValidationError):
            point.x = 3.0

    def test_vector_alias(self):
        assert Vector2D is Point2D
        assert str(Vector2D(x=1.0, y=2.0)) == "Point2D(x=1.00, y=2.00)"


class TestResolution:

    def test_aspect_ratio(self):
        assert Resolution(width=800, height=600).aspect_ratio == pytest.approx(4 / 3)

    @pytest.mark.parametrize("width,height", [(0, 600), (800, 0), (-1, 10)])
    def test_dimensions_must_be_positive(self, width, height):
        with pytest.raises(ValidationError):
            Resolution(width=width, height=height)

    def test_str_and_tuple(self):
        surface = Resolution(width=475, height=320)
        assert str(surface) == "Resolution(475x320)"
        assert surface.as_tuple() == (475, 320)


def test_event_type_values():
    assert EventType.MOVE.value == "move"
    assert EventType("touch") is EventType.TOUCH
