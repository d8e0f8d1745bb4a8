import numpy as np
import pytest
from pydantic import ValidationError

from shapeweave.colors import DEFAULT_COLORS, Color
from shapeweave.config.presets import DESCRIPTION_DEFAULTS
from shapeweave.config.ranges import IntRange, Range
from shapeweave.descriptions import (
    CrossDescription,
    PentagonDescription,
    RegularPolygonDescription,
    SquareDescription,
    TriangleDescription,
    UNIT_PENTAGON,
    description_adapter,
)
from shapeweave.errors import InvalidRangeError
from shapeweave.geometry import area
from shapeweave.sampling import PhiloxRandom
from shapeweave.shapes import Circle, Ellipse, SemiCircle


@pytest.mark.parametrize("kind", sorted(DESCRIPTION_DEFAULTS))
def test_every_kind_samples_a_shape_with_positive_hull_area(kind):
    desc = description_adapter.validate_python(DESCRIPTION_DEFAULTS[kind])
    rng = PhiloxRandom(11)
    for _ in range(20):
        shape, color, caption = desc.sample_colored_shape(rng)
        assert shape.circumscribed_convex_polygon().area > 0
        assert color in DEFAULT_COLORS
        assert caption == f"{color.value} {desc.shape_name}"


def test_curved_kinds_build_curved_shapes():
    rng = PhiloxRandom(0)
    for kind, cls in (("circle", Circle), ("semicircle", SemiCircle), ("ellipse", Ellipse)):
        desc = description_adapter.validate_python(DESCRIPTION_DEFAULTS[kind])
        assert isinstance(desc.sample_shape(rng), cls)


def test_triangle_closed_form():
    desc = TriangleDescription(width=[10, 10], height=[20, 20], rotation=[0, 0])
    shape = desc.sample_shape(PhiloxRandom(0))
    assert np.allclose(
        sorted(map(tuple, shape.vertices)), sorted([(0.0, 20.0), (10.0, 20.0), (5.0, 0.0)])
    )


def test_pentagon_scales_unit_pentagon():
    desc = PentagonDescription(size=[10, 10], rotation=[0, 0])
    shape = desc.sample_shape(PhiloxRandom(0))
    assert shape.area == pytest.approx(100 * area(UNIT_PENTAGON))


def test_cross_hull_has_eight_vertices():
    desc = CrossDescription(width=[30, 30], height=[30, 30], thickness=[10, 10], rotation=[0, 0])
    shape = desc.sample_shape(PhiloxRandom(0))
    assert len(shape.vertices) == 12
    assert len(shape.circumscribed_convex_polygon()) == 8
    assert shape.area == pytest.approx(30 * 10 * 2 - 100)


def test_regular_polygon_vertex_count_in_range():
    desc = RegularPolygonDescription(vertex_count=[5, 7], radius=[4, 4])
    rng = PhiloxRandom(2)
    counts = {len(desc.sample_shape(rng).vertices) for _ in range(60)}
    assert counts == {5, 6, 7}
    with pytest.raises(ValidationError):
        RegularPolygonDescription(vertex_count=[2, 4], radius=[1, 2])


def test_sampling_is_deterministic():
    desc = SquareDescription(size=[5, 25])
    a = desc.sample_colored_shape(PhiloxRandom(42))
    b = desc.sample_colored_shape(PhiloxRandom(42))
    assert np.array_equal(a[0].vertices, b[0].vertices)
    assert a[1:] == b[1:]


def test_allowed_colors_restrict_palette():
    desc = SquareDescription(size=[5, 6], allowed_colors=["red", "blue"])
    rng = PhiloxRandom(5)
    colors = {desc.sample_colored_shape(rng)[1] for _ in range(50)}
    assert colors == {Color.RED, Color.BLUE}
    with pytest.raises(ValidationError):
        SquareDescription(size=[5, 6], allowed_colors=[])


def test_caption_override_and_label():
    plain = SquareDescription(size=[5, 6])
    assert plain.label == "square"
    red = plain.restricted_to(color=Color.RED)
    assert red.label == "red square"
    assert red.sample_colored_shape(PhiloxRandom(0))[2] == "red square"
    named = plain.restricted_to(caption="a box")
    assert named.label == "a box"
    assert named.sample_colored_shape(PhiloxRandom(0))[2] == "a box"
    assert plain.allowed_colors is None and plain.caption is None


def test_ranges_reject_inverted_bounds():
    with pytest.raises(ValidationError) as info:
        Range.model_validate([5, 1])
    cause = info.value.errors()[0]["ctx"]["error"]
    assert isinstance(cause, InvalidRangeError)
    with pytest.raises(ValidationError):
        TriangleDescription(width=[5, 1], height=[1, 2])
    with pytest.raises(ValidationError):
        SquareDescription(size=[0, 2])
    with pytest.raises(ValidationError):
        Range.model_validate([1, 2, 3])


def test_range_forms_and_sampling():
    assert Range.model_validate(3).as_tuple() == (3, 3)
    assert Range.model_validate({"lower": 1, "upper": 2}).as_tuple() == (1, 2)
    ir = IntRange.model_validate([2, 4])
    rng = PhiloxRandom(1)
    assert {ir.sample(rng) for _ in range(100)} == {2, 3, 4}


def test_unknown_fields_rejected():
    with pytest.raises(ValidationError):
        description_adapter.validate_python({"kind": "square", "size": [1, 2], "sides": 4})
    with pytest.raises(ValidationError):
        description_adapter.validate_python({"kind": "hexagon", "size": [1, 2]})


@pytest.mark.parametrize("raw", [[float("nan"), 1.0], [0.0, float("nan")], [0.0, float("inf")], float("nan")])
def test_ranges_reject_non_finite_bounds(raw):
    with pytest.raises(ValidationError):
        Range.model_validate(raw)
