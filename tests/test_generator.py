import logging

import numpy as np
import pytest

from shapeweave.descriptions import CircleDescription, SquareDescription, TriangleDescription
from shapeweave.errors import ExhaustedPlacementBudgetError
from shapeweave.colors import Color
from shapeweave.generator import Generator, PlacementState
from shapeweave.shapes import ConvexPolygon
from shapeweave.types import PlacedShape


def test_single_square_end_to_end(make_config, fixed_square, assert_inside_canvas):
    cfg = make_config()
    image = Generator(cfg, seed=3).generate_image([fixed_square(20)])
    assert len(image.shapes) == 1
    box = image.shapes[0].shape.bounding_box()
    assert box.width == pytest.approx(20) and box.height == pytest.approx(20)
    assert_inside_canvas(image, 100, 100)
    assert image.attempts == 1
    assert image.requested_caption == "square"
    assert image.full_caption == f"{image.shapes[0].color.value} square"


def test_infeasible_layout_hits_attempt_cap(make_config, fixed_square):
    cfg = make_config(max_placement_attempts=50)
    gen = Generator(cfg, seed=0)
    with pytest.raises(ExhaustedPlacementBudgetError) as info:
        gen.generate_image([fixed_square(60), fixed_square(60)])
    assert info.value.attempts == 50
    assert info.value.shape_count == 2


def test_oversized_shape_hits_attempt_cap(make_config, fixed_square):
    cfg = make_config(max_placement_attempts=5)
    with pytest.raises(ExhaustedPlacementBudgetError):
        Generator(cfg, seed=0).generate_image([fixed_square(150)])


@pytest.mark.parametrize("seed", range(5))
def test_pairwise_overlap_budget_holds(make_config, assert_pairwise_overlap, assert_inside_canvas, seed):
    cfg = make_config(
        width=128,
        height=128,
        max_overlap_ratio=0.2,
        distractor_count=[1, 3],
        shuffle_descriptions=True,
        max_placement_attempts=5000,
    )
    descs = [
        SquareDescription(size=[10, 20]),
        CircleDescription(radius=[5, 10], vertex_count=24),
        TriangleDescription(width=[10, 20], height=[10, 20]),
    ]
    image = Generator(cfg, seed=seed).generate_image(descs)
    assert 4 <= len(image.shapes) <= 6
    assert_pairwise_overlap(image, 0.2, cfg.geometry_eps)
    assert_inside_canvas(image, 128, 128)


def test_zero_overlap_budget_means_disjoint(make_config, fixed_square, assert_pairwise_overlap):
    cfg = make_config(max_overlap_ratio=0.0)
    image = Generator(cfg, seed=8).generate_image([fixed_square(30), fixed_square(30), fixed_square(30)])
    assert len(image.shapes) == 3
    assert_pairwise_overlap(image, 0.0)


def test_same_seed_same_image(make_config):
    cfg = make_config(max_overlap_ratio=0.1, distractor_count=[0, 2])
    descs = [SquareDescription(size=[10, 30]), CircleDescription(radius=[5, 12], vertex_count=16)]
    a = Generator(cfg, seed=99).generate_images(descs, 3)
    b = Generator(cfg, seed=99).generate_images(descs, 3)
    assert [i.full_caption for i in a] == [i.full_caption for i in b]
    for ia, ib in zip(a, b):
        for pa, pb in zip(ia.shapes, ib.shapes):
            va = pa.shape.circumscribed_convex_polygon().vertices
            vb = pb.shape.circumscribed_convex_polygon().vertices
            assert np.array_equal(va, vb)


def test_seed_defaults_to_configuration(make_config):
    cfg = make_config(seed=1234)
    assert Generator(cfg).seed == 1234
    assert Generator(cfg, seed=5).seed == 5


def test_sequence_puts_distractors_first(make_config, fixed_square):
    cfg = make_config(
        distractor_count=[2, 2],
        distractor_descriptions=[{"kind": "circle", "radius": [2, 3]}],
    )
    requested = [fixed_square(5, caption="a"), fixed_square(6, caption="b")]
    seq = Generator(cfg, seed=0).build_sequence(requested)
    assert [d.kind for d in seq[:2]] == ["circle", "circle"]
    assert seq[2:] == requested


def test_no_distractors_keeps_requested_order(make_config, fixed_square):
    cfg = make_config()
    requested = [fixed_square(5, caption="a"), fixed_square(6, caption="b")]
    assert Generator(cfg, seed=0).build_sequence(requested) == requested


def test_requested_caption_ignores_distractors_and_shuffle(make_config, fixed_square):
    cfg = make_config(
        max_overlap_ratio=0.5,
        shuffle_descriptions=True,
        distractor_count=[1, 2],
        distractor_descriptions=[{"kind": "circle", "radius": [3, 4], "vertex_count": 12}],
    )
    requested = [fixed_square(8, caption=c) for c in ("a", "b", "c")]
    image = Generator(cfg, seed=21).generate_image(requested)
    assert image.requested_caption == "a, b, c"
    fragments = image.full_caption.split(", ")
    assert sorted(f for f in fragments if f in {"a", "b", "c"}) == ["a", "b", "c"]
    assert len(fragments) == len(image.shapes) >= 4


def test_restarts_are_logged(make_config, fixed_square, caplog):
    caplog.set_level(logging.DEBUG, logger="shapeweave")
    cfg = make_config(max_placement_attempts=3)
    with pytest.raises(ExhaustedPlacementBudgetError):
        Generator(cfg, seed=0).generate_image([fixed_square(150)])
    messages = [r.getMessage() for r in caplog.records]
    assert any("unplaceable" in m for m in messages)
    assert any(m.startswith("restart") for m in messages)


def test_check_accepts_or_restarts(make_config):
    gen = Generator(make_config(max_overlap_ratio=0.3), seed=0)
    placed = [PlacedShape(ConvexPolygon([(0, 0), (10, 0), (10, 10), (0, 10)]), Color.RED, "red square")]
    touching = ConvexPolygon([(8, 0), (18, 0), (18, 10), (8, 10)])
    covering = ConvexPolygon([(5, 0), (15, 0), (15, 10), (5, 10)])
    assert gen._check(touching, placed) is PlacementState.ACCEPTED
    assert gen._check(covering, placed) is PlacementState.RESTART
    assert gen._check(covering, []) is PlacementState.ACCEPTED
    assert set(PlacementState) == {PlacementState.ACCEPTED, PlacementState.RESTART}
