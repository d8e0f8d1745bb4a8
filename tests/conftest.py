import pytest

from shapeweave.config.loader import load_configuration
from shapeweave.descriptions import SquareDescription
from shapeweave.sampling import PhiloxRandom


@pytest.fixture
def rng(): return PhiloxRandom(0)


@pytest.fixture
def make_config():
    """Return a factory for small, strict test configurations."""
    def _fn(**overrides):
        base = {
            "width": 100,
            "height": 100,
            "max_overlap_ratio": 0.0,
            "distractor_count": [0, 0],
            "shuffle_descriptions": False,
            "max_placement_attempts": 2000,
            "seed": 1,
            "workers": 1,
        }
        base.update(overrides)
        return load_configuration(base)
    return _fn


@pytest.fixture
def fixed_square():
    def _fn(size, **kw):
        return SquareDescription(size=[size, size], rotation=[0, 0], **kw)
    return _fn


@pytest.fixture
def assert_pairwise_overlap():
    def _check(image, max_ratio, eps=1e-10):
        hulls = [p.shape.circumscribed_convex_polygon() for p in image.shapes]
        for i in range(len(hulls)):
            for j in range(len(hulls)):
                if i != j:
                    assert hulls[i].intersection_ratio(hulls[j], eps) <= max_ratio + 1e-9
    return _check


@pytest.fixture
def assert_inside_canvas():
    def _check(image, width, height, tol=1e-9):
        for p in image.shapes:
            assert p.shape.bounding_box().within(width, height, tol)
    return _check
