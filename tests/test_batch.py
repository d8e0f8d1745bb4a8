import numpy as np

from shapeweave.batch import generate_batch, group_seeds, write_outputs
from shapeweave.descriptions import CircleDescription, SquareDescription


def _groups():
    return [
        [SquareDescription(size=[8, 16], allowed_colors=["red"])],
        [CircleDescription(radius=[4, 8], vertex_count=16), SquareDescription(size=[6, 10])],
        [SquareDescription(size=[5, 9], caption="small box")],
    ]


def _vertices(images):
    return [
        [p.shape.circumscribed_convex_polygon().vertices for p in image.shapes] for image in images
    ]


def test_group_seeds_are_stable():
    assert group_seeds(5, 3) == group_seeds(5, 3)
    assert len(set(group_seeds(5, 3))) == 3
    assert group_seeds(5, 2) == group_seeds(5, 3)[:2]


def test_batch_layout(make_config):
    cfg = make_config(image_count_per_description=2, max_overlap_ratio=0.1)
    images = generate_batch(_groups(), cfg, seed=17)
    assert len(images) == 6
    assert [i.requested_caption for i in images] == [
        "red square", "red square", "circle, square", "circle, square", "small box", "small box",
    ]


def test_worker_count_does_not_change_output(make_config):
    cfg = make_config(image_count_per_description=2, max_overlap_ratio=0.1)
    serial = generate_batch(_groups(), cfg, seed=17, workers=1)
    parallel = generate_batch(_groups(), cfg, seed=17, workers=2)
    assert [i.full_caption for i in serial] == [i.full_caption for i in parallel]
    for a, b in zip(_vertices(serial), _vertices(parallel)):
        assert all(np.array_equal(x, y) for x, y in zip(a, b))


def test_write_outputs(tmp_path, make_config):
    cfg = make_config(max_overlap_ratio=0.1)
    images = generate_batch(_groups(), cfg, seed=3)
    out = write_outputs(images, cfg, tmp_path / "out")
    assert sorted(p.name for p in (out / "svg").iterdir()) == ["0.svg", "1.svg", "2.svg"]
    requested = (out / "requested_captions.txt").read_text().splitlines()
    full = (out / "full_captions.txt").read_text().splitlines()
    assert requested == ["red square", "circle, square", "small box"]
    assert full == [i.full_caption for i in images]
    assert full[0] == "red square"
    assert "<svg" in (out / "svg" / "0.svg").read_text()
