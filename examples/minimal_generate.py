"""Generate a few images from inline captions and print their captions."""

from shapeweave import generate_batch, load_configuration, parse_captions
from shapeweave.logging import init_logging

cfg = load_configuration(overrides={"image_count_per_description": 2, "seed": 7})
init_logging(cfg.log_level)
groups = parse_captions("red triangle, blue circle\ngreen square", cfg)
for image in generate_batch(groups, cfg):
    print(f"{image.requested_caption!r:32} -> {image.full_caption!r} ({image.attempts} attempt(s))")
