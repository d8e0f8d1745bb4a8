"""Rejection-sampling placement of shape sequences on a canvas.

The sequence for one image is a random number of distractors followed by the
requested descriptions.  Shapes are sampled and positioned one at a time and
checked against every shape accepted so far.  Any failure (a shape that does
not fit the canvas, or an overlap above ``max_overlap_ratio``) discards the
whole partial image and starts again from the first shape, so earlier shapes
are resampled too.  Every restart counts towards ``max_placement_attempts``.
"""
from __future__ import annotations

from enum import Enum
from typing import List, Optional, Sequence, Tuple

from .config.schema import Configuration
from .descriptions import Description
from .errors import ExhaustedPlacementBudgetError, UnplaceableShape
from .sampling.philox import PhiloxRandom
from .shapes import Shape
from .types import GeneratedImage, PlacedShape
from .logging import logger


class PlacementState(Enum):
    ACCEPTED = "accepted"
    RESTART = "restart"


class Generator:
    """Owns one random stream and places shapes for a batch of images.

    Parameters
    ----------
    configuration:
        Canvas size, overlap budget, distractor settings and attempt cap.
    seed:
        Seed for the private :class:`PhiloxRandom`; falls back to
        ``configuration.seed`` and then to a fresh random seed.
    """

    def __init__(self, configuration: Configuration, seed: Optional[int] = None):
        self.configuration = configuration
        self.rng = PhiloxRandom(configuration.seed if seed is None else seed)

    @property
    def seed(self) -> int:
        return self.rng.seed

    def build_sequence(self, descriptions: Sequence[Description]) -> List[Description]:
        """Distractors first, then the requested descriptions (shuffled if configured)."""
        cfg = self.configuration
        count = cfg.distractor_count.sample(self.rng)
        sequence = [self.rng.choice(cfg.distractor_descriptions) for _ in range(count)]
        requested = list(descriptions)
        if cfg.shuffle_descriptions:
            self.rng.shuffle(requested)
        sequence.extend(requested)
        return sequence

    def _position(self, description: Description) -> PlacedShape:
        cfg = self.configuration
        shape, color, caption = description.sample_colored_shape(self.rng)
        positioned = shape.positioned_randomly(cfg.width, cfg.height, self.rng)
        if positioned is None:
            box = shape.bounding_box()
            raise UnplaceableShape(
                f"{caption} ({box.width:.3g}x{box.height:.3g}) does not fit "
                f"a {cfg.width:g}x{cfg.height:g} canvas"
            )
        return PlacedShape(positioned, color, caption)

    def _check(self, candidate: Shape, placed: Sequence[PlacedShape]) -> PlacementState:
        cfg = self.configuration
        hull = candidate.circumscribed_convex_polygon()
        for other in placed:
            ratio = hull.intersection_ratio(other.shape.circumscribed_convex_polygon(), cfg.geometry_eps)
            if ratio > cfg.max_overlap_ratio:
                logger.debug(
                    "overlap %.4f with %s exceeds %.4f", ratio, other.caption, cfg.max_overlap_ratio
                )
                return PlacementState.RESTART
        return PlacementState.ACCEPTED

    def place_shapes(self, sequence: Sequence[Description]) -> Tuple[List[PlacedShape], int]:
        """Place every description of ``sequence`` in order.

        Returns the accepted shapes and the number of attempts it took.  Raises
        :class:`ExhaustedPlacementBudgetError` once ``max_placement_attempts``
        attempts have failed.
        """
        cfg = self.configuration
        placed: List[PlacedShape] = []
        attempts = 1
        index = 0
        while index < len(sequence):
            try:
                candidate = self._position(sequence[index])
            except UnplaceableShape as exc:
                logger.debug("shape %d/%d unplaceable: %s", index + 1, len(sequence), exc)
                state = PlacementState.RESTART
            else:
                state = self._check(candidate.shape, placed)

            if state is PlacementState.ACCEPTED:
                placed.append(candidate)
                index += 1
                continue

            if attempts >= cfg.max_placement_attempts:
                raise ExhaustedPlacementBudgetError(attempts, len(sequence))
            logger.debug("restart %d after %d accepted shape(s)", attempts, len(placed))
            attempts += 1
            placed.clear()
            index = 0
        return placed, attempts

    def generate_image(self, descriptions: Sequence[Description]) -> GeneratedImage:
        sequence = self.build_sequence(descriptions)
        placed, attempts = self.place_shapes(sequence)
        return GeneratedImage(
            shapes=placed,
            requested_caption=requested_caption(descriptions),
            full_caption=", ".join(p.caption for p in placed),
            attempts=attempts,
        )

    def generate_images(self, descriptions: Sequence[Description], count: int) -> List[GeneratedImage]:
        return [self.generate_image(descriptions) for _ in range(count)]


def requested_caption(descriptions: Sequence[Description]) -> str:
    return ", ".join(d.label for d in descriptions)


__all__ = ["Generator", "PlacementState", "requested_caption"]
