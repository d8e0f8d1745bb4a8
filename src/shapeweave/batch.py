"""Batch generation: one independent task per description group.

Every group gets its own :class:`~shapeweave.generator.Generator` seeded from
the batch seed and the group index, so the output does not depend on the
number of workers or on scheduling order.  Results are written into a pre-sized
list where group ``g`` owns the slice ``[g * n, (g + 1) * n)``.
"""
from __future__ import annotations

from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import List, Optional, Sequence

from .config.schema import Configuration
from .descriptions import Description
from .generator import Generator, requested_caption
from .sampling.philox import PhiloxRandom
from .svg import render_svg
from .types import GeneratedImage
from .logging import init_logging, logger, worker_level


def group_seeds(seed: Optional[int], count: int) -> List[int]:
    root = PhiloxRandom(seed)
    return [root.spawn_seed(i) for i in range(count)]


def generate_group(
    descriptions: Sequence[Description], configuration: Configuration, seed: int
) -> List[GeneratedImage]:
    generator = Generator(configuration, seed=seed)
    return generator.generate_images(descriptions, configuration.image_count_per_description)


def generate_batch(
    groups: Sequence[Sequence[Description]],
    configuration: Configuration,
    seed: Optional[int] = None,
    workers: Optional[int] = None,
) -> List[GeneratedImage]:
    """Generate ``image_count_per_description`` images for every group.

    ``seed`` and ``workers`` default to the configuration values.  With more
    than one worker the groups run on a process pool.
    """
    groups = [list(g) for g in groups]
    seed = configuration.seed if seed is None else seed
    workers = configuration.workers if workers is None else workers
    n = configuration.image_count_per_description
    seeds = group_seeds(seed, len(groups))
    results: List[Optional[GeneratedImage]] = [None] * (len(groups) * n)

    def store(index: int, images: List[GeneratedImage]) -> None:
        results[index * n:(index + 1) * n] = images
        logger.info(
            "generated %d image(s) for caption %d / %d: %s",
            len(images), index + 1, len(groups), requested_caption(groups[index]),
        )

    if workers <= 1 or len(groups) <= 1:
        for i, group in enumerate(groups):
            store(i, generate_group(group, configuration, seeds[i]))
    else:
        level = worker_level()
        pool_kwargs = {} if level is None else {"initializer": init_logging, "initargs": (level,)}
        with ProcessPoolExecutor(max_workers=min(workers, len(groups)), **pool_kwargs) as executor:
            futures = {
                executor.submit(generate_group, group, configuration, seeds[i]): i
                for i, group in enumerate(groups)
            }
            try:
                for future in as_completed(futures):
                    store(futures[future], future.result())
            except BaseException:
                for future in futures:
                    future.cancel()
                raise
    return results  # type: ignore[return-value]


def write_outputs(
    images: Sequence[GeneratedImage], configuration: Configuration, output_dir: str | Path
) -> Path:
    """Write ``svg/<i>.svg`` plus the requested and full caption files."""
    out = Path(output_dir)
    svg_dir = out / "svg"
    svg_dir.mkdir(parents=True, exist_ok=True)
    for i, image in enumerate(images):
        (svg_dir / f"{i}.svg").write_text(render_svg(image, configuration), encoding="utf-8")
    (out / "requested_captions.txt").write_text(
        "\n".join(image.requested_caption for image in images) + "\n", encoding="utf-8"
    )
    (out / "full_captions.txt").write_text(
        "\n".join(image.full_caption for image in images) + "\n", encoding="utf-8"
    )
    logger.info("wrote %d image(s) to %s", len(images), out)
    return out


__all__ = ["group_seeds", "generate_group", "generate_batch", "write_outputs"]
