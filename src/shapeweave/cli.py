# -*- coding: utf-8 -*-
from __future__ import annotations
import argparse, sys, pathlib

from .batch import generate_batch, write_outputs
from .config.loader import dump_configuration, load_configuration, load_descriptions
from .errors import ShapeweaveError
from .logging import init_logging, logger
from .parser import parse_captions


def _overrides(args) -> dict:
    out = {}
    if args.seed is not None:
        out["seed"] = args.seed
    if args.workers is not None:
        out["workers"] = args.workers
    if getattr(args, "log_level", None):
        out["log_level"] = args.log_level
    return out


def cmd_generate(args):
    cfg = load_configuration(args.config, overrides=_overrides(args))
    init_logging(cfg.log_level, args.log_file)

    if args.descriptions:
        groups = load_descriptions(args.descriptions)
    else:
        text = pathlib.Path(args.captions).read_text(encoding="utf-8")
        groups = parse_captions(text, cfg)
    if not groups:
        raise SystemExit("no captions or descriptions to generate")

    logger.info("generating %d image(s) per caption for %d caption(s)", cfg.image_count_per_description, len(groups))
    images = generate_batch(groups, cfg)
    out = write_outputs(images, cfg, args.output_dir)
    print(f"wrote {len(images)} image(s) to {out}")
    return 0


def cmd_dump_config(args):
    cfg = load_configuration(args.config)
    text = dump_configuration(cfg)
    if args.out:
        pathlib.Path(args.out).parent.mkdir(parents=True, exist_ok=True)
        pathlib.Path(args.out).write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)
    return 0


def make_parser():
    p = argparse.ArgumentParser(
        prog="shapeweave",
        description="Generate random images of colored shapes from captions.",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    pg = sub.add_parser("generate", help="Generate SVG images and caption files")
    pg.add_argument("--config", "-c", default=None, help="YAML/JSON configuration (defaults if omitted)")
    src = pg.add_mutually_exclusive_group(required=True)
    src.add_argument("--captions", help="text file with one comma-separated caption per line")
    src.add_argument("--descriptions", "-d", help="YAML/JSON list of description lists")
    pg.add_argument("--output-dir", "-o", dest="output_dir", required=True)
    pg.add_argument("--seed", type=int, default=None, help="batch seed (overrides config)")
    pg.add_argument("--workers", type=int, default=None, help="process pool size (overrides config)")
    pg.add_argument("--log-level", dest="log_level", choices=["none", "info", "debug"], default=None)
    pg.add_argument("--log-file", dest="log_file", default=None, help="also write log records to this file")
    pg.set_defaults(func=cmd_generate)

    pd = sub.add_parser("dump-config", help="Print the fully resolved configuration as YAML")
    pd.add_argument("--config", "-c", default=None)
    pd.add_argument("--out", default=None, help="write to this file instead of stdout")
    pd.set_defaults(func=cmd_dump_config)

    return p


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    parser = make_parser()
    ns = parser.parse_args(argv)
    try:
        return ns.func(ns)
    except (ShapeweaveError, FileNotFoundError) as exc:
        logger.error("%s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
