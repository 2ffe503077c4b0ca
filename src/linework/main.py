"""
main.py - Command-line entry point: generate shapes and print them as JSON.

Examples:
    linework --seed 7 box --count 10
    linework polygon --w 20 --h 10 --count 6
    linework --repeat 3 offset --x 50 --y 50 --min 0.1 --max 0.2
"""

import sys
import json
import logging
import argparse
from dataclasses import asdict
from typing import List, Optional, Sequence

from .config import LogConfig
from .logging_utils import configure_logging, parse_level
from .shapes import OffsetQuad, RandomBox, RandomPolygon, Shape

LOGGER_NAME = "linework"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linework", description="Generate random line-art point sets as JSON.")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible output")
    parser.add_argument("--repeat", type=int, default=1, help="number of shapes to generate")
    parser.add_argument("--log-level", type=parse_level, default="WARNING",
                        help="console level name, e.g. DEBUG or info")
    parser.add_argument("--log-dir", default=None, help="also write a rotating log file here")

    sub = parser.add_subparsers(dest="shape", required=True)
    for name in ("box", "polygon"):
        p = sub.add_parser(name)
        p.add_argument("--w", type=float, default=10)
        p.add_argument("--h", type=float, default=10)
        p.add_argument("--count", type=int, default=4)

    p = sub.add_parser("offset")
    p.add_argument("--w", type=float, default=10)
    p.add_argument("--h", type=float, default=10)
    p.add_argument("--x", type=float, default=50)
    p.add_argument("--y", type=float, default=50)
    p.add_argument("--min", dest="min_ratio", type=float, default=0.1)
    p.add_argument("--max", dest="max_ratio", type=float, default=0.2)
    return parser


def make_shapes(args: argparse.Namespace) -> List[Shape]:
    if args.shape == "offset":
        kwargs = dict(w=args.w, h=args.h, x=args.x, y=args.y,
                      min_ratio=args.min_ratio, max_ratio=args.max_ratio)
        shape_cls = OffsetQuad
    else:
        kwargs = dict(w=args.w, h=args.h, count=args.count)
        shape_cls = RandomBox if args.shape == "box" else RandomPolygon

    if args.seed is not None:
        Shape.reseed(args.seed)
    return [shape_cls(**kwargs) for _ in range(args.repeat)]


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = LogConfig(level=args.log_level, log_dir=args.log_dir)
    configure_logging(level=config.level, log_dir=config.log_dir,
                      name=LOGGER_NAME, run_prefix=config.run_prefix)
    logger = logging.getLogger(LOGGER_NAME)
    logger.info(f"LogConfig: {asdict(config)}")

    try:
        shapes = make_shapes(args)
    except (TypeError, ValueError) as e:
        logger.critical(f"Cannot generate {args.shape}: {e}")
        return 1

    json.dump([s.meta for s in shapes], sys.stdout, indent=2, default=str)
    sys.stdout.write("\n")
    logger.info(f"Generated {len(shapes)} {args.shape} shape(s)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
