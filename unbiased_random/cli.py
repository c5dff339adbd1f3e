"""Draw values from a seeded generator on the command line.

Usage:
    unbiased-random --algorithm xor128 --seed 123 --count 5
    unbiased-random --kind fract32 --min 0.25 --max 0.75 --count 3
    unbiased-random --seed start --kind int32 --min -10 --max 10
    unbiased-random --seed 1 --count 1000 --histogram 8 --min 0 --max 8
    unbiased-random --seed 1 --count 10 --state-out ckpt.json
    unbiased-random --state-in ckpt.json --count 10   # continues the run

A --seed that parses as a number is used as one; anything else is a string
seed. Without --seed or --state-in the seed is drawn from the secure source.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .bulk import fract32_array, histogram, int32_array, uint32_array
from .constants import (
    MAX_SAFE_FRACT32_EXCLUSIVE,
    MAX_SAFE_INT32_EXCLUSIVE,
    MAX_SAFE_UINT32_EXCLUSIVE,
    MIN_SAFE_FRACT32_INCLUSIVE,
    MIN_SAFE_INT32_INCLUSIVE,
    MIN_SAFE_UINT32_INCLUSIVE,
)
from .generators import (
    ALGORITHMS,
    DEFAULT_ALGORITHM,
    GeneratorConfig,
    create_generator,
)
from .seeding import Seed
from .state_io import load_state, save_state

logger = logging.getLogger(__name__)

_FILLERS = {
    "uint32": uint32_array,
    "int32": int32_array,
    "fract32": fract32_array,
}

_DOMAINS = {
    "uint32": (MIN_SAFE_UINT32_INCLUSIVE, MAX_SAFE_UINT32_EXCLUSIVE),
    "int32": (MIN_SAFE_INT32_INCLUSIVE, MAX_SAFE_INT32_EXCLUSIVE),
    "fract32": (MIN_SAFE_FRACT32_INCLUSIVE, MAX_SAFE_FRACT32_EXCLUSIVE),
}


def parse_seed(text: str) -> Seed:
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unbiased-random",
        description="Draw unbiased 32-bit values from a seeded generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--algorithm",
        "-a",
        choices=sorted(ALGORITHMS),
        default=None,
        help=f"Seeded algorithm (default: {DEFAULT_ALGORITHM})",
    )
    parser.add_argument(
        "--seed",
        "-s",
        type=parse_seed,
        default=None,
        help="Number or string seed (default: drawn from the secure source)",
    )
    parser.add_argument(
        "--count",
        "-n",
        type=int,
        default=1,
        help="Number of values to draw (default: 1)",
    )
    parser.add_argument(
        "--kind",
        "-k",
        choices=sorted(_FILLERS),
        default="uint32",
        help="Representation to draw (default: uint32)",
    )
    parser.add_argument(
        "--min",
        dest="min_inclusive",
        type=float,
        default=None,
        help="Inclusive lower bound (default: bottom of the kind's domain)",
    )
    parser.add_argument(
        "--max",
        dest="max_exclusive",
        type=float,
        default=None,
        help="Exclusive upper bound (default: top of the kind's domain)",
    )
    parser.add_argument(
        "--histogram",
        type=int,
        default=None,
        metavar="BINS",
        help="Print bucket counts over [min, max) instead of the values",
    )
    parser.add_argument(
        "--state-in",
        default=None,
        help="Resume from a state file written by --state-out",
    )
    parser.add_argument(
        "--state-out",
        default=None,
        help="Write the generator state after drawing",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log generator lifecycle to stderr",
    )
    return parser


def _make_generator(args: argparse.Namespace):
    if args.state_in is not None:
        if args.seed is not None:
            raise ValueError("--seed and --state-in are mutually exclusive")
        generator = load_state(args.state_in)
        name = generator.algorithm.name
        if args.algorithm is not None and args.algorithm != name:
            raise ValueError(
                f"State file holds {name!r} state, "
                f"not {args.algorithm!r}"
            )
        return generator

    config = GeneratorConfig(
        algorithm=args.algorithm or DEFAULT_ALGORITHM,
        seed=args.seed,
    )
    return create_generator(config)


def run(args: argparse.Namespace) -> None:
    if args.count < 0:
        raise ValueError(f"--count must be non-negative, got {args.count}")
    if args.histogram is not None and args.histogram < 1:
        raise ValueError(f"--histogram must be positive, got {args.histogram}")

    generator = _make_generator(args)
    values = _FILLERS[args.kind](
        generator, args.count, args.min_inclusive, args.max_exclusive
    )
    logger.info(
        "Drew %d %s values from %s",
        args.count,
        args.kind,
        generator.algorithm.name,
    )

    if args.histogram is not None:
        domain_lo, domain_hi = _DOMAINS[args.kind]
        lo = domain_lo if args.min_inclusive is None else args.min_inclusive
        hi = domain_hi if args.max_exclusive is None else args.max_exclusive
        for count in histogram(values, args.histogram, lo, hi).tolist():
            print(count)
    else:
        for value in values.tolist():
            print(value)

    if args.state_out is not None:
        save_state(args.state_out, generator)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        run(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
