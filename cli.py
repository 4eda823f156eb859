"""Generate random integers from the command line.

Draws from an inclusive range, or from a custom list when ``--list`` is
given, and prints the numbers either line-by-line or as JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional, Sequence

from generator_config import Mode
from generator_engine import GeneratorEngine
from generator_errors import GeneratorError
from generator_stats import GeneratorStats
from seeded_random import RandomSource


def _format_numbers(numbers: Sequence[int], as_json: bool, stats: Optional[GeneratorStats] = None) -> str:
    if as_json:
        payload = {"numbers": list(numbers)}
        if stats is not None:
            payload["stats"] = stats.model_dump()
        return json.dumps(payload)
    lines = [str(n) for n in numbers]
    if stats is not None:
        lines.append(
            f"count={stats.count} min={stats.min} max={stats.max} sum={stats.sum} avg={stats.avg:.2f}"
        )
    return "\n".join(lines)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--lower", type=int, default=0, help="Inclusive lower bound (default: 0)")
    parser.add_argument("--upper", type=int, default=1024, help="Inclusive upper bound (default: 1024)")
    parser.add_argument(
        "--count",
        type=int,
        default=1,
        help="How many numbers to generate (default: 1)",
    )
    parser.add_argument(
        "--allow-duplicates",
        action="store_true",
        help="Allow the same number to be drawn more than once",
    )
    parser.add_argument(
        "--list",
        dest="custom_list",
        metavar="TEXT",
        help="Draw from these numbers instead of the range, e.g. '1,2,3'",
    )
    parser.add_argument("--seed", type=int, help="Seed for the RNG (default: OS randomness)")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output the generated numbers as a JSON object",
    )
    parser.add_argument("--save", metavar="PATH", help="Also write the numbers to PATH")
    parser.add_argument("--stats", action="store_true", help="Append count/min/max/sum/avg")
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> GeneratorEngine:
    engine = GeneratorEngine(rng=RandomSource(args.seed))
    settings = {"num_to_generate": args.count, "allow_duplicates": args.allow_duplicates}
    # The range is ignored in custom list mode.
    if args.custom_list is not None:
        settings["custom_list_input"] = args.custom_list
        settings["mode"] = Mode.CUSTOM_LIST
    else:
        settings["lower_bound"] = args.lower
        settings["upper_bound"] = args.upper
    engine.configure(**settings)
    engine.generate()
    if args.save:
        engine.save(args.save)
    return engine


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO)
    args = _parse_args(argv)
    try:
        engine = run(args)
    except (GeneratorError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    stats = engine.get_stats() if args.stats else None
    print(_format_numbers(engine.get_numbers(), args.json, stats))
    return 0


if __name__ == "__main__":
    sys.exit(main())
