"""
sortscope - run an instrumented sort from the command line.

Usage:
    sortscope --list
    sortscope quick --size 64 --distribution reversed
    sortscope radix --values 170,45,75,90,802,24,2,66 --radix-base 16
    sortscope merge --seed 7 --dump merge.json --show-actions 20
"""

from __future__ import annotations

import argparse
import sys

from sortscope.algorithms import ALGORITHM_INFO, ALGORITHMS
from sortscope.engine import SortingEngine, dump_run
from sortscope.inputs import DISTRIBUTIONS, generate
from sortscope.logging_config import enable_console_logging
from sortscope.settings import LOG_LEVELS, RADIX_BASES, load_settings


def _parse_number(tok: str):
    tok = tok.strip()
    try:
        return int(tok)
    except ValueError:
        return float(tok)


def parse_values(text: str) -> list:
    if not text.strip():
        return []
    return [_parse_number(t) for t in text.split(",")]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="sortscope",
        description="Run a sorting algorithm and report every operation it performs.",
    )
    p.add_argument("algorithm", nargs="?", help="algorithm key, see --list (default from settings)")
    p.add_argument("--list", action="store_true", help="list the available algorithms")
    p.add_argument("--describe", action="store_true", help="print the algorithm description")
    p.add_argument("--size", type=int, help="length of the generated input")
    p.add_argument("--distribution", choices=sorted(DISTRIBUTIONS), help="shape of the generated input")
    p.add_argument("--seed", type=int, help="seed for the generated input")
    p.add_argument("--values", help="comma separated input, overrides --size/--distribution")
    p.add_argument("--radix-base", type=int, choices=RADIX_BASES, help="digit base for radix sort")
    p.add_argument("--show-actions", type=int, default=0, metavar="N", help="print the first N actions")
    p.add_argument("--dump", metavar="PATH", help="write the run as JSON")
    p.add_argument("--settings", metavar="PATH", help="settings JSON file")
    p.add_argument("--log-level", choices=LOG_LEVELS, type=str.upper)
    return p


def print_algorithms():
    w = max(len(nm) for nm, _ in ALGORITHMS)
    for idx, (nm, ky) in enumerate(ALGORITHMS):
        info = ALGORITHM_INFO[ky]
        stable = "stable" if info.stable else ""
        print(f"{idx+1:02d}  {ky:<10} {nm:<{w}}  time {info.time_complexity:<15} "
              f"space {info.space_complexity:<13} {stable}".rstrip())


def run_sort(cfg: dict) -> int:
    engine = SortingEngine(cfg["radix_base"])
    try:
        result = engine.run(cfg["key"], cfg["values"])
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    info = ALGORITHM_INFO[result.algorithm]
    stats = engine.get_stats()
    print(f"{info.name}  [SORTED]")
    if cfg["describe"]:
        print(engine.get_description(result.algorithm))
    cx = engine.get_complexity(result.algorithm)
    print(f"  time {cx['time']}   space {cx['space']}")
    print(f"  input        {list(cfg['values'])}")
    print(f"  sorted       {list(result.sorted_sequence)}")
    print(f"  actions      {len(result.action_log)}")
    print(f"  comparisons  {stats.comparisons}")
    print(f"  swaps        {stats.swaps}")
    print(f"  accesses     {stats.accesses}")
    print(f"  peak memory  {stats.peak_memory}")

    for step, action in enumerate(result.action_log[:cfg["show_actions"]]):
        print(f"  {step:>5}  {action.description:<34} {action.notation}")

    if cfg["dump"]:
        dump_run(result, cfg["dump"], cfg["values"])
        print(f"  wrote {cfg['dump']}")
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list:
        print_algorithms()
        return 0

    try:
        settings = load_settings(args.settings).replace(
            algorithm=args.algorithm,
            size=args.size,
            distribution=args.distribution,
            seed=args.seed,
            radix_base=args.radix_base,
            log_level=args.log_level,
        )
    except ValueError as e:
        parser.error(str(e))
    enable_console_logging(settings.log_level)

    if args.values is not None:
        try:
            values = parse_values(args.values)
        except ValueError as e:
            print(f"error: malformed --values: {e}", file=sys.stderr)
            return 1
    else:
        values = generate(settings.distribution, settings.size, settings.seed)

    return run_sort(dict(
        key=settings.algorithm,
        values=values,
        radix_base=settings.radix_base,
        describe=args.describe,
        show_actions=max(0, args.show_actions),
        dump=args.dump,
    ))


if __name__ == "__main__":
    sys.exit(main())
