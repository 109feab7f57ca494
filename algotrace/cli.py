"""Command line — print or play the step trace of one algorithm run."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import random
import sys

from .api import default_start, dump_trace, generate_structure, trace_algorithm, trace_to_dict
from .generators import build_tree
from .playback import AsyncioScheduler, PlaybackCursor
from .registry import all_algorithms, get_algorithm
from .run_types import AlgorithmFamily, PlaybackConfig
from .trace_types import Step, StepTrace


def _print_algorithms() -> None:
    print("═══ Algorithms ═══")
    for info in all_algorithms():
        print(f"  {info.key:<10} {info.name:<22} {info.complexity:<15} {info.family.value}")


def _print_step(index: int, step: Step) -> None:
    print(f"  [{index}] {step}", flush=True)


async def _play(trace: StepTrace, delay_ms: int) -> None:
    finished = asyncio.Event()

    def on_step(index: int, step: Step) -> None:
        _print_step(index, step)
        if index == len(trace) - 1:
            finished.set()

    cursor = PlaybackCursor(AsyncioScheduler(), delay_ms, on_step=on_step)
    cursor.start(trace.steps)
    if trace.steps:
        await finished.wait()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algotrace",
        description="Step-by-step traces of sorting, graph and tree algorithms",
    )
    parser.add_argument(
        "algorithm",
        nargs="?",
        help="Algorithm to trace (see --list)",
    )
    parser.add_argument("--list", action="store_true", help="List algorithms and exit")
    parser.add_argument(
        "--size",
        "-n",
        type=int,
        default=None,
        help="Array length, graph node count or tree value count",
    )
    parser.add_argument("--seed", "-s", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--values",
        default=None,
        help="Comma-separated input values (sorting: the array; tree: insertion order)",
    )
    parser.add_argument("--start", default=None, help="Start node id for graph traversals")
    parser.add_argument("--json", action="store_true", help="Print the trace as JSON")
    parser.add_argument("--stats", action="store_true", help="Print step statistics")
    parser.add_argument(
        "--play",
        action="store_true",
        help="Replay the trace on a timer instead of printing it at once",
    )
    parser.add_argument(
        "--delay",
        type=int,
        default=None,
        help="Playback delay in milliseconds (default: algorithm-specific)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable info logging",
    )
    return parser


def _build_structure(args: argparse.Namespace, config: PlaybackConfig):
    if args.values is None:
        return generate_structure(args.algorithm, config.size, rng=random.Random(config.seed))

    values = [int(v) for v in args.values.split(",") if v.strip()]
    family = get_algorithm(args.algorithm).family
    if family == AlgorithmFamily.SORTING:
        return values
    if family == AlgorithmFamily.TREE:
        return build_tree(values)
    raise ValueError("--values is only supported for sorting and tree algorithms")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    if args.list:
        _print_algorithms()
        return 0
    if not args.algorithm:
        parser.error("an algorithm is required (see --list)")

    config = PlaybackConfig(delay_ms=args.delay, size=args.size, seed=args.seed)

    try:
        structure = _build_structure(args, config)
        start = args.start or default_start(structure)
        trace = trace_algorithm(args.algorithm, structure, start)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(trace_to_dict(trace), indent=2))
    elif args.play:
        delay_ms = config.delay_ms
        if delay_ms is None:
            delay_ms = get_algorithm(args.algorithm).default_delay_ms
        print(f"═══ {get_algorithm(args.algorithm).name} ({len(trace)} steps) ═══")
        try:
            asyncio.run(_play(trace, delay_ms))
        except KeyboardInterrupt:
            print("\nInterrupted.")
            return 1
    else:
        print(dump_trace(trace))

    if args.stats:
        print(trace.stats.report())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
