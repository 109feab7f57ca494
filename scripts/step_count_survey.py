"""Survey how step-sequence length grows with input size for every algorithm.

Usage:
    poetry run python scripts/step_count_survey.py 5 10 20 40 --seed 7

Prints one row per algorithm and one column per size, each cell holding the
mean step count over a handful of seeded random structures.
"""

import argparse
import logging
import random
import statistics

from algotrace.api import default_start, generate_structure, trace_algorithm
from algotrace.registry import all_algorithms

logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)

SAMPLES_PER_SIZE = 5


def mean_step_count(algorithm: str, size: int, rng: random.Random) -> float:
    """Average trace length over SAMPLES_PER_SIZE fresh structures."""
    counts = []
    for _ in range(SAMPLES_PER_SIZE):
        structure = generate_structure(algorithm, size, rng=rng)
        trace = trace_algorithm(algorithm, structure, default_start(structure))
        counts.append(len(trace))
    return statistics.mean(counts)


def main() -> None:
    parser = argparse.ArgumentParser(description="Step count survey")
    parser.add_argument("sizes", nargs="+", type=int, help="Input sizes to survey")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    args = parser.parse_args()

    rng = random.Random(args.seed)
    header = f"{'algorithm':<12}" + "".join(f"{size:>10}" for size in args.sizes)
    print(header)
    print("─" * len(header))
    for info in all_algorithms():
        logger.info("Surveying %s", info.key)
        cells = "".join(
            f"{mean_step_count(info.key, size, rng):>10.1f}" for size in args.sizes
        )
        print(f"{info.key:<12}{cells}")


if __name__ == "__main__":
    main()
