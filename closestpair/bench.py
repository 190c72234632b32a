"""Timing harness: runs a closest-pair search over growing inputs and writes CSV statistics."""

from __future__ import annotations

import random
import re
import sys
import time
from dataclasses import dataclass
from typing import Callable, Sequence, TextIO

from .divide import closest_pair
from .geometry import Point
from .stats import mean_and_stdev, quartiles

USAGE = "\n".join(
    [
        "Usage: <filename> <RUNS> <LOWER> <UPPER> <STEP>",
        "<filename> is the name of the file where performance data will be written.",
        "It is recommended for <filename> to have .csv extension and it should not previously exist.",
        "<RUNS>: numbers of runs per test case: should be >= 32.",
        "<LOWER> <UPPER> <STEP>: range of test cases.",
        "These should all be positive.",
    ]
)

HEADER = "n,t_mean,t_stdev,t_Q0,t_Q1,t_Q2,t_Q3,t_Q4"
BAR_WIDTH = 70
MAX_COORD = 1000

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class BenchConfig:
    """Output file and the range of input sizes to time."""

    filename: str
    runs: int
    lower: int
    upper: int
    step: int


def _parse_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    value = int(match.group(1))
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def parse_args(argv: Sequence[str]) -> BenchConfig:
    """Read ``<filename> <RUNS> <LOWER> <UPPER> <STEP>`` and validate it."""
    if len(argv) != 5:
        raise ValueError(USAGE)
    filename, *numbers = argv
    runs, lower, upper, step = (_parse_int(n) for n in numbers)
    if runs < 4:
        raise ValueError("<RUNS> must be at least 4.")
    if step <= 0 or lower <= 0 or upper <= 0:
        raise ValueError("<STEP>, <LOWER> and <UPPER> have to be positive.")
    if lower > upper:
        raise ValueError("<LOWER> must be at most equal to <UPPER>.")
    return BenchConfig(filename, runs, lower, upper, step)


def progress_bar(done: int, total: int) -> str:
    """Terminal progress bar for ``done`` out of ``total``, ending in a carriage return."""
    progress = done / total
    filled = int(BAR_WIDTH * progress)
    bar = "".join(
        "=" if i < filled else ">" if i == filled else " " for i in range(BAR_WIDTH)
    )
    return f"\033[1m[{bar}] {int(progress * 100.0)}%\r\033[0m"


def generate_random_points(num_points: int, max_coord: int, rng: random.Random) -> list[Point]:
    """``num_points`` points with coordinates in ``[0, max_coord)``."""
    return [
        Point(rng.randrange(max_coord), rng.randrange(max_coord))
        for _ in range(num_points)
    ]


def run_benchmark(
    config: BenchConfig,
    out: TextIO,
    func: Callable[[Sequence[Point]], float] = closest_pair,
) -> list[tuple[float, ...]]:
    """Time ``func`` for each input size and write one CSV row per size to ``out``.

    Times are in milliseconds. Returns the rows that were written.
    """
    rng = random.Random()
    sizes = range(config.lower, config.upper + 1, config.step)
    total_runs = config.runs * len(sizes)
    executed = 0
    rows = []

    print(HEADER, file=out)
    for n in sizes:
        points = generate_random_points(n, MAX_COORD, rng)
        times = []
        for _ in range(config.runs):
            executed += 1
            sys.stderr.write(progress_bar(executed, total_runs))
            sys.stderr.flush()
            start = time.perf_counter()
            func(points)
            times.append((time.perf_counter() - start) * 1000.0)

        mean, stdev = mean_and_stdev(times)
        row = (n, mean, stdev, *quartiles(times))
        rows.append(row)
        print(",".join([str(n)] + [f"{v:g}" for v in row[1:]]), file=out)
    return rows


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point; returns the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        config = parse_args(args)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    with open(config.filename, "w", encoding="utf-8") as out:
        print("\033[0;36mRunning tests...\033[0m\n", file=sys.stderr)
        run_benchmark(config, out, closest_pair)
        print("\n\n\033[1;32mDone!\033[0m", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())