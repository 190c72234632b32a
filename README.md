# closestpair

This package finds the smallest distance between any two points in a set
of integer points in the plane. It can check every pair, or it can use
divide and conquer. It also includes a tool that times a search over a
range of input sizes.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from closestpair.geometry import Point, brute_force, distance
from closestpair.divide import closest_pair

points = [Point(0, 0), Point(5, 5), Point(1, 1), Point(9, 2)]

print(distance(points[0], points[2]))  # 1.4142...
print(brute_force(points))             # checks every pair, O(n^2)
print(closest_pair(points))            # divide and conquer, O(n log n)
```

`Point` is a frozen dataclass with integer fields `x` and `y`.

With fewer than two points, the two searches return different values:

- `closest_pair` returns `0.0`.
- `brute_force` returns `math.inf`.

### Sorting helpers

`closestpair.divide` also exposes the merge sort that the search uses:

- `merge_sort(points, coord)` returns a new list sorted stably on `"x"`. Any other `coord` sorts on `y`.
- `merge_sorted(left, right, coord)` merges two lists that are already sorted on `coord`. When two keys are equal, the element from `left` comes first.
- `sorted_points(points, coord)` sorts on `"x"` or `"y"`. Any other `coord` gives back a copy of the points in their original order.

### Summary statistics

`closestpair.stats` provides the statistics that the benchmark reports:

```python
from closestpair.stats import quartiles, quartiles_nth, mean_and_stdev

q0, q1, q2, q3, q4 = quartiles([4.0, 1.0, 3.0, 2.0, 5.0, 6.0, 7.0, 8.0])
same = quartiles_nth([4.0, 1.0, 3.0, 2.0, 5.0, 6.0, 7.0, 8.0])
mean, stdev = mean_and_stdev([1.0, 2.0, 3.0, 4.0])
```

`quartiles` and `quartiles_nth` each return a tuple of five values: minimum, lower quartile, median, upper quartile and maximum.

- `quartiles` works by sorting.
- `quartiles_nth` works by selection.

Both need at least four values and raise `ValueError` otherwise.

`mean_and_stdev` returns the mean and the sample standard deviation, which divides by `n - 1`. It needs at least two values and raises `ValueError` otherwise.

## Running the benchmark

```
closestpair-bench results.csv RUNS LOWER UPPER STEP
```

- `results.csv` is the file the timing data is written to. It is overwritten if it exists.
- `RUNS` is how many times each input size is timed. It must be at least 4, and 32 or more is recommended.
- `LOWER`, `UPPER` and `STEP` set the input sizes: from `LOWER` to `UPPER` inclusive, increasing by `STEP`. All three must be positive, and `LOWER` may not exceed `UPPER`.

If the arguments are wrong, the command prints a message on standard error and exits with status 1.

For each size, the benchmark:

1. generates random points with coordinates in `[0, 1000)`,
2. times the divide-and-conquer search `RUNS` times on those points.

A progress bar is shown on standard error while it runs. The CSV starts with this header:

```
n,t_mean,t_stdev,t_Q0,t_Q1,t_Q2,t_Q3,t_Q4
```

It then has one row per input size, with times in milliseconds.

### Using the benchmark from Python

The same run is available through `closestpair.bench`:

- `parse_args(argv)` returns a `BenchConfig`.
- `run_benchmark(config, out, func)` writes the CSV to the open text stream `out` and returns the rows it wrote.

`func` defaults to `closest_pair`. Passing `brute_force` times the exhaustive search the same way.

The command-line tool itself always times `closest_pair`. It has no option to choose another function.