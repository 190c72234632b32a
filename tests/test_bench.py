import io
import random

import pytest

from closestpair.bench import (
    HEADER,
    BenchConfig,
    generate_random_points,
    main,
    parse_args,
    progress_bar,
    run_benchmark,
)


def test_parse_args_valid():
    config = parse_args(["out.csv", "32", "10", "100", "10"])
    assert config == BenchConfig("out.csv", 32, 10, 100, 10)


def test_parse_args_ignores_trailing_text():
    config = parse_args(["out.csv", "8abc", "1", "2", "1"])
    assert config.runs == 8


def test_parse_args_wrong_count():
    with pytest.raises(ValueError, match="Usage"):
        parse_args(["out.csv", "32", "10"])


def test_parse_args_not_a_number():
    with pytest.raises(ValueError, match="invalid"):
        parse_args(["out.csv", "many", "1", "2", "1"])


def test_parse_args_out_of_range():
    with pytest.raises(ValueError, match="out of range"):
        parse_args(["out.csv", "99999999999999999999", "1", "2", "1"])


def test_parse_args_too_few_runs():
    with pytest.raises(ValueError, match="<RUNS> must be at least 4"):
        parse_args(["out.csv", "3", "1", "2", "1"])


@pytest.mark.parametrize("args", [["0", "5", "1"], ["1", "5", "0"], ["1", "-5", "1"]])
def test_parse_args_non_positive(args):
    with pytest.raises(ValueError, match="have to be positive"):
        parse_args(["out.csv", "4", *args])


def test_parse_args_lower_above_upper():
    with pytest.raises(ValueError, match="at most equal"):
        parse_args(["out.csv", "4", "9", "2", "1"])


def test_progress_bar_empty():
    bar = progress_bar(0, 10)
    assert bar.startswith("\033[1m[>")
    assert bar.endswith("] 0%\r\033[0m")


def test_progress_bar_full():
    bar = progress_bar(10, 10)
    assert "=" * 70 in bar
    assert "100%" in bar


def test_generate_random_points_range_and_determinism():
    pts = generate_random_points(200, 1000, random.Random(1))
    assert len(pts) == 200
    assert all(0 <= p.x < 1000 and 0 <= p.y < 1000 for p in pts)
    assert pts == generate_random_points(200, 1000, random.Random(1))


def test_run_benchmark_writes_rows():
    calls = []

    def func(points):
        calls.append(len(points))
        return 0.0

    out = io.StringIO()
    rows = run_benchmark(BenchConfig("unused.csv", 4, 5, 15, 5), out, func)
    lines = out.getvalue().splitlines()
    assert lines[0] == HEADER
    assert [line.split(",")[0] for line in lines[1:]] == ["5", "10", "15"]
    assert all(len(line.split(",")) == 8 for line in lines[1:])
    assert calls == [5] * 4 + [10] * 4 + [15] * 4
    assert [row[0] for row in rows] == [5, 10, 15]
    assert all(row[3] <= row[5] <= row[7] for row in rows)


def test_main_writes_csv(tmp_path):
    target = tmp_path / "times.csv"
    assert main([str(target), "4", "4", "8", "4"]) == 0
    lines = target.read_text(encoding="utf-8").splitlines()
    assert lines[0] == HEADER
    assert [line.split(",")[0] for line in lines[1:]] == ["4", "8"]


def test_main_bad_arguments(capsys):
    assert main(["only-one"]) == 1
    assert "Usage" in capsys.readouterr().err