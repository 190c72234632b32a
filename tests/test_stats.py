import pytest
from hypothesis import given
from hypothesis import strategies as st

from closestpair.stats import mean_and_stdev, quartiles, quartiles_nth

samples = st.lists(
    st.floats(min_value=-1e6, max_value=1e6, allow_nan=False),
    min_size=4,
    max_size=40,
)


def test_quartiles_four_values():
    assert quartiles([4.0, 1.0, 3.0, 2.0]) == (1.0, 1.75, 2.5, 3.25, 4.0)


def test_quartiles_odd_count_uses_middle_elements():
    q = quartiles([5.0, 1.0, 4.0, 2.0, 3.0, 7.0, 6.0])
    assert q[0] == 1.0
    assert q[2] == 4.0
    assert q[4] == 7.0


def test_quartiles_does_not_modify_input():
    data = [3.0, 1.0, 2.0, 0.0]
    quartiles(data)
    quartiles_nth(data)
    assert data == [3.0, 1.0, 2.0, 0.0]


@pytest.mark.parametrize("func", [quartiles, quartiles_nth])
def test_too_few_points(func):
    with pytest.raises(ValueError, match="at least 4"):
        func([1.0, 2.0, 3.0])


@given(samples)
def test_quartiles_are_ordered(data):
    q = quartiles(data)
    assert q[0] == min(data)
    assert q[4] == max(data)
    assert list(q) == sorted(q)


@given(samples)
def test_selection_agrees_with_sorting(data):
    assert quartiles_nth(data) == quartiles(data)


def test_mean_and_stdev_of_constant():
    assert mean_and_stdev([2.5, 2.5, 2.5, 2.5]) == (2.5, 0.0)


@given(st.lists(st.integers(min_value=-1000, max_value=1000), min_size=2, max_size=30))
def test_stdev_is_shift_invariant(values):
    mean, stdev = mean_and_stdev(values)
    shifted_mean, shifted_stdev = mean_and_stdev([v + 100 for v in values])
    assert shifted_mean == pytest.approx(mean + 100)
    assert shifted_stdev == pytest.approx(stdev, abs=1e-9)


def test_mean_and_stdev_needs_two_values():
    with pytest.raises(ValueError):
        mean_and_stdev([1.0])