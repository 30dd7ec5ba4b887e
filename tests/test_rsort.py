import pytest
from hypothesis import given
from hypothesis import strategies as st

from kernelbench.rsort import WORD_MAX, radix_sort

words = st.integers(min_value=0, max_value=WORD_MAX)


@given(st.lists(words, max_size=200))
def test_matches_builtin_sort(values):
    assert radix_sort(values) == sorted(values)


@given(st.lists(words, max_size=60), st.integers(min_value=1, max_value=33))
def test_any_digit_width_sorts(values, log_base):
    assert radix_sort(values, log_base) == sorted(values)


def test_input_is_left_untouched():
    values = [5, 3, WORD_MAX, 0, 3]
    copy = list(values)
    result = radix_sort(values)
    assert values == copy
    assert result == sorted(copy)


def test_empty_input():
    assert radix_sort([]) == []


def test_accepts_generator():
    assert radix_sort(v for v in (9, 1, 4)) == [1, 4, 9]


@pytest.mark.parametrize("bad", [-1, WORD_MAX + 1])
def test_out_of_range_rejected(bad):
    with pytest.raises(ValueError):
        radix_sort([1, bad])


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        radix_sort([1.5])


def test_zero_log_base_rejected():
    with pytest.raises(ValueError):
        radix_sort([1, 2], 0)