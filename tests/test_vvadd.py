import pytest
from hypothesis import given
from hypothesis import strategies as st

from kernelbench.vvadd import vvadd


def test_dataset_prefix():
    assert vvadd([41, 833, 564, 187], [454, 335, 1, 989]) == [495, 1168, 565, 1176]


@given(st.lists(st.tuples(st.integers(), st.integers()), max_size=50))
def test_commutative(pairs):
    a = [p[0] for p in pairs]
    b = [p[1] for p in pairs]
    assert vvadd(a, b) == vvadd(b, a)


@given(st.lists(st.integers(), max_size=50))
def test_zero_vector_is_identity(a):
    assert vvadd(a, [0] * len(a)) == a


@given(st.lists(st.tuples(st.integers(), st.integers()), max_size=50))
def test_subtracting_back(pairs):
    a = [p[0] for p in pairs]
    b = [p[1] for p in pairs]
    assert vvadd(vvadd(a, b), [-v for v in b]) == a


def test_empty():
    assert vvadd([], []) == []


def test_length_mismatch():
    with pytest.raises(ValueError):
        vvadd([1, 2], [1])