import zlib

import pytest
from hypothesis import given
from hypothesis import strategies as st

from kernelbench.checksum import MASK32
from kernelbench.debug import FOX, counting_loop, double_rot13_checksum, fib, rot13


def test_fib_start():
    assert [fib(n) for n in range(3)] == [0, 1, 1]


@given(st.integers(min_value=0, max_value=300))
def test_fib_recurrence_modulo_word(n):
    assert fib(n + 2) == (fib(n + 1) + fib(n)) & MASK32
    assert 0 <= fib(n) <= MASK32


def test_fib_negative():
    with pytest.raises(ValueError):
        fib(-1)


def test_rot13_example():
    assert rot13("Hello, World!") == "Uryyb, Jbeyq!"


@given(st.text(max_size=100))
def test_rot13_involution(text):
    assert rot13(rot13(text)) == text


def test_rot13_leaves_non_letters():
    text = "0123 .,!? é"
    assert rot13(text) == text


def test_counting_loop_default():
    assert counting_loop() == (10, 55)


@given(st.integers(min_value=0, max_value=500))
def test_counting_loop_invariant(limit):
    counter, total = counting_loop(limit)
    assert counter == limit
    assert 2 * total == limit * (limit + 1)


def test_checksum_of_fox():
    rotated = rot13(FOX).encode()
    assert double_rot13_checksum() == zlib.crc32(rotated) ^ zlib.crc32(FOX.encode())


@given(st.text(max_size=60))
def test_checksum_symmetric_under_rot13(text):
    assert double_rot13_checksum(text) == double_rot13_checksum(rot13(text))


@given(st.text(alphabet="0123456789 .,;:!?", max_size=40))
def test_checksum_zero_without_letters(text):
    assert double_rot13_checksum(text) == 0