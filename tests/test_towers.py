import pytest
from hypothesis import given
from hypothesis import strategies as st

from kernelbench.towers import Towers, TowersError


@given(st.integers(min_value=1, max_value=10))
def test_solve_verifies(n):
    towers = Towers(n)
    towers.solve()
    assert towers.verify() is True
    assert towers.num_moves == 2**n - 1
    assert towers.peg_c == list(range(n, 0, -1))


def test_default_is_seven_discs():
    towers = Towers()
    assert towers.num_discs == 7
    assert towers.peg_a == [7, 6, 5, 4, 3, 2, 1]


def test_unsolved_fails_on_first_peg():
    with pytest.raises(TowersError) as info:
        Towers(3).verify()
    assert info.value.code == 2


def test_middle_peg_check():
    towers = Towers(3)
    towers.solve()
    towers.peg_b.append(towers.peg_c.pop())
    with pytest.raises(TowersError) as info:
        towers.verify()
    assert info.value.code == 3


def test_order_check():
    towers = Towers(3)
    towers.solve()
    towers.peg_c.reverse()
    with pytest.raises(TowersError) as info:
        towers.verify()
    assert info.value.code == 5


def test_move_count_check():
    towers = Towers(4)
    towers.solve()
    towers.num_moves += 1
    with pytest.raises(TowersError) as info:
        towers.verify()
    assert info.value.code == 6


def test_clear_restores_start():
    towers = Towers(5)
    towers.solve()
    towers.clear()
    assert towers.peg_a == [5, 4, 3, 2, 1]
    assert towers.peg_b == [] and towers.peg_c == []
    assert towers.num_moves == 0
    towers.solve()
    assert towers.verify() is True


def test_zero_discs_rejected():
    with pytest.raises(ValueError):
        Towers(0)