import dataclasses

import pytest

from kernelbench.vvadd import vvadd
from kernelbench.vvadd_data import (
    LARGE_SIZE,
    SMALL_SIZE,
    VvaddDataset,
    large_dataset,
    small_dataset,
)


def test_small_dataset_size():
    data = small_dataset()
    assert len(data) == 300
    assert len(data.input1) == len(data.input2) == len(data.verify) == SMALL_SIZE


def test_large_dataset_size():
    data = large_dataset()
    assert len(data) == 1000
    assert len(data.input1) == len(data.input2) == len(data.verify) == LARGE_SIZE


def test_first_elements_pinned():
    data = small_dataset()
    assert data.input1[0] == 41
    assert data.input2[0] == 454
    assert data.verify[0] == 495


def test_last_elements_pinned():
    data = large_dataset()
    assert data.input1[-1] == 955
    assert data.input2[-1] == 28
    assert data.verify[-1] == 983


@pytest.mark.parametrize("factory", [small_dataset, large_dataset])
def test_vvadd_matches_reference(factory):
    data = factory()
    result = vvadd(data.input1, data.input2)
    assert data.check(result)
    assert tuple(result) == data.verify


def test_small_is_prefix_of_large():
    small = small_dataset()
    large = large_dataset()
    assert large.input1[:SMALL_SIZE] == small.input1
    assert large.input2[:SMALL_SIZE] == small.input2
    assert large.verify[:SMALL_SIZE] == small.verify


@pytest.mark.parametrize("factory", [small_dataset, large_dataset])
def test_inputs_are_in_range(factory):
    data = factory()
    assert all(0 <= v < 1000 for v in data.input1)
    assert all(0 <= v < 1000 for v in data.input2)


def test_check_rejects_wrong_result():
    data = small_dataset()
    wrong = list(data.verify)
    wrong[-1] += 1
    assert data.check(wrong) is False


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        VvaddDataset((1, 2), (3, 4), (4,))


def test_lists_become_tuples():
    data = VvaddDataset([1, 2], [3, 4], [4, 6])
    assert data.input1 == (1, 2)
    assert data.check([4, 6])


def test_dataset_is_frozen():
    data = small_dataset()
    with pytest.raises(dataclasses.FrozenInstanceError):
        data.input1 = ()
    assert len(data.input1) == SMALL_SIZE
    assert data.input1[0] == 41