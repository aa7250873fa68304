from __future__ import annotations

import pytest

from gridplane.api.errors import NotFoundError
from gridplane.runtime.z_index import ZIndex


def test_iteration_is_ascending_level_then_insertion_order() -> None:
    index = ZIndex()
    index.set(1, 0)
    index.set(2, 5)
    index.set(3, -2)
    index.set(4, 0)
    index.set(5, 5)
    assert list(index) == [3, 1, 4, 2, 5]
    assert index.levels == (-2, 0, 5)


def test_moving_an_id_appends_it_to_the_new_bucket() -> None:
    index = ZIndex()
    for object_id in (1, 2, 3):
        index.set(object_id, 0)
    index.set(1, 0)
    assert index.bucket(0) == (2, 3, 1)
    index.set(2, 1)
    assert list(index) == [3, 1, 2]
    assert index.level_of(2) == 1


def test_emptied_buckets_are_removed() -> None:
    index = ZIndex()
    index.set(1, 3)
    index.set(2, 0)
    index.set(1, 0)
    assert index.levels == (0,)
    index.unset(1)
    index.unset(2)
    assert index.levels == ()
    assert len(index) == 0


def test_each_live_id_is_in_exactly_one_bucket() -> None:
    index = ZIndex()
    moves = [(1, 0), (2, 4), (1, 4), (3, -1), (2, -1), (1, 7), (3, 0)]
    for object_id, level in moves:
        index.set(object_id, level)
    seen = [object_id for level in index.levels for object_id in index.bucket(level)]
    assert sorted(seen) == [1, 2, 3]
    assert all(index.bucket(level) for level in index.levels)
    assert list(index.levels) == sorted(index.levels)


def test_unknown_ids_raise_not_found() -> None:
    index = ZIndex()
    with pytest.raises(NotFoundError):
        index.unset(9)
    with pytest.raises(NotFoundError):
        index.level_of(9)
    assert 9 not in index
