import random

import pytest

from algocraft.skiplist import MAX_LEVEL, SkipList


@pytest.fixture
def filled():
    rng = random.Random(99)
    keys = rng.sample(range(1000), 100)
    values = {k: rng.randrange(10000) for k in keys}
    sl = SkipList()
    for k in keys:
        sl.insert(k, values[k])
    return sl, values


def test_lookup_returns_inserted_values(filled):
    sl, values = filled
    for k, v in values.items():
        assert sl[k] == v
        assert k in sl


def test_missing_key_raises_key_error(filled):
    sl, values = filled
    missing = max(values) + 1
    assert missing not in sl
    with pytest.raises(KeyError):
        sl[missing]


def test_bottom_lane_is_sorted_and_complete(filled):
    sl, values = filled
    bottom = sl.levels()[-1]
    assert [k for k, _ in bottom] == sorted(values)
    assert dict(bottom) == values


def test_every_lane_is_sorted_subset_of_the_one_below(filled):
    sl, _ = filled
    lanes = sl.levels()
    assert len(lanes) <= MAX_LEVEL + 1
    for upper, lower in zip(lanes, lanes[1:]):
        upper_keys = [k for k, _ in upper]
        assert upper_keys == sorted(upper_keys)
        assert set(upper_keys) <= {k for k, _ in lower}


def test_duplicate_insert_keeps_first_value():
    sl = SkipList()
    sl.insert(5, "first")
    sl.insert(5, "second")
    assert sl[5] == "first"
    assert len(sl.levels()[-1]) == 1


def test_delete_removes_only_that_key(filled):
    sl, values = filled
    victims = sorted(values)[::3]
    for k in victims:
        sl.delete_key(k)
    for k, v in values.items():
        if k in victims:
            assert k not in sl
        else:
            assert sl[k] == v
    remaining = [k for k, _ in sl.levels()[-1]]
    assert remaining == sorted(set(values) - set(victims))


def test_delete_missing_key_is_ignored():
    sl = SkipList()
    sl.insert(1, 10)
    sl.delete_key(2)
    assert sl[1] == 10


def test_delete_everything_leaves_empty_list(filled):
    sl, values = filled
    for k in values:
        sl.delete_key(k)
    assert sl.levels() == [[]]


def test_empty_list_has_no_keys():
    sl = SkipList()
    assert 0 not in sl
    with pytest.raises(KeyError):
        sl[0]