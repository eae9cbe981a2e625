# tests/test_shuffle.py
from collections import Counter
from random import Random

from sudoku_game.shuffle import shuffle


class RecordingRandom:
    """Always picks index 0 and remembers the ranges it was asked for."""

    def __init__(self):
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        return 0


def test_walks_from_last_index_down():
    rng = RecordingRandom()
    items = ["a", "b", "c", "d"]
    result = shuffle(items, rng)
    assert result is items
    assert rng.calls == [4, 3, 2]
    assert items == ["b", "c", "d", "a"]


def test_result_is_a_permutation():
    items = list(range(1, 10))
    shuffle(items, Random(7))
    assert sorted(items) == list(range(1, 10))


def test_same_seed_same_order():
    a = shuffle(list(range(81)), Random(99))
    b = shuffle(list(range(81)), Random(99))
    assert a == b


def test_short_sequences():
    assert shuffle([], Random(0)) == []
    assert shuffle([1], Random(0)) == [1]


def test_orderings_are_roughly_uniform():
    rng = Random(2024)
    counts = Counter(tuple(shuffle([1, 2, 3], rng)) for _ in range(6000))
    assert len(counts) == 6
    for n in counts.values():
        assert 800 < n < 1200
