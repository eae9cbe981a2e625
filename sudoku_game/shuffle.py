# shuffle.py

from random import Random
from typing import List, TypeVar

T = TypeVar("T")


def shuffle(items: List[T], rng: Random) -> List[T]:
    """
    Fisher-Yates shuffle in place, walking from the last index down and
    swapping each slot with a uniformly chosen index at or below it.
    Returns the same list for chaining.
    """
    for i in range(len(items) - 1, 0, -1):
        j = rng.randrange(i + 1)
        items[i], items[j] = items[j], items[i]
    return items
