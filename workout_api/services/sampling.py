import random
from typing import Sequence, TypeVar

T = TypeVar("T")


def _generator(rng: random.Random | None):
    return rng if rng is not None else random


def shuffle(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """
    Return a shuffled copy of items using Fisher-Yates.
    The caller's sequence is never mutated.
    """
    gen = _generator(rng)
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = gen.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def sample(items: Sequence[T], k: int, rng: random.Random | None = None) -> list[T]:
    """
    Pick up to k distinct items uniformly at random.

    Asking for more than exist returns all of them (shuffled); negative k
    returns nothing.
    """
    k = max(0, min(k, len(items)))
    if k == 0:
        return []
    return shuffle(items, rng)[:k]


def choice(items: Sequence[T], rng: random.Random | None = None) -> T:
    if not items:
        raise IndexError("Cannot choose from an empty sequence")
    return items[_generator(rng).randrange(len(items))]
