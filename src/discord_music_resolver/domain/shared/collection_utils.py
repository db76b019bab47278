"""Sequence helpers shared by the resolver services."""

from __future__ import annotations

import random
from typing import Any, TypeVar

T = TypeVar("T")


def shuffle(items: list[T] | tuple[T, ...] | Any) -> list[T]:
    """Return a new list holding every element of ``items`` in random order.

    Each step draws a uniformly random index from the remaining pool and moves
    that element to the output. Anything that is not a list or tuple yields
    an empty list.
    """
    if not isinstance(items, (list, tuple)):
        return []

    pool = list(items)
    shuffled: list[T] = []
    while pool:
        shuffled.append(pool.pop(random.randrange(len(pool))))
    return shuffled
