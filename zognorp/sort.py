"""A merge sort driven by a caller-supplied ordering predicate."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import TypeVar

T = TypeVar("T")

_END = object()


def merge_sort(array: Sequence[T], compare: Callable[[T, T], bool]) -> list[T]:
    """Return a new list holding ``array`` sorted by ``compare``.

    ``compare(a, b)`` returns True when ``a`` should come before ``b``.
    When it returns False the element from the right-hand half is taken
    first, so a strict predicate puts equal elements in reverse order.
    """
    if len(array) <= 1:
        return list(array)

    split_index = len(array) // 2
    left = merge_sort(array[:split_index], compare)
    right = merge_sort(array[split_index:], compare)
    return _merge(left, right, compare)


def _merge(a: list[T], b: list[T], compare: Callable[[T, T], bool]) -> list[T]:
    out: list[T] = []
    iter_a: Iterator[T] = iter(a)
    iter_b: Iterator[T] = iter(b)
    item_a = next(iter_a, _END)
    item_b = next(iter_b, _END)

    while item_a is not _END and item_b is not _END:
        if compare(item_a, item_b):
            out.append(item_a)
            item_a = next(iter_a, _END)
        else:
            out.append(item_b)
            item_b = next(iter_b, _END)

    if item_a is not _END:
        out.append(item_a)
        out.extend(iter_a)
    if item_b is not _END:
        out.append(item_b)
        out.extend(iter_b)
    return out