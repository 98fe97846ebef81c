"""Interleaving of an iterable with generated separators."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

T = TypeVar("T")


def with_separator(iterable: Iterable[T], new_separator: Callable[[], T]) -> Iterator[T]:
    """Yield each item followed by a freshly made separator.

    A separator also follows the last item.
    """
    for item in iterable:
        yield item
        yield new_separator()