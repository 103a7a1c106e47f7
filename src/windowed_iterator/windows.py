"""Sliding window iterator adapter.

A window of ``window_size`` consecutive elements slides over the source one
element at a time, so successive windows overlap by ``window_size - 1``
elements::

    >>> list(windows(["These", "are", "a", "bunch"], 3))
    [['These', 'are', 'a'], ['are', 'a', 'bunch']]

Behaviour to note:

* A window size of 0 yields nothing and never touches the source.
* A window size larger than the source yields nothing.
* Each window is a fresh list, so changing one window list never changes
  another. That isolation covers the lists only: the elements inside them are
  the source objects themselves and are shared between overlapping windows.
  Mutable elements need a ``clone`` callable (e.g. :func:`copy.deepcopy`),
  which is applied to every element of every window.
"""

from __future__ import annotations

import logging
import operator
from collections import deque
from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from .logging_utils import log_event

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _check_window_size(window_size: int) -> int:
    if isinstance(window_size, bool):
        raise TypeError("window_size must be an integer, not bool")
    size = operator.index(window_size)
    if size < 0:
        raise ValueError("window_size must be non-negative")
    return size


class Windows(Iterator[List[T]]):
    """Lazy iterator over the overlapping windows of an iterable.

    Created by :func:`windows` or :meth:`Windowed.windows`. Elements are pulled
    from the source only when the next window is requested.
    """

    def __init__(
        self,
        iterable: Iterable[T],
        window_size: int,
        *,
        clone: Optional[Callable[[T], T]] = None,
    ) -> None:
        self._window_size = _check_window_size(window_size)
        self._iter: Iterator[T] = iter(iterable)
        self._window: deque[T] = deque(maxlen=self._window_size or None)
        self._clone = clone
        self._exhausted = False
        self._emitted = 0

    @property
    def window_size(self) -> int:
        return self._window_size

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __iter__(self) -> "Windows[T]":
        return self

    def __next__(self) -> List[T]:
        if self._exhausted:
            raise StopIteration
        if self._window_size == 0:
            self._mark_exhausted()
            raise StopIteration

        if len(self._window) == self._window_size:
            self._window.popleft()

        while len(self._window) < self._window_size:
            try:
                elem = next(self._iter)
            except StopIteration:
                self._mark_exhausted()
                raise
            self._window.append(elem)

        self._emitted += 1
        if self._clone is None:
            return list(self._window)
        return [self._clone(elem) for elem in self._window]

    def _mark_exhausted(self) -> None:
        # sticky: a source that resumes after StopIteration is never pulled again
        self._exhausted = True
        log_event(
            logger,
            "windows.exhausted",
            level=logging.DEBUG,
            window_size=self._window_size,
            emitted=self._emitted,
        )

    def __length_hint__(self) -> int:
        if self._exhausted or self._window_size == 0:
            return 0
        remaining = operator.length_hint(self._iter)
        if len(self._window) == self._window_size:
            return remaining
        return max(0, remaining + len(self._window) - self._window_size + 1)

    def __repr__(self) -> str:
        state = "exhausted" if self._exhausted else f"emitted={self._emitted}"
        return f"{type(self).__name__}(window_size={self._window_size}, {state})"


def windows(
    iterable: Iterable[T],
    window_size: int,
    *,
    clone: Optional[Callable[[T], T]] = None,
) -> Windows[T]:
    """Return a sliding window iterator over ``iterable``.

    Every produced window holds exactly ``window_size`` elements, oldest
    first. The iterator is exhausted once the source can no longer fill a
    whole window; elements pulled for an incomplete window are consumed and
    dropped.

    >>> it = windows([2, 3, 5, 7], 10)
    >>> next(it, None) is None
    True
    """

    return Windows(iterable, window_size, clone=clone)


class Windowed(Generic[T]):
    """Wraps any iterable so that ``.windows(n)`` can be chained onto it."""

    def __init__(self, iterable: Iterable[T]) -> None:
        self._iterable = iterable

    def __iter__(self) -> Iterator[T]:
        return iter(self._iterable)

    def windows(self, window_size: int, *, clone: Optional[Callable[[T], T]] = None) -> Windows[T]:
        return Windows(self._iterable, window_size, clone=clone)
