"""A fixed-capacity registry of file descriptors that can be closed together."""

from __future__ import annotations

import contextlib
import enum
import functools
import os
from collections.abc import Iterable

MAX_FD_TRACKER = 1024
MIN_CAPACITY = 16
_FIRST_USER_FD = 3


class ErrorType(enum.Enum):
    """Kinds of tracker failure, valued by their error id."""

    BUFFER_OVERFLOW = 300
    TOO_SMALL_MAX_TRACKER = 301


class TrackerError(Exception):
    """Base class for tracker failures; every tracked descriptor is closed first."""

    error_type: ErrorType

    @property
    def error_id(self) -> int:
        return self.error_type.value


class BufferOverflowError(TrackerError):
    """Raised when a descriptor is registered while every slot is taken."""

    error_type = ErrorType.BUFFER_OVERFLOW

    def __init__(self) -> None:
        super().__init__("Errors exist in file descriptor tracker: Buffer Overflow")


class CapacityTooSmallError(TrackerError):
    """Raised when the tracker's capacity is below the accepted minimum."""

    error_type = ErrorType.TOO_SMALL_MAX_TRACKER

    def __init__(self, capacity: int) -> None:
        super().__init__(
            "Errors exist in file descriptor tracker: "
            f'Too small "MAX_TRACKER" ({capacity}); '
            f'the least "MAX_TRACKER" acceptable size is: {MIN_CAPACITY}'
        )
        self.capacity = capacity


def _close(fd: int) -> None:
    with contextlib.suppress(OSError):
        os.close(fd)


class FdTracker:
    """Remembers file descriptors in a fixed number of slots."""

    def __init__(self, capacity: int = MAX_FD_TRACKER) -> None:
        self.capacity = capacity
        self._slots: list[int | None] = [None] * max(capacity, 0)

    def _fail(self, error: TrackerError) -> TrackerError:
        self.close_all()
        return error

    def _assign(self, fd: int) -> None:
        try:
            index = self._slots.index(None)
        except ValueError:
            _close(fd)
            raise self._fail(BufferOverflowError()) from None
        self._slots[index] = fd

    def register(self, *args: int) -> None:
        """Store each descriptor in the first free slot.

        Nothing is stored when no descriptor is given or the first one is
        a standard stream. When the slots run out, the overflowing
        descriptor and every tracked one are closed and
        BufferOverflowError is raised.
        """
        if self.capacity < MIN_CAPACITY:
            raise self._fail(CapacityTooSmallError(self.capacity))
        if not args or args[0] < _FIRST_USER_FD:
            return
        for fd in args:
            self._assign(fd)

    def _close_matching(self, fd: int) -> None:
        for index, value in enumerate(self._slots):
            if value == fd:
                _close(value)
                self._slots[index] = None

    def close_partial(self, *args: int) -> None:
        """Close and forget every slot holding one of the given descriptors."""
        if not args or args[0] < _FIRST_USER_FD:
            return
        for fd in args:
            self._close_matching(fd)

    def close_all(self) -> None:
        """Close and forget every tracked descriptor above the standard streams."""
        for index, value in enumerate(self._slots):
            if value is not None and value >= _FIRST_USER_FD:
                _close(value)
                self._slots[index] = None

    def tracked(self) -> list[int]:
        """Return the tracked descriptors in slot order."""
        return [fd for fd in self._slots if fd is not None]

    def __iter__(self) -> Iterable[int]:
        return iter(self.tracked())

    def __len__(self) -> int:
        return sum(1 for fd in self._slots if fd is not None)

    def __contains__(self, fd: object) -> bool:
        return fd is not None and fd in self._slots

    def __enter__(self) -> FdTracker:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close_all()


@functools.lru_cache(maxsize=None)
def default_tracker() -> FdTracker:
    """Return the process-wide tracker, created on first use."""
    return FdTracker(MAX_FD_TRACKER)


def fd_register(*args: int) -> None:
    """Register descriptors with the process-wide tracker."""
    default_tracker().register(*args)


def fd_close_partial(*args: int) -> None:
    """Close the given descriptors tracked by the process-wide tracker."""
    default_tracker().close_partial(*args)


def fd_close_all() -> None:
    """Close every descriptor tracked by the process-wide tracker."""
    default_tracker().close_all()