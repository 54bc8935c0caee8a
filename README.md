# fdtracker

A small registry of open file descriptors. Register descriptors as you open
them, then close a chosen few or every one of them in a single call.

## Installing

```
pip install fdtracker
```

## Using a tracker

```python
import os
from fdtracker.tracker import FdTracker

with FdTracker(16) as tracker:
    a = os.open(os.devnull, os.O_RDONLY)
    b = os.open(os.devnull, os.O_RDONLY)
    tracker.register(a, b)

    tracker.close_partial(a)      # closes only a
    assert a not in tracker
    assert len(tracker) == 1
    assert tracker.tracked() == [b]
# leaving the block closes everything still tracked
```

`FdTracker(capacity)` has room for `capacity` descriptors; the default is
1024. Each registered descriptor goes into the first free slot, and
`tracked()` (or iterating over the tracker) gives the held descriptors in
slot order.

- `register(*fds)` stores every given descriptor. If no descriptor is given,
  or the first one is below 3 (a standard stream), the call does nothing.
- `close_partial(*fds)` closes and forgets every slot holding one of the
  given descriptors, with the same rule about an empty call or a first
  descriptor below 3.
- `close_all()` closes and forgets every tracked descriptor of 3 or above.

Errors from closing a descriptor (for instance one already closed elsewhere)
are ignored.

## Limits and errors

- If the capacity is below 16, `register` closes every tracked descriptor and
  raises `CapacityTooSmallError` (the tracker can still be created; the check
  happens on registration). The error keeps the rejected value in `capacity`.
- Registering a descriptor when every slot is taken closes that descriptor,
  closes every tracked descriptor, and raises `BufferOverflowError`.

Both derive from `TrackerError`, which carries an `ErrorType`
(`BUFFER_OVERFLOW` or `TOO_SMALL_MAX_TRACKER`) as `error_type` and its number
(300 or 301) as `error_id`.

## Module-level functions

For code that wants a single shared registry, the module offers functions that
work on one process-wide tracker with room for 1024 descriptors:

```python
from fdtracker.tracker import fd_register, fd_close_partial, fd_close_all, default_tracker

fd_register(fd1, fd2, fd3)
fd_close_partial(fd2)
fd_close_all()
```

`default_tracker()` returns that shared tracker, creating it on first use.

## What it does not do

The package does not open descriptors or discover which ones a process has
open; it knows only the descriptors handed to it. It has no command-line
tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```