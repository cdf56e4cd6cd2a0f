"""Cooperative per-thread interrupt flag.

Python threads cannot be interrupted from outside, so long-running work
polls a flag instead. When the capture boundary swallows an
``InterruptedError`` into a ``Failure``, it re-sets the flag for the calling
thread so the cancellation request is not lost.

The flag store is shared between threads and guarded by an aiologic lock,
which is safe to take from both threads and event loops.

Examples:
    >>> interrupt()
    >>> is_interrupted()
    True
    >>> interrupted()  # reads and clears
    True
    >>> is_interrupted()
    False
"""

from __future__ import annotations

import threading
import weakref

import aiologic

__all__ = [
    'interrupt',
    'interrupted',
    'is_interrupted',
    'raise_if_interrupted',
]

_lock = aiologic.Lock()
# Keyed on the Thread object, so a flag is dropped with its thread
_flags: weakref.WeakKeyDictionary[threading.Thread, bool] = weakref.WeakKeyDictionary()


def _target(thread: threading.Thread | None) -> threading.Thread:
    if thread is None:
        return threading.current_thread()
    if thread.ident is None:
        msg = f'Thread {thread.name!r} has not been started'
        raise RuntimeError(msg)
    return thread


def interrupt(thread: threading.Thread | None = None) -> None:
    """Set the interrupt flag of ``thread`` (the current thread if None).

    Raises:
        RuntimeError: If ``thread`` has not been started.
    """
    target = _target(thread)
    with _lock:
        _flags[target] = True


def is_interrupted(thread: threading.Thread | None = None) -> bool:
    """Return the interrupt flag of ``thread`` without clearing it."""
    target = _target(thread)
    with _lock:
        return _flags.get(target, False)


def interrupted() -> bool:
    """Return and clear the interrupt flag of the current thread."""
    target = threading.current_thread()
    with _lock:
        return _flags.pop(target, False)


def raise_if_interrupted() -> None:
    """Clear the current thread's flag and raise if it was set.

    This is the check a cooperative, long-running supplier calls between
    units of work.

    Raises:
        InterruptedError: If the current thread was interrupted.
    """
    if interrupted():
        msg = 'Thread interrupted'
        raise InterruptedError(msg)
