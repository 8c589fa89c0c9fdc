# obsmap/runtime/concurrency.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Union

AnyLock = Union["threading.Lock", "threading.RLock"]


def get_lock(reentrant: bool = False) -> AnyLock:
    """
    Provide a new lock for guarding process-wide registries. Re-entrant locks
    are handed out when the guarded code may call back into itself.
    """
    if reentrant:
        return threading.RLock()
    return threading.Lock()


@contextmanager
def with_lock(lock: AnyLock):
    """
    Acquire the given lock upon entry and release it upon exit.
    """
    lock.acquire()
    try:
        yield
    finally:
        lock.release()
