"""
Session Lock Registry

Per-session asyncio locks so answer submissions for one interview are handled
one at a time within this process. An entry lives only while some request holds
or waits for its lock.
"""

import asyncio
import threading
from contextlib import asynccontextmanager
from typing import Dict, List

# session id -> [lock, number of holders and waiters]
_SESSION_LOCKS: Dict[str, List] = {}
_SESSION_LOCKS_GUARD = threading.Lock()


def active_lock_count() -> int:
    with _SESSION_LOCKS_GUARD:
        return len(_SESSION_LOCKS)


def _acquire_entry(session_id: str) -> asyncio.Lock:
    with _SESSION_LOCKS_GUARD:
        entry = _SESSION_LOCKS.get(session_id)
        if entry is None:
            entry = [asyncio.Lock(), 0]
            _SESSION_LOCKS[session_id] = entry
        entry[1] += 1
        return entry[0]


def _release_entry(session_id: str) -> None:
    with _SESSION_LOCKS_GUARD:
        entry = _SESSION_LOCKS.get(session_id)
        if entry is None:
            return
        entry[1] -= 1
        if entry[1] <= 0:
            del _SESSION_LOCKS[session_id]


@asynccontextmanager
async def session_lock(session_id: str):
    """Hold the lock of one session for the duration of the block."""
    lock = _acquire_entry(session_id)
    try:
        async with lock:
            yield
    finally:
        _release_entry(session_id)
