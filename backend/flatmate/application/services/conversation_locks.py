"""
Per-conversation serialization of chat turns.

Two turns for the same conversation would otherwise interleave their message
writes and LLM history reads. Turns for different conversations never wait on
each other. Locks exist only while a turn holds or waits on them.
"""

from __future__ import annotations

import asyncio
from collections import defaultdict
from contextlib import asynccontextmanager
from typing import AsyncIterator


class ConversationLocks:
    def __init__(self, enabled: bool = True):
        self._enabled = enabled
        self._locks: dict[str, asyncio.Lock] = {}
        self._holders: defaultdict[str, int] = defaultdict(int)

    @asynccontextmanager
    async def hold(self, conversation_id: str) -> AsyncIterator[None]:
        if not self._enabled:
            yield
            return

        lock = self._locks.setdefault(conversation_id, asyncio.Lock())
        self._holders[conversation_id] += 1
        try:
            async with lock:
                yield
        finally:
            self._holders[conversation_id] -= 1
            if self._holders[conversation_id] == 0:
                del self._holders[conversation_id]
                self._locks.pop(conversation_id, None)

    def __len__(self) -> int:
        return len(self._locks)
