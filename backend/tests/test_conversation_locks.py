"""
Tests for per-conversation turn serialization.
"""

import asyncio

from flatmate.application.services import ConversationLocks


class TestConversationLocks:
    def test_same_conversation_is_serialized(self):
        locks = ConversationLocks()
        events = []

        async def turn(name):
            async with locks.hold("c1"):
                events.append(f"{name}-start")
                await asyncio.sleep(0.01)
                events.append(f"{name}-end")

        async def main():
            await asyncio.gather(turn("a"), turn("b"))

        asyncio.run(main())

        assert events == ["a-start", "a-end", "b-start", "b-end"]

    def test_different_conversations_run_concurrently(self):
        locks = ConversationLocks()
        events = []

        async def turn(conversation_id):
            async with locks.hold(conversation_id):
                events.append(f"{conversation_id}-start")
                await asyncio.sleep(0.01)
                events.append(f"{conversation_id}-end")

        async def main():
            await asyncio.gather(turn("c1"), turn("c2"))

        asyncio.run(main())

        assert events[:2] == ["c1-start", "c2-start"]

    def test_locks_are_discarded_when_idle(self):
        locks = ConversationLocks()

        async def main():
            async with locks.hold("c1"):
                assert len(locks) == 1
            assert len(locks) == 0

        asyncio.run(main())

    def test_lock_released_on_error(self):
        locks = ConversationLocks()

        async def main():
            try:
                async with locks.hold("c1"):
                    raise RuntimeError("turn failed")
            except RuntimeError:
                pass
            async with locks.hold("c1"):
                return "acquired"

        assert asyncio.run(main()) == "acquired"
        assert len(locks) == 0

    def test_disabled_locks_do_not_serialize(self):
        locks = ConversationLocks(enabled=False)
        events = []

        async def turn(name):
            async with locks.hold("c1"):
                events.append(f"{name}-start")
                await asyncio.sleep(0.01)
                events.append(f"{name}-end")

        async def main():
            await asyncio.gather(turn("a"), turn("b"))

        asyncio.run(main())

        assert events[:2] == ["a-start", "b-start"]
