"""Unit tests for TransitionManager."""

import asyncio

import pytest

from haste.client.transitions import TransitionManager


class TestWithoutEffect:

    def test_run_applies_callback(self):
        calls = []
        manager = TransitionManager()

        manager.run(lambda: calls.append("applied"))

        assert calls == ["applied"]
        assert not manager.is_supported

    @pytest.mark.asyncio
    async def test_run_async_applies_callback(self):
        calls = []

        await TransitionManager().run_async(lambda: calls.append("applied"))

        assert calls == ["applied"]


class TestWithEffect:

    @pytest.mark.asyncio
    async def test_run_does_not_wait_for_effect(self):
        calls = []
        release = asyncio.Event()

        async def effect():
            await release.wait()
            calls.append("effect")

        manager = TransitionManager(effect)
        manager.run(lambda: calls.append("applied"))

        assert calls == ["applied"]

        release.set()
        await manager.wait_pending()
        assert calls == ["applied", "effect"]

    @pytest.mark.asyncio
    async def test_run_async_waits_for_effect(self):
        calls = []

        async def effect():
            calls.append("effect")

        await TransitionManager(effect).run_async(lambda: calls.append("applied"))

        assert calls == ["applied", "effect"]

    @pytest.mark.asyncio
    async def test_failed_effect_is_skipped(self):
        calls = []

        async def effect():
            raise RuntimeError("aborted")

        await TransitionManager(effect).run_async(lambda: calls.append("applied"))

        assert calls == ["applied"]
