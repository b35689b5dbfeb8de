"""Visual transition wrapper.

A transition effect is an optional async callable run around a state
change. The state change itself always happens synchronously inside
run()/run_async(); the effect can never delay or cancel it.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional, Set

logger = logging.getLogger(__name__)

TransitionEffect = Callable[[], Awaitable[None]]


class TransitionManager:
    """Runs callbacks with an optional visual effect.

    Args:
        effect: Async callable animating the change; None disables effects
    """

    def __init__(self, effect: Optional[TransitionEffect] = None):
        self._effect = effect
        self._pending: Set[asyncio.Task] = set()

    @property
    def is_supported(self) -> bool:
        return self._effect is not None

    def run(self, callback: Callable[[], None]) -> None:
        """Apply callback now and start the effect without waiting for it."""
        callback()
        if self._effect is None:
            return

        try:
            task = asyncio.get_running_loop().create_task(self._play())
        except RuntimeError:
            # No event loop: nothing to animate on
            return
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def run_async(self, callback: Callable[[], None]) -> None:
        """Apply callback now and wait until the effect finishes."""
        callback()
        if self._effect is not None:
            await self._play()

    async def wait_pending(self) -> None:
        """Wait for effects started by run()."""
        if self._pending:
            await asyncio.gather(*list(self._pending))

    async def _play(self) -> None:
        try:
            await self._effect()
        except Exception as e:
            logger.debug(f"View transition skipped: {e}")
