"""Bounded random delay used to emulate a remote auth backend."""

from __future__ import annotations

import asyncio
import logging
import random
from typing import Awaitable, Callable, Mapping

from climatebuddy.core.config import DelayRange, LatencySettings

logger = logging.getLogger(__name__)

Sleeper = Callable[[float], Awaitable[None]]


class LatencySimulator:
    def __init__(
        self,
        ranges: Mapping[str, DelayRange],
        *,
        enabled: bool = True,
        sleep: Sleeper = asyncio.sleep,
        rng: random.Random | None = None,
    ) -> None:
        for name, (low, high) in ranges.items():
            if low < 0 or high < low:
                raise ValueError(f"invalid delay range for {name}: ({low}, {high})")
        self._ranges = dict(ranges)
        self._enabled = enabled
        self._sleep = sleep
        self._rng = rng or random.Random()

    @classmethod
    def from_settings(cls, settings: LatencySettings) -> "LatencySimulator":
        return cls(settings.ranges(), enabled=settings.enabled)

    @classmethod
    def disabled(cls) -> "LatencySimulator":
        return cls({}, enabled=False)

    @property
    def enabled(self) -> bool:
        return self._enabled

    def pick_delay(self, operation: str) -> float:
        if not self._enabled or operation not in self._ranges:
            return 0.0
        low, high = self._ranges[operation]
        return self._rng.uniform(low, high)

    async def wait(self, operation: str) -> float:
        delay = self.pick_delay(operation)
        if delay > 0:
            logger.debug("Simulating %.3fs latency for %s", delay, operation)
            await self._sleep(delay)
        return delay


__all__ = ["LatencySimulator", "Sleeper"]
