"""The per-frame update loop with a fixed-rate step."""

from __future__ import annotations

import time
from collections.abc import Callable
from datetime import timedelta
from typing import Optional


class GameLoop:
    """Runs per-frame, fixed-rate and network callbacks each time it is ticked."""

    FIXED_TIMESTEP = timedelta(milliseconds=160)
    _STEP_US = FIXED_TIMESTEP // timedelta(microseconds=1)

    def __init__(
        self,
        on_tick: Optional[Callable[[float], None]] = None,
        on_fixed_tick: Optional[Callable[[int], None]] = None,
        on_network_tick: Optional[Callable[[int], None]] = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self._on_tick = on_tick
        self._on_fixed_tick = on_fixed_tick
        self._on_network_tick = on_network_tick
        self._clock = clock
        self._last: Optional[float] = None
        self._remainder_us = 0
        self._elapsed_ticks = 0

    @property
    def elapsed_ticks(self) -> int:
        return self._elapsed_ticks

    def tick(self) -> None:
        """Advance one frame; the first tick sees no elapsed time."""
        now = self._clock()
        delta_us = 0 if self._last is None else round((now - self._last) * 1_000_000)
        self._last = now

        if self._on_tick is not None:
            self._on_tick(delta_us / 1_000_000)

        steps, self._remainder_us = divmod(delta_us + self._remainder_us, self._STEP_US)
        for _ in range(steps):
            if self._on_fixed_tick is not None:
                self._on_fixed_tick(self._elapsed_ticks)
            self._elapsed_ticks += 1

        if self._on_network_tick is not None:
            self._on_network_tick(self._elapsed_ticks)