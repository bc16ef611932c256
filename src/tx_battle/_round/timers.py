# Area: Round
"""
tx_battle._round.timers — Round timer tracking
==============================================

Tracks the interval timers of the active round (countdown tick and
block poll). Every timer carries the round generation it was scheduled
for; timers of a superseded generation are dropped without firing.

Timers are driven by ``run_due()``, called from the runner's loop. Due
timers fire in priority order (lowest first), so a poll and a tick that
fall due in the same pass always run poll-then-tick.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, List

logger = logging.getLogger("tx_battle.round.timers")


@dataclass
class _Timer:
    name: str
    generation: int
    interval: float
    callback: Callable[[], None]
    priority: int
    catch_up: bool
    next_due: float


class RoundTimers:
    """
    Interval timers keyed by name.

    A ``catch_up`` timer fires once for every interval that elapsed since
    it was last run; other timers fire at most once per pass and are
    rescheduled one interval from now.
    """

    def __init__(self) -> None:
        self._timers: Dict[str, _Timer] = {}

    def schedule(
        self,
        name: str,
        generation: int,
        interval: float,
        callback: Callable[[], None],
        priority: int = 0,
        catch_up: bool = False,
    ) -> None:
        """Schedule (or replace) a timer; first fire is one interval from now."""
        self._timers[name] = _Timer(
            name=name,
            generation=generation,
            interval=interval,
            callback=callback,
            priority=priority,
            catch_up=catch_up,
            next_due=time.monotonic() + interval,
        )
        logger.debug("Timer scheduled: %s gen=%d every %.1fs", name, generation, interval)

    def cancel_generation(self, generation: int) -> int:
        """Remove every timer of a generation. Returns how many were removed."""
        names = [n for n, t in self._timers.items() if t.generation == generation]
        for name in names:
            del self._timers[name]
        if names:
            logger.debug("Timers cancelled for gen=%d: %s", generation, names)
        return len(names)

    def active(self) -> List[str]:
        """Names of the timers still scheduled."""
        return sorted(self._timers)

    def run_due(self, current_generation: int) -> int:
        """
        Fire due timers of ``current_generation``.

        Stale timers are removed. A callback may cancel timers (including
        its own); cancelled timers stop firing immediately.

        Returns:
            Number of callbacks fired
        """
        now = time.monotonic()
        due = sorted(
            (t for t in self._timers.values() if now >= t.next_due),
            key=lambda t: t.priority,
        )

        fired = 0
        for timer in due:
            if timer.generation != current_generation:
                logger.debug("Dropping stale timer %s gen=%d", timer.name, timer.generation)
                self._timers.pop(timer.name, None)
                continue

            while self._timers.get(timer.name) is timer and now >= timer.next_due:
                if timer.catch_up:
                    timer.next_due += timer.interval
                else:
                    timer.next_due = now + timer.interval
                timer.callback()
                fired += 1

        return fired
