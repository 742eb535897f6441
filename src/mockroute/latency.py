"""Simulated latency — per-request randomized delay.

A route's latency is an ``average`` plus a uniform jitter drawn from the
half-open window ``[0, delta)``, both in milliseconds. A fresh value is
drawn for every request.

Random source:
    Each thread owns its own ``random.Random``. The ASGI server may run
    handlers on several threads (free-threaded builds, threaded workers),
    and per-thread generators mean draws never contend on shared state.
"""

from __future__ import annotations

import random
import threading
from dataclasses import dataclass

_local = threading.local()


def _thread_rng() -> random.Random:
    """Return this thread's generator, creating it on first use."""
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = random.Random()
        _local.rng = rng
    return rng


@dataclass(frozen=True, slots=True)
class Latency:
    """Configured latency for one route, in milliseconds.

    ``delta`` is the exclusive upper bound of the jitter. A ``delta`` of
    zero or less disables jitter instead of failing the draw.
    """

    average: int = 0
    delta: int = 0

    def duration_ms(self, rng: random.Random | None = None) -> int:
        """Draw one delay in milliseconds: ``average + randrange(delta)``."""
        jitter = 0
        if self.delta > 0:
            jitter = (rng or _thread_rng()).randrange(self.delta)
        return max(self.average + jitter, 0)

    def describe(self) -> str:
        """Human-readable form used in the startup banner."""
        return f"{self.average}ms +[0, {max(self.delta, 0)})ms"


def compute_delay(latency: Latency, rng: random.Random | None = None) -> float:
    """Return the delay for one request in seconds, ready for ``sleep()``."""
    return latency.duration_ms(rng) / 1000
