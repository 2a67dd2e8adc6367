"""Per-client request budgets for the name formatting API.

Budgets are counted in formatting units rather than requests: laying out one name
for one airline costs one unit, so ``/api/format/all`` is charged one unit per
airline in the policy table while the health check is free.
"""

from __future__ import annotations

import os
import threading
import time
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Deque, Dict, Tuple

from data.airlines import AIRLINES

DEFAULT_ROUTE_COSTS: Dict[str, int] = {
    "/health": 0,
    "/api/format/all": len(AIRLINES),
}


@dataclass
class RateLimitConfig:
    units_per_minute: int = 600
    window_seconds: int = 60
    default_cost: int = 1
    route_costs: Dict[str, int] = field(default_factory=lambda: dict(DEFAULT_ROUTE_COSTS))

    def cost_for(self, path: str) -> int:
        return self.route_costs.get(path.rstrip("/") or "/", self.default_cost)


@dataclass
class _ClientWindow:
    charges: Deque[Tuple[float, int]] = field(default_factory=deque)
    spent: int = 0

    def prune(self, cutoff: float) -> None:
        while self.charges and self.charges[0][0] <= cutoff:
            _, cost = self.charges.popleft()
            self.spent -= cost


class RateLimiter:
    """Thread-safe sliding-window budget keyed by client identifier.

    Clients whose window has emptied are forgotten, so the table only holds
    clients seen during the last window.
    """

    def __init__(self, config: RateLimitConfig | None = None, clock: Callable[[], float] = time.monotonic):
        self.config = config or RateLimitConfig()
        self._clock = clock
        self._lock = threading.Lock()
        self._windows: Dict[str, _ClientWindow] = {}
        self._last_sweep = clock()

    @property
    def tracked_clients(self) -> int:
        with self._lock:
            return len(self._windows)

    def is_allowed(self, client_id: str, cost: int = 1) -> bool:
        if cost <= 0:
            return True
        now = self._clock()
        cutoff = now - self.config.window_seconds
        with self._lock:
            if now - self._last_sweep >= self.config.window_seconds:
                self._sweep(cutoff)
                self._last_sweep = now
            window = self._current_window(client_id, cutoff)
            spent = window.spent if window else 0
            if spent + cost > self.config.units_per_minute:
                return False
            if window is None:
                window = self._windows[client_id] = _ClientWindow()
            window.charges.append((now, cost))
            window.spent += cost
            return True

    def allow_request(self, client_id: str, path: str) -> bool:
        return self.is_allowed(client_id, self.config.cost_for(path))

    def remaining(self, client_id: str) -> int:
        cutoff = self._clock() - self.config.window_seconds
        with self._lock:
            window = self._current_window(client_id, cutoff)
            spent = window.spent if window else 0
        return max(0, self.config.units_per_minute - spent)

    def _current_window(self, client_id: str, cutoff: float) -> _ClientWindow | None:
        # Caller holds the lock.
        window = self._windows.get(client_id)
        if window is None:
            return None
        window.prune(cutoff)
        if not window.charges:
            del self._windows[client_id]
            return None
        return window

    def _sweep(self, cutoff: float) -> None:
        for client_id in list(self._windows):
            self._current_window(client_id, cutoff)

    @classmethod
    def from_env(cls) -> "RateLimiter":
        raw_limit = os.environ.get("RATE_LIMIT_PER_MINUTE")
        try:
            limit = int(raw_limit) if raw_limit and raw_limit.strip() else RateLimitConfig.units_per_minute
            if limit <= 0:
                raise ValueError(raw_limit)
        except ValueError:
            limit = RateLimitConfig.units_per_minute
        return cls(RateLimitConfig(units_per_minute=limit))
