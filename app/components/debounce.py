"""
Debounced search input.

Streamlit reruns the page on every widget edit, so a thread-based timer
cannot push results back into the page. Instead the debouncer keeps a single
pending call plus its deadline; a fragment on the page polls it. Each new
call replaces the pending one and restarts the window, so only the final
state after a quiet period is acted on.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Callable, Optional


@dataclass
class _Pending:
    args: tuple
    kwargs: dict
    due: float


class Debouncer:
    def __init__(self, fn: Callable[..., Any], wait: float = 0.3, clock: Callable[[], float] = time.monotonic) -> None:
        if wait < 0:
            raise ValueError("wait must be >= 0")
        self._fn = fn
        self._wait = wait
        self._clock = clock
        self._pending: Optional[_Pending] = None

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def call(self, *args: Any, **kwargs: Any) -> None:
        """Cancel any pending call and schedule this one `wait` seconds out."""
        self._pending = _Pending(args=args, kwargs=kwargs, due=self._clock() + self._wait)

    def cancel(self) -> None:
        self._pending = None

    def poll(self) -> bool:
        """Fire the pending call if its window has elapsed. Returns True if it fired."""
        p = self._pending
        if p is None or self._clock() < p.due:
            return False
        self._pending = None
        self._fn(*p.args, **p.kwargs)
        return True

    def flush(self) -> bool:
        """Fire the pending call now, regardless of the window."""
        p = self._pending
        if p is None:
            return False
        self._pending = None
        self._fn(*p.args, **p.kwargs)
        return True
