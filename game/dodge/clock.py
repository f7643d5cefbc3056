"""
Deterministic timer clock driven by elapsed milliseconds.

The host advances the clock once per frame (before the frame update), so all
callbacks fire on the caller's thread in schedule order. Handles are explicit
tokens: cancelling one guarantees its callback never runs again.
"""

from __future__ import annotations

from typing import Callable, List, Optional


class TimerHandle:
    """Cancelable token returned by Clock.schedule"""

    def __init__(self, clock: "Clock", delay_ms: float, callback: Callable[[], None],
                 repeating: bool, due_ms: float):
        self._clock = clock
        self.delay_ms = delay_ms
        self.callback = callback
        self.repeating = repeating
        self.due_ms = due_ms
        self.active = True

    def cancel(self):
        self.active = False
        self._clock._discard(self)

    def __repr__(self):
        kind = "every" if self.repeating else "after"
        state = "active" if self.active else "cancelled"
        return f"<TimerHandle {kind} {self.delay_ms:g}ms {state}>"


class Clock:
    """Recurring and one-shot timers on a virtual millisecond clock"""

    def __init__(self):
        self.now_ms = 0.0
        self._timers: List[TimerHandle] = []

    def schedule(self, delay_ms: float, callback: Callable[[], None],
                 repeating: bool = True) -> TimerHandle:
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be non-negative, got {delay_ms}")
        if repeating and delay_ms == 0:
            raise ValueError("A repeating timer needs a positive delay")
        handle = TimerHandle(self, delay_ms, callback, repeating, self.now_ms + delay_ms)
        self._timers.append(handle)
        return handle

    def advance(self, delta_ms: float):
        """Move time forward and fire every timer that comes due, in time order"""
        target = self.now_ms + delta_ms
        while True:
            handle = self._next_due(target)
            if handle is None:
                break
            self.now_ms = handle.due_ms
            if handle.repeating:
                handle.due_ms += handle.delay_ms
            else:
                handle.cancel()
            handle.callback()
        self.now_ms = target

    def clear(self):
        """Cancel every pending timer"""
        for handle in list(self._timers):
            handle.cancel()

    @property
    def pending(self) -> int:
        return len(self._timers)

    def _next_due(self, target: float) -> Optional[TimerHandle]:
        due = [h for h in self._timers if h.active and h.due_ms <= target]
        if not due:
            return None
        return min(due, key=lambda h: h.due_ms)

    def _discard(self, handle: TimerHandle):
        if handle in self._timers:
            self._timers.remove(handle)
