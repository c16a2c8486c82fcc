"""
Cooperative delayed-callback scheduler.

The surfaces are single-threaded; the only deferred work is the deep-link
scroll. The host drives time forward with `advance()` (e.g. from its
render loop, or directly in tests), so callbacks run on the caller's
thread and never interleave with a pipeline recompute.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Protocol

from loguru import logger


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> "ScheduledCall":
        ...


@dataclass(order=True)
class ScheduledCall:
    """Handle for a pending callback"""
    due: float
    seq: int
    callback: Callable[[], None] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)
    
    def cancel(self) -> None:
        self.cancelled = True


class CooperativeScheduler:
    """
    Virtual-clock scheduler.
    
    Callbacks fire in due-time order (ties in scheduling order) when the
    clock is advanced past their due time.
    """
    
    def __init__(self):
        self.now: float = 0.0
        self._seq = 0
        self._pending: List[ScheduledCall] = []
    
    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        call = ScheduledCall(due=self.now + max(delay, 0.0), seq=self._seq, callback=callback)
        self._seq += 1
        self._pending.append(call)
        self._pending.sort()
        return call
    
    @property
    def pending(self) -> int:
        return sum(1 for call in self._pending if not call.cancelled)
    
    def advance(self, seconds: float) -> int:
        """
        Move the clock forward and run every callback now due.
        
        Returns:
            Number of callbacks executed
        """
        self.now += seconds
        executed = 0
        while self._pending and self._pending[0].due <= self.now:
            call = self._pending.pop(0)
            if call.cancelled:
                continue
            call.callback()
            executed += 1
        
        if executed:
            logger.debug(f"Scheduler ran {executed} callback(s) at t={self.now:.3f}s")
        return executed
    
    def run_all(self) -> int:
        """Advance to the last pending due time and run everything"""
        if not self._pending:
            return 0
        return self.advance(max(self._pending[-1].due - self.now, 0.0))
