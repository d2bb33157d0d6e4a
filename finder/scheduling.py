"""
Cancellable timers and debouncing.

The search view only issues a remote search once the query has been stable for
a quiet interval. This module provides the timer abstraction behind that:

- Scheduler.schedule(delay, action) returns a TimerHandle that can be cancelled
- PollingScheduler runs due actions on the caller's thread when run_due() is called
  (the Streamlit views poll it on every rerun; tests drive it with a fake clock)
- ThreadingScheduler fires actions on threading.Timer threads
- Debouncer keeps at most one pending action, cancelling and replacing it on reschedule
"""

import heapq
import itertools
import logging
import threading
import time
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)

Action = Callable[[], None]


class TimerHandle(ABC):
    """Handle returned by Scheduler.schedule()."""

    @abstractmethod
    def cancel(self) -> None:
        """Prevent the action from running. Safe to call more than once."""
        pass

    @property
    @abstractmethod
    def cancelled(self) -> bool:
        pass


class Scheduler(ABC):
    """Runs an action once, after a delay in seconds."""

    @abstractmethod
    def schedule(self, delay: float, action: Action) -> TimerHandle:
        pass


class _PolledTimer(TimerHandle):
    def __init__(self, due: float, action: Action) -> None:
        self.due = due
        self.action = action
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class PollingScheduler(Scheduler):
    """
    Single-threaded scheduler: nothing runs until the owner calls run_due().

    Actions run in due-time order (ties in scheduling order), on the thread
    calling run_due().

    Args:
        clock: Zero-argument callable returning the current time in seconds
               (default: time.monotonic)
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock or time.monotonic
        self._counter = itertools.count()
        self._queue: List[Tuple[float, int, _PolledTimer]] = []
        self._lock = threading.Lock()

    def now(self) -> float:
        return self._clock()

    def schedule(self, delay: float, action: Action) -> TimerHandle:
        timer = _PolledTimer(self.now() + max(delay, 0.0), action)
        with self._lock:
            heapq.heappush(self._queue, (timer.due, next(self._counter), timer))
        return timer

    @property
    def pending(self) -> int:
        """Number of scheduled actions that are neither run nor cancelled."""
        with self._lock:
            return sum(1 for _, _, timer in self._queue if not timer.cancelled)

    def run_due(self) -> int:
        """
        Run every action whose due time has passed.

        Returns:
            Number of actions that ran.
        """
        ran = 0
        while True:
            with self._lock:
                if not self._queue or self._queue[0][0] > self.now():
                    break
                _, _, timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            timer.action()
            ran += 1
        return ran


class _ThreadTimer(TimerHandle):
    def __init__(self, timer: threading.Timer) -> None:
        self._timer = timer
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True
        self._timer.cancel()

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class ThreadingScheduler(Scheduler):
    """Fires each action on its own daemon threading.Timer."""

    def schedule(self, delay: float, action: Action) -> TimerHandle:
        timer = threading.Timer(max(delay, 0.0), action)
        timer.daemon = True
        timer.start()
        return _ThreadTimer(timer)


class Debouncer:
    """
    Runs an action only after `delay` seconds without a newer schedule() call.

    Every schedule() cancels the previously pending action, so at most one
    action is pending at any time.
    """

    def __init__(self, scheduler: Scheduler, delay: float) -> None:
        self.scheduler = scheduler
        self.delay = delay
        self._handle: Optional[TimerHandle] = None
        self._lock = threading.Lock()

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._handle is not None and not self._handle.cancelled

    def schedule(self, action: Action) -> None:
        with self._lock:
            if self._handle is not None:
                self._handle.cancel()
                logger.debug("Debounce: cancelled pending action")
            handle_box: List[TimerHandle] = []

            def fire() -> None:
                with self._lock:
                    handle = handle_box[0]
                    # A timer thread may already be running when cancel() is called
                    if self._handle is not handle or handle.cancelled:
                        logger.debug("Debounce: skipped superseded action")
                        return
                    self._handle = None
                action()

            handle = self.scheduler.schedule(self.delay, fire)
            handle_box.append(handle)
            self._handle = handle

    def cancel(self) -> None:
        with self._lock:
            if self._handle is not None:
                self._handle.cancel()
                self._handle = None
