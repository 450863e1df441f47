import copy
import logging
import threading

logger = logging.getLogger(__name__)

IDLE = "idle"
RUNNING = "running"
PAUSED = "paused"
COMPLETED = "completed"

TICK_SECONDS = 1.0


class ThreadTicker:
    """Calls a callback every `seconds` on a chain of threading.Timer objects."""

    def every(self, seconds, callback):
        handle = {"timer": None, "cancelled": False, "lock": threading.Lock()}

        def fire():
            if handle["cancelled"]:
                return
            callback()
            arm()

        def arm():
            with handle["lock"]:
                if handle["cancelled"]:
                    return
                timer = threading.Timer(seconds, fire)
                timer.daemon = True
                handle["timer"] = timer
                timer.start()

        arm()
        return handle

    def cancel(self, handle):
        with handle["lock"]:
            handle["cancelled"] = True
            if handle["timer"] is not None:
                handle["timer"].cancel()


class SessionRunner:
    """
    Drives one generated routine through a per-second countdown.

    The runner keeps its own copy of the routine's steps (main followed by
    cooldown), each annotated with a `completed` flag, so the routine passed
    in is never modified. The scheduler fires once a second through a callback
    tied to the registration that created it, so a cancelled registration
    cannot advance the session. `tick()` advances unconditionally; tests call
    it directly with a scheduler that never fires.
    """

    def __init__(self, routine: dict, scheduler=None, on_complete=None):
        steps = list(routine.get("main") or []) + list(routine.get("cooldown") or [])
        self._steps = copy.deepcopy(steps)
        for step in self._steps:
            step["completed"] = False

        self._scheduler = scheduler or ThreadTicker()
        self._on_complete = on_complete
        self._handle = None
        self._generation = 0
        self._lock = threading.RLock()

        self.state = IDLE
        self.active_index = -1
        self.remaining = 0

    @property
    def steps(self):
        return self._steps

    def start(self):
        with self._lock:
            if self.state == RUNNING:
                return
            if self.state == PAUSED:
                self._set_running()
                return
            if not self._steps:
                return

            idx = self._next_incomplete(0)
            if idx == -1:
                # Everything was done already: run the routine again from the top
                for step in self._steps:
                    step["completed"] = False
                idx = 0

            self._activate(idx)
            self._set_running()

    def resume(self):
        with self._lock:
            if self.state == PAUSED:
                self._set_running()

    def pause(self):
        with self._lock:
            self._cancel_tick()
            if self.state == RUNNING:
                self.state = PAUSED

    def stop(self):
        with self._lock:
            self._cancel_tick()
            if self.state in (RUNNING, PAUSED):
                self.state = IDLE
            self.active_index = -1
            self.remaining = 0

    def tick(self):
        self._tick(None)

    def _tick(self, generation):
        finished = False
        with self._lock:
            if self.state != RUNNING:
                return
            if generation is not None and generation != self._generation:
                # Fired by a registration that was cancelled while it waited on the lock
                return
            if not 0 <= self.active_index < len(self._steps):
                self._cancel_tick()
                self.state = IDLE
                self.active_index = -1
                self.remaining = 0
                return

            self.remaining -= 1
            if self.remaining > 0:
                return

            self._steps[self.active_index]["completed"] = True
            nxt = self._next_incomplete(self.active_index + 1)
            if nxt == -1:
                self._cancel_tick()
                self.state = COMPLETED
                self.active_index = -1
                self.remaining = 0
                finished = True
            else:
                self._activate(nxt)

        if finished:
            logger.debug("Session completed after %d steps", len(self._steps))
            if self._on_complete is not None:
                self._on_complete(self)

    def total_remaining(self) -> int:
        """Seconds left in the routine; the full time-based length when not running."""
        with self._lock:
            if self.state == RUNNING and self.active_index >= 0:
                later = sum(
                    _seconds(s) for s in self._steps[self.active_index + 1:] if s.get("unit") == "time"
                )
                return self.remaining + later
            total = sum(_seconds(s) for s in self._steps if s.get("unit") == "time")
            return total or 300

    def _activate(self, idx):
        self.active_index = idx
        self.remaining = _seconds(self._steps[idx])

    def _next_incomplete(self, start):
        for i in range(start, len(self._steps)):
            if not self._steps[i]["completed"]:
                return i
        return -1

    def _set_running(self):
        self._cancel_tick()
        self.state = RUNNING
        self._handle = self._scheduler.every(TICK_SECONDS, lambda gen=self._generation: self._tick(gen))

    def _cancel_tick(self):
        self._generation += 1
        if self._handle is not None:
            self._scheduler.cancel(self._handle)
            self._handle = None


def _seconds(step):
    try:
        return int(step.get("duration_or_reps") or 0)
    except (TypeError, ValueError):
        return 0
