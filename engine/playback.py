"""
playback.py — Step-by-Step Playback Controller
===============================================
The PlaybackController is the ONLY object the UI talks to while a run
is on screen.  It owns a cursor into a finished step sequence and
exposes next / prev / reset / play / pause / speed.

Cursor semantics (N = number of steps):
    0        → ready, nothing applied yet
    k (1..N) → steps[k-1] is on screen
    N        → complete

State machine:
    READY    →  step_forward() / play()  →  STEPPING / PLAYING
    PLAYING  →  pause()                   →  STEPPING
    PLAYING  →  (cursor reaches N)        →  COMPLETE, playing cleared
    any      →  reset()                   →  READY
    any      →  load(new run)             →  READY

Autoplay:
  While playing there is exactly one DeferredAction pending on the
  scheduler.  When it fires it performs one step_forward() and, if
  still playing and not at N, schedules the next one.  Anything that
  changes the timing (pause, speed, manual stepping, reset, load)
  cancels the pending action first, so a stale timer can never advance
  a run that has moved on.

Thread safety:
  None needed.  The scheduler is cooperative and fires actions on the
  thread that calls run_due(); the controller must only be used from
  that thread.
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple, Union

from algorithms.step import AlgorithmStep, KruskalResult
from engine.scheduler import DeferredAction, TickScheduler
from graph.edge import Edge

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Timing
# ---------------------------------------------------------------------------
BASE_INTERVAL = 2.0          # seconds per step at 1.0x

MIN_SPEED = 0.5
MAX_SPEED = 2.0

SPEED_PRESETS = {
    "slow":    0.5,    # teaching mode
    "normal":  1.0,
    "fast":    1.5,
    "fastest": 2.0,    # demo mode
}

# ---------------------------------------------------------------------------
# Status messages for the states that have no step of their own
# ---------------------------------------------------------------------------
MSG_LOADED = "Ready to visualize Kruskal's steps."
MSG_READY  = "Ready to start"
MSG_RESET  = "Ready to start algorithm"


# ---------------------------------------------------------------------------
# View — what the renderer reads
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class PlaybackView:
    """
    Attributes:
        cursor          : Number of steps applied (0..total_steps).
        total_steps     : Length of the loaded sequence.
        playing         : Autoplay flag.
        speed           : Speed multiplier.
        visible_mst     : MST edges currently on screen.
        visible_cost    : Their total weight.
        message         : Status text.
        current_step    : The step on screen, None in the ready state.
        skipped_ids     : Ids of edges rejected so far.
    """

    cursor:       int
    total_steps:  int
    playing:      bool
    speed:        float
    visible_mst:  Tuple[Edge, ...]
    visible_cost: float
    message:      str
    current_step: Optional[AlgorithmStep]
    skipped_ids:  Tuple[int, ...] = ()

    @property
    def current_edge_id(self) -> Optional[int]:
        return self.current_step.edge.id if self.current_step else None

    @property
    def is_complete(self) -> bool:
        return self.cursor == self.total_steps

    @property
    def visible_edge_ids(self) -> Tuple[int, ...]:
        return tuple(e.id for e in self.visible_mst)

    def to_dict(self) -> dict:
        return {
            "cursor":          self.cursor,
            "total_steps":     self.total_steps,
            "playing":         self.playing,
            "speed":           self.speed,
            "visible_mst":     [e.to_dict() for e in self.visible_mst],
            "visible_cost":    self.visible_cost,
            "message":         self.message,
            "current_edge_id": self.current_edge_id,
            "decision":        self.current_step.decision if self.current_step else None,
            "is_complete":     self.is_complete,
            "skipped_ids":     list(self.skipped_ids),
        }


StepSource = Union[KruskalResult, Sequence[AlgorithmStep]]


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------
class PlaybackController:
    """
    Attributes:
        scheduler     : Where autoplay actions are queued.
        base_interval : Seconds per step at speed 1.0.
        on_change     : Optional callback(PlaybackView) fired after every change.
    """

    def __init__(
        self,
        scheduler: Optional[TickScheduler] = None,
        base_interval: float = BASE_INTERVAL,
        speed: float = 1.0,
        on_change: Optional[Callable[[PlaybackView], None]] = None,
    ):
        self.scheduler:     TickScheduler = scheduler or TickScheduler()
        self.base_interval: float         = base_interval
        self.on_change:     Optional[Callable[[PlaybackView], None]] = on_change

        self._steps:    Tuple[AlgorithmStep, ...] = ()
        self._cursor:   int                       = 0
        self._playing:  bool                      = False
        self._speed:    float                     = _check_speed(speed)
        self._mst:      Tuple[Edge, ...]          = ()
        self._cost:     float                     = 0
        self._message:  str                       = ""
        self._pending:  Optional[DeferredAction]  = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, run: StepSource) -> None:
        """Attach a freshly generated run and go to the ready state."""
        self._cancel_pending()
        steps = run.steps if isinstance(run, KruskalResult) else run
        self._steps   = tuple(steps)
        self._playing = False
        self._show(None, MSG_LOADED, cursor=0)
        self._notify()
        log.debug("playback: loaded %d steps", len(self._steps))

    def reset(self) -> None:
        self._cancel_pending()
        self._playing = False
        self._show(None, MSG_RESET, cursor=0)
        self._notify()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def step_forward(self) -> bool:
        """Apply the next step.  False (and no change) if already complete."""
        if not self._advance():
            return False
        self._reschedule()
        self._notify()
        return True

    def step_backward(self) -> bool:
        """Undo the last applied step.  False (and no change) if at the start."""
        if self._cursor == 0:
            return False
        cursor = self._cursor - 1
        if cursor == 0:
            self._show(None, MSG_READY, cursor=0)
        else:
            step = self._steps[cursor - 1]
            self._show(step, step.message, cursor=cursor)
        self._reschedule()
        self._notify()
        return True

    def goto(self, cursor: int) -> bool:
        """Jump straight to `cursor`.  False if it is out of range."""
        if not 0 <= cursor <= len(self._steps):
            return False
        if cursor == 0:
            self._show(None, MSG_READY, cursor=0)
        else:
            step = self._steps[cursor - 1]
            self._show(step, step.message, cursor=cursor)
        if self._cursor == len(self._steps):
            self._playing = False
        self._reschedule()
        self._notify()
        return True

    def jump_to_end(self) -> None:
        self.goto(len(self._steps))

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> bool:
        """Start autoplay.  False (playing stays off) if the run is complete."""
        if self._cursor >= len(self._steps):
            self._playing = False
            return False
        if self._playing:
            return True
        self._playing = True
        self._reschedule()
        self._notify()
        return True

    def pause(self) -> None:
        self._cancel_pending()
        if self._playing:
            self._playing = False
            self._notify()

    def toggle_play(self) -> bool:
        """Returns the playing flag after the toggle."""
        if self._playing:
            self.pause()
        else:
            self.play()
        return self._playing

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, multiplier: float) -> None:
        self._speed = _check_speed(multiplier)
        self._reschedule()
        self._notify()

    def set_speed_preset(self, preset: str) -> None:
        if preset not in SPEED_PRESETS:
            raise ValueError(f"Unknown speed preset: {preset!r}")
        self.set_speed(SPEED_PRESETS[preset])

    @property
    def interval(self) -> float:
        """Seconds between autoplay steps at the current speed."""
        return self.base_interval / self._speed

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def steps(self) -> Tuple[AlgorithmStep, ...]:
        return self._steps

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def is_playing(self) -> bool:
        return self._playing

    @property
    def is_complete(self) -> bool:
        return self._cursor == len(self._steps)

    @property
    def visible_mst(self) -> Tuple[Edge, ...]:
        return self._mst

    @property
    def message(self) -> str:
        return self._message

    @property
    def current_step(self) -> Optional[AlgorithmStep]:
        return self._steps[self._cursor - 1] if self._cursor > 0 else None

    @property
    def has_pending(self) -> bool:
        return self._pending is not None and self._pending.pending

    def view(self) -> PlaybackView:
        return PlaybackView(
            cursor=self._cursor,
            total_steps=len(self._steps),
            playing=self._playing,
            speed=self._speed,
            visible_mst=self._mst,
            visible_cost=self._cost,
            message=self._message,
            current_step=self.current_step,
            skipped_ids=tuple(s.edge.id for s in self._steps[:self._cursor] if not s.added),
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _advance(self) -> bool:
        if self._cursor >= len(self._steps):
            return False
        step = self._steps[self._cursor]
        self._show(step, step.message, cursor=self._cursor + 1)
        if self._cursor == len(self._steps) and self._playing:
            self._playing = False
            log.debug("playback: reached end, autoplay stopped")
        return True

    def _show(self, step: Optional[AlgorithmStep], message: str, cursor: int) -> None:
        # visible MST, cost and message always move together
        self._mst     = step.mst if step else ()
        self._cost    = step.cost if step else 0
        self._message = message
        self._cursor  = cursor

    def _on_timer(self) -> None:
        self._pending = None
        if not self._playing:
            return
        self._advance()
        self._reschedule()
        self._notify()

    def _reschedule(self) -> None:
        self._cancel_pending()
        if self._playing and self._cursor < len(self._steps):
            self._pending = self.scheduler.call_later(self.interval, self._on_timer)

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _notify(self) -> None:
        if self.on_change:
            self.on_change(self.view())


def _check_speed(multiplier: float) -> float:
    if isinstance(multiplier, bool) or not isinstance(multiplier, (int, float)):
        raise ValueError(f"Speed must be a number, got {multiplier!r}")
    if not math.isfinite(multiplier) or multiplier <= 0:
        raise ValueError(f"Speed must be positive and finite, got {multiplier!r}")
    return float(multiplier)


def final_view(run: StepSource) -> PlaybackView:
    """The view at the last step of `run`, for reports drawn after the fact."""
    controller = PlaybackController(scheduler=TickScheduler())
    controller.load(run)
    controller.jump_to_end()
    return controller.view()
