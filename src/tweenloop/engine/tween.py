"""
Tween

Interpolates numeric fields of a caller-owned mapping from their current
values to target values over time, shaped by an easing curve.

Lifecycle:
    IDLE -- start() --> DELAYING -- activation time --> RUNNING
    RUNNING -- cycle done, repeats left --> DELAYING / RUNNING
    RUNNING -- cycle done, no repeats --> COMPLETED
    DELAYING / RUNNING -- stop() --> STOPPED

A tween does not keep time by itself. Once started it registers with a
TweenLoop and is driven by TweenLoop.tick(), which calls advance() with
the current time in milliseconds.

Example:
    sprite = {"x": 0.0, "alpha": 1.0}

    Tween(sprite).to({"x": 100, "alpha": 0}, 500) \\
        .easing("ease_out_quad") \\
        .on_complete(lambda obj: print("done", obj)) \\
        .start()

    # once per frame
    tick()
"""

import math
from typing import Callable, Dict, MutableMapping, Optional, Union

from tweenloop.engine.tween_loop import TweenLoop, get_tween_loop
from tweenloop.models.easing import EaseFunction, linear, resolve_easing
from tweenloop.models.enums import LogCategory, TweenPhase
from tweenloop.models.tween_config import TweenConfig, parse_repeat
from tweenloop.utils.logger import get_category_logger
from tweenloop.utils.numeric import coerce_or_zero, parse_float, to_number

log = get_category_logger(LogCategory.TWEEN)

Target = MutableMapping[str, float]
TweenCallback = Callable[[Target], None]


class Tween:
    """
    Animation unit for one target mapping

    Args:
        target: Mapping of field name → number, mutated in place
        duration_ms: Length of one cycle (default 1000); negative values clamp to 0
        repeat: Extra cycles after the first; math.inf or "infinite" loops forever
        delay_ms: Wait before the first cycle and before every repeat
        yoyo: Reverse direction on every repeat
        ease_function: Easing callable or registered name (default linear)
        on_start / on_update / on_complete / on_stop: Optional callbacks,
            each called with the target mapping
        loop: TweenLoop to register with; None means the default loop
    """

    def __init__(
        self,
        target: Target,
        duration_ms: float = 1000,
        repeat: Union[int, float, str] = 0,
        delay_ms: float = 0,
        yoyo: bool = False,
        ease_function: Union[str, EaseFunction, None] = linear,
        on_start: Optional[TweenCallback] = None,
        on_update: Optional[TweenCallback] = None,
        on_complete: Optional[TweenCallback] = None,
        on_stop: Optional[TweenCallback] = None,
        loop: Optional[TweenLoop] = None
    ):
        self._target = target
        self._duration_ms = max(0, duration_ms)
        self._repeat = parse_repeat(repeat)
        self._delay_ms = max(0, delay_ms)
        self._yoyo = yoyo
        self._ease_function = resolve_easing(ease_function)

        self._on_start = on_start
        self._on_update = on_update
        self._on_complete = on_complete
        self._on_stop = on_stop

        self._loop = loop
        self._active_loop: Optional[TweenLoop] = None

        self._values_start: Dict[str, float] = {}
        self._values_start_repeat: Dict[str, float] = {}
        self._values_end: Dict[str, float] = {}

        # Fallback start values for fields that disappear before start()
        self._values_initial: Dict[str, float] = {
            field: parse_float(value) for field, value in target.items()
        }

        self._phase = TweenPhase.IDLE
        self._reversed = False
        self._start_time = 0.0
        self._on_start_fired = False

    @classmethod
    def from_config(
        cls,
        target: Target,
        config: TweenConfig,
        loop: Optional[TweenLoop] = None
    ) -> "Tween":
        """Build a tween whose timing and easing come from a TweenConfig"""
        return cls(
            target,
            duration_ms=config.duration_ms,
            repeat=config.repeat,
            delay_ms=config.delay_ms,
            yoyo=config.yoyo,
            ease_function=config.ease_function,
            loop=loop,
        )

    # ------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------

    @property
    def target(self) -> Target:
        return self._target

    @property
    def phase(self) -> TweenPhase:
        return self._phase

    @property
    def is_playing(self) -> bool:
        return self._phase in (TweenPhase.DELAYING, TweenPhase.RUNNING)

    @property
    def is_reversed(self) -> bool:
        """True while a yoyo tween is running back towards its original values"""
        return self._reversed

    @property
    def duration_ms(self) -> float:
        return self._duration_ms

    @property
    def delay_ms(self) -> float:
        return self._delay_ms

    @property
    def repeats_remaining(self) -> float:
        return self._repeat

    @property
    def is_yoyo(self) -> bool:
        return self._yoyo

    @property
    def ease_function(self) -> EaseFunction:
        return self._ease_function

    @property
    def activation_time(self) -> float:
        return self._start_time

    @property
    def start_values(self) -> Dict[str, float]:
        return dict(self._values_start)

    @property
    def end_values(self) -> Dict[str, float]:
        return dict(self._values_end)

    # ------------------------------------------------------------
    # Fluent configuration
    # ------------------------------------------------------------

    def to(self, properties: Dict[str, object], duration_ms: Optional[float] = None) -> "Tween":
        """
        Set the end values (and optionally the duration)

        Values are coerced to float once, here. Non-numeric values become
        NaN and will be written to the target as NaN.

        Calling this while the tween runs retargets it from the next tick.
        """
        if duration_ms is not None:
            self._duration_ms = max(0, duration_ms)
        self._values_end = {field: to_number(value) for field, value in properties.items()}
        return self

    def duration(self, ms: float) -> "Tween":
        self._duration_ms = max(0, ms)
        return self

    def delay(self, ms: float) -> "Tween":
        self._delay_ms = max(0, ms)
        return self

    def repeat(self, times: Union[int, float, str]) -> "Tween":
        self._repeat = parse_repeat(times)
        return self

    def yoyo(self, enabled: bool = True) -> "Tween":
        self._yoyo = enabled
        return self

    def easing(self, ease_function: Union[str, EaseFunction]) -> "Tween":
        self._ease_function = resolve_easing(ease_function)
        return self

    def on_start(self, callback: TweenCallback) -> "Tween":
        self._on_start = callback
        return self

    def on_update(self, callback: TweenCallback) -> "Tween":
        self._on_update = callback
        return self

    def on_complete(self, callback: TweenCallback) -> "Tween":
        self._on_complete = callback
        return self

    def on_stop(self, callback: TweenCallback) -> "Tween":
        self._on_stop = callback
        return self

    # ------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------

    def start(self, time: Optional[float] = None) -> "Tween":
        """
        Capture current values and register with the loop

        Args:
            time: Start time in ms; defaults to the loop's clock

        Starting a tween that is already playing restarts it from the
        current target values.
        """
        loop = self._resolve_loop()
        if self._active_loop is not None and self._active_loop is not loop:
            self._active_loop.remove(self)
        self._active_loop = loop

        now = loop.now() if time is None else time

        self._values_start = {}
        for field in self._values_end:
            current = self._target.get(field, self._values_initial.get(field))
            self._values_start[field] = coerce_or_zero(current)
        self._values_start_repeat = dict(self._values_start)

        self._on_start_fired = False
        self._start_time = now + self._delay_ms
        self._phase = TweenPhase.DELAYING if self._delay_ms > 0 else TweenPhase.RUNNING

        loop.add(self)

        log.debug("Tween started",
                  fields=list(self._values_end),
                  activation_ms=self._start_time,
                  duration_ms=self._duration_ms)
        return self

    def stop(self) -> "Tween":
        """
        Cancel a playing tween

        Fields keep whatever value was applied last. No-op (and no
        on_stop) when the tween is not playing.
        """
        if not self.is_playing:
            return self

        if self._active_loop is not None:
            self._active_loop.remove(self)
        self._phase = TweenPhase.STOPPED

        log.debug("Tween stopped", fields=list(self._values_end))
        self._fire("on_stop", self._on_stop)
        return self

    def advance(self, time: float) -> bool:
        """
        Apply the interpolated values for the given time

        Returns:
            True while the tween should stay in the loop, False once it
            has finished (or is not playing at all).
        """
        if not self.is_playing:
            return False

        if time < self._start_time:
            self._phase = TweenPhase.DELAYING
            return True

        self._phase = TweenPhase.RUNNING

        if not self._on_start_fired:
            self._on_start_fired = True
            self._fire("on_start", self._on_start)
            if not self.is_playing:
                return False

        elapsed = self._elapsed_fraction(time)
        value = self._ease_function(elapsed)

        for field, end in self._values_end.items():
            start = self._values_start.get(field, 0.0)
            self._target[field] = start + (end - start) * value

        self._fire("on_update", self._on_update)

        if not self.is_playing:
            # stopped from inside a callback
            return False

        if elapsed < 1:
            return True

        if self._repeat > 0:
            self._begin_repeat(time)
            return True

        self._phase = TweenPhase.COMPLETED
        log.debug("Tween completed", fields=list(self._values_end))
        self._fire("on_complete", self._on_complete)
        # on_complete may have restarted the tween
        return self.is_playing

    # ------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------

    def _resolve_loop(self) -> TweenLoop:
        if self._loop is not None:
            return self._loop
        return get_tween_loop()

    def _elapsed_fraction(self, time: float) -> float:
        if self._duration_ms <= 0:
            return 1.0
        return min(max((time - self._start_time) / self._duration_ms, 0.0), 1.0)

    def _begin_repeat(self, time: float):
        if not math.isinf(self._repeat):
            self._repeat -= 1

        for field in self._values_start_repeat:
            if self._yoyo:
                previous_start = self._values_start_repeat[field]
                self._values_start_repeat[field] = self._values_end.get(field, 0.0)
                self._values_end[field] = previous_start
            self._values_start[field] = self._values_start_repeat[field]

        if self._yoyo:
            self._reversed = not self._reversed

        self._start_time = time + self._delay_ms
        if self._delay_ms > 0:
            self._phase = TweenPhase.DELAYING

        log.debug("Tween repeating",
                  repeats_left=self._repeat,
                  reversed=self._reversed)

    def _fire(self, name: str, callback: Optional[TweenCallback]):
        """Invoke a lifecycle callback; a failing callback never breaks the tick"""
        if callback is None:
            return
        try:
            callback(self._target)
        except Exception as e:
            log.error(f"Tween callback failed: {name}", exception=repr(e))

    def __repr__(self):
        return (f"Tween({self._phase.name}, fields={list(self._values_end)}, "
                f"{self._duration_ms}ms)")
