"""
Tween Configuration

Reusable value object describing how a tween runs: timing, repetition and
easing. Loaded from YAML presets by ConfigManager, or built in code and
passed to Tween.from_config().
"""

import math
from typing import Union

from tweenloop.models.easing import EaseFunction, resolve_easing

INFINITE = "infinite"


def parse_repeat(value: Union[int, float, str, None]) -> float:
    """
    Normalize a repeat count

    Accepts a non-negative int, math.inf, or the string "infinite".
    None and negative numbers mean "no repeat".
    """
    if value is None:
        return 0
    if isinstance(value, str):
        if value.strip().lower() in (INFINITE, "inf"):
            return math.inf
        value = int(value)
    if math.isinf(value):
        return math.inf
    return max(0, int(value))


class TweenConfig:
    """
    Configuration for a single tween

    Attributes:
        duration_ms: Length of one cycle in milliseconds
        delay_ms: Wait before each cycle starts
        repeat: Extra cycles after the first (math.inf = forever)
        yoyo: Reverse direction on every repeat
        ease_function: Easing curve (t: 0.0-1.0) → factor

    Examples:
        # Quick fade
        fade = TweenConfig(duration_ms=300, ease_function="ease_out_quad")

        # Endless pulse back and forth
        pulse = TweenConfig(duration_ms=600, repeat="infinite", yoyo=True)
    """

    def __init__(
        self,
        duration_ms: float = 1000,
        delay_ms: float = 0,
        repeat: Union[int, float, str, None] = 0,
        yoyo: bool = False,
        ease_function: Union[str, EaseFunction, None] = None
    ):
        self.duration_ms = max(0, duration_ms)
        self.delay_ms = max(0, delay_ms)
        self.repeat = parse_repeat(repeat)
        self.yoyo = bool(yoyo)
        self.ease_function = resolve_easing(ease_function)

    def replace(self, **changes) -> "TweenConfig":
        """Copy of this config with some fields overridden"""
        fields = {
            "duration_ms": self.duration_ms,
            "delay_ms": self.delay_ms,
            "repeat": self.repeat,
            "yoyo": self.yoyo,
            "ease_function": self.ease_function,
        }
        fields.update(changes)
        return TweenConfig(**fields)

    def __eq__(self, other) -> bool:
        if not isinstance(other, TweenConfig):
            return NotImplemented
        return (
            self.duration_ms == other.duration_ms
            and self.delay_ms == other.delay_ms
            and self.repeat == other.repeat
            and self.yoyo == other.yoyo
            and self.ease_function is other.ease_function
        )

    def __repr__(self):
        repeat = INFINITE if math.isinf(self.repeat) else self.repeat
        yoyo = ", yoyo" if self.yoyo else ""
        ease = getattr(self.ease_function, "__name__", repr(self.ease_function))
        return (f"TweenConfig({self.duration_ms}ms, delay={self.delay_ms}ms, "
                f"repeat={repeat}{yoyo}, {ease})")


DEFAULT_CONFIG = TweenConfig()
