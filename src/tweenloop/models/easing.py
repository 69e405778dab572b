"""
Easing Functions

An easing function maps normalized progress to shaped progress:

    ease(t: 0.0-1.0) -> factor

Boundaries are stable (ease(0) == 0, ease(1) == 1). Elastic curves
overshoot the [0, 1] range in between, which is intended. Input outside
[0, 1] is undefined; Tween always clamps before calling.

Curves are registered by name in EASINGS so configuration files can pick
them as strings ("ease_out_quad", "bounce_in_out", ...).
"""

import math
from typing import Callable, Dict, Optional, Union

from tweenloop.models.enums import LogCategory
from tweenloop.utils.logger import get_category_logger

log = get_category_logger(LogCategory.EASING)

EaseFunction = Callable[[float], float]


def linear(t: float) -> float:
    """
    Linear easing (constant speed)

    Args:
        t: Progress (0.0 = start, 1.0 = end)

    Returns:
        Factor (0.0 to 1.0)
    """
    return t


def ease_in_quad(t: float) -> float:
    """Quadratic ease-in (slow start → fast end)"""
    return t * t


def ease_out_quad(t: float) -> float:
    """Quadratic ease-out (fast start → slow end)"""
    return 1 - (1 - t) * (1 - t)


def ease_in_out_quad(t: float) -> float:
    """Quadratic ease-in-out (slow start → fast middle → slow end)"""
    return 2 * t * t if t < 0.5 else 1 - (-2 * t + 2) ** 2 / 2


def ease_in_cubic(t: float) -> float:
    """Cubic ease-in (very slow start)"""
    return t * t * t


def ease_out_cubic(t: float) -> float:
    """Cubic ease-out (very slow end)"""
    return 1 - (1 - t) ** 3


def ease_in_out_cubic(t: float) -> float:
    """Cubic ease-in-out (very smooth acceleration/deceleration)"""
    return 4 * t ** 3 if t < 0.5 else 1 - (-2 * t + 2) ** 3 / 2


# === Exponential ===

def exponential_in(t: float) -> float:
    return 0.0 if t == 0 else 1024 ** (t - 1)


def exponential_out(t: float) -> float:
    return 1.0 if t == 1 else 1 - 2 ** (-10 * t)


def exponential_in_out(t: float) -> float:
    """Exponential ease-in-out, exact at both ends"""
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    t *= 2
    if t < 1:
        return 0.5 * 1024 ** (t - 1)
    return 0.5 * (-(2 ** (-10 * (t - 1))) + 2)


# === Elastic ===
# Amplitude 1, period 0.4 -> phase shift s = period / 4

ELASTIC_PERIOD = 0.4
_ELASTIC_SHIFT = ELASTIC_PERIOD / 4


def elastic_in(t: float) -> float:
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    t -= 1
    return -(2 ** (10 * t)) * math.sin((t - _ELASTIC_SHIFT) * (2 * math.pi) / ELASTIC_PERIOD)


def elastic_out(t: float) -> float:
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    return 2 ** (-10 * t) * math.sin((t - _ELASTIC_SHIFT) * (2 * math.pi) / ELASTIC_PERIOD) + 1


def elastic_in_out(t: float) -> float:
    """Elastic ease-in-out (springy overshoot on both sides of the midpoint)"""
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    t = t * 2 - 1
    wave = math.sin((t - _ELASTIC_SHIFT) * (2 * math.pi) / ELASTIC_PERIOD)
    if t < 0:
        return -0.5 * 2 ** (10 * t) * wave
    return 0.5 * 2 ** (-10 * t) * wave + 1


# === Bounce ===

def bounce_out(t: float) -> float:
    """Bounce ease-out (ball dropped on the floor)"""
    n1, d1 = 7.5625, 2.75
    if t < 1 / d1:
        return n1 * t * t
    if t < 2 / d1:
        t -= 1.5 / d1
        return n1 * t * t + 0.75
    if t < 2.5 / d1:
        t -= 2.25 / d1
        return n1 * t * t + 0.9375
    t -= 2.625 / d1
    return n1 * t * t + 0.984375


def bounce_in(t: float) -> float:
    return 1 - bounce_out(1 - t)


def bounce_in_out(t: float) -> float:
    if t < 0.5:
        return bounce_in(t * 2) * 0.5
    return bounce_out(t * 2 - 1) * 0.5 + 0.5


EASINGS: Dict[str, EaseFunction] = {
    "linear": linear,
    "ease_in_quad": ease_in_quad,
    "ease_out_quad": ease_out_quad,
    "ease_in_out_quad": ease_in_out_quad,
    "ease_in_cubic": ease_in_cubic,
    "ease_out_cubic": ease_out_cubic,
    "ease_in_out_cubic": ease_in_out_cubic,
    "exponential_in": exponential_in,
    "exponential_out": exponential_out,
    "exponential_in_out": exponential_in_out,
    "elastic_in": elastic_in,
    "elastic_out": elastic_out,
    "elastic_in_out": elastic_in_out,
    "bounce_in": bounce_in,
    "bounce_out": bounce_out,
    "bounce_in_out": bounce_in_out,
}


def get_easing(name: str) -> EaseFunction:
    """
    Look up a registered easing curve by name

    Raises:
        KeyError: if no curve is registered under that name
    """
    try:
        return EASINGS[name]
    except KeyError:
        raise KeyError(f"Unknown easing function: {name!r}") from None


def resolve_easing(
    easing: Union[str, EaseFunction, None],
    default: EaseFunction = linear
) -> EaseFunction:
    """
    Turn a name, callable or None into an easing callable

    Unknown names are logged and replaced with the default curve, so a
    typo in a config file degrades to linear motion instead of crashing.
    """
    if easing is None:
        return default
    if callable(easing):
        return easing
    curve: Optional[EaseFunction] = EASINGS.get(easing)
    if curve is None:
        log.warn(f"Unknown easing '{easing}', falling back to {default.__name__}",
                 available=", ".join(sorted(EASINGS)))
        return default
    return curve
