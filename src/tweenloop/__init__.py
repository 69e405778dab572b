"""
tweenloop - time-based interpolation of numeric fields

Build a Tween for a mapping, give it end values, start it, and call tick()
once per frame:

    from tweenloop import Tween, tick

    ball = {"x": 0, "y": 0}
    Tween(ball).to({"x": 100}, 500).easing("bounce_out").start()

    while tick():
        draw(ball)
"""

from .engine.tween import Tween
from .engine.tween_loop import TweenLoop, get_tween_loop, set_tween_loop, tick
from .managers.config_manager import ConfigManager
from .models.easing import EASINGS, get_easing, linear
from .models.enums import TweenPhase
from .models.tween_config import TweenConfig

__all__ = [
    'Tween',
    'TweenLoop',
    'TweenPhase',
    'TweenConfig',
    'ConfigManager',
    'get_tween_loop',
    'set_tween_loop',
    'tick',
    'EASINGS',
    'get_easing',
    'linear',
]
