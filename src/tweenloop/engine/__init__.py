"""
Tween engine: animation units and the loop that drives them
"""

from .tween import Tween
from .tween_loop import TweenLoop, get_tween_loop, set_tween_loop, tick

__all__ = [
    'Tween',
    'TweenLoop',
    'get_tween_loop',
    'set_tween_loop',
    'tick',
]
