"""
Models for tweenloop
"""

from .enums import TweenPhase, LogLevel, LogCategory
from .tween_config import TweenConfig

__all__ = [
    'TweenPhase',
    'LogLevel',
    'LogCategory',
    'TweenConfig',
]
