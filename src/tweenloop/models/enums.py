"""
Enums for the tween state machine and logging
"""

from enum import Enum, auto


class TweenPhase(Enum):
    """
    Lifecycle phases of a single Tween

    IDLE: constructed, never started
    DELAYING: started, waiting for activation time (start time + delay)
    RUNNING: interpolating fields
    COMPLETED: finished all cycles (terminal until restarted)
    STOPPED: cancelled with stop() (terminal until restarted)
    """
    IDLE = auto()
    DELAYING = auto()
    RUNNING = auto()
    COMPLETED = auto()
    STOPPED = auto()


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, presets
    TWEEN = auto()       # Tween start/stop/repeat/complete
    LOOP = auto()        # Active set registration
    EASING = auto()      # Easing lookup and fallbacks
