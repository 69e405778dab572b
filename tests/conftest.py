import pytest

from tweenloop.engine.tween_loop import TweenLoop, set_tween_loop
from tweenloop.utils.logger import get_logger, configure_logger


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, start: float = 0.0):
        self.time = start

    def __call__(self) -> float:
        return self.time

    def advance(self, ms: float) -> float:
        self.time += ms
        return self.time


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def loop(clock):
    """Isolated loop driven by the fake clock."""
    return TweenLoop(clock=clock)


@pytest.fixture(autouse=True)
def default_loop(clock):
    """
    Fresh default loop per test, so tweens started without an explicit
    loop never leak between tests.
    """
    fresh = TweenLoop(clock=clock)
    previous = set_tween_loop(fresh)
    yield fresh
    set_tween_loop(previous)


@pytest.fixture(autouse=True)
def restore_logger():
    logger = get_logger()
    level, colors = logger.min_level, logger.use_colors
    yield logger
    configure_logger(level, colors)


class CallRecorder(list):
    """Records callback invocations as (name, snapshot of target)."""

    def make(self, name):
        def callback(target):
            self.append((name, dict(target)))
        return callback

    def names(self):
        return [name for name, _ in self]


@pytest.fixture
def calls():
    return CallRecorder()
