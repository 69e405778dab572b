"""
Tween Loop

Owns the set of running tweens and advances all of them from one call.

The loop never schedules anything itself: the caller invokes tick() as
often as it renders (once per frame is typical). Tweens add themselves in
start() and leave on stop() or when they finish.

Example:
    loop = TweenLoop()
    Tween(ball, loop=loop).to({"y": 300}, 800).start()

    while loop.tick():
        render(ball)

A process-wide default loop backs the module-level helpers, so tweens
created without an explicit loop share one active set:

    Tween(ball).to({"y": 300}).start()
    tick()
"""

from typing import Callable, List, Optional, Tuple, TYPE_CHECKING

from tweenloop.models.enums import LogCategory
from tweenloop.utils.clock import now_ms
from tweenloop.utils.logger import get_category_logger

if TYPE_CHECKING:
    from tweenloop.engine.tween import Tween

log = get_category_logger(LogCategory.LOOP)

Clock = Callable[[], float]


class TweenLoop:
    """
    Active set of tweens

    Args:
        clock: Time source in milliseconds, used whenever tick() or
            Tween.start() get no explicit time (default: now_ms)
    """

    def __init__(self, clock: Optional[Clock] = None):
        self._tweens: List["Tween"] = []
        self._clock: Clock = clock or now_ms

    def now(self) -> float:
        """Current time from the loop's clock"""
        return self._clock()

    @property
    def tweens(self) -> Tuple["Tween", ...]:
        """Snapshot of live tweens in tick order"""
        return tuple(self._tweens)

    def __len__(self) -> int:
        return len(self._tweens)

    def __contains__(self, tween: "Tween") -> bool:
        return any(t is tween for t in self._tweens)

    def add(self, tween: "Tween") -> None:
        """Register a tween; adding one that is already live is a no-op"""
        if tween in self:
            return
        self._tweens.append(tween)
        log.debug("Tween added", live=len(self._tweens))

    def remove(self, tween: "Tween") -> None:
        """Unregister a tween; no-op if it is not live"""
        for index, live in enumerate(self._tweens):
            if live is tween:
                del self._tweens[index]
                log.debug("Tween removed", live=len(self._tweens))
                return

    def tick(self, time: Optional[float] = None) -> bool:
        """
        Advance every live tween

        Tweens that report completion are removed in the same pass.
        Tweens removed by a callback during the pass are skipped; tweens
        added during the pass are first advanced on the next tick.

        Args:
            time: Current time in ms; defaults to the loop's clock

        Returns:
            False if there was nothing to advance, True otherwise
            (even if every tween finished on this tick)
        """
        if not self._tweens:
            return False

        now = self.now() if time is None else time

        for tween in tuple(self._tweens):
            if tween not in self:
                continue
            if not tween.advance(now):
                self.remove(tween)

        return True

    def stop_all(self) -> None:
        """Stop every live tween (fires their on_stop callbacks)"""
        for tween in tuple(self._tweens):
            tween.stop()
        # Entries added with add() but never started are not playing; drop them too
        self._tweens.clear()

    def __enter__(self) -> "TweenLoop":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop_all()

    def __repr__(self):
        return f"TweenLoop(live={len(self._tweens)})"


# === Default loop ===
_default_loop = TweenLoop()


def get_tween_loop() -> TweenLoop:
    """Return the process-wide default loop"""
    return _default_loop


def set_tween_loop(loop: TweenLoop) -> TweenLoop:
    """
    Replace the default loop

    Returns the previous default so callers (and tests) can restore it.
    Tweens already started keep the loop they registered with.
    """
    global _default_loop
    previous = _default_loop
    _default_loop = loop
    return previous


def tick(time: Optional[float] = None) -> bool:
    """Advance the default loop (see TweenLoop.tick)"""
    return _default_loop.tick(time)
