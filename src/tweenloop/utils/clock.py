import time


def now_ms() -> float:
    """Monotonic timestamp in milliseconds (default time source for tween loops)."""
    return time.perf_counter() * 1000.0
