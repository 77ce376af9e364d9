import time


def throttle(duration_ms: int):
    """Sleep a fixed number of milliseconds; no jitter"""
    if duration_ms > 0:
        time.sleep(duration_ms / 1000)
