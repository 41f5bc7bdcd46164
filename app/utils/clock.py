import time


def current_millis() -> int:
    """
    Current wall-clock time in milliseconds since the Unix epoch.
    """
    return time.time_ns() // 1_000_000
