# adminbounds/utils.py

import time
from functools import wraps

from loguru import logger


def format_time(seconds: float) -> str:
    """
    Format seconds into 'xh ym zs' as appropriate.
    Show only nonzero components.
    """
    seconds_int = int(seconds)
    ms = int((seconds - seconds_int) * 1000)
    h, rem = divmod(seconds_int, 3600)
    m, s = divmod(rem, 60)
    out = []
    if h > 0:
        out.append(f"{h}h")
    if m > 0:
        out.append(f"{m}m")
    if s > 0 or (h == 0 and m == 0):
        if ms > 0 and seconds < 60:
            out.append(f"{s}.{ms:03d}s")
        else:
            out.append(f"{s}s")
    return " ".join(out)


def format_size(num_bytes: int) -> str:
    """Human readable byte count, e.g. 1536 -> '1.5 KB'."""
    size = float(num_bytes)
    for unit in ["B", "KB", "MB", "GB"]:
        if size < 1024 or unit == "GB":
            if unit == "B":
                return f"{int(size)} B"
            return f"{size:.1f} {unit}"
        size /= 1024


def log_timing(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        elapsed = time.perf_counter() - start
        logger.info("Elapsed time: {}", format_time(elapsed))
        return result

    return wrapper
