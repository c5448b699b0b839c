"""Helpers for collecting host and process metrics."""
from __future__ import annotations

import datetime as dt
import math
import os
import platform
import socket
import sys
import time
from typing import Any, Dict, Tuple

import psutil

from .config import Settings

MEMORY_WARNING_BYTES = 100 * 1024 * 1024
_BYTES_PER_MB = 1024 * 1024


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision, e.g. 2024-01-01T00:00:00.000Z."""
    now = dt.datetime.now(dt.timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def uptime_seconds(settings: Settings) -> int:
    elapsed = time.monotonic() - settings.started_monotonic
    return max(0, math.floor(elapsed))


def heap_usage() -> Tuple[int, int]:
    """Return (used, total) bytes for this process: resident and virtual size."""
    info = psutil.Process(os.getpid()).memory_info()
    return info.rss, info.vms


def memory_check(used_bytes: int) -> str:
    return "ok" if used_bytes < MEMORY_WARNING_BYTES else "warning"


def to_megabytes(num_bytes: float) -> int:
    return int(round(num_bytes / _BYTES_PER_MB))


def _as_megabytes_label(num_bytes: float) -> str:
    return f"{to_megabytes(num_bytes)} MB"


def hostname() -> str:
    return socket.gethostname()


def runtime_version() -> str:
    return f"v{platform.python_version()}"


def runtime_platform() -> str:
    return sys.platform


def process_uptime_seconds() -> int:
    created = psutil.Process(os.getpid()).create_time()
    return max(0, int(time.time() - created))


def collect_system_info() -> Dict[str, Any]:
    """Gather hostname, platform, CPU count and memory figures from the host."""
    memory = psutil.virtual_memory()
    return {
        "hostname": hostname(),
        "platform": runtime_platform(),
        "architecture": platform.machine(),
        "cpus": psutil.cpu_count(logical=True) or 0,
        "totalMemory": _as_megabytes_label(memory.total),
        "freeMemory": _as_megabytes_label(memory.available),
    }


def collect_process_info() -> Dict[str, Any]:
    used, total = heap_usage()
    return {
        "runtimeVersion": runtime_version(),
        "pid": os.getpid(),
        "uptime": f"{process_uptime_seconds()} seconds",
        "memoryUsage": {
            "heapUsed": _as_megabytes_label(used),
            "heapTotal": _as_megabytes_label(total),
        },
    }
