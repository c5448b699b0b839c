import datetime as dt
import time

from sample_app import metrics
from sample_app.config import Settings


def test_memory_check_threshold() -> None:
    assert metrics.memory_check(0) == "ok"
    assert metrics.memory_check(metrics.MEMORY_WARNING_BYTES - 1) == "ok"
    assert metrics.memory_check(metrics.MEMORY_WARNING_BYTES) == "warning"


def test_to_megabytes_rounds() -> None:
    assert metrics.to_megabytes(0) == 0
    assert metrics.to_megabytes(1024 * 1024) == 1
    assert metrics.to_megabytes(int(2.6 * 1024 * 1024)) == 3


def test_utc_timestamp_is_iso_with_zulu_suffix() -> None:
    stamp = metrics.utc_timestamp()

    assert stamp.endswith("Z")
    parsed = dt.datetime.fromisoformat(stamp[:-1] + "+00:00")
    assert parsed.tzinfo is not None


def test_uptime_seconds_floors_elapsed_time() -> None:
    settings = Settings(started_monotonic=time.monotonic() - 3.9)

    assert metrics.uptime_seconds(settings) in (3, 4)


def test_uptime_seconds_never_negative() -> None:
    settings = Settings(started_monotonic=time.monotonic() + 60)

    assert metrics.uptime_seconds(settings) == 0


def test_heap_usage_reports_positive_sizes() -> None:
    used, total = metrics.heap_usage()

    assert used > 0
    assert total >= used


def test_collect_process_info_shape() -> None:
    info = metrics.collect_process_info()

    assert info["runtimeVersion"].startswith("v")
    assert info["uptime"].endswith(" seconds")
    assert info["memoryUsage"]["heapUsed"].endswith(" MB")
