"""Exec-style health probe for container runtimes (exit 0 when the service answers)."""
from __future__ import annotations

import logging
import os
import sys

import requests

from .config import get_env

DEFAULT_PROBE_PATH = "/health"
DEFAULT_TIMEOUT_SECONDS = 5.0


def probe_url() -> str:
    base = get_env("PROBE_URL", f"http://127.0.0.1:{get_env('PORT', '3000')}")
    path = get_env("PROBE_PATH", DEFAULT_PROBE_PATH)
    if not path.startswith("/"):
        path = f"/{path}"
    return base.rstrip("/") + path


def check_endpoint(url: str, timeout: float) -> bool:
    """Return True when ``url`` answers 200 with a JSON body."""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        logging.warning("Probe request to %s failed: %s", url, exc)
        return False

    if response.status_code != 200:
        logging.warning("Probe %s returned %s: %s", url, response.status_code, response.text)
        return False
    try:
        response.json()
    except ValueError:
        logging.warning("Probe %s returned a non-JSON body", url)
        return False
    return True


def _parse_timeout(raw: str) -> float:
    timeout = float(raw)
    if timeout <= 0:
        raise ValueError(f"timeout must be positive, got {raw!r}")
    return timeout


def main() -> int:
    level = getattr(logging, get_env("LOG_LEVEL", "INFO").upper(), logging.INFO)
    logging.basicConfig(
        level=level if isinstance(level, int) else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stdout,
    )
    url = probe_url()
    raw_timeout = get_env("PROBE_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS))
    try:
        timeout = _parse_timeout(raw_timeout)
    except ValueError as exc:
        logging.error("Invalid PROBE_TIMEOUT %r: %s", raw_timeout, exc)
        return 1
    if check_endpoint(url, timeout):
        logging.info("Probe %s succeeded", url)
        return 0
    return 1


if __name__ == "__main__":
    sys.exit(main())
