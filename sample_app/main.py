"""CLI entrypoint for launching the FastAPI service with Uvicorn."""
from __future__ import annotations

import logging
import os
import signal
import sys
from typing import List

import uvicorn
from uvicorn.config import LOG_LEVELS

from . import metrics
from .api import ACCESS_LOGGER_NAME, ENDPOINTS, create_app
from .config import Settings, get_settings

lifecycle_logger = logging.getLogger("sample_app.lifecycle")

# Service output that LOG_LEVEL must not silence.
PINNED_LOGGERS = (ACCESS_LOGGER_NAME, lifecycle_logger.name)

BANNER_RULE = "=" * 40


def configure_logging(level: str) -> None:
    numeric_level = LOG_LEVELS.get(level.lower(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger().setLevel(numeric_level)
    for name in PINNED_LOGGERS:
        logging.getLogger(name).setLevel(logging.INFO)


def render_banner(settings: Settings) -> List[str]:
    lines = [
        BANNER_RULE,
        "Server started successfully!",
        f"Version: {settings.version}",
        f"Environment: {settings.environment}",
        f"Listening on: http://{settings.host}:{settings.port}",
        f"Hostname: {metrics.hostname()}",
        BANNER_RULE,
        "Available endpoints:",
    ]
    lines.extend(f"  GET  {path:<11}- {description}" for path, description in ENDPOINTS)
    lines.append(BANNER_RULE)
    return lines


class AppServer(uvicorn.Server):
    """Uvicorn server that prints a banner once bound and exits at once on a signal."""

    def __init__(self, config: uvicorn.Config, settings: Settings) -> None:
        super().__init__(config)
        self.settings = settings

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            for line in render_banner(self.settings):
                lifecycle_logger.info(line)

    def handle_exit(self, sig: int, frame) -> None:
        lifecycle_logger.info("%s signal received: closing HTTP server", signal.Signals(sig).name)
        for handler in logging.getLogger().handlers:
            handler.flush()
        sys.stdout.flush()
        os._exit(0)


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)

    config = uvicorn.Config(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        access_log=False,
    )
    AppServer(config, settings).run()


if __name__ == "__main__":
    main()
