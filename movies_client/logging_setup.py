from __future__ import annotations

import logging

from .settings import get_settings


def configure_logging(level: str | int | None = None) -> None:
    """Basic root logging for scripts. The library itself never calls this."""
    logging.basicConfig(
        level=level or get_settings().LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
