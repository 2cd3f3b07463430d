# Licensed under the Apache License, Version 2.0
import logging
import os
from typing import Optional

# httpx logs every request at INFO; only let it through when debugging
NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(level_name: Optional[str] = None) -> None:
    level_name = (level_name or os.getenv("ARACHNID_SHIELD_LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)
    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    logging.basicConfig(level=level, format=fmt)
    quiet_http_loggers(level)


def quiet_http_loggers(level: int) -> None:
    http_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(http_level)
