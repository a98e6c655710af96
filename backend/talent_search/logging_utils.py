from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict


LOGGER_NAME = "talent_search"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(level)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def log_event(logger: logging.Logger, payload: Dict[str, Any], level: int = logging.INFO) -> None:
    payload["timestamp"] = datetime.now(timezone.utc).isoformat()
    logger.log(level, json.dumps(payload, ensure_ascii=True, default=str))
