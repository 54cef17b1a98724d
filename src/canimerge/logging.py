from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

LOG_PATH = Path("~/.canimerge/canimerge.log").expanduser()


def setup_logger(debug: bool = False) -> logging.Logger:
    """File logger for run history; console output never goes through it."""
    logger = logging.getLogger("canimerge")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if logger.handlers:
        return logger
    LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(LOG_PATH)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def log_event(logger: logging.Logger, event: str, data: Dict[str, Any]) -> None:
    logger.info("%s %s", event, json.dumps(data, default=str, sort_keys=True))
