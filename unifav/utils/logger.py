"""Structured logging and per-search analytics logging."""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Return a configured logger (creates handler only once per name)."""
    from unifav.utils.config import settings

    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    effective_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    logger.setLevel(effective_level)

    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)

    # Optional file handler
    log_path = Path(settings.log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    fh = logging.FileHandler(log_path, encoding="utf-8")
    fh.setFormatter(logging.Formatter(fmt))
    logger.addHandler(fh)

    return logger


def log_search(
    criteria: Dict[str, str],
    outcome: str,
    result_count: int,
    response_time_ms: float,
    message: Optional[str] = None,
) -> None:
    """Append a single search record to the JSONL analytics file."""
    from unifav.utils.config import settings

    record = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "criteria": criteria,
        "outcome": outcome,
        "result_count": result_count,
        "response_time_ms": round(response_time_ms, 1),
    }
    if message:
        record["message"] = message

    path = Path(settings.analytics_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        f.write(json.dumps(record, ensure_ascii=False) + "\n")
