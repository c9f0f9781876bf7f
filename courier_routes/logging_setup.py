from __future__ import annotations
import logging
from pathlib import Path
from datetime import datetime

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(
    run: str = "app",
    log_dir: Path | str = "data/out",
    level: str = "INFO",
    name: str = "courier_routes",
) -> logging.Logger:
    """
    Configures the courier_routes logger for one run of the Flask app or a
    pipeline script. Records from every courier_routes.* module go to the
    console and to <log_dir>/<run>_<timestamp>.log, so the admin edits of
    a day and each sync/resolve batch end up in their own files.
    """
    out_dir = Path(log_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    log_path = out_dir / f"{run}_{datetime.now():%Y%m%d_%H%M%S}.log"

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.handlers.clear()
    logger.propagate = False

    fmt = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    for handler in (logging.StreamHandler(), logging.FileHandler(log_path, encoding="utf-8")):
        handler.setFormatter(fmt)
        logger.addHandler(handler)

    logger.info(f"{run}: logging to {log_path}")
    return logger
