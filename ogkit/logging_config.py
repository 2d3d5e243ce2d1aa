from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        log_path = Path(log_file)
        fallback_path = Path("logs") / "ogkit.log"
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            handler_path = log_path
        except PermissionError:
            fallback_path.parent.mkdir(parents=True, exist_ok=True)
            handler_path = fallback_path
        handlers.append(
            RotatingFileHandler(
                handler_path,
                maxBytes=5 * 1024 * 1024,
                backupCount=5,
            )
        )
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
