import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional

LOG_DIR = Path(__file__).parent.parent / "logs"
LOG_FILE_NAME = "lineup_builder.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Overrides the level passed to setup_logging()
LOG_LEVEL_ENV = "LINEUP_LOG_LEVEL"


def _resolve_level(log_level: str) -> int:
    name = os.environ.get(LOG_LEVEL_ENV, log_level)
    return getattr(logging, name.upper(), logging.INFO)


def setup_logging(log_level: str = "INFO", log_dir: Optional[Path] = None) -> Optional[Path]:
    """Configure the root logger for the lineup builder command-line tools.

    Adds a rotating file handler (5MB max, 3 backups) that records
    everything down to DEBUG, plus a console handler at *log_level*.
    Calling it again once the root logger has handlers is a no-op.

    Returns:
        Path of the log file, or None if logging was already configured.
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return None

    log_dir = Path(log_dir) if log_dir is not None else LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    level = _resolve_level(log_level)
    root_logger.setLevel(min(level, logging.DEBUG))

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    file_handler = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logging.getLogger(__name__).info(
        "Logging initialized (level=%s, file=%s)", logging.getLevelName(level), log_file
    )
    return log_file
