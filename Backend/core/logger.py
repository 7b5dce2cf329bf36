# core/logger.py

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from core.config import load_settings

# ──────────────────────────────────────────────────────────────────────────────
# Formatter
# ──────────────────────────────────────────────────────────────────────────────
LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
)

formatter = logging.Formatter(LOG_FORMAT)

ROOT_NAME = "travel_guide"


def _configure(root: logging.Logger) -> None:
    settings = load_settings()
    root.setLevel(settings.log_level)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=5 * 1024 * 1024,   # 5 MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Child of the `travel_guide` logger; handlers are attached only once."""
    root = logging.getLogger(ROOT_NAME)
    # Streamlit re-executes the script on every interaction
    if not root.handlers:
        _configure(root)
    return root.getChild(name)
