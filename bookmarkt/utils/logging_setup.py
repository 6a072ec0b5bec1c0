"""
Logging configuration for bookmarkt.

This module sets up logging based on configuration settings.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(config=None, log_file: Optional[str] = None) -> None:
    """
    Set up logging configuration.

    Console output goes to stderr because stdout carries the converted
    document.

    Args:
        config: BookmarktConfig object; defaults apply when omitted
        log_file: Optional log file path override
    """
    log_level = "WARNING"
    if config is not None:
        log_level = config.logging.level
        if log_file is None and config.logging.log_file:
            log_file = str(config.logging.log_file)

    handlers = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    handlers.append(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(
        level=getattr(logging, log_level.upper()), handlers=handlers, force=True
    )

    logger = logging.getLogger(__name__)
    logger.debug(f"Log level: {log_level}")
    if log_file:
        logger.info(f"Log file: {log_file}")

    # Reduce noise from the markup libraries
    logging.getLogger("bs4").setLevel(logging.WARNING)
    logging.getLogger("html5lib").setLevel(logging.WARNING)
