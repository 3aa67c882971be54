"""Logging setup for scripts that drive the engine.

Library modules only create loggers; handlers are attached here, on request.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    name: str = "astro_engine",
    level: str = "INFO",
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Configure a logger with a console handler and an optional rotating file.

    Args:
        name: Logger name (the package logger covers every module)
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path for a rotating log file

    Returns:
        The configured logger
    """
    numeric = getattr(logging, level.upper(), logging.INFO)
    logger = logging.getLogger(name)
    logger.setLevel(numeric)

    formatter = logging.Formatter(LOG_FORMAT)

    # calling twice must not duplicate console output
    if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
               for h in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)
    for h in logger.handlers:
        h.setLevel(numeric)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10485760,  # 10MB
            backupCount=5,
        )
        file_handler.setLevel(numeric)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
