import logging
import os

from mojang_api.core.config import get_settings

LOGGER_PREFIX = "mojang_api"


def get_logger(name: str) -> logging.Logger:
    """
    Library logger configured from the environment settings (MOJANG_LOG_*).

    Handlers are attached once and records do not propagate to the root
    logger, so applications that configure root logging see no duplicates.
    """
    settings = get_settings()

    logger = logging.getLogger(f"{LOGGER_PREFIX}.{name}")

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    logger.setLevel(settings.LOG_LEVEL.upper())
    logger.propagate = False

    formatter = logging.Formatter(
        "[%(asctime)s] %(levelname)s | %(name)s | %(message)s"
    )

    if settings.LOG_FILE:
        log_dir = os.path.dirname(settings.LOG_FILE)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(settings.LOG_FILE, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger
