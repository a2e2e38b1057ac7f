"""
Logging Configuration
Console (and optional file) output for the 'portfolio3d' namespace. The 3D
stack is kept at WARNING unless debugging, and Python warnings raised by it
are routed through logging.
"""
import logging
import os
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%H:%M:%S'

# Third-party loggers that are chatty at INFO
THIRD_PARTY_LOGGERS = ("pyvista", "pyvistaqt", "py.warnings")


def default_log_path() -> str:
    """~/.portfolio3d/portfolio3d.log"""
    return os.path.join(os.path.expanduser("~"), ".portfolio3d", "portfolio3d.log")


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Args:
        level: Level of the 'portfolio3d' logger and its handlers.
        log_file: Optional path to also write logs to. '~' is expanded and
            missing parent directories are created.
    """
    logger = logging.getLogger("portfolio3d")
    logger.setLevel(level)

    # Re-running setup (e.g. from tests) must not duplicate output
    if logger.hasHandlers():
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_file = os.path.expanduser(log_file)
        directory = os.path.dirname(log_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logging.captureWarnings(True)
    third_party_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(third_party_level)

    logger.info(f"Logging initialized{f' (file: {log_file})' if log_file else ''}.")
