"""
Logging setup shared by the CLI and the dashboard.
"""
from __future__ import annotations

import logging


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger once; later calls only adjust the level."""
    level_name = str(level).upper()
    if level_name not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {level}")
    logging.basicConfig(level=level_name, format=LOG_FORMAT)
    logging.getLogger().setLevel(level_name)
