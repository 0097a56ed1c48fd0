"""
Report output locations (stats JSON, chart images).

When no report directory is configured, ``REPORT_DIR`` in the environment
is used before the ``report`` default.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union


REPORT_DIR_ENV = "REPORT_DIR"
DEFAULT_REPORT_DIR = "report"
IMAGES_SUBDIR = "images"


class PathManager:
    """Resolves the report directory against a base directory (cwd by default)."""

    def __init__(self, base_dir: Optional[str] = None, report_dir: Optional[str] = None):
        self.base_dir = Path(base_dir or os.getcwd()).resolve()
        report = Path(report_dir or os.environ.get(REPORT_DIR_ENV) or DEFAULT_REPORT_DIR)
        self.report_dir = report if report.is_absolute() else self.base_dir / report

    @property
    def images_dir(self) -> Path:
        return self.report_dir / IMAGES_SUBDIR

    def report_file(self, filename: str) -> Path:
        return self.report_dir / filename


def ensure_dir(path: Union[str, Path]) -> str:
    """Create ``path`` (and parents) if needed and return it as a string."""
    Path(path).mkdir(parents=True, exist_ok=True)
    return str(path)
