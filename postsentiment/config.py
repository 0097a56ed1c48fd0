"""
Configuration loader and shared-store builder.

Uses a YAML file as the single source of truth for runtime settings.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Optional
import os

import yaml

from postsentiment.utils.log import LOG_LEVELS
from postsentiment.utils.path_manager import PathManager


@dataclass
class DataConfig:
    input_path: str = "data/posts.json"
    output_path: str = "data/analyzed_posts.json"
    text_field: str = "content"


@dataclass
class HistoryConfig:
    max_entries: int = 20


@dataclass
class InputConfig:
    max_chars: int = 280


@dataclass
class ReportConfig:
    report_dir: Optional[str] = None
    chart_format: str = "png"
    dpi: int = 150


@dataclass
class LoggingConfig:
    level: str = "INFO"


@dataclass
class AppConfig:
    data: DataConfig = field(default_factory=DataConfig)
    history: HistoryConfig = field(default_factory=HistoryConfig)
    input: InputConfig = field(default_factory=InputConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


VALID_CHART_FORMATS = {"png", "svg", "pdf", "jpg"}


def load_config(path: str) -> AppConfig:
    """Load YAML configuration into AppConfig."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ValueError(f"Config root must be a mapping: {path}")

    sections = {f.name: f.default_factory for f in fields(AppConfig)}
    unknown = sorted(str(key) for key in set(raw) - set(sections))
    if unknown:
        raise ValueError(f"Unknown config section(s): {', '.join(unknown)}")

    return AppConfig(**{name: _load_section(name, cls, raw.get(name)) for name, cls in sections.items()})


def _load_section(name: str, cls: Any, raw: Any) -> Any:
    if raw is None:
        return cls()
    if not isinstance(raw, dict):
        raise ValueError(f"Config section '{name}' must be a mapping")
    known = {f.name for f in fields(cls)}
    unknown = sorted(str(key) for key in set(raw) - known)
    if unknown:
        keys = ", ".join(f"{name}.{key}" for key in unknown)
        raise ValueError(f"Unknown config key(s): {keys}")
    return cls(**raw)


def validate_config(config: AppConfig) -> None:
    """Validate configuration constraints."""
    if not str(config.data.input_path).strip():
        raise ValueError("data.input_path cannot be empty")
    if not str(config.data.output_path).strip():
        raise ValueError("data.output_path cannot be empty")
    if not str(config.data.text_field).strip():
        raise ValueError("data.text_field cannot be empty")
    if int(config.history.max_entries) <= 0:
        raise ValueError("history.max_entries must be >= 1")
    if int(config.input.max_chars) <= 0:
        raise ValueError("input.max_chars must be >= 1")
    if config.report.chart_format not in VALID_CHART_FORMATS:
        raise ValueError(f"Invalid report.chart_format: {config.report.chart_format}")
    if int(config.report.dpi) <= 0:
        raise ValueError("report.dpi must be >= 1")
    if str(config.logging.level).upper() not in LOG_LEVELS:
        raise ValueError(f"Invalid logging.level: {config.logging.level}")


def config_to_shared(config: AppConfig) -> dict:
    """Convert AppConfig into the shared store structure used by nodes."""
    paths = PathManager(report_dir=config.report.report_dir)

    return {
        "data": {
            "posts": [],
            "records": [],
            "data_paths": {
                "input_path": config.data.input_path,
                "output_path": config.data.output_path,
            },
        },
        "config": {
            "text_field": config.data.text_field,
            "max_chars": int(config.input.max_chars),
            "report": {
                "report_dir": str(paths.report_dir),
                "images_dir": str(paths.images_dir),
                "stats_path": str(paths.report_file("sentiment_stats.json")),
                "chart_format": config.report.chart_format,
                "dpi": int(config.report.dpi),
            },
        },
        "results": {
            "statistics": {},
            "timeline": {},
            "charts": [],
            "chart_errors": [],
            "data_save": {
                "saved": False,
                "output_path": "",
                "data_count": 0,
            },
        },
        "monitor": {
            "start_time": "",
            "current_node": "",
            "execution_log": [],
            "error_log": [],
            "durations": {},
            "node_started": {},
        },
    }
