"""
conftest.py - shared pytest fixtures

Sample posts, ready-made analysis records and a config/shared store pointing
at a temporary directory.
"""
import json
from pathlib import Path

import pytest

from postsentiment.config import AppConfig, DataConfig, ReportConfig, config_to_shared
from postsentiment.utils.history import SessionHistory
from postsentiment.utils.nlp import analyze, explain

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


# =============================================================================
# Data fixtures
# =============================================================================

@pytest.fixture
def sample_posts():
    """6 raw posts: 2 positive, 3 negative, 1 neutral."""
    with open(FIXTURES_DIR / "sample_posts.json", "r", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def sample_history(sample_posts):
    """Session history holding every sample post (newest first)."""
    history = SessionHistory(max_entries=20)
    for post in sample_posts:
        history.add(post["content"], analyze(post["content"]), explain(post["content"]))
    return history


@pytest.fixture
def sample_records(sample_history):
    """Flat analysis records, newest first."""
    return sample_history.to_records()


# =============================================================================
# Config / shared store
# =============================================================================

@pytest.fixture
def posts_file(tmp_path, sample_posts):
    path = tmp_path / "posts.json"
    path.write_text(json.dumps(sample_posts), encoding="utf-8")
    return path


@pytest.fixture
def tmp_config(tmp_path, posts_file):
    """AppConfig reading the sample posts and writing under tmp_path."""
    return AppConfig(
        data=DataConfig(
            input_path=str(posts_file),
            output_path=str(tmp_path / "out" / "analyzed_posts.json"),
        ),
        report=ReportConfig(report_dir=str(tmp_path / "report")),
    )


@pytest.fixture
def shared(tmp_config):
    return config_to_shared(tmp_config)
