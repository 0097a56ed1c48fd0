"""
Tests for post loading and result saving.
"""
import json

import pytest

from postsentiment.utils.data_loader import load_posts, save_analyzed_posts, save_json


def test_load_posts(posts_file):
    posts = load_posts(str(posts_file))
    assert len(posts) == 6
    assert posts[0]["content"].startswith("I absolutely love")


def test_load_posts_wraps_strings(tmp_path):
    path = tmp_path / "posts.json"
    path.write_text(json.dumps(["good", {"content": "bad"}]), encoding="utf-8")
    assert load_posts(str(path)) == [{"content": "good"}, {"content": "bad"}]


def test_load_posts_rejects_non_list(tmp_path):
    path = tmp_path / "posts.json"
    path.write_text(json.dumps({"content": "good"}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_posts(str(path))


def test_load_posts_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_posts(str(tmp_path / "missing.json"))


def test_save_json_creates_parent_dirs(tmp_path):
    output = tmp_path / "nested" / "dir" / "out.json"
    assert save_json({"a": "é"}, str(output)) is True
    assert json.loads(output.read_text(encoding="utf-8")) == {"a": "é"}
    assert not (tmp_path / "nested" / "dir" / "out.json.tmp").exists()


def test_save_analyzed_posts(tmp_path):
    output = tmp_path / "analyzed.json"
    posts = [{"content": "good", "sentiment_analysis": {"sentiment": "positive"}}]
    assert save_analyzed_posts(posts, str(output))
    assert json.loads(output.read_text(encoding="utf-8")) == posts


def test_save_json_failure_removes_temp_file(tmp_path):
    output = tmp_path / "out.json"
    assert save_json({"ok": 1, "bad": object()}, str(output)) is False
    assert not output.exists()
    assert not (tmp_path / "out.json.tmp").exists()
