import json
import os
from typing import List, Dict, Any
import logging

logger = logging.getLogger(__name__)


def load_posts(data_file_path: str) -> List[Dict[str, Any]]:
    """
    Load posts from a JSON file.

    The file must hold a JSON list. Items may be objects (the text lives in a
    configurable field) or plain strings, which are wrapped as ``{"content": s}``.

    Args:
        data_file_path: path of the posts file

    Returns:
        List[Dict[str, Any]]: post records
    """
    try:
        with open(data_file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except Exception as e:
        logger.error(f"Failed to load posts from {data_file_path}: {e}")
        raise

    if not isinstance(data, list):
        raise ValueError(f"Posts file must contain a JSON list: {data_file_path}")

    posts = [item if isinstance(item, dict) else {"content": str(item)} for item in data]
    logger.info(f"Loaded {len(posts)} posts from {data_file_path}")
    return posts


def save_json(data: Any, output_path: str) -> bool:
    """
    Write ``data`` as pretty-printed UTF-8 JSON, creating parent directories.

    Returns:
        bool: True when the file was written
    """
    tmp_path = f"{output_path}.tmp"
    try:
        output_dir = os.path.dirname(output_path)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        with open(tmp_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        os.replace(tmp_path, output_path)
        logger.info(f"Saved {output_path}")
        return True
    except Exception as e:
        logger.error(f"Failed to save {output_path}: {e}")
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        return False


def save_analyzed_posts(posts: List[Dict[str, Any]], output_path: str) -> bool:
    """Save posts enriched with their sentiment analysis."""
    return save_json(posts, output_path)
