"""
Post loading node.
"""
import logging

from postsentiment.nodes.base import MonitoredNode
from postsentiment.utils.data_loader import load_posts

logger = logging.getLogger(__name__)


class LoadPostsNode(MonitoredNode):
    """
    Load raw posts from the configured JSON file into shared["data"]["posts"].
    """

    def prep(self, shared):
        data_paths = shared.get("data", {}).get("data_paths", {})
        return data_paths.get("input_path", "data/posts.json")

    def exec(self, prep_res):
        return load_posts(prep_res)

    def post(self, shared, prep_res, exec_res):
        shared.setdefault("data", {})["posts"] = exec_res
        logger.info(f"[LoadPosts] loaded {len(exec_res)} posts from {prep_res}")
        return "default"
