"""
Analysed post save node.
"""
import logging

from postsentiment.nodes.base import MonitoredNode
from postsentiment.utils.data_loader import save_analyzed_posts

logger = logging.getLogger(__name__)


class SaveResultsNode(MonitoredNode):
    """
    Save posts with their sentiment fields to data_paths["output_path"].
    """

    def prep(self, shared):
        data = shared.get("data", {})
        return {
            "posts": data.get("posts", []),
            "output_path": data.get("data_paths", {}).get("output_path", "data/analyzed_posts.json"),
        }

    def exec(self, prep_res):
        return save_analyzed_posts(prep_res["posts"], prep_res["output_path"])

    def post(self, shared, prep_res, exec_res):
        shared.setdefault("results", {})["data_save"] = {
            "saved": bool(exec_res),
            "output_path": prep_res["output_path"] if exec_res else "",
            "data_count": len(prep_res["posts"]) if exec_res else 0,
        }
        if not exec_res:
            logger.error(f"[SaveResults] could not write {prep_res['output_path']}")
        return "default"
