"""
Aggregate statistics node.
"""
import logging

from postsentiment.nodes.base import MonitoredNode
from postsentiment.utils.analysis_tools import execute_tool
from postsentiment.utils.data_loader import save_json

logger = logging.getLogger(__name__)


class SentimentStatsNode(MonitoredNode):
    """
    Distribution statistics and timeline over the analysed posts, written to
    the report directory as sentiment_stats.json.
    """

    def prep(self, shared):
        report_cfg = (shared.get("config", {}) or {}).get("report", {}) or {}
        return {
            "records": shared.get("data", {}).get("records", []),
            "stats_path": report_cfg.get("stats_path", "report/sentiment_stats.json"),
        }

    def exec(self, prep_res):
        records = prep_res["records"]
        distribution = execute_tool("sentiment_distribution_stats", records)
        # Posts are in file order, oldest first.
        timeline = execute_tool("sentiment_timeline", records, newest_first=False)
        payload = {"statistics": distribution, "timeline": timeline}
        saved = save_json(payload, prep_res["stats_path"])
        return {"statistics": distribution, "timeline": timeline, "saved": saved}

    def post(self, shared, prep_res, exec_res):
        results = shared.setdefault("results", {})
        results["statistics"] = exec_res["statistics"]
        results["timeline"] = exec_res["timeline"]
        results["stats_path"] = prep_res["stats_path"] if exec_res["saved"] else ""
        logger.info(f"[SentimentStats] {exec_res['statistics'].get('summary', '')}")
        return "default"
