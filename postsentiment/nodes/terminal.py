"""
terminal.py - end-of-pipeline summary node
"""
import logging

from postsentiment.nodes.base import MonitoredNode

logger = logging.getLogger(__name__)


class TerminalNode(MonitoredNode):
    """Announce the end of the run and store a summary in shared["final_summary"]."""

    def prep(self, shared):
        results = shared.get("results", {})
        return {
            "statistics": results.get("statistics", {}),
            "charts": results.get("charts", []),
            "data_save": results.get("data_save", {}),
            "durations": dict((shared.get("monitor", {}) or {}).get("durations", {})),
        }

    def exec(self, prep_res):
        stats_data = prep_res["statistics"].get("data", {})
        data_save = prep_res["data_save"]
        return {
            "status": "completed",
            "total_posts": stats_data.get("total_count", 0),
            "dominant_sentiment": stats_data.get("dominant_sentiment", ""),
            "avg_confidence": stats_data.get("avg_confidence", 0.0),
            "charts": len(prep_res["charts"]),
            "data_saved": data_save.get("saved", False),
            "output_path": data_save.get("output_path", ""),
            "node_durations": prep_res["durations"],
        }

    def post(self, shared, prep_res, exec_res):
        logger.info(
            f"[Terminal] {exec_res['total_posts']} posts, dominant={exec_res['dominant_sentiment'] or 'n/a'}, "
            f"charts={exec_res['charts']}, saved={exec_res['output_path'] or 'no'}"
        )
        shared["final_summary"] = exec_res
        return "default"
