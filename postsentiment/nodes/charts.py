"""
Chart rendering node.
"""
import logging

from postsentiment.nodes.base import MonitoredNode
from postsentiment.utils.analysis_tools import execute_tool, get_chart_tools
from postsentiment.utils.path_manager import ensure_dir

logger = logging.getLogger(__name__)


class SentimentChartsNode(MonitoredNode):
    """
    Render every registered chart tool into the images directory.

    A tool that fails is recorded in results["chart_errors"]; the others
    still run. If rendering fails as a whole the flow continues without charts.
    """

    def prep(self, shared):
        report_cfg = (shared.get("config", {}) or {}).get("report", {}) or {}
        return {
            "records": shared.get("data", {}).get("records", []),
            "images_dir": report_cfg.get("images_dir", "report/images"),
            "fmt": report_cfg.get("chart_format", "png"),
            "dpi": int(report_cfg.get("dpi", 150)),
        }

    def exec(self, prep_res):
        images_dir = ensure_dir(prep_res["images_dir"])
        charts = []
        errors = []
        for tool_name in get_chart_tools():
            result = execute_tool(
                tool_name,
                prep_res["records"],
                output_dir=images_dir,
                newest_first=False,
                fmt=prep_res["fmt"],
                dpi=prep_res["dpi"],
            )
            if "error" in result:
                errors.append({"tool_name": tool_name, "error": result["error"]})
                continue
            charts.extend(result.get("charts", []))
        return {"charts": charts, "errors": errors}

    def exec_fallback(self, prep_res, exc):
        return {"charts": [], "errors": [{"tool_name": "*", "error": str(exc)}]}

    def post(self, shared, prep_res, exec_res):
        results = shared.setdefault("results", {})
        results["charts"] = exec_res["charts"]
        results["chart_errors"] = exec_res["errors"]
        for err in exec_res["errors"]:
            logger.warning(f"[SentimentCharts] {err['tool_name']} failed: {err['error']}")
        logger.info(f"[SentimentCharts] rendered {len(exec_res['charts'])} charts")
        return "default"
