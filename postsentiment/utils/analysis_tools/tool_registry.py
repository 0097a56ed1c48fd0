"""
Analysis tool registry.

Single place that lists the statistics and chart tools, so the pipeline
and the dashboard can run them by name.
"""

from typing import List, Dict, Any, Optional

from .sentiment_tools import (
    sentiment_distribution_stats,
    sentiment_timeline,
    sentiment_pie_chart,
    sentiment_bar_chart,
    sentiment_timeline_chart,
)


_RECORDS_PARAM = {"type": "list", "description": "Analysed post records", "required": True}
_OUTPUT_DIR_PARAM = {"type": "string", "description": "Chart output directory", "required": False,
                     "default": "report/images"}
_FORMAT_PARAM = {"type": "string", "description": "Image format", "required": False, "default": "png"}
_DPI_PARAM = {"type": "int", "description": "Image resolution", "required": False, "default": 150}
_NEWEST_FIRST_PARAM = {"type": "bool", "description": "Records are ordered newest first",
                       "required": False, "default": True}


TOOL_REGISTRY: Dict[str, Dict[str, Any]] = {
    "sentiment_distribution_stats": {
        "name": "sentiment_distribution_stats",
        "description": "Counts and percentages of positive/negative/neutral posts, average confidence",
        "function": sentiment_distribution_stats,
        "parameters": {"records": _RECORDS_PARAM},
        "generates_chart": False,
    },
    "sentiment_timeline": {
        "name": "sentiment_timeline",
        "description": "Chronological sentiment value and confidence sequence",
        "function": sentiment_timeline,
        "parameters": {"records": _RECORDS_PARAM, "newest_first": _NEWEST_FIRST_PARAM},
        "generates_chart": False,
    },
    "sentiment_pie_chart": {
        "name": "sentiment_pie_chart",
        "description": "Pie chart of the sentiment class shares",
        "function": sentiment_pie_chart,
        "parameters": {"records": _RECORDS_PARAM, "output_dir": _OUTPUT_DIR_PARAM,
                       "fmt": _FORMAT_PARAM, "dpi": _DPI_PARAM},
        "generates_chart": True,
    },
    "sentiment_bar_chart": {
        "name": "sentiment_bar_chart",
        "description": "Bar chart of post counts per sentiment class",
        "function": sentiment_bar_chart,
        "parameters": {"records": _RECORDS_PARAM, "output_dir": _OUTPUT_DIR_PARAM,
                       "fmt": _FORMAT_PARAM, "dpi": _DPI_PARAM},
        "generates_chart": True,
    },
    "sentiment_timeline_chart": {
        "name": "sentiment_timeline_chart",
        "description": "Line chart of sentiment value and confidence over the sequence",
        "function": sentiment_timeline_chart,
        "parameters": {"records": _RECORDS_PARAM, "output_dir": _OUTPUT_DIR_PARAM,
                       "newest_first": _NEWEST_FIRST_PARAM, "fmt": _FORMAT_PARAM, "dpi": _DPI_PARAM},
        "generates_chart": True,
    },
}


def get_all_tools() -> List[Dict[str, Any]]:
    """Tool definitions without the callables."""
    return [
        {
            "name": info["name"],
            "description": info["description"],
            "parameters": info["parameters"],
            "generates_chart": info["generates_chart"],
        }
        for info in TOOL_REGISTRY.values()
    ]


def get_tool_by_name(tool_name: str) -> Optional[Dict[str, Any]]:
    return TOOL_REGISTRY.get(tool_name)


def execute_tool(tool_name: str, records: List[Dict[str, Any]],
                 **kwargs) -> Dict[str, Any]:
    """
    Run one registered tool.

    Unknown keyword arguments are ignored; missing optional ones take their
    registered defaults. Tool failures are returned as ``{"error": ...}``.
    """
    tool_info = TOOL_REGISTRY.get(tool_name)
    if not tool_info:
        return {
            "error": f"Unknown tool: {tool_name}",
            "available_tools": list(TOOL_REGISTRY.keys()),
        }

    params: Dict[str, Any] = {"records": records}
    for param_name, param_info in tool_info["parameters"].items():
        if param_name == "records":
            continue
        if param_name in kwargs:
            params[param_name] = kwargs[param_name]
        elif "default" in param_info:
            params[param_name] = param_info["default"]

    try:
        result = tool_info["function"](**params)
        result["tool_name"] = tool_name
        return result
    except Exception as e:
        return {
            "error": str(e),
            "tool_name": tool_name,
        }


def get_chart_tools() -> List[str]:
    return [name for name, info in TOOL_REGISTRY.items() if info["generates_chart"]]


def get_data_tools() -> List[str]:
    return [name for name, info in TOOL_REGISTRY.items() if not info["generates_chart"]]
