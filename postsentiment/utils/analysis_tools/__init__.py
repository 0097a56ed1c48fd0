"""
Sentiment statistics and chart tools over analysed posts.
"""

from .sentiment_tools import (
    sentiment_distribution_stats,
    sentiment_timeline,
    sentiment_pie_chart,
    sentiment_bar_chart,
    sentiment_timeline_chart,
)
from .tool_registry import (
    TOOL_REGISTRY,
    execute_tool,
    get_all_tools,
    get_chart_tools,
    get_data_tools,
    get_tool_by_name,
)

__all__ = [
    "sentiment_distribution_stats",
    "sentiment_timeline",
    "sentiment_pie_chart",
    "sentiment_bar_chart",
    "sentiment_timeline_chart",
    "TOOL_REGISTRY",
    "execute_tool",
    "get_all_tools",
    "get_chart_tools",
    "get_data_tools",
    "get_tool_by_name",
]
