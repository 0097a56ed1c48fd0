"""
Pipeline nodes for batch sentiment analysis.
"""

from postsentiment.nodes.base import MonitoredNode, MonitoredBatchNode
from postsentiment.nodes.load import LoadPostsNode
from postsentiment.nodes.analyze import AnalyzePostsBatchNode
from postsentiment.nodes.stats import SentimentStatsNode
from postsentiment.nodes.charts import SentimentChartsNode
from postsentiment.nodes.save import SaveResultsNode
from postsentiment.nodes.terminal import TerminalNode

__all__ = [
    "MonitoredNode",
    "MonitoredBatchNode",
    "LoadPostsNode",
    "AnalyzePostsBatchNode",
    "SentimentStatsNode",
    "SentimentChartsNode",
    "SaveResultsNode",
    "TerminalNode",
]
