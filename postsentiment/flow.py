"""
Batch sentiment pipeline - Flow definition

================================================================================
Pipeline
================================================================================

LoadPostsNode
    -> AnalyzePostsBatchNode   (lexicon analysis per post)
    -> SentimentStatsNode      (distribution + timeline, sentiment_stats.json)
    -> SentimentChartsNode     (pie / bar / timeline images)
    -> SaveResultsNode         (analysed posts JSON)
    -> TerminalNode            (summary)

================================================================================
"""

from pocketflow import Flow

from postsentiment.nodes import (
    LoadPostsNode,
    AnalyzePostsBatchNode,
    SentimentStatsNode,
    SentimentChartsNode,
    SaveResultsNode,
    TerminalNode,
)


def create_analysis_flow(max_retries: int = 1, wait_time: int = 0) -> Flow:
    """
    Build the batch analysis flow.

    Args:
        max_retries: per-node retry attempts
        wait_time: seconds between retries
    """
    load_node = LoadPostsNode(max_retries=max_retries, wait=wait_time)
    analyze_node = AnalyzePostsBatchNode(max_retries=max_retries, wait=wait_time)
    stats_node = SentimentStatsNode(max_retries=max_retries, wait=wait_time)
    charts_node = SentimentChartsNode(max_retries=max_retries, wait=wait_time)
    save_node = SaveResultsNode(max_retries=max_retries, wait=wait_time)
    terminal_node = TerminalNode()

    load_node >> analyze_node
    analyze_node >> stats_node
    stats_node >> charts_node
    charts_node >> save_node
    save_node >> terminal_node

    return Flow(start=load_node)
