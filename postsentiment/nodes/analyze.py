"""
Per-post sentiment analysis node.
"""
import logging

from postsentiment.nodes.base import MonitoredBatchNode
from postsentiment.utils.history import HistoryEntry
from postsentiment.utils.nlp import analyze, confidence_level, explain
from postsentiment.utils.nlp.result import AnalysisResult

logger = logging.getLogger(__name__)


class AnalyzePostsBatchNode(MonitoredBatchNode):
    """
    Run the lexicon analyzer over every post.

    Output fields added to each post:
    - sentiment_analysis (AnalysisResult.to_dict())
    - sentiment_explanation
    - confidence_level
    - over_length (text longer than config max_chars; still analysed)
    """

    def prep(self, shared):
        posts = shared.get("data", {}).get("posts", [])
        cfg = shared.get("config", {}) or {}
        text_field = cfg.get("text_field", "content")
        max_chars = int(cfg.get("max_chars", 280))
        items = []
        for post in posts:
            text = post.get(text_field)
            items.append({
                "text": text if isinstance(text, str) else "",
                "max_chars": max_chars,
            })
        return items

    def exec(self, prep_res):
        text = prep_res["text"]
        result = analyze(text)
        return {
            "text": text,
            "result": result,
            "explanation": explain(text),
            "confidence_level": confidence_level(result.confidence),
            "over_length": len(text) > prep_res["max_chars"],
        }

    def post(self, shared, prep_res, exec_res):
        posts = shared.get("data", {}).get("posts", [])
        records = []
        over_length = 0
        for post, item in zip(posts, exec_res):
            result: AnalysisResult = item["result"]
            post["sentiment_analysis"] = result.to_dict()
            post["sentiment_explanation"] = item["explanation"]
            post["confidence_level"] = item["confidence_level"]
            post["over_length"] = item["over_length"]
            over_length += int(item["over_length"])
            records.append(
                HistoryEntry(text=item["text"], result=result, explanation=item["explanation"]).to_record()
            )

        shared.setdefault("data", {})["records"] = records
        if over_length:
            logger.warning(f"[AnalyzePosts] {over_length} posts exceed the character limit")
        logger.info(f"[AnalyzePosts] analysed {len(records)} posts")
        return "default"
