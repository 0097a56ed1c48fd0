"""
Sentiment statistics and charts over a set of analysed posts.

Records are flat dicts as produced by ``HistoryEntry.to_record`` (at least
``sentiment`` and ``confidence``; score columns are optional):

- sentiment_distribution_stats: per-class counts, percentages, mean confidence
- sentiment_timeline: chronological sentiment/confidence sequence
- sentiment_pie_chart: class share pie chart
- sentiment_bar_chart: class count bar chart
- sentiment_timeline_chart: sentiment value and confidence over the session
"""

import os
from datetime import datetime
from typing import List, Dict, Any

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from postsentiment.utils.nlp.result import SENTIMENT_LABELS


SENTIMENT_DISPLAY = {
    "positive": "Positive",
    "negative": "Negative",
    "neutral": "Neutral",
}

SENTIMENT_COLORS = {
    "positive": "#4caf50",
    "negative": "#f44336",
    "neutral": "#9e9e9e",
}

SENTIMENT_VALUES = {
    "positive": 1,
    "negative": -1,
    "neutral": 0,
}

SCORE_COLUMNS = ("positive_score", "negative_score", "neutral_score")


def _normalize_records_df(records: List[Dict[str, Any]]) -> pd.DataFrame:
    """Records -> DataFrame with typed sentiment/confidence columns."""
    df = pd.DataFrame(records)
    if df.empty:
        return df
    if "sentiment" not in df.columns:
        df["sentiment"] = "neutral"
    df["sentiment"] = df["sentiment"].fillna("neutral").astype(str)
    if "confidence" not in df.columns:
        df["confidence"] = 0.5
    df["confidence"] = pd.to_numeric(df["confidence"], errors="coerce").fillna(0.5)
    for col in SCORE_COLUMNS:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")
    return df


def _chart_path(output_dir: str, name: str, fmt: str = "png") -> str:
    os.makedirs(output_dir, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    return os.path.join(output_dir, f"{name}_{timestamp}.{fmt}")


def sentiment_distribution_stats(records: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Sentiment class distribution.

    Records whose label is not positive, negative or neutral are left out of
    the counts and reported as ``skipped_count``.

    Args:
        records: analysed post records

    Returns:
        dict with ``data`` and ``summary``
    """
    df = _normalize_records_df(records)
    skipped = 0
    if not df.empty:
        known = df["sentiment"].isin(SENTIMENT_LABELS)
        skipped = int((~known).sum())
        df = df[known]
    total = len(df)
    if total == 0:
        return {
            "data": {},
            "summary": "No analysed posts to summarize",
        }

    counts = df["sentiment"].value_counts()
    distribution = {}
    for label in SENTIMENT_LABELS:
        count = int(counts.get(label, 0))
        distribution[label] = {
            "count": count,
            "percentage": round(count / total * 100, 1),
        }

    avg_confidence = float(df["confidence"].mean())
    dominant = max(SENTIMENT_LABELS, key=lambda label: distribution[label]["count"])

    average_scores = {}
    for col in SCORE_COLUMNS:
        if col in df.columns and df[col].notna().any():
            average_scores[col.replace("_score", "")] = round(float(df[col].mean()), 4)

    summary = (
        f"Analyzed {total} posts, average confidence {avg_confidence * 100:.1f}%, "
        f"dominant sentiment {SENTIMENT_DISPLAY[dominant]}"
    )

    return {
        "data": {
            "distribution": distribution,
            "total_count": total,
            "avg_confidence": round(avg_confidence, 4),
            "dominant_sentiment": dominant,
            "average_scores": average_scores,
            "skipped_count": skipped,
        },
        "summary": summary,
    }


def sentiment_timeline(records: List[Dict[str, Any]], newest_first: bool = True) -> Dict[str, Any]:
    """
    Chronological sentiment sequence.

    Args:
        records: analysed post records
        newest_first: True when ``records`` are ordered newest first (session
            history order); they are reversed so index 1 is the oldest

    Returns:
        dict with ``data`` and ``summary``
    """
    df = _normalize_records_df(records)
    if df.empty:
        return {"data": {"timeline": []}, "summary": "No analysed posts to plot"}

    if newest_first:
        df = df.iloc[::-1].reset_index(drop=True)

    timeline = []
    for idx, row in enumerate(df.itertuples(index=False), 1):
        timeline.append({
            "index": idx,
            "sentiment": row.sentiment,
            "sentiment_value": SENTIMENT_VALUES.get(row.sentiment, 0),
            "confidence": round(float(row.confidence), 4),
        })

    values = [p["sentiment_value"] for p in timeline]
    mean_value = float(np.mean(values))
    if mean_value > 0:
        trend = "leaning positive"
    elif mean_value < 0:
        trend = "leaning negative"
    else:
        trend = "balanced"

    return {
        "data": {
            "timeline": timeline,
            "mean_sentiment_value": round(mean_value, 4),
        },
        "summary": f"{len(timeline)} posts in sequence, overall {trend}",
    }


def sentiment_pie_chart(records: List[Dict[str, Any]],
                        output_dir: str = "report/images",
                        fmt: str = "png",
                        dpi: int = 150) -> Dict[str, Any]:
    """Pie chart of sentiment class shares; empty classes are left out."""
    stats = sentiment_distribution_stats(records)
    distribution = stats["data"].get("distribution", {})
    slices = [(label, distribution[label]["count"]) for label in SENTIMENT_LABELS
              if distribution.get(label, {}).get("count", 0) > 0]
    if not slices:
        return {"charts": [], "summary": "No sentiment data to chart"}

    fig, ax = plt.subplots(figsize=(8, 8))
    ax.pie(
        [count for _, count in slices],
        labels=[SENTIMENT_DISPLAY[label] for label, _ in slices],
        colors=[SENTIMENT_COLORS[label] for label, _ in slices],
        autopct="%1.1f%%",
        startangle=90,
    )
    ax.set_title("Sentiment Distribution", fontsize=16, fontweight="bold")
    ax.axis("equal")
    plt.tight_layout()

    file_path = _chart_path(output_dir, "sentiment_pie", fmt)
    plt.savefig(file_path, dpi=dpi, bbox_inches="tight")
    plt.close(fig)

    return {
        "charts": [{
            "id": os.path.splitext(os.path.basename(file_path))[0],
            "type": "pie_chart",
            "title": "Sentiment Distribution",
            "file_path": file_path,
            "source_tool": "sentiment_pie_chart",
            "description": "Share of positive, negative and neutral posts",
        }],
        "summary": stats["summary"],
    }


def sentiment_bar_chart(records: List[Dict[str, Any]],
                        output_dir: str = "report/images",
                        fmt: str = "png",
                        dpi: int = 150) -> Dict[str, Any]:
    """Bar chart of post counts per sentiment class."""
    stats = sentiment_distribution_stats(records)
    distribution = stats["data"].get("distribution", {})
    if not distribution:
        return {"charts": [], "summary": "No sentiment data to chart"}

    labels = list(SENTIMENT_LABELS)
    counts = [distribution[label]["count"] for label in labels]

    fig, ax = plt.subplots(figsize=(10, 6))
    bars = ax.bar(
        [SENTIMENT_DISPLAY[label] for label in labels],
        counts,
        color=[SENTIMENT_COLORS[label] for label in labels],
    )
    for bar, count in zip(bars, counts):
        ax.text(bar.get_x() + bar.get_width() / 2, bar.get_height(), str(count),
                ha="center", va="bottom", fontsize=11)
    ax.set_title("Sentiment Counts", fontsize=16, fontweight="bold", pad=15)
    ax.set_ylabel("Posts", fontsize=12)
    ax.grid(True, axis="y", alpha=0.3)
    plt.tight_layout()

    file_path = _chart_path(output_dir, "sentiment_bar", fmt)
    plt.savefig(file_path, dpi=dpi, bbox_inches="tight")
    plt.close(fig)

    return {
        "charts": [{
            "id": os.path.splitext(os.path.basename(file_path))[0],
            "type": "bar_chart",
            "title": "Sentiment Counts",
            "file_path": file_path,
            "source_tool": "sentiment_bar_chart",
            "description": "Number of posts in each sentiment class",
        }],
        "summary": stats["summary"],
    }


def sentiment_timeline_chart(records: List[Dict[str, Any]],
                             output_dir: str = "report/images",
                             newest_first: bool = True,
                             fmt: str = "png",
                             dpi: int = 150) -> Dict[str, Any]:
    """Sentiment value (+1/0/-1) and confidence across the analysed sequence."""
    timeline_result = sentiment_timeline(records, newest_first=newest_first)
    timeline = timeline_result["data"].get("timeline", [])
    if not timeline:
        return {"charts": [], "summary": "No sentiment data to chart"}

    x = [p["index"] for p in timeline]
    values = [p["sentiment_value"] for p in timeline]
    confidences = [p["confidence"] for p in timeline]

    fig, ax = plt.subplots(figsize=(14, 6))
    ax.plot(x, values, marker="o", linewidth=2, color="#2196f3", label="Sentiment")
    ax.scatter(x, values, c=[SENTIMENT_COLORS.get(p["sentiment"], "#607d8b") for p in timeline],
               s=80, zorder=3)
    ax.set_ylim(-1.5, 1.5)
    ax.set_yticks([-1, 0, 1])
    ax.set_yticklabels(["Negative", "Neutral", "Positive"])
    ax.set_xlabel("Analysis #", fontsize=12)

    ax2 = ax.twinx()
    ax2.plot(x, confidences, linestyle="--", color="#ff9800", label="Confidence")
    ax2.set_ylim(0, 1)
    ax2.set_ylabel("Confidence", fontsize=12)

    lines = ax.get_legend_handles_labels()
    lines2 = ax2.get_legend_handles_labels()
    ax.legend(lines[0] + lines2[0], lines[1] + lines2[1], loc="upper left")
    ax.set_title("Sentiment Timeline", fontsize=16, fontweight="bold", pad=15)
    ax.grid(True, alpha=0.3)
    plt.tight_layout()

    file_path = _chart_path(output_dir, "sentiment_timeline", fmt)
    plt.savefig(file_path, dpi=dpi, bbox_inches="tight")
    plt.close(fig)

    return {
        "charts": [{
            "id": os.path.splitext(os.path.basename(file_path))[0],
            "type": "line_chart",
            "title": "Sentiment Timeline",
            "file_path": file_path,
            "source_tool": "sentiment_timeline_chart",
            "description": "Sentiment class and confidence of each post in order",
        }],
        "summary": timeline_result["summary"],
    }
