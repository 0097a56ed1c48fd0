"""
Streamlit entry for the post sentiment dashboard.

    streamlit run postsentiment/dashboard/app.py
"""
import os
import tempfile

import pandas as pd
import streamlit as st

from postsentiment.config import AppConfig, load_config
from postsentiment.dashboard.logic import (
    build_stat_cards,
    completion_message,
    get_history,
    submit_post,
    validate_post_text,
)
from postsentiment.utils.analysis_tools import execute_tool, get_chart_tools
from postsentiment.utils.nlp import confidence_level


SENTIMENT_ICONS = {"positive": "😊", "negative": "😞", "neutral": "😐"}


def _load_app_config() -> AppConfig:
    path = os.environ.get("POSTSENTIMENT_CONFIG", "config.yaml")
    if os.path.exists(path):
        return load_config(path)
    return AppConfig()


st.set_page_config(page_title="Post Sentiment", layout="wide")

config = _load_app_config()
max_chars = int(config.input.max_chars)
history = get_history(st.session_state, max_entries=int(config.history.max_entries))

st.title("Post Sentiment Analysis")
st.write("Classify short posts as positive, negative or neutral with a weighted lexicon.")

with st.form("post_form", clear_on_submit=True):
    text = st.text_area("Post", max_chars=max_chars, placeholder="What's happening?")
    submitted = st.form_submit_button("Analyze")

if submitted:
    errors = validate_post_text(text, max_chars=max_chars)
    if errors:
        for err in errors:
            st.error(err)
    else:
        entry = submit_post(history, text)
        st.success(completion_message(entry))

records = history.to_records()

if not records:
    st.info("No posts analysed yet. Enter a post above to get started.")
else:
    cards = build_stat_cards(records)
    for col, card in zip(st.columns(len(cards)), cards):
        col.metric(card["title"], card["value"], card["detail"], delta_color="off")

    charts_tab, history_tab = st.tabs(["Charts", "History"])

    with charts_tab:
        if "chart_dir" not in st.session_state:
            st.session_state["chart_dir"] = tempfile.mkdtemp(prefix="postsentiment_")
        for tool_name in get_chart_tools():
            result = execute_tool(tool_name, records, output_dir=st.session_state["chart_dir"])
            if "error" in result:
                st.warning(f"{tool_name}: {result['error']}")
                continue
            for chart in result.get("charts", []):
                with open(chart["file_path"], "rb") as f:
                    st.image(f.read(), caption=chart["title"])
                os.remove(chart["file_path"])

    with history_tab:
        for entry in history:
            result = entry.result
            icon = SENTIMENT_ICONS.get(result.sentiment, "")
            with st.container(border=True):
                st.markdown(f"{icon} **{result.sentiment.capitalize()}** "
                            f"- {result.confidence * 100:.0f}% ({confidence_level(result.confidence)})")
                st.write(entry.text)
                st.caption(f"{entry.timestamp:%Y-%m-%d %H:%M:%S} - {entry.explanation.strip()}")
        st.download_button(
            "Download history (CSV)",
            data=pd.DataFrame(records).to_csv(index=False),
            file_name="sentiment_history.csv",
            mime="text/csv",
        )
