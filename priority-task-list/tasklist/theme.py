from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import streamlit as st
from streamlit.errors import StreamlitAPIException

logger = logging.getLogger(__name__)

THEME_FILE = Path(__file__).resolve().parent.parent / "assets" / "task_list.css"


@st.cache_data(show_spinner=False)
def load_css(path: str = str(THEME_FILE)) -> Optional[str]:
    """Read the stylesheet once per server process; None if it is missing."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.warning("Theme file not found at %s", path)
        return None


def set_theme(page_title: str, page_icon: str) -> bool:
    """Configure the task list page & inject its CSS.

    Called at the top of every rerun. Streamlit accepts one page_config per
    run, while the stylesheet has to be re-emitted each time. Returns False
    when the stylesheet could not be loaded.
    """
    try:
        st.set_page_config(
            page_title=page_title,
            page_icon=page_icon,
            layout="centered",
            initial_sidebar_state="collapsed",
        )
    except StreamlitAPIException:
        logger.debug("Page config already set for this run")

    css = load_css()
    if css is None:
        st.error(f"Theme file not found at {THEME_FILE}. The page renders unstyled.")
        return False
    st.markdown(f"<style>{css}</style>", unsafe_allow_html=True)
    return True
