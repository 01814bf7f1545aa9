"""College Exam Seat Planner: Streamlit entry point."""

import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config.defaults import APP_TITLE, APP_SUBTITLE
from components.sidebar import render_sidebar
from data.session_store import initialize_session_state, pop_flash
from tabs import tab_classrooms, tab_allocate
from utils.logger import configure_logging


def _show_flash():
    flash = pop_flash()
    if not flash:
        return
    level, message = flash
    if level == "info":
        st.info(message)
    else:
        st.success(message)


def main():
    st.set_page_config(
        page_title=APP_TITLE,
        page_icon="🎓",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    configure_logging()
    initialize_session_state()
    render_sidebar()

    st.title(f"🎓 {APP_TITLE}")
    st.caption(APP_SUBTITLE)
    _show_flash()

    tab1, tab2 = st.tabs([
        "🏫 Classrooms",
        "⚡ Allocate Exam",
    ])

    with tab1:
        tab_classrooms.render()
    with tab2:
        tab_allocate.render()


if __name__ == "__main__":
    main()
