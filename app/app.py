"""
Agent Command Center Application

A Streamlit dashboard for triaging driver queries the support bot failed to resolve.
"""
import sys
from pathlib import Path
import logging
import streamlit as st

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Now we can import our modules
from command_center.constants import LOG_LEVEL
from command_center.query_store import QueryStore, load_queries
from app.components import Dashboard, LogViewer
from app.styles import STYLES

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

def initialize_session_state():
    """Initialize session state variables"""
    if 'query_store' not in st.session_state:
        st.session_state.query_store = QueryStore()
    if 'driver_filter' not in st.session_state:
        st.session_state.driver_filter = ""
    if 'loaded_driver_filter' not in st.session_state:
        st.session_state.loaded_driver_filter = None
    if 'selected_query_id' not in st.session_state:
        st.session_state.selected_query_id = None
    if 'show_logs' not in st.session_state:
        st.session_state.show_logs = False

def refresh_queries():
    """Fetch queries for the current driver filter into the store"""
    driver_filter = st.session_state.driver_filter.strip()
    with st.spinner("Loading queries..."):
        load_queries(st.session_state.query_store, driver_filter)
    st.session_state.loaded_driver_filter = driver_filter

def render_sidebar():
    """Render sidebar content"""
    with st.sidebar:
        st.markdown("### 🚚 Driver")
        st.text_input("Filter by driver ID", key="driver_filter", placeholder="e.g. DRV-2847")

        if st.button("🔄 Refresh queries"):
            refresh_queries()

        st.markdown("### 🔍 Tools")

        # Render the action log in sidebar
        LogViewer.render_logs()

def render_error(store: QueryStore):
    """Inline, retryable error notice for a failed fetch"""
    st.error(f"❌ Could not load queries: {store.error}")
    if st.button("Retry"):
        refresh_queries()
        st.rerun()

def main():
    """Main application entry point"""
    # Page configuration
    st.set_page_config(layout="wide", page_title="Agent Command Center")
    st.markdown(f"<style>{STYLES}</style>", unsafe_allow_html=True)

    # Initialize session state
    initialize_session_state()

    # Render sidebar
    render_sidebar()

    # Initial load, and reload whenever the driver filter changes
    if st.session_state.loaded_driver_filter != st.session_state.driver_filter.strip():
        refresh_queries()

    # Main content area
    st.title("🎧 Agent Command Center")
    st.caption("AI failed, but didn't leave the agent alone. Triage, act, and close.")

    store = st.session_state.query_store
    if store.error:
        render_error(store)

    driver_filter = st.session_state.loaded_driver_filter
    if driver_filter:
        st.markdown(f"Filtered by driver **{driver_filter}**")

    with st.container():
        dashboard = Dashboard(store)
        dashboard.render_dashboard()

if __name__ == "__main__":
    main()
