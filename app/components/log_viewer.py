"""Log viewer component"""
from datetime import datetime
import streamlit as st
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from command_center import logs
from command_center.formatting import confidence_level, format_percent

class LogViewer:
    """Manages the agent action log in the sidebar"""

    @staticmethod
    def render_log_entry(log: dict) -> None:
        """Render a single log entry"""
        st.markdown(f"""
        <div class="log-entry">
            <div class="log-timestamp">
                {datetime.fromisoformat(log['timestamp']).strftime('%Y-%m-%d %H:%M:%S')}
            </div>
            <div class="log-action">{log['action']} · query {log['query_id']}</div>
            <div>Driver: {log['driver_id']} · {log['intent']} · {log['risk_tag']}</div>
            <div class="confidence-{confidence_level(log['confidence'])}">
                Bot confidence: {format_percent(log['confidence'])}
            </div>
        </div>
        """, unsafe_allow_html=True)

        if log['note']:
            st.caption(f"Note: {log['note']}")

    @staticmethod
    def render_logs() -> None:
        """Render the logs interface in the sidebar"""
        # Initialize show_logs state if not exists
        if "show_logs" not in st.session_state:
            st.session_state.show_logs = False

        # Add toggle button to sidebar
        if st.sidebar.button("📋 View Action Log", key="toggle_logs"):
            st.session_state.show_logs = not st.session_state.show_logs

        # Show logs if enabled
        if st.session_state.show_logs:
            with st.sidebar:
                st.markdown("### Recent Actions")
                all_logs = logs.get_all_logs()

                if not all_logs:
                    st.info("No agent actions yet.")
                else:
                    for log in all_logs:
                        with st.expander(f"{log['action'].title()}: {log['driver_id']}", expanded=False):
                            LogViewer.render_log_entry(log)
