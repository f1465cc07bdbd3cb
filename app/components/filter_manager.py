"""Filter management component for the query queue"""
from typing import List
import streamlit as st
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from command_center.constants import FILTER_ALL, SMART_VIEW_LABELS
from command_center.data_model import DisplayQuery, FilterSelection, RiskTag, SmartView
from command_center.query_filters import available_intents, available_languages

class FilterManager:
    """Manages filter UI and state"""

    @staticmethod
    def with_all_option(options: List[str]) -> List[str]:
        """Prepend the 'all' sentinel to a list of filter options"""
        return [FILTER_ALL] + [o for o in options if o != FILTER_ALL]

    @staticmethod
    def reset_if_unavailable(key: str, options: List[str]) -> None:
        """Fall back to 'all' when a refetch removed the selected option"""
        if st.session_state.get(key, FILTER_ALL) not in options:
            st.session_state[key] = FILTER_ALL

    def render_smart_views(self) -> SmartView:
        """Render the smart view switcher"""
        view_ids = [view.value for view in SmartView]
        selected = st.radio(
            "Smart views",
            options=view_ids,
            format_func=lambda v: SMART_VIEW_LABELS[v],
            horizontal=True,
            key="smart_view",
        )
        return SmartView(selected)

    def render_filters(self, queries: List[DisplayQuery]) -> FilterSelection:
        """Render all filter UI components and return the active selection"""
        smart_view = self.render_smart_views()

        language_options = self.with_all_option(available_languages(queries))
        intent_options = self.with_all_option(available_intents(queries))
        self.reset_if_unavailable("language_filter", language_options)
        self.reset_if_unavailable("intent_filter", intent_options)

        filter_col1, filter_col2, filter_col3 = st.columns(3)

        with filter_col1:
            language = st.selectbox(
                "Language",
                options=language_options,
                format_func=lambda v: "All languages" if v == FILTER_ALL else v,
                key="language_filter",
            )

        with filter_col2:
            risk = st.selectbox(
                "Risk",
                options=self.with_all_option([tag.value for tag in RiskTag]),
                format_func=lambda v: "All risks" if v == FILTER_ALL else v,
                key="risk_filter",
            )

        with filter_col3:
            intent = st.selectbox(
                "Predicted intent",
                options=intent_options,
                format_func=lambda v: "All intents" if v == FILTER_ALL else v,
                key="intent_filter",
            )

        return FilterSelection(
            language=language,
            risk=risk,
            smart_view=smart_view,
            intent=intent,
        )
