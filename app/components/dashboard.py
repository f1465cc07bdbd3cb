"""Dashboard component"""
import streamlit as st
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from command_center.data_model import QueryStats
from command_center.formatting import build_queue_table
from command_center.query_filters import compute_kpis, filter_queries, risk_breakdown, top_intents
from command_center.query_store import QueryStore
from command_center.visualization_logic import ChartBuilder
from app.components.filter_manager import FilterManager
from app.components.query_detail import QueryDetail

class Dashboard:
    """Manages the queue, KPI and insights views over the query store"""

    def __init__(self, store: QueryStore):
        self.store = store
        self.filter_manager = FilterManager()
        self.chart_builder = ChartBuilder()

    @staticmethod
    def render_kpis(stats: QueryStats) -> None:
        """Render the KPI cards"""
        col1, col2, col3, col4 = st.columns(4)
        col1.metric("Unresolved bot queries", stats.total)
        col2.metric("High-risk / Escalated", stats.high_risk)
        col3.metric("Avg bot confidence score", f"{stats.avg_confidence_pct}%")
        col4.metric("SLA breaches (live)", stats.sla_breaches)

    def render_queue(self) -> None:
        """Render filters, the filtered queue table and the selected query's detail"""
        queries = self.store.queries
        selection = self.filter_manager.render_filters(queries)
        visible = filter_queries(queries, selection)

        st.caption(f"Showing {len(visible)} of {len(queries)} queries")
        if not visible:
            st.info("No queries match the current filters.")
            return

        st.dataframe(build_queue_table(visible), use_container_width=True)

        visible_ids = [q.id for q in visible]
        if st.session_state.get("selected_query_id") not in visible_ids:
            st.session_state.selected_query_id = None
        selected_id = st.selectbox(
            "Open query",
            options=[None] + visible_ids,
            format_func=lambda qid: "Select a query…" if qid is None else self._query_label(qid),
            key="selected_query_id",
        )

        if selected_id is not None:
            query = self.store.get(selected_id)
            if query is not None:
                with st.container(border=True):
                    QueryDetail.render(query, self.store)

    def _query_label(self, query_id: str) -> str:
        query = self.store.get(query_id)
        if query is None:
            return query_id
        return f"{query.driver_id} · {query.intent_predicted}"

    def render_insights(self) -> None:
        """Render the top failure intents and risk mix over the whole collection"""
        queries = self.store.queries
        shares = top_intents(queries)
        if not shares:
            st.info("No data")
            return

        figure = self.chart_builder.create_insights_figure(shares, risk_breakdown(queries))
        st.plotly_chart(figure, use_container_width=True)

        for share in shares:
            st.markdown(f"- **{share.intent}**: {share.count} ({share.percent}%)")

    def render_dashboard(self) -> None:
        """Render the dashboard interface"""
        self.render_kpis(compute_kpis(self.store.queries))

        queue_tab, insights_tab = st.tabs(["📥 Queue", "📊 Insights"])
        with queue_tab:
            self.render_queue()
        with insights_tab:
            self.render_insights()
