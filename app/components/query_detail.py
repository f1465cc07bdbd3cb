"""Query detail panel: driver utterance, bot analysis and agent actions"""
import streamlit as st
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from command_center.data_model import DisplayQuery
from command_center.formatting import confidence_level, format_percent, risk_badge_variant
from command_center.query_filters import is_low_confidence
from command_center.query_store import QueryStore


class QueryDetail:
    """Renders a single query for the agent and handles resolve / escalate"""

    @staticmethod
    def render_utterance(query: DisplayQuery) -> None:
        """A. What the driver said"""
        st.markdown("##### 🗣️ Driver utterance")
        st.markdown(f'<div class="utterance">“{query.raw_text}”</div>', unsafe_allow_html=True)
        st.caption(query.language)
        if query.translated_text:
            st.markdown(f"→ {query.translated_text}")
        if query.voice_confidence is not None:
            st.markdown(
                f'Voice confidence: <span class="confidence-{confidence_level(query.voice_confidence)}">'
                f'{format_percent(query.voice_confidence)}</span>',
                unsafe_allow_html=True,
            )

    @staticmethod
    def render_bot_analysis(query: DisplayQuery) -> None:
        """B. Why the bot failed"""
        st.markdown("##### 🤖 Bot analysis")
        marker = " ❌" if is_low_confidence(query) else ""
        st.markdown(f"**Predicted intent:** {query.intent_predicted}")
        st.markdown(
            f'**Confidence:** <span class="confidence-{confidence_level(query.intent_confidence)}">'
            f'{format_percent(query.intent_confidence)}</span>{marker}',
            unsafe_allow_html=True,
        )
        if query.entities:
            for name, value in query.entities.items():
                st.markdown(f"- `{name}`: {value or '—'}")
        st.markdown(f"**Failure reason:** {query.failure_reason}")
        st.markdown(
            f'**Risk:** <span class="risk-badge risk-{risk_badge_variant(query.risk_tag)}">{query.risk_tag}</span>',
            unsafe_allow_html=True,
        )
        if query.risk_score is not None:
            st.markdown(f"**Risk score:** {query.risk_score} / 100")

    @staticmethod
    def render_agent_assist(query: DisplayQuery) -> None:
        """C. Suggested agent actions"""
        if not (query.suggested_intent or query.suggested_follow_ups or query.deep_links):
            return
        st.markdown("##### 💡 Agent assist")
        if query.suggested_intent:
            st.markdown(f"**Suggested intent:** {query.suggested_intent}")
        for follow_up in query.suggested_follow_ups or []:
            st.markdown(f"- {follow_up}")
        for link in query.deep_links or []:
            st.markdown(f"[{link.label}]({link.href})")

    @staticmethod
    def _on_resolve(store: QueryStore, query_id: str) -> None:
        # Runs as a widget callback, before the selectbox is re-created
        store.resolve(query_id, st.session_state.get(f"note_{query_id}", ""))
        st.session_state.selected_query_id = None

    @staticmethod
    def _on_escalate(store: QueryStore, query_id: str) -> None:
        store.escalate(query_id, st.session_state.get(f"note_{query_id}", ""))

    @classmethod
    def render_actions(cls, query: DisplayQuery, store: QueryStore) -> None:
        """Resolve / escalate buttons"""
        st.text_input("Note (optional)", key=f"note_{query.id}")
        col1, col2 = st.columns(2)
        with col1:
            st.button(
                "✅ Resolve",
                key=f"resolve_{query.id}",
                on_click=cls._on_resolve,
                args=(store, query.id),
            )
        with col2:
            st.button(
                "⬆️ Escalate",
                key=f"escalate_{query.id}",
                on_click=cls._on_escalate,
                args=(store, query.id),
            )

    @classmethod
    def render(cls, query: DisplayQuery, store: QueryStore) -> None:
        """Render the full detail panel"""
        st.markdown("### Query detail")
        st.caption(f"Driver: {query.driver_name} ({query.driver_id})")
        cls.render_utterance(query)
        st.markdown("---")
        cls.render_bot_analysis(query)
        cls.render_agent_assist(query)
        st.markdown("---")
        cls.render_actions(query, store)
