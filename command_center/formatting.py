# ------------------------------
# Display helpers for the dashboard
# ------------------------------

from datetime import datetime, timezone
from typing import Optional, Sequence

import pandas as pd

from command_center.constants import (
    CONFIDENCE_HIGH_THRESHOLD,
    CONFIDENCE_MEDIUM_THRESHOLD,
    QUEUE_TABLE_COLUMNS,
)
from command_center.data_model import DisplayQuery, RiskTag
from command_center.query_filters import round_half_up


def format_time_ago(ts: datetime, now: Optional[datetime] = None) -> str:
    '''
      "Just now", "12m ago" or "2h 5m ago"
    '''
    now = now or datetime.now(timezone.utc)
    mins = int((now - ts).total_seconds() // 60)
    if mins < 1:
        return "Just now"
    if mins < 60:
        return f"{mins}m ago"
    return f"{mins // 60}h {mins % 60}m ago"


def format_percent(confidence: float) -> str:
    return f"{round_half_up(confidence * 100)}%"


def risk_badge_variant(risk_tag: str) -> str:
    tag = RiskTag.coerce(risk_tag)
    if tag in (RiskTag.FRAUD, RiskTag.SAFETY, RiskTag.HIGH_RISK):
        return "destructive"
    if tag == RiskTag.REFUND:
        return "secondary"
    return "outline"


def confidence_level(confidence: float) -> str:
    if confidence >= CONFIDENCE_HIGH_THRESHOLD:
        return "high"
    if confidence >= CONFIDENCE_MEDIUM_THRESHOLD:
        return "medium"
    return "low"


def build_queue_table(queries: Sequence[DisplayQuery], now: Optional[datetime] = None) -> pd.DataFrame:
    """Build the queue table shown to agents, one row per query, indexed by query id"""
    rows = [
        {
            "Time": format_time_ago(q.timestamp, now),
            "Driver": q.driver_name,
            "Driver ID": q.driver_id,
            "Language": q.language,
            "Predicted intent": q.intent_predicted,
            "Confidence": format_percent(q.intent_confidence),
            "Failure reason": q.failure_reason,
            "Risk": q.risk_tag,
        }
        for q in queries
    ]
    return pd.DataFrame(rows, columns=QUEUE_TABLE_COLUMNS, index=[q.id for q in queries])
