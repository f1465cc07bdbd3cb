"""
data_model.py
Data models for driver queries, filter selections and dashboard statistics.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Dict, Any, Optional

from command_center.constants import FILTER_ALL


class RiskTag(str, Enum):
    NORMAL = "normal"
    REFUND = "refund"
    FRAUD = "fraud"
    SAFETY = "safety"
    HIGH_RISK = "highRisk"

    @classmethod
    def coerce(cls, value: Any) -> "RiskTag":
        """Map any value onto the closed set of risk tags, defaulting to normal."""
        try:
            return cls(value)
        except ValueError:
            return cls.NORMAL


class SmartView(str, Enum):
    ALL = "all"
    REFUND_RISK = "refund_risk"
    SLA_BREACH = "sla_breach"
    LOW_CONF = "low_conf"


@dataclass(frozen=True)
class RawQuery:
    """A query record exactly as delivered by GET /api/queries"""
    id: Any
    driver_id: str
    language: str
    intent: str
    confidence: str
    failure_reason: str
    risk_tag: str
    action: str
    summary: str
    created_at: str
    updated_at: str = ""
    deleted_at: Optional[str] = None

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "RawQuery":
        """Build from the camelCase JSON item. Missing string fields become empty strings."""
        if not isinstance(item, dict):
            item = {}
        return cls(
            id=_as_str(item.get("id")),
            driver_id=_as_str(item.get("driverId")),
            language=_as_str(item.get("language")),
            intent=_as_str(item.get("intent")),
            confidence=_as_str(item.get("confidence")),
            failure_reason=_as_str(item.get("failureReason")),
            risk_tag=_as_str(item.get("riskTag")),
            action=_as_str(item.get("action")),
            summary=_as_str(item.get("summary")),
            created_at=_as_str(item.get("createdAt")),
            updated_at=_as_str(item.get("updatedAt")),
            deleted_at=item.get("deletedAt"),
        )


def _as_str(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True)
class DeepLink:
    label: str
    href: str


@dataclass(frozen=True)
class DisplayQuery:
    """View model for a single unresolved query. Never persisted."""
    id: str
    timestamp: datetime
    driver_id: str
    driver_name: str
    language: str
    intent_predicted: str
    intent_confidence: float
    failure_reason: str
    risk_tag: str
    raw_text: str
    entities: Dict[str, str] = field(default_factory=dict)
    risk_score: Optional[int] = None
    translated_text: Optional[str] = None
    voice_confidence: Optional[float] = None
    suggested_intent: Optional[str] = None
    suggested_follow_ups: Optional[List[str]] = None
    deep_links: Optional[List[DeepLink]] = None
    sla_breach: Optional[bool] = None
    sla_minutes_left: Optional[int] = None


@dataclass(frozen=True)
class FilterSelection:
    """Active filter selections. Every dimension at FILTER_ALL imposes no constraint."""
    language: str = FILTER_ALL
    risk: str = FILTER_ALL
    smart_view: SmartView = SmartView.ALL
    intent: str = FILTER_ALL
    refund_risk_min_score: Optional[int] = None  # Only used by the refund_risk view


@dataclass(frozen=True)
class QueryStats:
    """KPI summary over a query collection"""
    total: int
    high_risk: int
    avg_confidence_pct: int
    sla_breaches: int = 0


@dataclass(frozen=True)
class IntentShare:
    """One row of the top failure intents breakdown"""
    intent: str
    count: int
    percent: int
