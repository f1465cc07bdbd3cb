# ------------------------------
# Filter & aggregation over the in-memory query collection
# ------------------------------

import math
from typing import Callable, Dict, List, Sequence

import pandas as pd

from command_center.constants import (
    FILTER_ALL,
    HIGH_RISK_TAGS,
    LOW_CONFIDENCE_THRESHOLD,
    SLA_WARNING_MINUTES,
)
from command_center.data_model import (
    DisplayQuery,
    FilterSelection,
    IntentShare,
    QueryStats,
    RiskTag,
    SmartView,
)

Predicate = Callable[[DisplayQuery], bool]


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def is_high_risk(query: DisplayQuery) -> bool:
    return query.risk_tag in HIGH_RISK_TAGS


def is_sla_breaching(query: DisplayQuery) -> bool:
    """SLA deadline is within the warning window and not yet passed"""
    minutes = query.sla_minutes_left
    return minutes is not None and 0 <= minutes <= SLA_WARNING_MINUTES


def is_low_confidence(query: DisplayQuery) -> bool:
    return query.intent_confidence < LOW_CONFIDENCE_THRESHOLD


def _smart_view_predicate(selection: FilterSelection) -> Predicate:
    view = SmartView(selection.smart_view)
    if view == SmartView.REFUND_RISK:
        min_score = selection.refund_risk_min_score
        if min_score is None:
            return is_high_risk
        return lambda q: is_high_risk(q) and (q.risk_score or 0) >= min_score
    if view == SmartView.SLA_BREACH:
        return is_sla_breaching
    if view == SmartView.LOW_CONF:
        return is_low_confidence
    return lambda q: True


def build_predicates(selection: FilterSelection) -> List[Predicate]:
    """Turn the active selections into predicates. Dimensions at FILTER_ALL add nothing."""
    predicates: List[Predicate] = []

    if selection.language != FILTER_ALL:
        language = selection.language.lower()
        predicates.append(lambda q: q.language.lower() == language)

    if selection.risk != FILTER_ALL:
        predicates.append(lambda q: q.risk_tag == selection.risk)

    if selection.intent != FILTER_ALL:
        predicates.append(lambda q: q.intent_predicted == selection.intent)

    if SmartView(selection.smart_view) != SmartView.ALL:
        predicates.append(_smart_view_predicate(selection))

    return predicates


def filter_queries(queries: Sequence[DisplayQuery], selection: FilterSelection) -> List[DisplayQuery]:
    '''
      Return the queries matching every active selection, in their original order.
    '''
    predicates = build_predicates(selection)
    return [q for q in queries if all(p(q) for p in predicates)]


def compute_kpis(queries: Sequence[DisplayQuery]) -> QueryStats:
    '''
      KPI summary: total, high-risk count, average confidence as a whole percentage
      and live SLA breaches. An empty collection gives all zeros.
    '''
    total = len(queries)
    high_risk = sum(1 for q in queries if is_high_risk(q))
    sla_breaches = sum(1 for q in queries if q.sla_breach)
    if total > 0:
        avg_confidence_pct = round_half_up(sum(q.intent_confidence for q in queries) / total * 100)
    else:
        avg_confidence_pct = 0
    return QueryStats(
        total=total,
        high_risk=high_risk,
        avg_confidence_pct=avg_confidence_pct,
        sla_breaches=sla_breaches,
    )


def top_intents(queries: Sequence[DisplayQuery]) -> List[IntentShare]:
    '''
      Group queries by predicted intent and rank groups by count (descending).

      Ties keep the order in which intents first appear in the collection.
    '''
    if not queries:
        return []

    df = pd.DataFrame({"intent": [q.intent_predicted for q in queries]})
    counts = df.groupby("intent", sort=False).size().reset_index(name="count")
    counts = counts.sort_values("count", ascending=False, kind="stable")

    total = len(queries)
    return [
        IntentShare(
            intent=intent,
            count=int(count),
            percent=round_half_up(count / total * 100) if total else 0,
        )
        for intent, count in zip(counts["intent"], counts["count"])
    ]


def risk_breakdown(queries: Sequence[DisplayQuery]) -> Dict[str, int]:
    """Count queries per risk tag over the closed set. Unknown tags count as normal."""
    breakdown = {tag.value: 0 for tag in RiskTag}
    for q in queries:
        breakdown[RiskTag.coerce(q.risk_tag).value] += 1
    return breakdown


def available_languages(queries: Sequence[DisplayQuery]) -> List[str]:
    """Distinct languages in first-seen order, for the language filter options"""
    return list(dict.fromkeys(q.language for q in queries if q.language))


def available_intents(queries: Sequence[DisplayQuery]) -> List[str]:
    return list(dict.fromkeys(q.intent_predicted for q in queries if q.intent_predicted))
