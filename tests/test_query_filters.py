import pytest

from command_center.data_model import FilterSelection, SmartView
from command_center.query_filters import (
    available_intents,
    available_languages,
    compute_kpis,
    filter_queries,
    risk_breakdown,
    round_half_up,
    top_intents,
)


@pytest.fixture
def queue(make_query):
    return [
        make_query("1", language="Hindi", risk_tag="normal", intent_confidence=0.42, sla_minutes_left=22),
        make_query("2", language="Tamil", risk_tag="refund", intent_confidence=0.31, risk_score=72,
                   intent_predicted="Refund Request", sla_minutes_left=-5, sla_breach=True),
        make_query("3", language="Mix", risk_tag="normal", intent_confidence=0.18, sla_minutes_left=7),
        make_query("4", language="Hindi", risk_tag="fraud", intent_confidence=0.55, risk_score=45,
                   intent_predicted="SIM Change", sla_minutes_left=0),
        make_query("5", language="Hindi", risk_tag="highRisk", intent_confidence=0.9),
    ]


def ids(queries):
    return [q.id for q in queries]


def test_all_sentinels_return_input_unchanged(queue):
    result = filter_queries(queue, FilterSelection())
    assert result == queue
    assert result is not queue


def test_language_filter_is_case_insensitive(queue):
    assert ids(filter_queries(queue, FilterSelection(language="hindi"))) == ["1", "4", "5"]
    assert ids(filter_queries(queue, FilterSelection(language="TAMIL"))) == ["2"]


def test_risk_filter_exact_match(queue):
    assert ids(filter_queries(queue, FilterSelection(risk="fraud"))) == ["4"]
    assert ids(filter_queries(queue, FilterSelection(risk="Fraud"))) == []


def test_intent_filter(queue):
    assert ids(filter_queries(queue, FilterSelection(intent="Refund Request"))) == ["2"]


def test_refund_risk_view(queue):
    assert ids(filter_queries(queue, FilterSelection(smart_view=SmartView.REFUND_RISK))) == ["2", "4", "5"]


def test_refund_risk_view_with_min_score(queue):
    selection = FilterSelection(smart_view=SmartView.REFUND_RISK, refund_risk_min_score=50)
    assert ids(filter_queries(queue, selection)) == ["2"]


def test_sla_breach_view(queue):
    assert ids(filter_queries(queue, FilterSelection(smart_view=SmartView.SLA_BREACH))) == ["3", "4"]


def test_low_conf_view_keeps_order(make_query):
    queries = [
        make_query("a", intent_confidence=0.18),
        make_query("b", intent_confidence=0.72),
        make_query("c", intent_confidence=0.42),
    ]
    assert ids(filter_queries(queries, FilterSelection(smart_view=SmartView.LOW_CONF))) == ["a", "c"]


def test_smart_view_accepts_plain_string(queue):
    assert ids(filter_queries(queue, FilterSelection(smart_view="low_conf"))) == ["1", "2", "3"]


def test_filters_compose_with_and(queue):
    selection = FilterSelection(language="hindi", smart_view=SmartView.LOW_CONF)
    assert ids(filter_queries(queue, selection)) == ["1"]


def test_filter_result_is_subset(queue):
    for view in SmartView:
        for risk in ["all", "normal", "refund", "fraud", "safety", "highRisk"]:
            result = filter_queries(queue, FilterSelection(risk=risk, smart_view=view))
            assert all(q in queue for q in result)


def test_unknown_risk_tag_is_not_high_risk(make_query):
    queries = [make_query("1", risk_tag="suspicious"), make_query("2", risk_tag="refund")]

    assert compute_kpis(queries).high_risk == 1
    assert ids(filter_queries(queries, FilterSelection(smart_view=SmartView.REFUND_RISK))) == ["2"]


def test_kpis_high_risk_count(make_query):
    queries = [make_query(str(i), risk_tag=tag) for i, tag in enumerate(["normal", "refund", "fraud", "highRisk"])]
    assert compute_kpis(queries).high_risk == 3


def test_kpis(queue):
    stats = compute_kpis(queue)

    assert stats.total == 5
    assert stats.high_risk == 3
    # (0.42 + 0.31 + 0.18 + 0.55 + 0.9) / 5 = 0.472
    assert stats.avg_confidence_pct == 47
    assert stats.sla_breaches == 1


def test_kpis_empty_collection():
    stats = compute_kpis([])

    assert stats.total == 0
    assert stats.high_risk == 0
    assert stats.avg_confidence_pct == 0
    assert stats.sla_breaches == 0
    assert top_intents([]) == []


def test_round_half_up():
    assert round_half_up(62.5) == 63
    assert round_half_up(0.5) == 1
    assert round_half_up(33.3) == 33


def test_top_intents_sorted_with_stable_ties(make_query):
    queries = [
        make_query("1", intent_predicted="Battery Booking"),
        make_query("2", intent_predicted="Refund Request"),
        make_query("3", intent_predicted="Swap History"),
        make_query("4", intent_predicted="Refund Request"),
    ]
    shares = top_intents(queries)

    assert [(s.intent, s.count, s.percent) for s in shares] == [
        ("Refund Request", 2, 50),
        ("Battery Booking", 1, 25),
        ("Swap History", 1, 25),
    ]


def test_top_intents_percent_rounding(make_query):
    queries = [make_query(str(i), intent_predicted=name) for i, name in enumerate(["A", "A", "B"])]
    assert [s.percent for s in top_intents(queries)] == [67, 33]


def test_risk_breakdown_closes_unknown_tags(make_query):
    queries = [make_query("1", risk_tag="fraud"), make_query("2", risk_tag="weird"), make_query("3")]
    breakdown = risk_breakdown(queries)

    assert breakdown == {"normal": 2, "refund": 0, "fraud": 1, "safety": 0, "highRisk": 0}


def test_available_options_first_seen_order(queue):
    assert available_languages(queue) == ["Hindi", "Tamil", "Mix"]
    assert available_intents(queue) == ["Check Swap History", "Refund Request", "SIM Change"]
