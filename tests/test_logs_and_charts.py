from command_center import logs
from command_center.data_model import IntentShare
from command_center.visualization_logic import ChartBuilder


def test_log_action_records_entry(make_query):
    query = make_query("42", risk_tag="fraud", intent_confidence=0.3)
    logs.log_action("resolve", query, "called driver")

    entry = logs.get_latest_log()
    assert entry["action"] == "resolve"
    assert entry["query_id"] == "42"
    assert entry["driver_id"] == "DRV-42"
    assert entry["risk_tag"] == "fraud"
    assert entry["confidence"] == 0.3
    assert entry["note"] == "called driver"
    assert len(logs.get_all_logs()) == 1


def test_clear_logs(make_query):
    logs.log_action("escalate", make_query("1"))
    logs.clear_logs()

    assert logs.get_all_logs() == []
    assert logs.get_latest_log() is None


def test_insights_figure():
    shares = [IntentShare("Refund Request", 2, 67), IntentShare("SIM Change", 1, 33)]
    risk_counts = {"normal": 0, "refund": 2, "fraud": 1, "safety": 0, "highRisk": 0}

    fig = ChartBuilder.create_insights_figure(shares, risk_counts)

    bar, pie = fig.data
    assert list(bar.y) == ["Refund Request", "SIM Change"]
    assert list(bar.x) == [2, 1]
    assert list(pie.labels) == ["refund", "fraud"]
    assert list(pie.values) == [2, 1]
