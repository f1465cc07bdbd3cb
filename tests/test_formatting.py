from datetime import datetime, timedelta, timezone

from command_center.formatting import (
    build_queue_table,
    confidence_level,
    format_percent,
    format_time_ago,
    risk_badge_variant,
)

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


def test_format_time_ago():
    assert format_time_ago(NOW - timedelta(seconds=30), NOW) == "Just now"
    assert format_time_ago(NOW - timedelta(minutes=8), NOW) == "8m ago"
    assert format_time_ago(NOW - timedelta(minutes=59), NOW) == "59m ago"
    assert format_time_ago(NOW - timedelta(minutes=125), NOW) == "2h 5m ago"


def test_format_percent():
    assert format_percent(0.42) == "42%"
    assert format_percent(0.0) == "0%"
    assert format_percent(1.0) == "100%"


def test_risk_badge_variant():
    assert risk_badge_variant("fraud") == "destructive"
    assert risk_badge_variant("safety") == "destructive"
    assert risk_badge_variant("highRisk") == "destructive"
    assert risk_badge_variant("refund") == "secondary"
    assert risk_badge_variant("normal") == "outline"
    assert risk_badge_variant("unheard-of") == "outline"


def test_confidence_level():
    assert confidence_level(0.7) == "high"
    assert confidence_level(0.55) == "medium"
    assert confidence_level(0.5) == "medium"
    assert confidence_level(0.49) == "low"


def test_build_queue_table(make_query):
    queries = [
        make_query("7", timestamp=NOW - timedelta(minutes=3), risk_tag="fraud", intent_confidence=0.18),
        make_query("9", language="Tamil"),
    ]
    table = build_queue_table(queries, NOW)

    assert list(table.index) == ["7", "9"]
    assert table.loc["7", "Time"] == "3m ago"
    assert table.loc["7", "Confidence"] == "18%"
    assert table.loc["7", "Risk"] == "fraud"
    assert table.loc["9", "Language"] == "Tamil"


def test_build_queue_table_empty():
    table = build_queue_table([])
    assert table.empty
    assert "Predicted intent" in table.columns
