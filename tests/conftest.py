"""Pytest configuration and shared fixtures."""
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict
from unittest.mock import MagicMock

import pytest

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from command_center import logs
from command_center.data_model import DisplayQuery

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def clear_action_logs():
    logs.clear_logs()
    yield
    logs.clear_logs()


@pytest.fixture
def raw_item():
    """Factory for raw API query items"""
    def _make(**overrides) -> Dict[str, Any]:
        item = {
            "id": 1,
            "driverId": "DRV-2847",
            "language": "hindi",
            "intent": "CheckSwapHistory",
            "confidence": "0.42",
            "failureReason": "Low intent confidence",
            "riskTag": "normal",
            "action": "none",
            "summary": "Bhai kal wali swap ka paisa kaat liya",
            "createdAt": "2025-06-01T11:52:00.000Z",
            "updatedAt": "2025-06-01T11:52:00.000Z",
            "deletedAt": None,
        }
        item.update(overrides)
        return item
    return _make


@pytest.fixture
def make_query():
    """Factory for display queries"""
    def _make(id: str = "1", **overrides) -> DisplayQuery:
        fields = {
            "id": id,
            "timestamp": NOW,
            "driver_id": f"DRV-{id}",
            "driver_name": f"DRV-{id}",
            "language": "Hindi",
            "intent_predicted": "Check Swap History",
            "intent_confidence": 0.6,
            "failure_reason": "Ambiguous query",
            "risk_tag": "normal",
            "raw_text": "Issue hai bhai",
        }
        fields.update(overrides)
        return DisplayQuery(**fields)
    return _make


@pytest.fixture
def make_response():
    """Factory for a stubbed requests.Response"""
    def _make(status: int, body: Any = None, invalid_json: bool = False) -> MagicMock:
        resp = MagicMock()
        resp.status_code = status
        resp.ok = status < 400
        if invalid_json:
            resp.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
        else:
            resp.json.return_value = body
        return resp
    return _make
