import logging
from typing import Dict, List, Optional
from datetime import datetime

from command_center.data_model import DisplayQuery

# Configure logging
logger = logging.getLogger(__name__)

# In-memory storage for agent actions
_action_logs = []

def log_action(action: str, query: DisplayQuery, note: str = "") -> None:
    """
    Record an agent action taken on a query.

    Args:
        action: What the agent did, e.g. "resolve" or "escalate"
        query: The query the action was taken on
        note: Optional free-text note from the agent
    """
    log_entry = {
        "timestamp": datetime.now().isoformat(),
        "action": action,
        "query_id": query.id,
        "driver_id": query.driver_id,
        "intent": query.intent_predicted,
        "risk_tag": query.risk_tag,
        "confidence": query.intent_confidence,
        "note": note,
    }
    _action_logs.append(log_entry)
    logger.info(f"Agent action '{action}' on query {query.id} (driver {query.driver_id})")

def get_all_logs() -> List[Dict]:
    """Get all logs, sorted by timestamp (newest first)."""
    return sorted(_action_logs, key=lambda x: x["timestamp"], reverse=True)

def get_latest_log() -> Optional[Dict]:
    """Get the most recent log entry."""
    return _action_logs[-1] if _action_logs else None

def clear_logs() -> None:
    """Clear all logs from memory."""
    _action_logs.clear()
    logger.info("Cleared all agent action logs")
