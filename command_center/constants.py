# ------------------------------
# Module: constants.py
# Description: Constants for the command center services
# ------------------------------

import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / '.env')

# :::::: Query API Related :::::: #

DEFAULT_API_BASE_URL = "http://localhost:8000"
QUERIES_API_PATH = "/api/queries"

# The base URL of the query service, e.g. "http://localhost:8000"
API_BASE_URL = os.environ.get("COMMAND_CENTER_API_URL", "") or DEFAULT_API_BASE_URL

# Seconds. Applied by the UI when it triggers a fetch; the client itself enforces nothing.
API_TIMEOUT_SECONDS = float(os.environ.get("COMMAND_CENTER_API_TIMEOUT", "10"))

LOG_LEVEL = os.environ.get("COMMAND_CENTER_LOG_LEVEL", "INFO").upper()

# :::::: Filter Related :::::: #

# Sentinel for "no constraint" in every filter dimension
FILTER_ALL = "all"

LOW_CONFIDENCE_THRESHOLD = 0.5
SLA_WARNING_MINUTES = 10

# Risk tags counted as "high-risk / escalated" in the KPIs and the refund_risk view
HIGH_RISK_TAGS = {"highRisk", "fraud", "refund"}

SMART_VIEW_LABELS = {
    "all": "All",
    "refund_risk": "Refund + High Risk",
    "sla_breach": "SLA Breaching in 10 min",
    "low_conf": "Low confidence",
}

# :::::: Display Related :::::: #

CONFIDENCE_HIGH_THRESHOLD = 0.7
CONFIDENCE_MEDIUM_THRESHOLD = 0.5

ESCALATED_ACTION = "escalated"
ESCALATED_INTENT_LABEL = "Escalated"

QUEUE_TABLE_COLUMNS = [
    "Time",
    "Driver",
    "Driver ID",
    "Language",
    "Predicted intent",
    "Confidence",
    "Failure reason",
    "Risk",
]
