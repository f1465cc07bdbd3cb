# ------------------------------
# Record mapper: RawQuery -> DisplayQuery
# ------------------------------

import logging
import math
import re
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Union

from command_center.constants import ESCALATED_ACTION, ESCALATED_INTENT_LABEL
from command_center.data_model import DisplayQuery, RawQuery, RiskTag

logger = logging.getLogger(__name__)

# Fallback for createdAt values that cannot be parsed
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_UPPERCASE_PATTERN = re.compile(r"([A-Z])")
# Leading decimal number, the part of the string a lenient float parse would read
_NUMBER_PREFIX_PATTERN = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
# Fractional seconds of any length, padded or cut to microseconds before parsing
_FRACTION_PATTERN = re.compile(r"(T\d{2}:\d{2}:\d{2})\.(\d+)")


def parse_timestamp(value: str) -> datetime:
    '''
      Parse an ISO-8601 timestamp into a timezone-aware datetime.

      Naive timestamps are taken as UTC. Anything unparsable maps to the Unix epoch.
    '''
    if not value:
        return EPOCH
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    text = _FRACTION_PATTERN.sub(lambda m: f"{m.group(1)}.{m.group(2)[:6].ljust(6, '0')}", text, count=1)
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        logger.debug(f"Unparsable timestamp {value!r}, using epoch")
        return EPOCH
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_confidence(value: Any) -> float:
    '''
      Parse a string-encoded confidence from its leading number, so "0.85%" reads as 0.85.

      No leading number, non-finite or out of [0, 1] -> 0.0
    '''
    if value is None:
        return 0.0
    match = _NUMBER_PREFIX_PATTERN.match(str(value))
    if match is None:
        return 0.0
    confidence = float(match.group(0))
    if not math.isfinite(confidence) or confidence < 0.0 or confidence > 1.0:
        return 0.0
    return confidence


def capitalize_language(language: str) -> str:
    return language[:1].upper() + language[1:]


def humanize_intent(intent: str) -> str:
    '''
      Split a machine-cased intent into words: "CheckSwapHistory" -> "Check Swap History".
    '''
    return _UPPERCASE_PATTERN.sub(r" \1", intent).strip() or intent


def normalize_risk_tag(risk_tag: str) -> str:
    # Unrecognized tags pass through here; consumers classify over the closed set
    if risk_tag == RiskTag.HIGH_RISK.value:
        return RiskTag.HIGH_RISK.value
    return risk_tag


def map_api_query_to_record(raw: Union[RawQuery, Dict[str, Any]]) -> DisplayQuery:
    '''
      Map one raw API query to its display record. Pure and total: never raises on bad field values.

      Args:
          raw: a RawQuery or the JSON item it was built from

      Returns:
          DisplayQuery
    '''
    if not isinstance(raw, RawQuery):
        raw = RawQuery.from_api(raw)

    return DisplayQuery(
        id=str(raw.id),
        timestamp=parse_timestamp(raw.created_at),
        driver_id=raw.driver_id,
        driver_name=raw.driver_id,
        language=capitalize_language(raw.language),
        intent_predicted=humanize_intent(raw.intent),
        intent_confidence=parse_confidence(raw.confidence),
        entities={},
        failure_reason=raw.failure_reason,
        risk_tag=normalize_risk_tag(raw.risk_tag),
        raw_text=raw.summary,
        suggested_intent=ESCALATED_INTENT_LABEL if raw.action == ESCALATED_ACTION else None,
    )


def map_api_queries(items: Iterable[Union[RawQuery, Dict[str, Any]]]) -> List[DisplayQuery]:
    """Map a list of raw queries, preserving order"""
    return [map_api_query_to_record(item) for item in items]
