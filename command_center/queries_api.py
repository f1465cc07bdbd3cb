"""
queries_api.py
Client for the query service: GET /api/queries
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from command_center.constants import API_BASE_URL, QUERIES_API_PATH

logger = logging.getLogger(__name__)


class QueriesApiError(Exception):
    """Base error for the query service. Carries the HTTP status and parsed body when known."""

    def __init__(self, message: str, status: Optional[int] = None, body: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.body = body


class InvalidResponseError(QueriesApiError):
    """Transport failed or the body is not valid JSON"""


class QueryRequestError(QueriesApiError):
    """Non-success HTTP status"""


class InvalidResponseFormatError(QueriesApiError):
    """HTTP succeeded but the JSON is not a {success: true, data: [...]} envelope"""


def get_api_base(base_url: Optional[str] = None) -> str:
    return (base_url or API_BASE_URL).rstrip("/")


def _error_message(body: Any, status: int) -> str:
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return f"Request failed ({status})"


def _is_success_envelope(body: Any) -> bool:
    return (
        isinstance(body, dict)
        and body.get("success") is True
        and isinstance(body.get("data"), list)
    )


def fetch_queries(
    driver_id: Optional[str] = None,
    *,
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None,
) -> List[Dict[str, Any]]:
    '''
        Fetch queries from GET /api/queries, optionally filtered by driver.

        Args:
            driver_id: When given, requests /api/queries?driverId=... The caller trims it
                and passes None for an empty filter.
            base_url: Overrides COMMAND_CENTER_API_URL
            timeout: Passed through to requests. No timeout when None.
            session: A requests.Session to send the request with, e.g. for pooled connections

        Returns:
            The raw query items from the response's data field, unchanged

        Raises:
            InvalidResponseError: transport failure or a body that is not JSON
            QueryRequestError: non-success HTTP status
            InvalidResponseFormatError: unexpected response envelope
    '''
    url = f"{get_api_base(base_url)}{QUERIES_API_PATH}"
    params = {"driverId": driver_id} if driver_id else None

    logger.info(f"Fetching queries from {url} (driverId={driver_id})")
    try:
        resp = (session or requests).get(url, params=params, timeout=timeout)
    except requests.RequestException as e:
        logger.error(f"Query service unreachable: {e}")
        raise InvalidResponseError(f"Invalid response: {e}") from e

    try:
        body = resp.json()
    except ValueError as e:
        logger.error(f"Invalid JSON from query service (status {resp.status_code})")
        raise InvalidResponseError("Invalid JSON response", resp.status_code) from e

    if not resp.ok:
        message = _error_message(body, resp.status_code)
        logger.error(f"Query service returned {resp.status_code}: {message}")
        raise QueryRequestError(message, resp.status_code, body)

    if not _is_success_envelope(body):
        logger.error("Query service returned an unexpected response format")
        raise InvalidResponseFormatError("Invalid response format", resp.status_code)

    data = body["data"]
    logger.info(f"Fetched {len(data)} queries")
    return data
