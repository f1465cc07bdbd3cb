"""
query_store.py
Process-local container for the current query collection.

The store is the single writer of the collection: a successful fetch replaces it,
an agent action removes or updates one record. Each fetch is tagged with a sequence
number so that a response arriving after a newer fetch was issued is discarded.
"""

import dataclasses
import logging
from typing import List, Optional

from command_center import logs
from command_center.constants import API_TIMEOUT_SECONDS, ESCALATED_INTENT_LABEL
from command_center.data_model import DisplayQuery
from command_center.queries_api import QueriesApiError, fetch_queries
from command_center.record_mapper import map_api_queries

logger = logging.getLogger(__name__)


class QueryStore:
    """Owns the in-memory query collection and the state of the latest fetch"""

    def __init__(self):
        self._queries: List[DisplayQuery] = []
        self._last_issued = 0
        self.loading = False
        self.error: Optional[str] = None

    @property
    def queries(self) -> List[DisplayQuery]:
        return list(self._queries)

    @property
    def last_issued(self) -> int:
        return self._last_issued

    def __len__(self) -> int:
        return len(self._queries)

    def get(self, query_id: str) -> Optional[DisplayQuery]:
        for q in self._queries:
            if q.id == query_id:
                return q
        return None

    def begin_fetch(self) -> int:
        """Issue a new fetch sequence number and mark the store as loading"""
        self._last_issued += 1
        self.loading = True
        self.error = None
        return self._last_issued

    def is_latest(self, seq: int) -> bool:
        return seq == self._last_issued

    def complete_fetch(self, seq: int, queries: List[DisplayQuery]) -> bool:
        '''
          Replace the whole collection with the result of fetch `seq`.

          Returns False (and changes nothing) when a newer fetch has been issued since.
          Records with an empty or already-seen id are dropped.
        '''
        if not self.is_latest(seq):
            logger.info(f"Discarding stale fetch #{seq} (latest is #{self._last_issued})")
            return False

        seen = set()
        unique: List[DisplayQuery] = []
        for q in queries:
            if not q.id or q.id in seen:
                logger.warning(f"Dropping query with empty or duplicate id {q.id!r}")
                continue
            seen.add(q.id)
            unique.append(q)

        self._queries = unique
        self.loading = False
        self.error = None
        return True

    def fail_fetch(self, seq: int, message: str) -> bool:
        """Record a failed fetch: the collection is cleared and the message kept for display"""
        if not self.is_latest(seq):
            logger.info(f"Discarding stale failure of fetch #{seq}: {message}")
            return False
        self._queries = []
        self.loading = False
        self.error = message
        return True

    def resolve(self, query_id: str, note: str = "") -> Optional[DisplayQuery]:
        """Remove a query from the collection. Returns the removed query, or None if absent."""
        query = self.get(query_id)
        if query is None:
            logger.warning(f"Resolve requested for unknown query {query_id}")
            return None
        self._queries = [q for q in self._queries if q.id != query_id]
        logs.log_action("resolve", query, note)
        return query

    def escalate(self, query_id: str, note: str = "") -> Optional[DisplayQuery]:
        """Mark a query as escalated in place. Returns the updated query, or None if absent."""
        query = self.get(query_id)
        if query is None:
            logger.warning(f"Escalate requested for unknown query {query_id}")
            return None
        updated = dataclasses.replace(query, suggested_intent=ESCALATED_INTENT_LABEL)
        self._queries = [updated if q.id == query_id else q for q in self._queries]
        logs.log_action("escalate", updated, note)
        return updated


def load_queries(
    store: QueryStore,
    driver_id: Optional[str] = None,
    timeout: Optional[float] = API_TIMEOUT_SECONDS,
) -> bool:
    '''
      Fetch, map and store the queries, optionally scoped to one driver.

      Args:
          store: The store to update
          driver_id: Raw driver filter input. Whitespace is trimmed, empty means no filter.
          timeout: Request timeout in seconds

      Returns:
          True if the store now holds the result of this fetch (even an empty one),
          False if it failed or was superseded by a newer fetch
    '''
    driver_id = (driver_id or "").strip() or None
    seq = store.begin_fetch()
    try:
        items = fetch_queries(driver_id, timeout=timeout)
    except QueriesApiError as e:
        logger.error(f"Failed to load queries: {e.message}")
        store.fail_fetch(seq, e.message)
        return False

    return store.complete_fetch(seq, map_api_queries(items))
