# ------------------------------------------------------------------
# Project's Testing Entry Point
# Run: python main.py [driver_id]
# Note: Please run the Streamlit app using: streamlit run app/app.py
# ------------------------------------------------------------------

import logging
import sys

from command_center.constants import LOG_LEVEL
from command_center.formatting import format_percent, format_time_ago
from command_center.query_filters import compute_kpis, top_intents
from command_center.query_store import QueryStore, load_queries

logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def print_summary(store: QueryStore):
    stats = compute_kpis(store.queries)
    print(f"Unresolved: {stats.total} | High-risk: {stats.high_risk} | "
          f"Avg confidence: {stats.avg_confidence_pct}% | SLA breaches: {stats.sla_breaches}")

    print("\nTop failure intents:")
    for share in top_intents(store.queries):
        print(f"  {share.intent:<30} {share.count:>4}  {share.percent:>3}%")

    print("\nQueue:")
    for q in store.queries:
        print(f"  [{q.id}] {format_time_ago(q.timestamp):>12}  {q.driver_id:<12} {q.language:<8} "
              f"{q.intent_predicted:<30} {format_percent(q.intent_confidence):>5}  {q.risk_tag}")


if __name__ == "__main__":

    driver_id = sys.argv[1] if len(sys.argv) > 1 else None

    store = QueryStore()
    if not load_queries(store, driver_id):
        logger.error(f"Could not load queries: {store.error}")
        sys.exit(1)

    print_summary(store)
