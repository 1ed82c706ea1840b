from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
import time
from functools import wraps

# Database Metrics
db_query_duration_seconds = Histogram(
    "prlabels_db_query_duration_seconds", "Label store query duration", ["operation"]
)

db_query_total = Counter("prlabels_db_queries_total", "Total label store queries", ["operation", "status"])

# Duplicate label inserts resolved by reading back the existing row
label_conflicts_total = Counter(
    "prlabels_label_conflicts_total", "Duplicate label inserts by fallback outcome", ["outcome"]
)


def get_metrics_export():
    """Return the Prometheus text exposition and its content type."""
    return generate_latest(), CONTENT_TYPE_LATEST


def track_db_query(operation):
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                result = func(*args, **kwargs)
                db_query_total.labels(operation=operation, status="success").inc()
                return result
            except Exception:
                db_query_total.labels(operation=operation, status="error").inc()
                raise
            finally:
                duration = time.time() - start_time
                db_query_duration_seconds.labels(operation=operation).observe(duration)

        return wrapper

    return decorator
