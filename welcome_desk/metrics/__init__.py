# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics — single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""

from prometheus_client import Counter, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "welcome_desk_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "welcome_desk_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "welcome_desk_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Business Metrics (updated by service layer only) ──
VISITORS_SUBMITTED = Counter(
    "welcome_desk_visitors_submitted_total",
    "Visitor submissions persisted",
    ["age_group", "language"],
)
SUBMISSION_FAILURES = Counter(
    "welcome_desk_submission_failures_total",
    "Visitor submissions halted before completion",
    ["stage"],
)
SUBMISSION_PROCESSING = Histogram(
    "welcome_desk_submission_processing_seconds",
    "Time to run the submission pipeline end-to-end",
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)
NOTIFICATIONS_SENT = Counter(
    "welcome_desk_notifications_total",
    "Ministry notification attempts by outcome",
    ["status"],
)
SETTINGS_UPDATES = Counter(
    "welcome_desk_settings_updates_total",
    "Church settings writes",
    ["status"],
)
LOGO_UPLOADS = Counter(
    "welcome_desk_logo_uploads_total",
    "Logo upload attempts by outcome",
    ["status"],
)
