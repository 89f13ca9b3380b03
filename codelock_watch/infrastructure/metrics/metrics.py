from __future__ import annotations

from fastapi import FastAPI
from prometheus_client import Counter
from prometheus_fastapi_instrumentator import Instrumentator


CODE_ENTRIES_TOTAL = Counter(
    "codelock_code_entries_total",
    "Code entries received from the game host, by outcome (wrong_code, benign, suspicious)",
    ["result"],
)
ADMIN_MESSAGES_TOTAL = Counter(
    "codelock_admin_messages_total",
    "Chat alerts queued for online admins",
)
WEBHOOK_DELIVERIES_TOTAL = Counter(
    "codelock_webhook_deliveries_total",
    "Completed webhook alert requests, by outcome (ok, failed)",
    ["outcome"],
)


def setup_metrics(app: FastAPI) -> None:
    """Attach Prometheus instrumentation and expose /metrics."""
    instrumentator = Instrumentator().instrument(app)
    instrumentator.expose(app, include_in_schema=False)
