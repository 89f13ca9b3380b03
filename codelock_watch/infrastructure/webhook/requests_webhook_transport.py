from __future__ import annotations

import logging
import threading
from typing import Mapping, Optional

import requests

from codelock_watch.config import settings
from codelock_watch.domain.ports.webhook_transport import CompletionCallback, IWebhookTransport


_log = logging.getLogger(__name__)


class RequestsWebhookTransport(IWebhookTransport):
    def __init__(self, timeout: Optional[float] = None, session: Optional[requests.Session] = None) -> None:
        self._timeout = float(timeout if timeout is not None else settings.webhook_timeout_sec)
        # no shared Session by default: each delivery thread makes its own request
        self._session = session

    def enqueue(
        self,
        url: str,
        body: str,
        callback: CompletionCallback,
        *,
        method: str = "POST",
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        threading.Thread(
            target=self.deliver,
            args=(url, body, callback, method, dict(headers or {})),
            name="webhook-alert",
            daemon=True,
        ).start()

    def deliver(
        self,
        url: str,
        body: str,
        callback: CompletionCallback,
        method: str = "POST",
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        try:
            requester = self._session if self._session is not None else requests
            resp = requester.request(
                method,
                url,
                data=body.encode("utf-8"),
                headers=dict(headers or {}),
                timeout=self._timeout,
            )
            code, text = resp.status_code, resp.text
        except requests.RequestException as exc:
            code, text = 0, str(exc)
        try:
            callback(code, text)
        except Exception:
            _log.exception("webhook completion callback failed")
