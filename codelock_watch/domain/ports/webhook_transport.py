from __future__ import annotations

from typing import Callable, Mapping, Optional, Protocol


# (status_code, response_body); status 0 means the request never got a response
CompletionCallback = Callable[[int, str], None]


class IWebhookTransport(Protocol):
    def enqueue(
        self,
        url: str,
        body: str,
        callback: CompletionCallback,
        *,
        method: str = "POST",
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:  # noqa: D401
        """Queue an outbound request and return immediately.

        ``callback`` runs later, on whatever thread completed the request.
        """
        ...
