"""Shared fixtures for the code-unlock alert tests."""

from __future__ import annotations

from typing import Callable, Iterable, List, Mapping, Optional, Tuple

import pytest

from codelock_watch.application.use_cases.alert_use_cases import (
    HandleCodeEntered,
    NotifyAdmins,
    SendWebhookAlert,
)
from codelock_watch.application.use_cases.permission_use_cases import ADMIN_PERMISSION
from codelock_watch.domain.models import CodeLock, PlayerSession
from codelock_watch.domain.ports.webhook_transport import CompletionCallback
from codelock_watch.infrastructure.host.snapshot_adapters import (
    CollectingChatService,
    PermissionAdminRoster,
    SnapshotAuthorizationProvider,
    SnapshotSessionProvider,
    SnapshotTeamProvider,
)
from codelock_watch.infrastructure.localization.message_catalog import MessageCatalog
from codelock_watch.infrastructure.permissions.file_permission_service import FilePermissionService


WEBHOOK_URL = "https://discord.example/api/webhooks/1/abc"


class FakeTransport:
    """Records enqueued requests instead of sending them."""

    def __init__(self) -> None:
        self.calls: List[dict] = []

    def enqueue(
        self,
        url: str,
        body: str,
        callback: CompletionCallback,
        *,
        method: str = "POST",
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.calls.append(
            {"url": url, "body": body, "callback": callback, "method": method, "headers": dict(headers or {})}
        )


@pytest.fixture()
def eve() -> PlayerSession:
    return PlayerSession(user_id=111, display_name="Eve")


@pytest.fixture()
def bob() -> PlayerSession:
    return PlayerSession(user_id=222, display_name="Bob")


@pytest.fixture()
def admin() -> PlayerSession:
    return PlayerSession(user_id=900, display_name="Admin")


@pytest.fixture()
def lock(bob: PlayerSession) -> CodeLock:
    return CodeLock(code="1234", owner_id=bob.user_id, position=(120.0, 5.0, -40.0), parent_entity_name="door.hinged.wood")


@pytest.fixture()
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture()
def permissions(tmp_path) -> FilePermissionService:
    svc = FilePermissionService(config_dir=tmp_path)
    svc.register_permission(ADMIN_PERMISSION)
    return svc


@pytest.fixture()
def make_handler(
    transport: FakeTransport, permissions: FilePermissionService
) -> Callable[..., Tuple[HandleCodeEntered, CollectingChatService]]:
    def _make(
        *,
        known: Iterable[PlayerSession] = (),
        online: Iterable[PlayerSession] = (),
        owner_id: int = 222,
        team: Iterable[int] = (),
        authed: Iterable[int] = (),
        webhook_url: str = WEBHOOK_URL,
    ) -> Tuple[HandleCodeEntered, CollectingChatService]:
        online = list(online)
        chat = CollectingChatService()
        catalog = MessageCatalog("en")
        handler = HandleCodeEntered(
            sessions=SnapshotSessionProvider(list(known) + online),
            teams=SnapshotTeamProvider(owner_id, team),
            authorization=SnapshotAuthorizationProvider(authed),
            notify_admins=NotifyAdmins(
                roster=PermissionAdminRoster(online, permissions, ADMIN_PERMISSION),
                chat=chat,
                messages=catalog,
            ),
            send_webhook=SendWebhookAlert(transport=transport, messages=catalog, webhook_url=lambda: webhook_url),
        )
        return handler, chat

    return _make
