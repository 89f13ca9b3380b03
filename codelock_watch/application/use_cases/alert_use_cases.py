from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from codelock_watch.domain.classifier import evaluate, format_position
from codelock_watch.domain.messages import DEFAULT_MESSAGES, Lang
from codelock_watch.domain.models import UNKNOWN, UNKNOWN_ID, CodeLock, PlayerSession, UnlockEvent, Verdict
from codelock_watch.domain.ports.host_services import (
    IAdminRoster,
    IAuthorizationProvider,
    IChatService,
    ISessionProvider,
    ITeamProvider,
)
from codelock_watch.domain.ports.message_catalog import IMessageCatalog
from codelock_watch.domain.ports.webhook_transport import IWebhookTransport
from codelock_watch.infrastructure.metrics.metrics import (
    ADMIN_MESSAGES_TOTAL,
    CODE_ENTRIES_TOTAL,
    WEBHOOK_DELIVERIES_TOTAL,
)


_log = logging.getLogger(__name__)

_JSON_HEADERS = {"Content-Type": "application/json"}


@dataclass(slots=True)
class NotifyAdmins:
    roster: IAdminRoster
    chat: IChatService
    messages: IMessageCatalog

    def __call__(self, event: UnlockEvent) -> int:
        sent = 0
        for admin in self.roster.online_admins():
            if admin is None:
                continue
            try:
                message = self._render(event, admin.language)
                self.chat.send_reply(admin, message)
            except Exception:
                _log.exception("failed to message admin %s", admin.user_id_string)
                continue
            sent += 1
        ADMIN_MESSAGES_TOTAL.inc(sent)
        return sent

    def _render(self, event: UnlockEvent, lang: Optional[str]) -> str:
        fields = {
            "actor": event.actor_name,
            "entity": event.entity_name,
            "location": event.location,
            "owner": event.owner_name,
        }
        template = self.messages.get_message(Lang.CHAT_UNLOCK_ALERT, lang)
        try:
            return template.format(**fields)
        except (KeyError, IndexError, ValueError) as exc:
            _log.warning("bad %s template for language %s: %s", Lang.CHAT_UNLOCK_ALERT, lang, exc)
            return DEFAULT_MESSAGES[Lang.CHAT_UNLOCK_ALERT].format(**fields)


@dataclass(slots=True)
class SendWebhookAlert:
    transport: IWebhookTransport
    messages: IMessageCatalog
    webhook_url: Callable[[], str]

    def __call__(self, event: UnlockEvent) -> bool:
        url = self.webhook_url()
        if not url:
            return False
        message = self.messages.get_message(Lang.DISCORD_UNLOCK_ALERT).format(
            actor=event.actor_name,
            actor_id=event.actor_ref,
            entity=event.entity_name,
            location=event.location,
            owner=event.owner_name,
            owner_id=event.owner_ref,
        )
        body = json.dumps({"content": message})
        self.transport.enqueue(url, body, _on_webhook_complete, method="POST", headers=_JSON_HEADERS)
        return True


def _on_webhook_complete(code: int, response: str) -> None:
    if code < 200 or code >= 300:
        WEBHOOK_DELIVERIES_TOTAL.labels(outcome="failed").inc()
        _log.warning("Failed to send Discord alert: Code: %s, Response: %s", code, response)
        return
    WEBHOOK_DELIVERIES_TOTAL.labels(outcome="ok").inc()


@dataclass(slots=True)
class HandleCodeEntered:
    """Entry point for the host's code-entered callback."""

    sessions: ISessionProvider
    teams: ITeamProvider
    authorization: IAuthorizationProvider
    notify_admins: NotifyAdmins
    send_webhook: SendWebhookAlert

    def __call__(
        self, lock: Optional[CodeLock], player: Optional[PlayerSession], entered_code: str
    ) -> Optional[Verdict]:
        if lock is None or player is None:
            return None
        # wrong codes are routine, keep them out of the logs
        if lock.code != entered_code:
            CODE_ENTRIES_TOTAL.labels(result="wrong_code").inc()
            return None

        event = self.build_event(lock, player)
        verdict = evaluate(event)
        CODE_ENTRIES_TOTAL.labels(result=verdict.value).inc()
        if verdict is Verdict.BENIGN:
            return verdict

        _log.info(
            "suspicious code unlock",
            extra={"actor_id": event.actor_ref, "owner_id": event.owner_ref, "entity": event.entity_name},
        )
        try:
            self.notify_admins(event)
        except Exception:
            _log.exception("admin notification failed")
        try:
            self.send_webhook(event)
        except Exception:
            _log.exception("webhook notification failed")
        return verdict

    def build_event(self, lock: CodeLock, player: PlayerSession) -> UnlockEvent:
        owner = self.sessions.find_by_id(lock.owner_id)
        return UnlockEvent(
            actor_id=player.user_id,
            actor_name=player.display_name,
            owner_id=lock.owner_id,
            owner_name=owner.display_name if owner is not None else UNKNOWN,
            owner_ref=owner.user_id_string if owner is not None else UNKNOWN_ID,
            entity_name=lock.parent_entity_name or UNKNOWN,
            location=format_position(lock.position),
            is_teammate=self.teams.are_teammates(lock.owner_id, player.user_id),
            is_authorized=self.authorization.is_building_authed(player),
        )
