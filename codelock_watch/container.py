from __future__ import annotations

from functools import lru_cache

from codelock_watch.config import settings
from codelock_watch.application.use_cases.alert_use_cases import (
    HandleCodeEntered,
    NotifyAdmins,
    SendWebhookAlert,
)
from codelock_watch.application.use_cases.permission_use_cases import (
    GrantAdmin,
    RegisterPermissions,
    RevokeAdmin,
)
from codelock_watch.application.use_cases.plugin_config_use_cases import (
    GetPluginConfig,
    ResolveWebhookUrl,
    SetWebhookUrl,
)
from codelock_watch.domain.ports.host_services import (
    IAdminRoster,
    IAuthorizationProvider,
    IChatService,
    ISessionProvider,
    ITeamProvider,
)
from codelock_watch.domain.ports.message_catalog import IMessageCatalog
from codelock_watch.domain.ports.permission_service import IPermissionService
from codelock_watch.domain.ports.webhook_transport import IWebhookTransport
from codelock_watch.infrastructure.config.plugin_config import FilePluginConfigRepository
from codelock_watch.infrastructure.localization.message_catalog import MessageCatalog
from codelock_watch.infrastructure.permissions.file_permission_service import FilePermissionService
from codelock_watch.infrastructure.webhook.requests_webhook_transport import RequestsWebhookTransport


@lru_cache(maxsize=1)
def plugin_config_repo() -> FilePluginConfigRepository:
    return FilePluginConfigRepository()


@lru_cache(maxsize=1)
def permission_service() -> IPermissionService:
    return FilePermissionService()


@lru_cache(maxsize=1)
def message_catalog() -> IMessageCatalog:
    return MessageCatalog()


@lru_cache(maxsize=1)
def webhook_transport() -> IWebhookTransport:
    return RequestsWebhookTransport()


# Plugin config use-cases
@lru_cache(maxsize=None)
def get_plugin_config() -> GetPluginConfig:
    return GetPluginConfig(repo=plugin_config_repo())


@lru_cache(maxsize=None)
def set_webhook_url() -> SetWebhookUrl:
    return SetWebhookUrl(repo=plugin_config_repo())


@lru_cache(maxsize=None)
def resolve_webhook_url() -> ResolveWebhookUrl:
    return ResolveWebhookUrl(repo=plugin_config_repo(), fallback=settings.discord_webhook_url)


# Permission use-cases
@lru_cache(maxsize=None)
def register_permissions() -> RegisterPermissions:
    return RegisterPermissions(svc=permission_service())


@lru_cache(maxsize=None)
def grant_admin() -> GrantAdmin:
    return GrantAdmin(svc=permission_service())


@lru_cache(maxsize=None)
def revoke_admin() -> RevokeAdmin:
    return RevokeAdmin(svc=permission_service())


# Alert use-cases
@lru_cache(maxsize=None)
def send_webhook_alert() -> SendWebhookAlert:
    return SendWebhookAlert(
        transport=webhook_transport(),
        messages=message_catalog(),
        webhook_url=resolve_webhook_url(),
    )


def handle_code_entered(
    *,
    sessions: ISessionProvider,
    teams: ITeamProvider,
    authorization: IAuthorizationProvider,
    roster: IAdminRoster,
    chat: IChatService,
) -> HandleCodeEntered:
    # host collaborators differ per callback, so this one is not cached
    return HandleCodeEntered(
        sessions=sessions,
        teams=teams,
        authorization=authorization,
        notify_admins=NotifyAdmins(roster=roster, chat=chat, messages=message_catalog()),
        send_webhook=send_webhook_alert(),
    )
