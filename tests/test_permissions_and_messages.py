"""Tests for permission grants, the admin roster and the message catalog."""

from __future__ import annotations

import pytest

from codelock_watch.application.use_cases.permission_use_cases import (
    ADMIN_PERMISSION,
    GrantAdmin,
    RegisterPermissions,
    RevokeAdmin,
)
from codelock_watch.domain.messages import DEFAULT_MESSAGES, Lang
from codelock_watch.infrastructure.host.snapshot_adapters import PermissionAdminRoster, SnapshotTeamProvider
from codelock_watch.infrastructure.localization.message_catalog import MessageCatalog
from codelock_watch.infrastructure.permissions.file_permission_service import FilePermissionService


# ── TestPermissions ──────────────────────────────────────────

class TestPermissions:
    def test_grant_requires_registration(self, tmp_path) -> None:
        svc = FilePermissionService(config_dir=tmp_path)
        with pytest.raises(ValueError):
            GrantAdmin(svc=svc)("111")

    def test_grant_and_revoke(self, tmp_path) -> None:
        svc = FilePermissionService(config_dir=tmp_path)
        RegisterPermissions(svc=svc)()

        GrantAdmin(svc=svc)("111")
        assert svc.user_has_permission("111", ADMIN_PERMISSION)
        assert not svc.user_has_permission("222", ADMIN_PERMISSION)

        RevokeAdmin(svc=svc)("111")
        assert not svc.user_has_permission("111", ADMIN_PERMISSION)

    def test_grants_survive_restart(self, tmp_path) -> None:
        svc = FilePermissionService(config_dir=tmp_path)
        RegisterPermissions(svc=svc)()
        GrantAdmin(svc=svc)("111")

        reloaded = FilePermissionService(config_dir=tmp_path)
        assert reloaded.user_has_permission("111", ADMIN_PERMISSION)

    def test_revoke_unknown_user_is_noop(self, tmp_path) -> None:
        RevokeAdmin(svc=FilePermissionService(config_dir=tmp_path))("nobody")


# ── TestAdminRoster ──────────────────────────────────────────

class TestAdminRoster:
    def test_only_granted_online_players(self, permissions, eve, bob, admin) -> None:
        permissions.grant_user_permission(admin.user_id_string, ADMIN_PERMISSION)
        roster = PermissionAdminRoster([eve, bob, admin], permissions, ADMIN_PERMISSION)
        assert list(roster.online_admins()) == [admin]

    def test_duplicate_sessions_listed_once(self, permissions, admin) -> None:
        permissions.grant_user_permission(admin.user_id_string, ADMIN_PERMISSION)
        roster = PermissionAdminRoster([admin, admin], permissions, ADMIN_PERMISSION)
        assert list(roster.online_admins()) == [admin]

    def test_offline_admin_not_listed(self, permissions, eve, admin) -> None:
        permissions.grant_user_permission(admin.user_id_string, ADMIN_PERMISSION)
        roster = PermissionAdminRoster([eve], permissions, ADMIN_PERMISSION)
        assert list(roster.online_admins()) == []


# ── TestTeams ────────────────────────────────────────────────

class TestTeams:
    def test_membership_is_symmetric(self) -> None:
        teams = SnapshotTeamProvider(222, [222, 111])
        assert teams.are_teammates(222, 111)
        assert teams.are_teammates(111, 222)

    def test_no_team(self) -> None:
        assert not SnapshotTeamProvider(222, []).are_teammates(222, 111)


# ── TestMessageCatalog ───────────────────────────────────────

class TestMessageCatalog:
    def test_english_defaults(self) -> None:
        catalog = MessageCatalog("en")
        assert catalog.get_message(Lang.CHAT_UNLOCK_ALERT) == DEFAULT_MESSAGES[Lang.CHAT_UNLOCK_ALERT]

    def test_missing_translation_falls_back(self) -> None:
        catalog = MessageCatalog("en")
        catalog.register_messages({Lang.CHAT_UNLOCK_ALERT: "translated"}, "fr")
        assert catalog.get_message(Lang.CHAT_UNLOCK_ALERT, "fr") == "translated"
        assert catalog.get_message(Lang.DISCORD_UNLOCK_ALERT, "fr") == DEFAULT_MESSAGES[Lang.DISCORD_UNLOCK_ALERT]

    def test_unknown_key_renders_key(self) -> None:
        assert MessageCatalog("en").get_message("NoSuchKey") == "NoSuchKey"
