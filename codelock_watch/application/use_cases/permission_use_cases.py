from __future__ import annotations

from dataclasses import dataclass

from codelock_watch.domain.ports.permission_service import IPermissionService


ADMIN_PERMISSION = "suspiciouscodeunlock.admin"
PERMISSIONS = [ADMIN_PERMISSION]


@dataclass(slots=True)
class RegisterPermissions:
    svc: IPermissionService

    def __call__(self) -> None:
        for name in PERMISSIONS:
            self.svc.register_permission(name)


@dataclass(slots=True)
class GrantAdmin:
    svc: IPermissionService

    def __call__(self, user_id: str) -> None:
        self.svc.grant_user_permission(user_id, ADMIN_PERMISSION)


@dataclass(slots=True)
class RevokeAdmin:
    svc: IPermissionService

    def __call__(self, user_id: str) -> None:
        self.svc.revoke_user_permission(user_id, ADMIN_PERMISSION)
