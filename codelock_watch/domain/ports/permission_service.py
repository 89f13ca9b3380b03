from __future__ import annotations

from typing import Protocol


class IPermissionService(Protocol):
    def register_permission(self, name: str) -> None:
        ...

    def user_has_permission(self, user_id: str, name: str) -> bool:
        ...

    def grant_user_permission(self, user_id: str, name: str) -> None:
        ...

    def revoke_user_permission(self, user_id: str, name: str) -> None:
        ...
