from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Set, Tuple

from codelock_watch.domain.models import PlayerSession
from codelock_watch.domain.ports.host_services import (
    IAdminRoster,
    IAuthorizationProvider,
    IChatService,
    ISessionProvider,
    ITeamProvider,
)
from codelock_watch.domain.ports.permission_service import IPermissionService


# The game host forwards what it knows at callback time; these adapters answer
# the dispatcher's questions from that snapshot.


class SnapshotSessionProvider(ISessionProvider):
    def __init__(self, sessions: Iterable[PlayerSession]) -> None:
        self._by_id: Dict[int, PlayerSession] = {s.user_id: s for s in sessions}

    def find_by_id(self, user_id: int) -> Optional[PlayerSession]:
        return self._by_id.get(user_id)


class SnapshotTeamProvider(ITeamProvider):
    def __init__(self, owner_id: int, owner_team_members: Iterable[int]) -> None:
        self._owner_id = owner_id
        self._members: Set[int] = set(owner_team_members)

    def are_teammates(self, first_id: int, second_id: int) -> bool:
        # only the owner's team is known
        if first_id == self._owner_id:
            return second_id in self._members
        if second_id == self._owner_id:
            return first_id in self._members
        return False


class SnapshotAuthorizationProvider(IAuthorizationProvider):
    def __init__(self, authed_ids: Iterable[int]) -> None:
        self._authed: Set[int] = set(authed_ids)

    def is_building_authed(self, player: PlayerSession) -> bool:
        return player.user_id in self._authed


class PermissionAdminRoster(IAdminRoster):
    def __init__(self, online: Iterable[PlayerSession], permissions: IPermissionService, permission: str) -> None:
        self._online = list(online)
        self._permissions = permissions
        self._permission = permission

    def online_admins(self) -> Iterable[PlayerSession]:
        admins: Dict[int, PlayerSession] = {}
        for p in self._online:
            if p is None or p.user_id in admins:
                continue
            if self._permissions.user_has_permission(p.user_id_string, self._permission):
                admins[p.user_id] = p
        return list(admins.values())


class CollectingChatService(IChatService):
    """Buffers replies so the host can deliver them from the HTTP response."""

    def __init__(self) -> None:
        self.outbox: List[Tuple[PlayerSession, str]] = []

    def send_reply(self, player: PlayerSession, message: str) -> None:
        self.outbox.append((player, message))
