from __future__ import annotations

from typing import Iterable, Optional, Protocol

from codelock_watch.domain.models import PlayerSession


class ISessionProvider(Protocol):
    def find_by_id(self, user_id: int) -> Optional[PlayerSession]:
        ...


class ITeamProvider(Protocol):
    def are_teammates(self, first_id: int, second_id: int) -> bool:
        ...


class IAuthorizationProvider(Protocol):
    def is_building_authed(self, player: PlayerSession) -> bool:
        ...


class IAdminRoster(Protocol):
    def online_admins(self) -> Iterable[PlayerSession]:
        """Connected sessions holding the admin permission."""
        ...


class IChatService(Protocol):
    def send_reply(self, player: PlayerSession, message: str) -> None:
        ...
