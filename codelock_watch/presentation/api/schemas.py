from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from codelock_watch.domain.models import CodeLock, PlayerSession


class SessionIn(BaseModel):
    user_id: int
    display_name: str
    language: Optional[str] = None

    def to_domain(self) -> PlayerSession:
        return PlayerSession(user_id=self.user_id, display_name=self.display_name, language=self.language)


class CodeLockIn(BaseModel):
    code: str
    owner_id: int
    position: Tuple[float, float, float]
    parent_entity_name: Optional[str] = None

    def to_domain(self) -> CodeLock:
        return CodeLock(
            code=self.code,
            owner_id=self.owner_id,
            position=self.position,
            parent_entity_name=self.parent_entity_name,
        )


class HostSnapshotIn(BaseModel):
    owner: Optional[SessionIn] = None
    owner_team_members: List[int] = Field(default_factory=list)
    player_building_authed: bool = False
    online_players: List[SessionIn] = Field(default_factory=list)


class CodeEnteredIn(BaseModel):
    lock: Optional[CodeLockIn] = None
    player: Optional[SessionIn] = None
    entered_code: str
    host: HostSnapshotIn = Field(default_factory=HostSnapshotIn)


class ChatMessageOut(BaseModel):
    user_id: int
    message: str


class CodeEnteredOut(BaseModel):
    verdict: Optional[str] = None
    messages: List[ChatMessageOut] = Field(default_factory=list)


class PluginConfigIn(BaseModel):
    discord_webhook_url: str = ""


class PluginConfigOut(BaseModel):
    version: str
    discord_webhook_url: str
