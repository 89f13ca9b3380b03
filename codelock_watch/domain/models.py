from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


UNKNOWN = "unknown"
UNKNOWN_ID = "0"


class Verdict(str, Enum):
    BENIGN = "benign"
    SUSPICIOUS = "suspicious"


@dataclass(frozen=True, slots=True)
class PlayerSession:
    user_id: int
    display_name: str
    language: Optional[str] = None

    @property
    def user_id_string(self) -> str:
        return str(self.user_id)


@dataclass(frozen=True, slots=True)
class CodeLock:
    code: str
    owner_id: int
    position: Tuple[float, float, float]
    # short prefab name of the door/box the lock hangs on; None when it can't be resolved
    parent_entity_name: Optional[str] = None


@dataclass(frozen=True, slots=True)
class UnlockEvent:
    """A correct code entry on somebody else's lock.

    Only built after the entered code matched, consumed right away and never stored.
    ``owner_id`` is the lock's owner id; ``owner_ref`` is the id string of the resolved
    owner session (``"0"`` when the owner could not be found).
    """

    actor_id: int
    actor_name: str
    owner_id: int
    owner_name: str
    owner_ref: str
    entity_name: str
    location: str
    is_teammate: bool
    is_authorized: bool

    @property
    def actor_ref(self) -> str:
        return str(self.actor_id)


@dataclass(slots=True)
class PluginConfig:
    version: str
    discord_webhook_url: str = ""
