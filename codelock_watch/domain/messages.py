from __future__ import annotations

from typing import Dict


class Lang:
    CHAT_UNLOCK_ALERT = "ChatUnlockAlert"
    DISCORD_UNLOCK_ALERT = "DiscordUnlockAlert"


DEFAULT_MESSAGES: Dict[str, str] = {
    Lang.CHAT_UNLOCK_ALERT: "Suspicious code unlock: {actor} unlocked a {entity} at {location} owned by {owner}.",
    Lang.DISCORD_UNLOCK_ALERT: (
        "Suspicious code unlock: {actor} ({actor_id}) unlocked a {entity} at {location} "
        "owned by {owner} ({owner_id})."
    ),
}
