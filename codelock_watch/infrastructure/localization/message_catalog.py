from __future__ import annotations

from typing import Dict, Mapping, Optional

from codelock_watch.config import settings
from codelock_watch.domain.messages import DEFAULT_MESSAGES
from codelock_watch.domain.ports.message_catalog import IMessageCatalog


class MessageCatalog(IMessageCatalog):
    def __init__(self, default_lang: Optional[str] = None) -> None:
        self._default_lang = (default_lang or settings.default_language or "en").lower()
        self._messages: Dict[str, Dict[str, str]] = {}
        self.register_messages(DEFAULT_MESSAGES, "en")

    def register_messages(self, messages: Mapping[str, str], lang: str = "en") -> None:
        table = self._messages.setdefault(lang.lower(), {})
        table.update(messages)

    def get_message(self, key: str, lang: Optional[str] = None) -> str:
        for candidate in (lang, self._default_lang, "en"):
            if not candidate:
                continue
            table = self._messages.get(candidate.lower())
            if table and key in table:
                return table[key]
        return key
