from __future__ import annotations

from typing import Mapping, Optional, Protocol


class IMessageCatalog(Protocol):
    def register_messages(self, messages: Mapping[str, str], lang: str = "en") -> None:
        ...

    def get_message(self, key: str, lang: Optional[str] = None) -> str:
        ...
