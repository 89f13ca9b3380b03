from __future__ import annotations

from typing import Protocol

from codelock_watch.domain.models import PluginConfig


class IPluginConfigRepository(Protocol):
    def load(self) -> PluginConfig:
        ...

    def save(self, cfg: PluginConfig) -> None:
        ...
