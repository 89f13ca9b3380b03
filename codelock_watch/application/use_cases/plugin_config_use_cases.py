from __future__ import annotations

from dataclasses import dataclass

from codelock_watch.domain.models import PluginConfig
from codelock_watch.domain.ports.plugin_config_repository import IPluginConfigRepository


@dataclass(slots=True)
class GetPluginConfig:
    repo: IPluginConfigRepository

    def __call__(self) -> PluginConfig:
        return self.repo.load()


@dataclass(slots=True)
class SetWebhookUrl:
    repo: IPluginConfigRepository

    def __call__(self, url: str) -> PluginConfig:
        cfg = self.repo.load()
        cfg.discord_webhook_url = (url or "").strip()
        self.repo.save(cfg)
        return cfg


@dataclass(slots=True)
class ResolveWebhookUrl:
    """Stored url first, then the env fallback."""

    repo: IPluginConfigRepository
    fallback: str = ""

    def __call__(self) -> str:
        return self.repo.load().discord_webhook_url or self.fallback
