from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from codelock_watch.config import PLUGIN_VERSION, settings
from codelock_watch.domain.models import PluginConfig
from codelock_watch.domain.ports.plugin_config_repository import IPluginConfigRepository


_log = logging.getLogger(__name__)

CONFIG_FILE_NAME = "suspicious_code_unlock.json"

# JSON keys as they appear on disk
KEY_VERSION = "Version"
KEY_WEBHOOK_URL = "Discord Webhook Url"


def default_config() -> PluginConfig:
    return PluginConfig(version=PLUGIN_VERSION, discord_webhook_url="")


def version_tuple(version: Optional[str]) -> Tuple[int, ...]:
    parts = []
    for chunk in str(version or "").split("."):
        try:
            parts.append(int(chunk))
        except ValueError:
            parts.append(0)
    return tuple(parts) or (0,)


def migrate_config(cfg: PluginConfig, current: str = PLUGIN_VERSION) -> Tuple[PluginConfig, bool]:
    """Bring a stored config up to ``current``; returns (config, changed)."""
    if version_tuple(cfg.version) >= version_tuple(current):
        return cfg, False
    _log.warning("Config changes detected! Updating...")
    previous = cfg.version
    if version_tuple(cfg.version) < version_tuple("1.0.0"):
        cfg = default_config()
    _log.warning("Config update complete! Updated from version %s to %s", previous, current)
    cfg.version = current
    return cfg, True


def _from_json(data: Dict[str, Any]) -> PluginConfig:
    return PluginConfig(
        version=str(data.get(KEY_VERSION) or ""),
        discord_webhook_url=str(data.get(KEY_WEBHOOK_URL) or ""),
    )


def _to_json(cfg: PluginConfig) -> Dict[str, Any]:
    return {KEY_VERSION: cfg.version, KEY_WEBHOOK_URL: cfg.discord_webhook_url}


class FilePluginConfigRepository(IPluginConfigRepository):
    def __init__(self, config_dir: Optional[Path] = None) -> None:
        self._dir = Path(config_dir or settings.config_dir)
        self._path = self._dir / CONFIG_FILE_NAME
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> PluginConfig:
        with self._lock:
            if not self._path.exists():
                cfg = default_config()
                self._write(cfg)
                return cfg
            try:
                data = json.loads(self._path.read_text(encoding="utf-8"))
                if not isinstance(data, dict):
                    data = {}
            except (OSError, ValueError) as exc:
                _log.warning("unreadable plugin config %s, using defaults: %s", self._path, exc)
                data = {}
            cfg, changed = migrate_config(_from_json(data))
            if changed:
                self._write(cfg)
            return cfg

    def save(self, cfg: PluginConfig) -> None:
        with self._lock:
            self._write(cfg)

    def _write(self, cfg: PluginConfig) -> None:
        self._dir.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(_to_json(cfg), ensure_ascii=False, indent=2), encoding="utf-8")
