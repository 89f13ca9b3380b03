from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Dict, Optional, Set

from codelock_watch.config import settings
from codelock_watch.domain.ports.permission_service import IPermissionService


_log = logging.getLogger(__name__)

PERMISSIONS_FILE_NAME = "permissions.json"


class FilePermissionService(IPermissionService):
    """Permission grants keyed by user id string, persisted as ``{user_id: [perm, ...]}``."""

    def __init__(self, config_dir: Optional[Path] = None) -> None:
        self._path = Path(config_dir or settings.config_dir) / PERMISSIONS_FILE_NAME
        self._lock = threading.Lock()
        self._registered: Set[str] = set()
        self._grants: Dict[str, Set[str]] = self._read()

    def register_permission(self, name: str) -> None:
        with self._lock:
            self._registered.add(name.lower())

    def user_has_permission(self, user_id: str, name: str) -> bool:
        with self._lock:
            return name.lower() in self._grants.get(str(user_id), set())

    def grant_user_permission(self, user_id: str, name: str) -> None:
        key = name.lower()
        with self._lock:
            if key not in self._registered:
                raise ValueError(f"permission not registered: {name}")
            self._grants.setdefault(str(user_id), set()).add(key)
            self._write()

    def revoke_user_permission(self, user_id: str, name: str) -> None:
        with self._lock:
            perms = self._grants.get(str(user_id))
            if not perms or name.lower() not in perms:
                return
            perms.discard(name.lower())
            if not perms:
                del self._grants[str(user_id)]
            self._write()

    def _read(self) -> Dict[str, Set[str]]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            _log.warning("unreadable permissions file %s: %s", self._path, exc)
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): {str(p).lower() for p in (v or [])} for k, v in data.items()}

    def _write(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = {k: sorted(v) for k, v in self._grants.items()}
        self._path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
