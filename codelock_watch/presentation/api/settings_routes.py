from __future__ import annotations

from fastapi import APIRouter, HTTPException

from codelock_watch import container
from codelock_watch.presentation.api.schemas import PluginConfigIn, PluginConfigOut


router = APIRouter(prefix="/settings")


@router.get("/config", response_model=PluginConfigOut)
def read_config() -> PluginConfigOut:
    cfg = container.get_plugin_config()()
    return PluginConfigOut(version=cfg.version, discord_webhook_url=cfg.discord_webhook_url)


@router.put("/config", response_model=PluginConfigOut)
def update_config(body: PluginConfigIn) -> PluginConfigOut:
    cfg = container.set_webhook_url()(body.discord_webhook_url)
    return PluginConfigOut(version=cfg.version, discord_webhook_url=cfg.discord_webhook_url)


@router.put("/permissions/{user_id}")
def grant_admin(user_id: str) -> dict:
    try:
        container.grant_admin()(user_id)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return {"ok": True}


@router.delete("/permissions/{user_id}")
def revoke_admin(user_id: str) -> dict:
    container.revoke_admin()(user_id)
    return {"ok": True}
