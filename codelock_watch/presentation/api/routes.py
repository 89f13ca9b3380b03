from __future__ import annotations

from fastapi import APIRouter

from codelock_watch import container
from codelock_watch.application.use_cases.permission_use_cases import ADMIN_PERMISSION
from codelock_watch.infrastructure.host.snapshot_adapters import (
    CollectingChatService,
    PermissionAdminRoster,
    SnapshotAuthorizationProvider,
    SnapshotSessionProvider,
    SnapshotTeamProvider,
)
from codelock_watch.presentation.api.schemas import ChatMessageOut, CodeEnteredIn, CodeEnteredOut


router = APIRouter(prefix="/api")


@router.get("/health")
async def health() -> dict:
    return {"status": "ok"}


@router.post("/hooks/code-entered", response_model=CodeEnteredOut)
def code_entered(payload: CodeEnteredIn) -> CodeEnteredOut:
    """Forwarded OnCodeEntered hook; admin chat lines come back in the response."""
    lock = payload.lock.to_domain() if payload.lock else None
    player = payload.player.to_domain() if payload.player else None
    host = payload.host
    online = [s.to_domain() for s in host.online_players]
    known = list(online)
    if host.owner is not None:
        known.append(host.owner.to_domain())

    chat = CollectingChatService()
    handler = container.handle_code_entered(
        sessions=SnapshotSessionProvider(known),
        teams=SnapshotTeamProvider(lock.owner_id if lock else 0, host.owner_team_members),
        authorization=SnapshotAuthorizationProvider(
            [player.user_id] if player is not None and host.player_building_authed else []
        ),
        roster=PermissionAdminRoster(online, container.permission_service(), ADMIN_PERMISSION),
        chat=chat,
    )
    verdict = handler(lock, player, payload.entered_code)
    return CodeEnteredOut(
        verdict=verdict.value if verdict is not None else None,
        messages=[ChatMessageOut(user_id=p.user_id, message=m) for p, m in chat.outbox],
    )
