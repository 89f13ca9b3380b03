from __future__ import annotations

import math
from typing import Tuple

from codelock_watch.domain.models import UnlockEvent, Verdict


def evaluate(event: UnlockEvent) -> Verdict:
    """Owner, teammates and building-authed players are expected to know the code."""
    if event.actor_id == event.owner_id:
        return Verdict.BENIGN
    if event.is_teammate:
        return Verdict.BENIGN
    if event.is_authorized:
        return Verdict.BENIGN
    return Verdict.SUSPICIOUS


def _coord(value: float) -> str:
    # nan/inf can't be rounded; show them as they are
    if not math.isfinite(value):
        return str(value)
    return str(round(value))


def format_position(position: Tuple[float, float, float]) -> str:
    x, y, z = position
    return f"({_coord(x)}, {_coord(y)}, {_coord(z)})"
