"""Tests for the unlock classifier and location formatting."""

from __future__ import annotations

import itertools

import pytest

from codelock_watch.domain.classifier import evaluate, format_position
from codelock_watch.domain.models import UnlockEvent, Verdict


def _event(*, actor_id: int = 111, owner_id: int = 222, teammate: bool = False, authorized: bool = False) -> UnlockEvent:
    return UnlockEvent(
        actor_id=actor_id,
        actor_name="Eve",
        owner_id=owner_id,
        owner_name="Bob",
        owner_ref=str(owner_id),
        entity_name="door.hinged.wood",
        location="(120, 5, -40)",
        is_teammate=teammate,
        is_authorized=authorized,
    )


# ── TestEvaluate ─────────────────────────────────────────────

class TestEvaluate:
    @pytest.mark.parametrize("teammate,authorized", list(itertools.product([False, True], repeat=2)))
    def test_owner_is_always_benign(self, teammate: bool, authorized: bool) -> None:
        event = _event(actor_id=222, owner_id=222, teammate=teammate, authorized=authorized)
        assert evaluate(event) is Verdict.BENIGN

    @pytest.mark.parametrize("authorized", [False, True])
    def test_teammate_is_benign(self, authorized: bool) -> None:
        assert evaluate(_event(teammate=True, authorized=authorized)) is Verdict.BENIGN

    def test_building_authorized_is_benign(self) -> None:
        assert evaluate(_event(authorized=True)) is Verdict.BENIGN

    def test_stranger_is_suspicious(self) -> None:
        assert evaluate(_event()) is Verdict.SUSPICIOUS

    def test_unresolved_owner_still_suspicious(self) -> None:
        event = _event(owner_id=0)
        assert evaluate(event) is Verdict.SUSPICIOUS


# ── TestFormatPosition ───────────────────────────────────────

class TestFormatPosition:
    def test_whole_numbers(self) -> None:
        assert format_position((120.0, 5.0, -40.0)) == "(120, 5, -40)"

    def test_rounds_fractions(self) -> None:
        assert format_position((10.4, 0.6, -3.7)) == "(10, 1, -4)"

    def test_non_finite_components_pass_through(self) -> None:
        assert format_position((float("nan"), float("inf"), float("-inf"))) == "(nan, inf, -inf)"
