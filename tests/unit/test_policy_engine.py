"""Unit tests for policies/engine.py — ProtectionPolicy and Verdict."""
from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from block_protection.policies.bypass import for_actors
from block_protection.policies.categories import (
    ALL_CATEGORIES,
    DIRECT_PLAYERS,
    NATURAL,
    ProtectionCategory,
)
from block_protection.policies.engine import ProtectionPolicy, Verdict

BREAK = ProtectionCategory.BREAK_BLOCK


def _always(block) -> bool:
    return True


def _never(block) -> bool:
    return False


# ---------------------------------------------------------------------------
# Verdict
# ---------------------------------------------------------------------------


class TestVerdict:
    def test_allowed_is_truthy(self) -> None:
        assert bool(Verdict(allowed=True, category=BREAK)) is True

    def test_denied_is_falsy(self) -> None:
        verdict = Verdict(allowed=False, category=BREAK, message="no")
        assert not verdict
        assert verdict.denied is True

    def test_frozen(self) -> None:
        verdict = Verdict(allowed=True, category=BREAK)
        with pytest.raises(AttributeError):
            verdict.allowed = False  # type: ignore[misc]


# ---------------------------------------------------------------------------
# evaluate
# ---------------------------------------------------------------------------


class TestEvaluate:
    @pytest.mark.parametrize("category", sorted(ALL_CATEGORIES - DIRECT_PLAYERS))
    def test_inactive_category_always_allowed(self, category, block, player) -> None:
        policy = ProtectionPolicy(_always, DIRECT_PLAYERS)
        assert policy.evaluate(category, block, player).allowed is True

    @pytest.mark.parametrize("category", sorted(ALL_CATEGORIES))
    def test_non_member_always_allowed(self, category, block, player) -> None:
        policy = ProtectionPolicy(_never, ALL_CATEGORIES)
        assert policy.evaluate(category, block, player).allowed is True

    @pytest.mark.parametrize("category", sorted(ALL_CATEGORIES))
    def test_bypass_always_allows(self, category, block, player) -> None:
        policy = ProtectionPolicy(_always, ALL_CATEGORIES)
        policy.add_bypass_rule(lambda a, c, l: True)
        verdict = policy.evaluate(category, block, player)
        assert verdict.allowed is True
        assert verdict.bypassed is True

    def test_denied_when_all_conditions_hold(self, block, player) -> None:
        policy = ProtectionPolicy(_always, BREAK)
        verdict = policy.evaluate(BREAK, block, player)
        assert verdict.allowed is False
        assert verdict.category is BREAK
        assert verdict.message is None

    def test_membership_not_called_for_inactive_category(self, block) -> None:
        membership = MagicMock(return_value=True)
        policy = ProtectionPolicy(membership, NATURAL)
        policy.evaluate(BREAK, block)
        membership.assert_not_called()

    def test_membership_receives_location(self, block) -> None:
        membership = MagicMock(return_value=False)
        ProtectionPolicy(membership, BREAK).evaluate(BREAK, block)
        membership.assert_called_once_with(block)

    def test_bypass_sees_none_for_actorless(self, block) -> None:
        rule = MagicMock(return_value=False)
        policy = ProtectionPolicy(_always, NATURAL)
        policy.add_bypass_rule(rule)
        policy.evaluate(ProtectionCategory.FLOW, block)
        rule.assert_called_once_with(None, ProtectionCategory.FLOW, block)

    def test_membership_errors_propagate(self, block) -> None:
        def broken(b):
            raise KeyError("world unloaded")

        policy = ProtectionPolicy(broken, BREAK)
        with pytest.raises(KeyError):
            policy.evaluate(BREAK, block)

    def test_admin_scenario(self, block, player, admin) -> None:
        policy = ProtectionPolicy(lambda b: b is block, BREAK)
        assert policy.evaluate(BREAK, block, player).denied
        policy.add_bypass_rule(lambda actor, c, l: actor is not None and actor.name == "admin")
        assert policy.evaluate(BREAK, block, admin).allowed
        assert policy.evaluate(BREAK, block, player).denied
        assert player.messages == []

    def test_is_protected(self, block) -> None:
        assert ProtectionPolicy(_always).is_protected(block) is True
        assert ProtectionPolicy(_never).is_protected(block) is False


# ---------------------------------------------------------------------------
# Deny messages
# ---------------------------------------------------------------------------


class TestDenyMessages:
    def test_message_delivered_once(self, block, player) -> None:
        policy = ProtectionPolicy(_always, BREAK)
        policy.set_deny_message(BREAK, "You can't break that")
        verdict = policy.evaluate(BREAK, block, player)
        assert verdict.message == "You can't break that"
        assert player.messages == ["You can't break that"]

    def test_no_message_when_allowed(self, block, player) -> None:
        policy = ProtectionPolicy(_never, BREAK)
        policy.set_deny_message(BREAK, "nope")
        policy.evaluate(BREAK, block, player)
        assert player.messages == []

    def test_no_message_when_bypassed(self, block, player) -> None:
        policy = ProtectionPolicy(_always, BREAK)
        policy.set_deny_message(BREAK, "nope")
        policy.add_bypass_rule(for_actors("steve"))
        policy.evaluate(BREAK, block, player)
        assert player.messages == []

    def test_clear_suppresses_delivery(self, block, player) -> None:
        policy = ProtectionPolicy(_always, BREAK)
        policy.set_deny_message(BREAK, "nope")
        policy.clear_deny_messages()
        verdict = policy.evaluate(BREAK, block, player)
        assert verdict.denied
        assert player.messages == []

    def test_actorless_denial_sends_nothing(self, block) -> None:
        policy = ProtectionPolicy(_always, NATURAL)
        policy.set_deny_message(lambda c: True, "nope")
        verdict = policy.evaluate(ProtectionCategory.FLOW, block)
        assert verdict.denied
        assert verdict.message == "nope"

    def test_filter_message(self, block, player) -> None:
        policy = ProtectionPolicy(_always, DIRECT_PLAYERS)
        policy.set_deny_message(lambda c: c in DIRECT_PLAYERS, "Protected area")
        policy.evaluate(ProtectionCategory.PLACE_BLOCK, block, player)
        assert player.messages == ["Protected area"]


# ---------------------------------------------------------------------------
# Mutators and enabled guard
# ---------------------------------------------------------------------------


class TestMutators:
    def test_set_categories_replaces(self, block) -> None:
        policy = ProtectionPolicy(_always, DIRECT_PLAYERS)
        policy.set_categories(ProtectionCategory.FLOW)
        assert policy.evaluate(BREAK, block).allowed
        assert policy.evaluate(ProtectionCategory.FLOW, block).denied

    def test_clear_bypass_rules(self, block, admin) -> None:
        policy = ProtectionPolicy(_always, BREAK)
        policy.add_bypass_rule(for_actors("admin"))
        policy.clear_bypass_rules()
        assert policy.evaluate(BREAK, block, admin).denied
        assert len(policy.bypass_chain) == 0

    def test_membership_property(self) -> None:
        assert ProtectionPolicy(_always).membership is _always

    def test_enabled_by_default(self) -> None:
        assert ProtectionPolicy(_always).enabled is True

    def test_disable_enable(self) -> None:
        policy = ProtectionPolicy(_always)
        policy.disable()
        assert policy.enabled is False
        policy.enable()
        policy.enable()
        assert policy.enabled is True

    def test_start_disabled(self) -> None:
        assert ProtectionPolicy(_always, enabled=False).enabled is False

    def test_repr(self) -> None:
        assert "enabled" in repr(ProtectionPolicy(_always, BREAK))
