"""Core protection policy: decides whether an action at a location is allowed.

A :class:`ProtectionPolicy` combines four parts:

- a membership predicate deciding which blocks it protects,
- the set of active :class:`ProtectionCategory` values,
- a :class:`BypassChain` of exemptions,
- a :class:`MessageTable` of deny messages.

An action is denied only when its category is active, the location is a
member, and no bypass rule exempts it.  Everything else is allowed.

Example
-------
>>> policy = ProtectionPolicy(lambda block: True, ProtectionCategory.BREAK_BLOCK)
>>> policy.evaluate(ProtectionCategory.BREAK_BLOCK, block).allowed
False
>>> policy.add_bypass_rule(for_actors("admin"))
>>> policy.evaluate(ProtectionCategory.BREAK_BLOCK, block, admin).allowed
True
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from block_protection.policies.bypass import BypassChain, BypassRule
from block_protection.policies.categories import CategorySet, ProtectionCategory
from block_protection.policies.messages import MessageTable, MessageTarget

if TYPE_CHECKING:
    from block_protection.events.world import Actor, Block

logger = logging.getLogger(__name__)

MembershipPredicate = Callable[["Block"], bool]


@dataclass(frozen=True)
class Verdict:
    """Outcome of evaluating one action against a policy.

    Attributes
    ----------
    allowed:
        Whether the action may proceed.
    category:
        The category that was evaluated.
    message:
        The deny message for *category*, when denied and one is set.
    bypassed:
        True when the action would have been denied but a bypass rule
        exempted it.
    """

    allowed: bool
    category: ProtectionCategory
    message: str | None = None
    bypassed: bool = False

    @property
    def denied(self) -> bool:
        return not self.allowed

    def __bool__(self) -> bool:
        """Return True if the action is allowed."""
        return self.allowed


class ProtectionPolicy:
    """Protects the blocks selected by *membership* against *categories*.

    Parameters
    ----------
    membership:
        Predicate returning True for blocks under this policy's protection.
        Called read-only; exceptions it raises propagate.
    categories:
        Initial active categories (single values or collections).
    enabled:
        Initial state of the enabled guard.
    """

    def __init__(
        self,
        membership: MembershipPredicate,
        *categories: ProtectionCategory | Iterable[ProtectionCategory],
        enabled: bool = True,
    ) -> None:
        self._membership = membership
        self._categories = CategorySet(*categories)
        self._bypass = BypassChain()
        self._messages = MessageTable()
        self._enabled = enabled

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def evaluate(
        self,
        category: ProtectionCategory,
        location: Block,
        actor: Actor | None = None,
    ) -> Verdict:
        """Evaluate one action.

        Checks run in order (category, membership, bypass) and stop at the
        first one that allows the action.  On denial, an actor with a
        configured message for *category* receives it once.

        Parameters
        ----------
        category:
            The kind of action being attempted.
        location:
            The block the action affects.
        actor:
            The player responsible, or ``None`` for environmental events.

        Returns
        -------
        Verdict
        """
        if not self._categories.contains(category):
            return Verdict(allowed=True, category=category)
        if not self._membership(location):
            return Verdict(allowed=True, category=category)
        if self._bypass.can_bypass(actor, category, location):
            return Verdict(allowed=True, category=category, bypassed=True)

        message = self._messages.lookup(category)
        logger.debug(
            "Denied %s at %r (actor=%s)",
            category.value,
            location,
            getattr(actor, "name", None),
        )
        if actor is not None and message is not None:
            actor.send_message(message)
        return Verdict(allowed=False, category=category, message=message)

    def is_protected(self, location: Block) -> bool:
        """Return the membership predicate's answer for *location*."""
        return bool(self._membership(location))

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    def set_categories(
        self,
        *categories: ProtectionCategory | Iterable[ProtectionCategory],
    ) -> None:
        """Replace the active categories."""
        self._categories.set(*categories)

    @property
    def categories(self) -> CategorySet:
        return self._categories

    # ------------------------------------------------------------------
    # Enabled guard
    # ------------------------------------------------------------------

    def enable(self) -> None:
        """Resume handling events.  Enabling an enabled policy is a no-op."""
        if not self._enabled:
            logger.info("Protection policy enabled")
        self._enabled = True

    def disable(self) -> None:
        """Stop handling events until :meth:`enable` is called."""
        if self._enabled:
            logger.info("Protection policy disabled")
        self._enabled = False

    @property
    def enabled(self) -> bool:
        return self._enabled

    # ------------------------------------------------------------------
    # Bypass rules and messages
    # ------------------------------------------------------------------

    def add_bypass_rule(self, rule: BypassRule) -> None:
        """Append a bypass rule; see :mod:`block_protection.policies.bypass`."""
        self._bypass.add(rule)

    def clear_bypass_rules(self) -> None:
        self._bypass.clear()

    def set_deny_message(self, target: MessageTarget, text: str) -> None:
        """Set the message shown to actors denied for *target* categories."""
        self._messages.set_message(target, text)

    def clear_deny_messages(self) -> None:
        self._messages.clear()

    @property
    def bypass_chain(self) -> BypassChain:
        return self._bypass

    @property
    def messages(self) -> MessageTable:
        return self._messages

    @property
    def membership(self) -> MembershipPredicate:
        return self._membership

    def __repr__(self) -> str:
        state = "enabled" if self._enabled else "disabled"
        return (
            f"ProtectionPolicy({state}, categories={len(self._categories)}, "
            f"bypass_rules={len(self._bypass)}, messages={len(self._messages)})"
        )


__all__ = ["MembershipPredicate", "ProtectionPolicy", "Verdict"]
