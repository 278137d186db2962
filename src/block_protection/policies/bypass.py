"""Bypass rules: predicates that exempt an action from denial.

Every rule has the same shape, ``rule(actor, category, location) -> bool``.
``actor`` is ``None`` for events no player can be held responsible for
(explosions, growth, pistons and so on).  A :class:`BypassChain` ORs its
rules in insertion order and stops at the first one returning ``True``.

The helpers at the bottom build rules from narrower predicates.

Example
-------
>>> chain = BypassChain()
>>> chain.add(for_actors("admin"))
>>> chain.add(ignoring_location(lambda actor, category: category is ProtectionCategory.INTERACT))
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Optional

from block_protection.policies.categories import ProtectionCategory

if TYPE_CHECKING:
    from block_protection.events.world import Actor, Block

logger = logging.getLogger(__name__)

BypassRule = Callable[[Optional["Actor"], ProtectionCategory, "Block"], bool]


class BypassChain:
    """Ordered list of :data:`BypassRule` callables."""

    def __init__(self, rules: list[BypassRule] | None = None) -> None:
        self._rules: list[BypassRule] = list(rules or [])

    def add(self, rule: BypassRule) -> None:
        """Append *rule* to the end of the chain."""
        self._rules.append(rule)

    def clear(self) -> None:
        """Remove every rule."""
        self._rules.clear()

    def can_bypass(
        self,
        actor: Actor | None,
        category: ProtectionCategory,
        location: Block,
    ) -> bool:
        """Return True when any rule exempts this actor, category and location.

        Rules are evaluated in insertion order; evaluation stops at the
        first rule returning ``True``.  An empty chain never bypasses.
        Exceptions raised by a rule propagate to the caller.
        """
        for index, rule in enumerate(self._rules):
            if rule(actor, category, location):
                logger.debug(
                    "Bypass granted by rule #%d: actor=%s category=%s",
                    index,
                    getattr(actor, "name", None),
                    category.value,
                )
                return True
        return False

    @property
    def rules(self) -> list[BypassRule]:
        """A copy of the rules in evaluation order."""
        return list(self._rules)

    def __len__(self) -> int:
        return len(self._rules)


# ---------------------------------------------------------------------------
# Rule adapters
# ---------------------------------------------------------------------------


def ignoring_location(
    predicate: Callable[[Optional["Actor"], ProtectionCategory], bool],
) -> BypassRule:
    """Wrap an ``(actor, category)`` predicate as a full bypass rule."""

    def rule(actor: Actor | None, category: ProtectionCategory, location: Block) -> bool:
        return predicate(actor, category)

    return rule


def players_only(rule: BypassRule) -> BypassRule:
    """Wrap *rule* so it never fires for events without an actor."""

    def guarded(actor: Actor | None, category: ProtectionCategory, location: Block) -> bool:
        if actor is None:
            return False
        return rule(actor, category, location)

    return guarded


def for_actors(
    *names: str,
    categories: frozenset[ProtectionCategory] | None = None,
) -> BypassRule:
    """Exempt the named actors, optionally only for *categories*."""
    allowed_names = frozenset(names)

    def rule(actor: Actor | None, category: ProtectionCategory, location: Block) -> bool:
        if actor is None or actor.name not in allowed_names:
            return False
        return categories is None or category in categories

    return rule


def for_categories(*categories: ProtectionCategory) -> BypassRule:
    """Exempt every actor (and actorless events) for *categories*."""
    exempt = frozenset(categories)

    def rule(actor: Actor | None, category: ProtectionCategory, location: Block) -> bool:
        return category in exempt

    return rule


__all__ = [
    "BypassChain",
    "BypassRule",
    "for_actors",
    "for_categories",
    "ignoring_location",
    "players_only",
]
