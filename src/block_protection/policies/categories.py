"""Protection categories and their named groupings.

The set of categories is closed: every protectable action is listed in
:class:`ProtectionCategory` and the groupings below are fixed frozensets
built from an explicit tuple.  :class:`CategorySet` is the mutable holder a
policy uses for its active categories.

Example
-------
>>> active = CategorySet(DIRECT_PLAYERS)
>>> ProtectionCategory.BREAK_BLOCK in active
True
>>> all_except(ProtectionCategory.MOB_SPAWN) == ALL_CATEGORIES - {ProtectionCategory.MOB_SPAWN}
True
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum


class ProtectionCategory(str, Enum):
    """Kinds of world mutation a policy can protect against."""

    BREAK_BLOCK = "break_block"
    PLACE_BLOCK = "place_block"
    INTERACT = "interact"
    CONTAINER_ACCESS = "container_access"
    ENTITY_EXPLOSION = "entity_explosion"
    BLOCK_EXPLOSION = "block_explosion"
    PISTONS = "pistons"
    REDSTONE = "redstone"
    FALLING_BLOCK = "falling_block"
    GROWTH = "growth"
    FADE = "fade"
    FLOW = "flow"
    ANVIL_DAMAGE = "anvil_damage"
    MOB_SPAWN = "mob_spawn"


# ---------------------------------------------------------------------------
# Groupings
# ---------------------------------------------------------------------------

_ORDERED: tuple[ProtectionCategory, ...] = (
    ProtectionCategory.BREAK_BLOCK,
    ProtectionCategory.PLACE_BLOCK,
    ProtectionCategory.INTERACT,
    ProtectionCategory.CONTAINER_ACCESS,
    ProtectionCategory.ENTITY_EXPLOSION,
    ProtectionCategory.BLOCK_EXPLOSION,
    ProtectionCategory.PISTONS,
    ProtectionCategory.REDSTONE,
    ProtectionCategory.FALLING_BLOCK,
    ProtectionCategory.GROWTH,
    ProtectionCategory.FADE,
    ProtectionCategory.FLOW,
    ProtectionCategory.ANVIL_DAMAGE,
    ProtectionCategory.MOB_SPAWN,
)

#: Every protection category.
ALL_CATEGORIES: frozenset[ProtectionCategory] = frozenset(_ORDERED)

#: Actions taken directly by players: breaking, placing and interacting.
DIRECT_PLAYERS: frozenset[ProtectionCategory] = frozenset(
    {
        ProtectionCategory.BREAK_BLOCK,
        ProtectionCategory.PLACE_BLOCK,
        ProtectionCategory.INTERACT,
        ProtectionCategory.CONTAINER_ACCESS,
    }
)

#: Actions usually set off by players that affect blocks indirectly.
INDIRECT_PLAYERS: frozenset[ProtectionCategory] = frozenset(
    {
        ProtectionCategory.PISTONS,
        ProtectionCategory.REDSTONE,
        ProtectionCategory.ENTITY_EXPLOSION,
        ProtectionCategory.BLOCK_EXPLOSION,
        ProtectionCategory.FALLING_BLOCK,
    }
)

#: Natural processes not caused by players.
NATURAL: frozenset[ProtectionCategory] = frozenset(
    {
        ProtectionCategory.GROWTH,
        ProtectionCategory.FADE,
        ProtectionCategory.FLOW,
        ProtectionCategory.MOB_SPAWN,
    }
)

GROUPS: dict[str, frozenset[ProtectionCategory]] = {
    "all": ALL_CATEGORIES,
    "direct_players": DIRECT_PLAYERS,
    "indirect_players": INDIRECT_PLAYERS,
    "natural": NATURAL,
}


def ordered_categories() -> tuple[ProtectionCategory, ...]:
    """Return every category in declaration order."""
    return _ORDERED


def all_except(*excluded: ProtectionCategory) -> frozenset[ProtectionCategory]:
    """Return every category except those given."""
    return ALL_CATEGORIES.difference(excluded)


def union_of(*sets: Iterable[ProtectionCategory]) -> frozenset[ProtectionCategory]:
    """Return the union of several category collections."""
    combined: set[ProtectionCategory] = set()
    for categories in sets:
        combined.update(categories)
    return frozenset(combined)


def resolve_categories(names: Iterable[str]) -> frozenset[ProtectionCategory]:
    """Resolve configuration names into a set of categories.

    Each name is either a category value (``"break_block"``) or a group
    name from :data:`GROUPS` (``"natural"``).

    Raises
    ------
    ValueError
        When a name is neither a category nor a group.
    """
    resolved: set[ProtectionCategory] = set()
    for raw in names:
        name = str(raw).strip().lower()
        if name in GROUPS:
            resolved.update(GROUPS[name])
            continue
        try:
            resolved.add(ProtectionCategory(name))
        except ValueError:
            valid = sorted([c.value for c in _ORDERED] + list(GROUPS))
            raise ValueError(
                f"Unknown protection category '{raw}'. Valid: {valid}"
            ) from None
    return frozenset(resolved)


def _flatten(
    items: Iterable[ProtectionCategory | Iterable[ProtectionCategory]],
) -> Iterator[ProtectionCategory]:
    for item in items:
        # ProtectionCategory is a str, so test it before treating item as iterable.
        if isinstance(item, ProtectionCategory):
            yield item
        elif isinstance(item, str):
            yield ProtectionCategory(item)
        else:
            yield from (ProtectionCategory(c) for c in item)


# ---------------------------------------------------------------------------
# CategorySet
# ---------------------------------------------------------------------------


class CategorySet:
    """Mutable set of active protection categories.

    Arguments may be single categories or collections of them, so both
    ``CategorySet(ProtectionCategory.FLOW)`` and ``CategorySet(NATURAL)``
    work.  Order is irrelevant and duplicates collapse.
    """

    def __init__(
        self,
        *categories: ProtectionCategory | Iterable[ProtectionCategory],
    ) -> None:
        self._active: set[ProtectionCategory] = set(_flatten(categories))

    def contains(self, category: ProtectionCategory) -> bool:
        """Return True when *category* is active."""
        return category in self._active

    def set(
        self,
        *categories: ProtectionCategory | Iterable[ProtectionCategory],
    ) -> None:
        """Replace the active categories entirely."""
        replacement = set(_flatten(categories))
        self._active.clear()
        self._active.update(replacement)

    def snapshot(self) -> frozenset[ProtectionCategory]:
        """Return an immutable copy of the active categories."""
        return frozenset(self._active)

    def __contains__(self, category: object) -> bool:
        return category in self._active

    def __iter__(self) -> Iterator[ProtectionCategory]:
        return iter([c for c in _ORDERED if c in self._active])

    def __len__(self) -> int:
        return len(self._active)

    def __repr__(self) -> str:
        names = ", ".join(c.value for c in self)
        return f"CategorySet({names})"


__all__ = [
    "ALL_CATEGORIES",
    "CategorySet",
    "DIRECT_PLAYERS",
    "GROUPS",
    "INDIRECT_PLAYERS",
    "NATURAL",
    "ProtectionCategory",
    "all_except",
    "ordered_categories",
    "resolve_categories",
    "union_of",
]
