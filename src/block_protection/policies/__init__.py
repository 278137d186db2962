"""Policy core for block-protection.

Exports the protection categories, bypass chain, message table and the
policy engine used by the event adapter and plugin layers.
"""
from __future__ import annotations

from block_protection.policies.bypass import (
    BypassChain,
    BypassRule,
    for_actors,
    for_categories,
    ignoring_location,
    players_only,
)
from block_protection.policies.categories import (
    ALL_CATEGORIES,
    DIRECT_PLAYERS,
    INDIRECT_PLAYERS,
    NATURAL,
    CategorySet,
    ProtectionCategory,
    all_except,
    resolve_categories,
    union_of,
)
from block_protection.policies.engine import ProtectionPolicy, Verdict
from block_protection.policies.messages import MessageTable

__all__ = [
    "ALL_CATEGORIES",
    "BypassChain",
    "BypassRule",
    "CategorySet",
    "DIRECT_PLAYERS",
    "INDIRECT_PLAYERS",
    "MessageTable",
    "NATURAL",
    "ProtectionCategory",
    "ProtectionPolicy",
    "Verdict",
    "all_except",
    "for_actors",
    "for_categories",
    "ignoring_location",
    "players_only",
    "resolve_categories",
    "union_of",
]
