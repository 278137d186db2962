"""block-protection — rule-based protection of world regions against mutation events.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
>>> import block_protection as bp
>>> policy = bp.ProtectionPolicy(lambda block: True, bp.DIRECT_PLAYERS)
>>> adapter = bp.EventAdapter(policy)
>>> event = bp.BlockBreak(block, player)
>>> adapter.handle(event)
True
>>> event.cancelled
True
"""
from __future__ import annotations

__version__: str = "0.1.0"

# ---------------------------------------------------------------------------
# Policies
# ---------------------------------------------------------------------------
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
    union_of,
)
from block_protection.policies.engine import ProtectionPolicy, Verdict
from block_protection.policies.messages import MessageTable

# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------
from block_protection.events.adapter import EventAdapter
from block_protection.events.kinds import (
    BlockBreak,
    BlockExplode,
    BlockFade,
    BlockFlow,
    BlockForm,
    BlockGrow,
    BlockPlace,
    BlockRedstone,
    BlockSpread,
    CreatureSpawn,
    EntityChangeBlock,
    EntityExplode,
    InteractAction,
    PistonExtend,
    PistonRetract,
    PlayerInteract,
    SpawnReason,
)

# ---------------------------------------------------------------------------
# Plugin, audit and templates
# ---------------------------------------------------------------------------
from block_protection.audit.logger import AuditLogger
from block_protection.plugin.config_loader import ConfigLoader, ProtectionConfig
from block_protection.plugin.protection_plugin import ProtectionPlugin
from block_protection.templates.policy_templates import get_template, list_templates

__all__ = [
    "__version__",
    # Policies
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
    "union_of",
    # Events
    "BlockBreak",
    "BlockExplode",
    "BlockFade",
    "BlockFlow",
    "BlockForm",
    "BlockGrow",
    "BlockPlace",
    "BlockRedstone",
    "BlockSpread",
    "CreatureSpawn",
    "EntityChangeBlock",
    "EntityExplode",
    "EventAdapter",
    "InteractAction",
    "PistonExtend",
    "PistonRetract",
    "PlayerInteract",
    "SpawnReason",
    # Plugin, audit and templates
    "AuditLogger",
    "ConfigLoader",
    "ProtectionConfig",
    "ProtectionPlugin",
    "get_template",
    "list_templates",
]
