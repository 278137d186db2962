"""Event variants, host protocols and the event adapter."""
from __future__ import annotations

from block_protection.events.adapter import EventAdapter
from block_protection.events.kinds import (
    EVENT_TYPES,
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
    ProtectionEvent,
    SpawnReason,
)
from block_protection.events.world import Actor, Block, EventSubscriber

__all__ = [
    "Actor",
    "Block",
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
    "EVENT_TYPES",
    "EntityChangeBlock",
    "EntityExplode",
    "EventAdapter",
    "EventSubscriber",
    "InteractAction",
    "PistonExtend",
    "PistonRetract",
    "PlayerInteract",
    "ProtectionEvent",
    "SpawnReason",
]
