"""Event variants understood by the :class:`EventAdapter`.

Each dataclass mirrors one world-mutation event raised by the host runtime.
The adapter mutates them in place: ``cancelled`` for cancellable events, the
``blocks`` list for explosions, ``new_current`` for redstone changes.  The
host reads those fields back after dispatch.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Union

if TYPE_CHECKING:
    from block_protection.events.world import Actor, Block

FALLING_BLOCK_ENTITY = "falling_block"


class InteractAction(str, Enum):
    """How a player interacted."""

    LEFT_CLICK_BLOCK = "left_click_block"
    RIGHT_CLICK_BLOCK = "right_click_block"
    LEFT_CLICK_AIR = "left_click_air"
    RIGHT_CLICK_AIR = "right_click_air"
    PHYSICAL = "physical"


class SpawnReason(str, Enum):
    """Why a creature spawned.  ``CUSTOM`` marks programmatic spawns."""

    NATURAL = "natural"
    SPAWNER = "spawner"
    SPAWNER_EGG = "spawner_egg"
    BREEDING = "breeding"
    COMMAND = "command"
    DEFAULT = "default"
    CUSTOM = "custom"


@dataclass
class _Cancellable:
    cancelled: bool = field(default=False, kw_only=True)


# ---------------------------------------------------------------------------
# Player actions
# ---------------------------------------------------------------------------


@dataclass
class BlockBreak(_Cancellable):
    kind: ClassVar[str] = "block_break"

    block: Block
    player: Actor | None = None


@dataclass
class BlockPlace(_Cancellable):
    kind: ClassVar[str] = "block_place"

    block: Block
    player: Actor | None = None


@dataclass
class PlayerInteract(_Cancellable):
    kind: ClassVar[str] = "player_interact"

    player: Actor
    action: InteractAction
    clicked_block: Block | None = None


# ---------------------------------------------------------------------------
# Indirect effects
# ---------------------------------------------------------------------------


@dataclass
class BlockRedstone:
    """Redstone current change; suppressed by restoring the old current."""

    kind: ClassVar[str] = "block_redstone"

    block: Block
    old_current: int
    new_current: int


@dataclass
class EntityExplode(_Cancellable):
    kind: ClassVar[str] = "entity_explode"

    blocks: list[Block]
    entity_type: str = "unknown"


@dataclass
class BlockExplode(_Cancellable):
    kind: ClassVar[str] = "block_explode"

    block: Block
    blocks: list[Block]


@dataclass
class PistonExtend(_Cancellable):
    kind: ClassVar[str] = "piston_extend"

    block: Block
    blocks: list[Block]


@dataclass
class PistonRetract(_Cancellable):
    kind: ClassVar[str] = "piston_retract"

    block: Block
    blocks: list[Block]


@dataclass
class EntityChangeBlock(_Cancellable):
    """An entity changing a block.

    Only falling block entities are checked; ``entity_type`` is matched
    against ``"falling_block"`` ignoring case.
    """

    kind: ClassVar[str] = "entity_change_block"

    block: Block
    entity_type: str


# ---------------------------------------------------------------------------
# Natural processes
# ---------------------------------------------------------------------------


@dataclass
class BlockGrow(_Cancellable):
    kind: ClassVar[str] = "block_grow"

    block: Block


@dataclass
class BlockSpread(_Cancellable):
    kind: ClassVar[str] = "block_spread"

    block: Block
    source: Block | None = None


@dataclass
class BlockForm(_Cancellable):
    kind: ClassVar[str] = "block_form"

    block: Block


@dataclass
class BlockFade(_Cancellable):
    kind: ClassVar[str] = "block_fade"

    block: Block


@dataclass
class BlockFlow(_Cancellable):
    """Liquid flowing from ``block`` into ``to_block``."""

    kind: ClassVar[str] = "block_flow"

    block: Block
    to_block: Block


@dataclass
class CreatureSpawn(_Cancellable):
    """A creature spawning; ``block`` is the block at the spawn location."""

    kind: ClassVar[str] = "creature_spawn"

    block: Block
    reason: SpawnReason
    entity_type: str = "unknown"


ProtectionEvent = Union[
    BlockBreak,
    BlockPlace,
    PlayerInteract,
    BlockRedstone,
    EntityExplode,
    BlockExplode,
    PistonExtend,
    PistonRetract,
    EntityChangeBlock,
    BlockGrow,
    BlockSpread,
    BlockForm,
    BlockFade,
    BlockFlow,
    CreatureSpawn,
]

EVENT_TYPES: tuple[type, ...] = (
    BlockBreak,
    BlockPlace,
    PlayerInteract,
    BlockRedstone,
    EntityExplode,
    BlockExplode,
    PistonExtend,
    PistonRetract,
    EntityChangeBlock,
    BlockGrow,
    BlockSpread,
    BlockForm,
    BlockFade,
    BlockFlow,
    CreatureSpawn,
)


__all__ = [
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
    "FALLING_BLOCK_ENTITY",
    "InteractAction",
    "PistonExtend",
    "PistonRetract",
    "PlayerInteract",
    "ProtectionEvent",
    "SpawnReason",
]
