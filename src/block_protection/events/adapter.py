"""Maps host events onto policy evaluations and applies denial side effects.

Each event variant from :mod:`block_protection.events.kinds` resolves to a
protection category, one or more locations, and an optional actor.  On
denial the adapter applies the side effect that fits the event:

=====================  ==================  ===================================
Event                  Category            On denial
=====================  ==================  ===================================
BlockBreak             BREAK_BLOCK         cancel
BlockPlace             PLACE_BLOCK         cancel
BlockRedstone          REDSTONE            restore the old current
PlayerInteract         CONTAINER_ACCESS    cancel (anvil data repaired first)
                       or INTERACT
EntityExplode          ENTITY_EXPLOSION    drop protected blocks from the list
BlockExplode           BLOCK_EXPLOSION     drop protected blocks from the list
PistonExtend/Retract   PISTONS             cancel if piston or any moved block
EntityChangeBlock      FALLING_BLOCK       cancel (falling block entities only)
BlockGrow/Spread/Form  GROWTH              cancel
BlockFade              FADE                cancel
BlockFlow              FLOW                cancel (checks the destination)
CreatureSpawn          MOB_SPAWN           cancel (custom spawns always pass)
=====================  ==================  ===================================
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from block_protection.events.kinds import (
    FALLING_BLOCK_ENTITY,
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
from block_protection.policies.categories import ProtectionCategory

if TYPE_CHECKING:
    from block_protection.audit.logger import AuditLogger
    from block_protection.events.world import Actor, Block
    from block_protection.policies.engine import ProtectionPolicy

logger = logging.getLogger(__name__)

EVENT_CATEGORIES: dict[type, ProtectionCategory] = {
    BlockBreak: ProtectionCategory.BREAK_BLOCK,
    BlockPlace: ProtectionCategory.PLACE_BLOCK,
    BlockRedstone: ProtectionCategory.REDSTONE,
    EntityExplode: ProtectionCategory.ENTITY_EXPLOSION,
    BlockExplode: ProtectionCategory.BLOCK_EXPLOSION,
    PistonExtend: ProtectionCategory.PISTONS,
    PistonRetract: ProtectionCategory.PISTONS,
    EntityChangeBlock: ProtectionCategory.FALLING_BLOCK,
    BlockGrow: ProtectionCategory.GROWTH,
    BlockSpread: ProtectionCategory.GROWTH,
    BlockForm: ProtectionCategory.GROWTH,
    BlockFade: ProtectionCategory.FADE,
    BlockFlow: ProtectionCategory.FLOW,
    CreatureSpawn: ProtectionCategory.MOB_SPAWN,
}


def category_for(event_type: type) -> ProtectionCategory:
    """Return the category of *event_type*, following its base classes.

    Host runtimes may subclass the event variants; a subclass maps to the
    category of the nearest variant it derives from.

    Raises
    ------
    KeyError
        When no class in the hierarchy has a fixed category.
    """
    for klass in event_type.__mro__:
        category = EVENT_CATEGORIES.get(klass)
        if category is not None:
            return category
    raise KeyError(event_type)


def resolve_interact_category(block: Block) -> ProtectionCategory | None:
    """Return the category for right-clicking *block*.

    Containers map to CONTAINER_ACCESS.  Other blocks map to INTERACT when
    they are interactable, and to ``None`` (nothing to protect) otherwise.
    """
    if block.has_inventory():
        return ProtectionCategory.CONTAINER_ACCESS
    if block.is_interactable():
        return ProtectionCategory.INTERACT
    return None


def repaired_anvil_data(data: str) -> str:
    """Strip the damage state from serialised anvil block data.

    ``"minecraft:damaged_anvil[facing=east]"`` becomes ``"anvil[facing=east]"``.
    Data without ``anvil`` in it is returned unchanged.
    """
    index = data.find("anvil")
    if index < 0:
        return data
    return data[index:]


class EventAdapter:
    """Applies a :class:`ProtectionPolicy` to host events.

    Parameters
    ----------
    policy:
        The policy deciding each evaluation.
    audit_logger:
        Optional audit trail; one record is written per denied event.
    repair_anvils:
        Reset damaged anvils in protected areas when ANVIL_DAMAGE is active.
        Hosts whose block data has no damage state should pass ``False``.
    """

    def __init__(
        self,
        policy: ProtectionPolicy,
        audit_logger: AuditLogger | None = None,
        repair_anvils: bool = True,
    ) -> None:
        self._policy = policy
        self._audit = audit_logger
        self._repair_anvils = repair_anvils

    def handle(self, event: ProtectionEvent) -> bool:
        """Evaluate *event* and apply the denial side effect, if any.

        Returns
        -------
        bool
            True when the event was cancelled, reverted or filtered.
        """
        if not self._policy.enabled:
            return False

        match event:
            case BlockBreak() | BlockPlace():
                return self._cancel_if_denied(event, event.block, event.player)

            case PlayerInteract():
                return self._handle_interact(event)

            case BlockRedstone():
                verdict = self._policy.evaluate(ProtectionCategory.REDSTONE, event.block)
                if verdict.allowed:
                    return False
                event.new_current = event.old_current
                self._record(event, ProtectionCategory.REDSTONE, None, 1)
                return True

            case EntityExplode() | BlockExplode():
                category = category_for(type(event))
                kept = [b for b in event.blocks if self._policy.evaluate(category, b).allowed]
                removed = len(event.blocks) - len(kept)
                if removed == 0:
                    return False
                # The host owns this list, so filter it in place.
                event.blocks[:] = kept
                self._record(event, category, None, removed)
                return True

            case PistonExtend() | PistonRetract():
                for block in (event.block, *event.blocks):
                    if self._policy.evaluate(ProtectionCategory.PISTONS, block).denied:
                        event.cancelled = True
                        self._record(event, ProtectionCategory.PISTONS, None, 1)
                        return True
                return False

            case EntityChangeBlock():
                if str(event.entity_type).lower() != FALLING_BLOCK_ENTITY:
                    return False
                return self._cancel_if_denied(event, event.block, None)

            case BlockGrow() | BlockSpread() | BlockForm() | BlockFade():
                return self._cancel_if_denied(event, event.block, None)

            case BlockFlow():
                return self._cancel_if_denied(event, event.to_block, None)

            case CreatureSpawn():
                if event.reason == SpawnReason.CUSTOM:
                    return False
                return self._cancel_if_denied(event, event.block, None)

            case _:
                raise TypeError(f"Unsupported event type: {type(event).__name__}")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _handle_interact(self, event: PlayerInteract) -> bool:
        block = event.clicked_block
        if event.action != InteractAction.RIGHT_CLICK_BLOCK or block is None:
            return False

        if self._repair_anvils and block.material.upper().endswith("ANVIL"):
            self._repair_anvil(block)

        category = resolve_interact_category(block)
        if category is None:
            return False
        verdict = self._policy.evaluate(category, block, event.player)
        if verdict.allowed:
            return False
        event.cancelled = True
        self._record(event, category, event.player, 1)
        return True

    def _repair_anvil(self, block: Block) -> None:
        if not self._policy.categories.contains(ProtectionCategory.ANVIL_DAMAGE):
            return
        if not self._policy.is_protected(block):
            return
        data = block.get_block_data()
        repaired = repaired_anvil_data(data)
        if repaired != data:
            logger.debug("Repairing anvil data %s -> %s", data, repaired)
            block.set_block_data(repaired)

    def _cancel_if_denied(
        self,
        event: ProtectionEvent,
        block: Block,
        actor: Actor | None,
    ) -> bool:
        category = category_for(type(event))
        verdict = self._policy.evaluate(category, block, actor)
        if verdict.allowed:
            return False
        event.cancelled = True  # type: ignore[union-attr]
        self._record(event, category, actor, 1)
        return True

    def _record(
        self,
        event: ProtectionEvent,
        category: ProtectionCategory,
        actor: Actor | None,
        blocks: int,
    ) -> None:
        if self._audit is None:
            return
        self._audit.log(
            {
                "event": "protection_denied",
                "event_kind": event.kind,
                "category": category.value,
                "actor": getattr(actor, "name", None),
                "blocks": blocks,
            }
        )

    @property
    def policy(self) -> ProtectionPolicy:
        return self._policy


__all__ = [
    "EVENT_CATEGORIES",
    "EventAdapter",
    "category_for",
    "repaired_anvil_data",
    "resolve_interact_category",
]
