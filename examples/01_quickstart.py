#!/usr/bin/env python3
"""Example: Quickstart — block-protection

Protect a square around the origin from players and explosions, let an
admin bypass, and run a few events through the adapter.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install block-protection
"""
from __future__ import annotations

from dataclasses import dataclass, field

import block_protection as bp


@dataclass(eq=False)
class DemoBlock:
    x: int
    z: int
    material: str = "STONE"

    def has_inventory(self) -> bool:
        return self.material == "CHEST"

    def is_interactable(self) -> bool:
        return self.material in {"CHEST", "LEVER"}

    def get_block_data(self) -> str:
        return f"minecraft:{self.material.lower()}"

    def set_block_data(self, data: str) -> None:
        pass


@dataclass(eq=False)
class DemoPlayer:
    name: str
    inbox: list[str] = field(default_factory=list)

    def send_message(self, message: str) -> None:
        self.inbox.append(message)
        print(f"    -> message to {self.name}: {message}")


def in_spawn(block: DemoBlock) -> bool:
    return abs(block.x) <= 16 and abs(block.z) <= 16


def main() -> None:
    print(f"block-protection version: {bp.__version__}")

    # Step 1: build the policy
    policy = bp.ProtectionPolicy(
        in_spawn,
        bp.union_of(bp.DIRECT_PLAYERS, {bp.ProtectionCategory.ENTITY_EXPLOSION}),
    )
    policy.set_deny_message(lambda c: c in bp.DIRECT_PLAYERS, "This is the spawn area.")
    policy.add_bypass_rule(bp.for_actors("admin"))
    adapter = bp.EventAdapter(policy, audit_logger=bp.AuditLogger())

    steve, admin = DemoPlayer("steve"), DemoPlayer("admin")

    # Step 2: player events
    for actor in (steve, admin):
        event = bp.BlockBreak(DemoBlock(3, 4), actor)
        adapter.handle(event)
        print(f"  {actor.name} breaks (3, 4): cancelled={event.cancelled}")

    # Step 3: an explosion at the spawn border
    blast = bp.EntityExplode([DemoBlock(15, 0), DemoBlock(17, 0), DemoBlock(18, 0)])
    adapter.handle(blast)
    print(f"  explosion destroys: {[(b.x, b.z) for b in blast.blocks]}")


if __name__ == "__main__":
    main()
