"""Protocols for the host world model.

The protection core never creates blocks, actors or event buses.  The host
runtime supplies objects satisfying these protocols and owns their state;
the core only queries them and, for the anvil repair, writes block data.
"""
from __future__ import annotations

from typing import Callable, Protocol


class Block(Protocol):
    """A block in the host world."""

    @property
    def material(self) -> str:
        """Material name, e.g. ``"CHEST"`` or ``"CHIPPED_ANVIL"``."""
        ...

    def has_inventory(self) -> bool:
        """Return True when the block's state holds an inventory."""
        ...

    def is_interactable(self) -> bool:
        """Return True when right-clicking the block does something."""
        ...

    def get_block_data(self) -> str:
        """Return the serialised block data, e.g. ``"minecraft:anvil[facing=north]"``."""
        ...

    def set_block_data(self, data: str) -> None:
        """Replace the block data with its serialised form."""
        ...


class Actor(Protocol):
    """A player (or other named actor) an event can be attributed to."""

    @property
    def name(self) -> str:
        ...

    def send_message(self, message: str) -> None:
        ...


class EventSubscriber(Protocol):
    """Event registration surface of the host runtime."""

    def subscribe(self, event_type: type, handler: Callable[[object], object]) -> None:
        ...

    def unsubscribe(self, event_type: type, handler: Callable[[object], object]) -> None:
        ...


__all__ = ["Actor", "Block", "EventSubscriber"]
