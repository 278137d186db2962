"""Shared fakes for the host world model."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

import pytest


@dataclass(eq=False)
class FakeBlock:
    name: str
    material: str = "STONE"
    inventory: bool = False
    interactable: bool = False
    data: str = "minecraft:stone"

    def has_inventory(self) -> bool:
        return self.inventory

    def is_interactable(self) -> bool:
        return self.interactable

    def get_block_data(self) -> str:
        return self.data

    def set_block_data(self, data: str) -> None:
        self.data = data


@dataclass(eq=False)
class FakePlayer:
    name: str
    messages: list[str] = field(default_factory=list)

    def send_message(self, message: str) -> None:
        self.messages.append(message)


class FakeEventBus:
    def __init__(self) -> None:
        self.handlers: dict[type, list[Callable[[object], object]]] = {}

    def subscribe(self, event_type: type, handler: Callable[[object], object]) -> None:
        self.handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: type, handler: Callable[[object], object]) -> None:
        self.handlers.get(event_type, []).remove(handler)

    def publish(self, event: object) -> None:
        for handler in list(self.handlers.get(type(event), [])):
            handler(event)

    def handler_count(self) -> int:
        return sum(len(h) for h in self.handlers.values())


@pytest.fixture()
def block() -> FakeBlock:
    return FakeBlock("L")


@pytest.fixture()
def player() -> FakePlayer:
    return FakePlayer("steve")


@pytest.fixture()
def admin() -> FakePlayer:
    return FakePlayer("admin")


@pytest.fixture()
def bus() -> FakeEventBus:
    return FakeEventBus()


def protect_names(*names: str) -> Callable[[FakeBlock], bool]:
    protected = frozenset(names)
    return lambda b: b.name in protected


@pytest.fixture()
def protects() -> Callable[..., Callable[[FakeBlock], bool]]:
    """Return a factory building a membership predicate over block names."""
    return protect_names


@pytest.fixture()
def make_block() -> type[FakeBlock]:
    return FakeBlock


@pytest.fixture()
def make_player() -> type[FakePlayer]:
    return FakePlayer
