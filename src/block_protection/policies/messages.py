"""Deny messages keyed by protection category."""
from __future__ import annotations

from collections.abc import Iterable
from typing import Callable, Union

from block_protection.policies.categories import ProtectionCategory, ordered_categories

MessageTarget = Union[
    ProtectionCategory,
    str,
    Callable[[ProtectionCategory], bool],
    Iterable[ProtectionCategory],
]


class MessageTable:
    """Maps categories to the message shown when that category is denied.

    A category without an entry is denied silently.
    """

    def __init__(self) -> None:
        self._messages: dict[ProtectionCategory, str] = {}

    def set_message(self, target: MessageTarget, text: str) -> None:
        """Set the deny message for one or more categories.

        Parameters
        ----------
        target:
            A category (or its string value), a predicate selecting
            categories, or an iterable of categories.
        text:
            The message sent to the actor on denial.

        Raises
        ------
        ValueError
            When a string target is not a category value.
        """
        for category in self._select(target):
            self._messages[category] = text

    def clear(self) -> None:
        """Remove every message."""
        self._messages.clear()

    def lookup(self, category: ProtectionCategory) -> str | None:
        """Return the message for *category*, or ``None`` when unset."""
        return self._messages.get(category)

    def as_dict(self) -> dict[str, str]:
        return {c.value: m for c, m in self._messages.items()}

    def __len__(self) -> int:
        return len(self._messages)

    @staticmethod
    def _select(target: MessageTarget) -> list[ProtectionCategory]:
        if isinstance(target, (ProtectionCategory, str)):
            return [ProtectionCategory(target)]
        if callable(target):
            return [c for c in ordered_categories() if target(c)]
        return [ProtectionCategory(c) for c in target]


__all__ = ["MessageTable", "MessageTarget"]
