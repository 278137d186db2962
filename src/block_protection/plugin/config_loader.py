"""Protection configuration loader with Pydantic v2 validation.

Loads a ``protection.yaml`` file into a typed :class:`ProtectionConfig`.
Category lists accept category values (``break_block``) and group names
(``direct_players``, ``indirect_players``, ``natural``, ``all``).  Unknown
keys are allowed so newer files still load.

Example
-------
>>> loader = ConfigLoader()
>>> config = loader.load_string("categories: [natural]\\nexclude: [mob_spawn]")
>>> sorted(c.value for c in config.active_categories())
['fade', 'flow', 'growth']
"""
from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from block_protection.policies.categories import (
    GROUPS,
    ProtectionCategory,
    resolve_categories,
)

_WILDCARD = "*"


def _validate_names(values: list[str]) -> list[str]:
    # resolve_categories raises ValueError for unknown names.
    resolve_categories(values)
    return [str(v).strip().lower() for v in values]


class BypassRuleConfig(BaseModel):
    """Named actors exempt from some (or all) categories."""

    model_config = {"extra": "allow"}

    actors: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)

    @field_validator("categories")
    @classmethod
    def validate_categories(cls, values: list[str]) -> list[str]:
        return _validate_names(values)

    def resolved_categories(self) -> frozenset[ProtectionCategory] | None:
        """Return the exempted categories, or ``None`` meaning all of them."""
        if not self.categories:
            return None
        return resolve_categories(self.categories)


class BypassConfig(BaseModel):
    """Bypass section: blanket actor exemptions plus scoped rules."""

    model_config = {"extra": "allow"}

    actors: list[str] = Field(default_factory=list)
    rules: list[BypassRuleConfig] = Field(default_factory=list)


class AuditConfig(BaseModel):
    """Configuration for the denial audit trail."""

    model_config = {"extra": "allow"}

    enabled: bool = Field(default=False)
    log_path: Path | None = Field(default=None)


class ProtectionConfig(BaseModel):
    """Top-level protection configuration schema.

    All sections are optional.  The default protects nothing.
    """

    model_config = {"extra": "allow"}

    version: str = Field(default="1")
    enabled: bool = Field(default=True)
    categories: list[str] = Field(default_factory=list)
    exclude: list[str] = Field(default_factory=list)
    deny_messages: dict[str, str] = Field(default_factory=dict)
    bypass: BypassConfig = Field(default_factory=BypassConfig)
    anvil_repair: bool = Field(default=True)
    audit: AuditConfig = Field(default_factory=AuditConfig)

    @field_validator("categories", "exclude")
    @classmethod
    def validate_categories(cls, values: list[str]) -> list[str]:
        return _validate_names(values)

    @field_validator("deny_messages")
    @classmethod
    def validate_message_keys(cls, values: dict[str, str]) -> dict[str, str]:
        normalised: dict[str, str] = {}
        for key, text in values.items():
            name = str(key).strip().lower()
            if name != _WILDCARD:
                resolve_categories([name])
            normalised[name] = text
        return normalised

    def active_categories(self) -> frozenset[ProtectionCategory]:
        """Return ``categories`` resolved, minus ``exclude``."""
        return resolve_categories(self.categories) - resolve_categories(self.exclude)

    def resolved_messages(self) -> dict[ProtectionCategory, str]:
        """Expand ``deny_messages`` keys to individual categories.

        The ``*`` wildcard applies first, then groups, then single
        categories, so more specific keys win.
        """
        expanded: dict[ProtectionCategory, str] = {}
        wildcard = self.deny_messages.get(_WILDCARD)
        if wildcard is not None:
            for category in GROUPS["all"]:
                expanded[category] = wildcard
        for key, text in self.deny_messages.items():
            if key in GROUPS:
                for category in GROUPS[key]:
                    expanded[category] = text
        for key, text in self.deny_messages.items():
            if key != _WILDCARD and key not in GROUPS:
                expanded[ProtectionCategory(key)] = text
        return expanded


class ConfigLoader:
    """Loads and validates protection YAML configuration."""

    def load(self, config_path: Path) -> ProtectionConfig:
        """Load and validate a protection YAML file.

        Raises
        ------
        FileNotFoundError:
            When the config file does not exist.
        ValueError:
            When the YAML content fails Pydantic validation.
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Protection config not found: {config_path}")

        with config_path.open("r", encoding="utf-8") as fh:
            raw: dict[str, object] = yaml.safe_load(fh) or {}

        return ProtectionConfig.model_validate(raw)

    def load_string(self, yaml_content: str) -> ProtectionConfig:
        """Load and validate a YAML string directly."""
        raw: dict[str, object] = yaml.safe_load(yaml_content) or {}
        return ProtectionConfig.model_validate(raw)

    def defaults(self) -> ProtectionConfig:
        """Return a default configuration with all defaults applied."""
        return ProtectionConfig()
