"""Plugin package for block-protection.

Exports the ProtectionPlugin entry point and configuration loader.
"""
from __future__ import annotations

from block_protection.plugin.config_loader import ConfigLoader, ProtectionConfig
from block_protection.plugin.protection_plugin import ProtectionPlugin

__all__ = [
    "ConfigLoader",
    "ProtectionConfig",
    "ProtectionPlugin",
]
