"""Bundled protection configuration templates."""
from __future__ import annotations

from block_protection.templates.policy_templates import (
    get_template,
    list_templates,
    write_template,
)

__all__ = ["get_template", "list_templates", "write_template"]
