"""Built-in YAML protection templates for common setups.

Example
-------
>>> from block_protection.templates.policy_templates import get_template, list_templates
>>> list_templates()
['build_protection', 'full_lockdown', 'natural_freeze', 'spawn_protection']
>>> yaml_str = get_template("spawn_protection")
"""
from __future__ import annotations

from pathlib import Path

# ---------------------------------------------------------------------------
# Template definitions
# ---------------------------------------------------------------------------

_BUILD_PROTECTION = """\
# Build Protection Template
# -------------------------
# Stops players from changing blocks or opening containers. Redstone,
# pistons and natural processes keep working.

categories:
  - direct_players
deny_messages:
  break_block: "You cannot break blocks here."
  place_block: "You cannot place blocks here."
  container_access: "You cannot open containers here."
  interact: "You cannot use that here."
bypass:
  actors: []
"""

_SPAWN_PROTECTION = """\
# Spawn Protection Template
# -------------------------
# Protects the spawn area from players and explosions. Staff listed under
# bypass.actors may build freely.

categories:
  - direct_players
  - entity_explosion
  - block_explosion
  - anvil_damage
deny_messages:
  "*": "This is the spawn area."
bypass:
  actors:
    - admin
  rules:
    - actors: [builder]
      categories: [break_block, place_block]
anvil_repair: true
"""

_NATURAL_FREEZE = """\
# Natural Freeze Template
# -----------------------
# Keeps a region exactly as built: no growth, fading, liquid flow or
# natural mob spawning. Players are not restricted.

categories:
  - natural
"""

_FULL_LOCKDOWN = """\
# Full Lockdown Template
# ----------------------
# Protects against every category. Useful for showcase builds.

categories:
  - all
deny_messages:
  direct_players: "This area is locked."
audit:
  enabled: true
"""

_TEMPLATES: dict[str, str] = {
    "build_protection": _BUILD_PROTECTION,
    "full_lockdown": _FULL_LOCKDOWN,
    "natural_freeze": _NATURAL_FREEZE,
    "spawn_protection": _SPAWN_PROTECTION,
}


def list_templates() -> list[str]:
    """Return the names of all bundled templates, sorted."""
    return sorted(_TEMPLATES)


def get_template(name: str) -> str:
    """Return the YAML text of template *name*.

    Raises
    ------
    KeyError
        When *name* is not a bundled template.
    """
    try:
        return _TEMPLATES[name]
    except KeyError:
        available = ", ".join(list_templates())
        raise KeyError(f"Unknown template '{name}'. Available: {available}") from None


def write_template(name: str, destination: str | Path) -> Path:
    """Write template *name* to *destination* and return the path written."""
    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(get_template(name), encoding="utf-8")
    return path
