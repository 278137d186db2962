"""ProtectionPlugin: wires a configured policy into the host event bus.

The plugin owns the membership predicate supplied by the host, builds the
:class:`ProtectionPolicy`, :class:`EventAdapter` and optional
:class:`AuditLogger` from configuration, and manages its event
subscriptions:

- ``load_config(path)``   load protection YAML
- ``attach(subscriber)``  subscribe to every event variant, once
- ``detach()``            remove every subscription it made
- ``handle(event)``       evaluate an event directly
- ``get_status()``        summary of the current state

Example
-------
>>> plugin = ProtectionPlugin(lambda block: block.y > 60)
>>> plugin.load_config(Path("protection.yaml"))
>>> plugin.attach(server.events)
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from block_protection.audit.logger import AuditLogger
from block_protection.events.adapter import EventAdapter
from block_protection.events.kinds import EVENT_TYPES, ProtectionEvent
from block_protection.plugin.config_loader import ConfigLoader, ProtectionConfig
from block_protection.policies.bypass import for_actors
from block_protection.policies.engine import MembershipPredicate, ProtectionPolicy

if TYPE_CHECKING:
    from block_protection.events.world import EventSubscriber

logger = logging.getLogger(__name__)


class ProtectionPlugin:
    """Entry point for hosting a protection policy.

    Parameters
    ----------
    membership:
        Predicate selecting the blocks this plugin protects.
    config_loader:
        Optional :class:`ConfigLoader` override (for testing).
    """

    def __init__(
        self,
        membership: MembershipPredicate,
        config_loader: ConfigLoader | None = None,
    ) -> None:
        self._membership = membership
        self._config_loader = config_loader or ConfigLoader()
        self._config: ProtectionConfig | None = None

        # Initialised in _init_subsystems.
        self._policy: ProtectionPolicy | None = None
        self._adapter: EventAdapter | None = None
        self._audit: AuditLogger | None = None

        self._subscriber: EventSubscriber | None = None

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def load_config(self, path: str | Path) -> None:
        """Load and apply a protection YAML configuration.

        Raises
        ------
        FileNotFoundError:
            When the config file does not exist.
        """
        self._config = self._config_loader.load(Path(path))
        self._init_subsystems()
        logger.info("ProtectionPlugin loaded config from %s", path)

    def load_config_string(self, yaml_content: str) -> None:
        """Load and apply configuration from a YAML string."""
        self._config = self._config_loader.load_string(yaml_content)
        self._init_subsystems()

    def load_config_defaults(self) -> None:
        """Initialise with the default configuration (protects nothing)."""
        self._config = self._config_loader.defaults()
        self._init_subsystems()

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def attach(self, subscriber: EventSubscriber) -> None:
        """Subscribe the adapter to every event variant on *subscriber*.

        Attaching to the subscriber already attached is a no-op; attaching
        to a different one detaches from the previous subscriber first.
        """
        self._ensure_initialised()
        if self._subscriber is subscriber:
            return
        if self._subscriber is not None:
            self.detach()
        for event_type in EVENT_TYPES:
            subscriber.subscribe(event_type, self.handle)
        self._subscriber = subscriber
        logger.info("ProtectionPlugin subscribed to %d event types", len(EVENT_TYPES))

    def detach(self) -> None:
        """Remove every subscription made by :meth:`attach`."""
        if self._subscriber is None:
            return
        for event_type in EVENT_TYPES:
            self._subscriber.unsubscribe(event_type, self.handle)
        self._subscriber = None
        logger.info("ProtectionPlugin unsubscribed")

    @property
    def attached(self) -> bool:
        return self._subscriber is not None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def handle(self, event: ProtectionEvent) -> bool:
        """Evaluate *event*; see :meth:`EventAdapter.handle`."""
        self._ensure_initialised()
        assert self._adapter is not None
        return self._adapter.handle(event)

    def enable(self) -> None:
        self._ensure_initialised()
        assert self._policy is not None
        self._policy.enable()

    def disable(self) -> None:
        self._ensure_initialised()
        assert self._policy is not None
        self._policy.disable()

    def get_status(self) -> dict[str, object]:
        """Return a summary of the plugin state.

        Returns
        -------
        dict[str, object]
            Keys ``initialised``, ``enabled``, ``attached``, ``categories``,
            ``bypass_rules``, ``deny_messages``, ``denials``.
        """
        if self._policy is None:
            return {"initialised": False}

        return {
            "initialised": True,
            "enabled": self._policy.enabled,
            "attached": self.attached,
            "categories": [c.value for c in self._policy.categories],
            "bypass_rules": len(self._policy.bypass_chain),
            "deny_messages": len(self._policy.messages),
            "denials": self._audit.count() if self._audit is not None else None,
        }

    # ------------------------------------------------------------------
    # Properties for direct subsystem access
    # ------------------------------------------------------------------

    @property
    def config(self) -> ProtectionConfig | None:
        return self._config

    @property
    def policy(self) -> ProtectionPolicy | None:
        """The protection policy instance."""
        return self._policy

    @property
    def adapter(self) -> EventAdapter | None:
        """The event adapter instance."""
        return self._adapter

    @property
    def audit(self) -> AuditLogger | None:
        """The audit logger, when auditing is enabled."""
        return self._audit

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _init_subsystems(self) -> None:
        """Build the policy, audit trail and adapter from the loaded config."""
        assert self._config is not None
        config = self._config

        policy = ProtectionPolicy(
            self._membership,
            config.active_categories(),
            enabled=config.enabled,
        )
        for category, text in config.resolved_messages().items():
            policy.set_deny_message(category, text)
        if config.bypass.actors:
            policy.add_bypass_rule(for_actors(*config.bypass.actors))
        for rule in config.bypass.rules:
            policy.add_bypass_rule(
                for_actors(*rule.actors, categories=rule.resolved_categories())
            )

        self._audit = None
        if config.audit.enabled:
            self._audit = AuditLogger(log_path=config.audit.log_path)

        self._policy = policy
        self._adapter = EventAdapter(
            policy,
            audit_logger=self._audit,
            repair_anvils=config.anvil_repair,
        )

    def _ensure_initialised(self) -> None:
        """Raise if the plugin has not been initialised via load_config."""
        if self._config is None:
            raise RuntimeError(
                "ProtectionPlugin is not initialised. Call load_config() first."
            )
