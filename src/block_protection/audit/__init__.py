"""Audit trail of denied events."""
from __future__ import annotations

from block_protection.audit.logger import AuditLogger

__all__ = ["AuditLogger"]
