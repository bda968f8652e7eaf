# -*- coding: utf-8 -*-
"""
Protocols Definition Module

Interfaces the composition root wires together. Infrastructure ports
(variable store, scale generator) live in core.ports and are re-exported
here so the app layer has one place to import them from.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Protocol, runtime_checkable

from core.ports.scale_generator import IScaleGenerator
from core.ports.variable_store import IVariableStore


# =============================================================================
# Event Bus Protocol
# =============================================================================

@runtime_checkable
class IEventBus(Protocol):
    """Publish-subscribe event system"""

    def subscribe(self, event_type: Enum, callback: Callable[[Any], None]) -> str:
        """Subscribe to an event; returns the subscription ID"""
        ...

    def unsubscribe(self, subscription_id: str) -> bool:
        ...

    def publish_sync(self, event_type: Enum, data: Any = None) -> None:
        """Deliver on the calling thread"""
        ...


# =============================================================================
# Configuration Service Protocol
# =============================================================================

@runtime_checkable
class IConfigService(Protocol):
    """Configuration Service Interface"""

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value

        Args:
            key: Configuration key, supports dot-separated nested keys
            default: Default value
        """
        ...

    def set(self, key: str, value: Any) -> None:
        ...

    def save(self) -> bool:
        ...


__all__ = [
    "IConfigService",
    "IEventBus",
    "IScaleGenerator",
    "IVariableStore",
]
