# -*- coding: utf-8 -*-
"""
Application Container Module

Holds the service instances of one generator setup.

Design Principles:
- Only the entry point (CLI or host adapter) holds the complete container
- Callers run generations through `generation`; the rest is for inspection
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.protocols import IConfigService, IEventBus, IVariableStore
    from core.generation_state import GenerationState
    from services.generation_service import GenerationService


@dataclass
class GeneratorContainer:
    """Generator Dependency Container

    Usage Example:
        container = GeneratorContainerFactory.create()
        container.state.update_options(hex_color="#FF5733")
        report = container.generation.generate()
        container.cleanup()
    """

    config: "IConfigService"
    event_bus: "IEventBus"
    store: "IVariableStore"
    state: "GenerationState"
    generation: "GenerationService"

    # === Internal service references ===
    _engine: Any = field(default=None, repr=False)
    _scale_generator: Any = field(default=None, repr=False)
    _documentation: Any = field(default=None, repr=False)

    @property
    def engine(self) -> Any:
        return self._engine

    def cleanup(self) -> None:
        """Release resources; call once the container is no longer used"""
        # Stop forwarding diagnostics before the bus goes away
        self.state.set_sink(None)

        if self.event_bus and hasattr(self.event_bus, 'shutdown'):
            self.event_bus.shutdown()

        if self.store and hasattr(self.store, 'close'):
            self.store.close()
