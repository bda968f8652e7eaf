# -*- coding: utf-8 -*-
"""
Container Factory Module

Creates and assembles all generator dependencies.

This is the **only** instance creation point (Composition Root).
All service instance creation should be done here, not within individual services.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from app.container import GeneratorContainer
    from core.event_bus import EventBus

logger = logging.getLogger(__name__)


def diagnostic_forwarder(event_bus: "EventBus") -> Callable[[str, str], None]:
    """State sink that republishes (level, message) as diagnostic events"""
    from core.event_bus import EventType

    def forward(level: str, message: str) -> None:
        event_type = EventType.ERROR_RECORDED if level == "error" else EventType.WARNING_RECORDED
        event_bus.publish_sync(event_type, message)

    return forward


class GeneratorContainerFactory:
    """Generator Container Factory

    Usage Example:
        # In main.py
        container = GeneratorContainerFactory.create(config_path=args.config)

        # In tests
        container = GeneratorContainerFactory.create_for_testing(max_modes_per_collection=1)
    """

    @staticmethod
    def create(
        config_path: str = "config/default_config.yaml",
        apply_defaults: bool = True,
    ) -> "GeneratorContainer":
        """Create Generator Container

        Args:
            config_path: Configuration file path
            apply_defaults: Seed the state options from the `defaults` config section

        Returns:
            A configured GeneratorContainer instance
        """
        from services.config_service import ConfigService

        logger.info("Creating generator container...")
        config = ConfigService(config_path)
        container = GeneratorContainerFactory._assemble(
            config,
            max_modes_per_collection=config.get("generator.max_modes_per_collection"),
        )
        if apply_defaults:
            defaults = config.get("defaults", {}) or {}
            container.state.update_options(defaults)

        logger.info("Generator container creation complete")
        return container

    @staticmethod
    def create_for_testing(
        config_path: Optional[str] = None,
        max_modes_per_collection: Optional[int] = None,
        read_only: bool = False,
    ) -> "GeneratorContainer":
        """Create a container for testing

        Uses built-in configuration defaults unless a config file is given,
        and leaves the state options at their documented defaults.

        Args:
            config_path: Optional configuration file path
            max_modes_per_collection: Mode limit of the in-memory store
            read_only: Create the store closed for writes
        """
        from services.config_service import ConfigService

        logger.info("Creating test generator container...")
        config = ConfigService(config_path)
        return GeneratorContainerFactory._assemble(
            config,
            max_modes_per_collection=max_modes_per_collection,
            read_only=read_only,
        )

    @staticmethod
    def _assemble(
        config,
        max_modes_per_collection: Optional[int] = None,
        read_only: bool = False,
    ) -> "GeneratorContainer":
        from app.container import GeneratorContainer
        from core.event_bus import EventBus
        from core.generation_state import GenerationState
        from core.scale_generator import SimpleScaleGenerator
        from core.variable_store import InMemoryVariableStore
        from services.documentation_service import DocumentationService
        from services.generation_service import GenerationService
        from services.token_synthesis_service import TokenSynthesisService

        # === 1. Infrastructure Layer ===
        event_bus = EventBus()
        store = InMemoryVariableStore(
            max_modes_per_collection=max_modes_per_collection,
            read_only=read_only,
        )
        state = GenerationState(sink=diagnostic_forwarder(event_bus))

        # === 2. Service Layer ===
        engine = TokenSynthesisService(
            store,
            state,
            contrast_threshold=float(config.get("generator.contrast_threshold", 4.5)),
        )
        scale_generator = SimpleScaleGenerator()
        documentation = DocumentationService(store)
        generation = GenerationService(
            store,
            state,
            engine,
            scale_generator,
            config=config,
            event_bus=event_bus,
            documentation=documentation,
        )

        # === 3. Assemble Container ===
        return GeneratorContainer(
            config=config,
            event_bus=event_bus,
            store=store,
            state=state,
            generation=generation,
            _engine=engine,
            _scale_generator=scale_generator,
            _documentation=documentation,
        )
