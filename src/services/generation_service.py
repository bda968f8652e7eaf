# -*- coding: utf-8 -*-
"""
Generation Service Module

Drives one generation run: validate the options, pick the next version
label, derive the seed themes, create the namespaces and run the token
tiers in order. Progress and the final report are published on the event
bus; diagnostics go through the generation state.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Tuple

from core.errors import (
    CreateOrUpdateError,
    InvalidColorError,
    InvalidThemeError,
    ValidationFailureError,
)
from core.event_bus import EventType
from core.generation_state import NamespaceKind
from models.results import GenerationReport, GenerationStatus, TierResult
from models.seed_theme import SeedTheme
from models.variable import VariableCollection
from services.token_catalog import BRAND, ERROR, NEUTRAL, ROLES, SUCCESS

if TYPE_CHECKING:
    from core.event_bus import EventBus
    from core.generation_state import GenerationState
    from core.ports.scale_generator import IScaleGenerator
    from core.ports.variable_store import IVariableStore
    from services.config_service import ConfigService
    from services.documentation_service import DocumentationService
    from services.token_synthesis_service import TokenSynthesisService

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "SCS"

_VERSION_SUFFIX = re.compile(r"(\d+)\.(\d+)$")

# Scale generator inputs per appearance when the config has none
_SCALE_DEFAULTS = {
    "light": {"gray": "#CCCCCC", "background": "#FFFFFF"},
    "dark": {"gray": "#555555", "background": "#1C1C1C"},
}


def next_version_number(names: Iterable[str], prefix: str = DEFAULT_PREFIX) -> str:
    """
    Next version label after the highest '<prefix> ... X.Y' name.

    No matching name gives "1.0"; a minor of 9 rolls over to the next major.
    """
    highest: Optional[Tuple[int, int]] = None
    for name in names:
        if not name.startswith(prefix):
            continue
        match = _VERSION_SUFFIX.search(name)
        if match is None:
            continue
        version = (int(match.group(1)), int(match.group(2)))
        if highest is None or version > highest:
            highest = version

    if highest is None:
        return "1.0"
    major, minor = highest
    if minor >= 9:
        return f"{major + 1}.0"
    return f"{major}.{minor + 1}"


class _RunStopped(Exception):
    """Internal: ends a run early with the given status"""

    def __init__(self, status: GenerationStatus):
        super().__init__(status.value)
        self.status = status


class GenerationService:
    """
    Generation Service

    Usage example:
        service = GenerationService(store, state, engine, SimpleScaleGenerator())
        state.update_options(hex_color="#FF5733", appearance="dark")
        report = service.generate()
        print(report.summary)
    """

    def __init__(
        self,
        store: "IVariableStore",
        state: "GenerationState",
        engine: "TokenSynthesisService",
        scale_generator: "IScaleGenerator",
        config: Optional["ConfigService"] = None,
        event_bus: Optional["EventBus"] = None,
        documentation: Optional["DocumentationService"] = None,
    ):
        self._store = store
        self._state = state
        self._engine = engine
        self._scale_generator = scale_generator
        self._config = config
        self._event_bus = event_bus
        self._documentation = documentation

    @property
    def prefix(self) -> str:
        return self._setting("generator.collection_prefix", DEFAULT_PREFIX)

    def _setting(self, key: str, default: Any) -> Any:
        if self._config is None:
            return default
        return self._config.get(key, default)

    def _publish(self, event_type: EventType, data: Any = None) -> None:
        if self._event_bus is not None:
            self._event_bus.publish_sync(event_type, data)

    # === Run ===

    def generate(self) -> GenerationReport:
        """
        Run one generation from the options currently in the state.

        Diagnostics from earlier runs are cleared first. The run never
        raises for per-token failures; they show up as a DEGRADED status.
        """
        self._state.clear_all()
        options = self._state.options
        report = GenerationReport()
        logger.info(
            "Starting generation: brand=%s appearance=%s primitives=%s",
            options.hex_color, options.appearance, options.include_primitives,
        )
        self._publish(EventType.GENERATION_STARTED, options)

        try:
            self._run(report)
        except (ValidationFailureError, InvalidThemeError) as e:
            logger.warning("Generation rejected: %s", e)
            report.status = GenerationStatus.REJECTED
        except _RunStopped as stop:
            report.status = stop.status
        else:
            report.status = (
                GenerationStatus.DEGRADED if self._state.has_errors()
                else GenerationStatus.COMPLETE
            )

        report.errors = list(self._state.errors)
        report.warnings = list(self._state.warnings)
        logger.info("Generation finished: %s", report.summary)
        self._state.log_state()
        self._publish(EventType.GENERATION_COMPLETED, report)
        return report

    def _run(self, report: GenerationReport) -> None:
        validation = self._state.validate()
        if not validation.is_valid:
            for message in validation.errors:
                self._state.add_error(message)
            raise ValidationFailureError(validation.errors)

        prefix = self.prefix
        version = next_version_number(
            (c.name for c in self._store.get_local_collections()), prefix
        )
        self._state.update_config(version_number=version)
        report.version_number = version
        logger.info("Next version number: %s", version)

        supports_multiple_modes = self.probe_multiple_modes()
        self._state.update_config(supports_multiple_modes=supports_multiple_modes)

        options = self._state.options
        appearances = self._active_appearances(options.appearance, supports_multiple_modes)
        report.appearances = list(appearances)

        themes = self._build_themes(appearances)
        batch = self._engine.validate_theme_batch(
            [theme for by_role in themes.values() for theme in by_role.values()]
        )
        if not batch.is_valid:
            for message in batch.errors:
                self._state.add_error(message)
            raise InvalidThemeError(batch.errors)
        self._check_closing()

        if options.include_primitives:
            self._run_primitives_path(report, prefix, version, appearances, themes)
        else:
            self._run_direct_path(report, prefix, version, appearances, themes)

        if options.font_family != "none":
            self._check_closing()
            spacing, modes = self._create_namespace(
                f"{prefix} Spacing {version}", ["Default"]
            )
            self._state.set_namespace_handle(NamespaceKind.SPACING, spacing)
            report.collections["spacing"] = spacing
            self._record(report, self._engine.synthesize_spacing_tier(spacing, modes["Default"]))

        if options.export_demo:
            self._state.add_warning("Demo export is not available in this generator; skipped")

    def _run_primitives_path(
        self,
        report: GenerationReport,
        prefix: str,
        version: str,
        appearances: List[str],
        themes: Dict[str, Dict[str, SeedTheme]],
    ) -> None:
        mode_names = [a.capitalize() for a in appearances]
        primitive, primitive_modes = self._create_namespace(
            f"{prefix} Primitive {version}", mode_names
        )
        semantic, semantic_modes = self._create_namespace(
            f"{prefix} Semantic {version}", mode_names
        )
        self._state.set_namespace_handle(NamespaceKind.PRIMITIVE, primitive)
        self._state.set_namespace_handle(NamespaceKind.SEMANTIC, semantic)
        report.collections["primitive"] = primitive
        report.collections["semantic"] = semantic

        for appearance in appearances:
            self._check_closing()
            mode_id = primitive_modes[appearance.capitalize()]
            by_role = themes[appearance]
            self._record(report, self._engine.synthesize_primitive_tier(
                primitive, mode_id,
                by_role[BRAND], by_role[NEUTRAL], by_role[SUCCESS], by_role[ERROR],
            ))
            self._record(report, self._engine.synthesize_accessibility_tokens(
                primitive, mode_id, by_role[BRAND]
            ))

        self._check_closing()
        semantic_appearance = "both" if len(appearances) > 1 else appearances[0]
        self._record(report, self._engine.synthesize_semantic_tier(
            semantic, primitive, semantic_appearance
        ))

        if self._state.options.export_documentation:
            first = appearances[0].capitalize()
            self._export_documentation(
                report, semantic, semantic_modes[first], primitive, primitive_modes[first]
            )

    def _run_direct_path(
        self,
        report: GenerationReport,
        prefix: str,
        version: str,
        appearances: List[str],
        themes: Dict[str, Dict[str, SeedTheme]],
    ) -> None:
        collection, modes = self._create_namespace(
            f"{prefix} Color {version}", [a.capitalize() for a in appearances]
        )
        self._state.set_namespace_handle(NamespaceKind.SEMANTIC, collection)
        report.collections["color"] = collection

        for appearance in appearances:
            self._check_closing()
            by_role = themes[appearance]
            self._record(report, self._engine.synthesize_direct_tier(
                collection, modes[appearance.capitalize()],
                by_role[BRAND], by_role[NEUTRAL], by_role[SUCCESS], by_role[ERROR],
            ))

        if self._state.options.export_documentation:
            self._export_documentation(
                report, collection, modes[appearances[0].capitalize()]
            )

    def _export_documentation(
        self,
        report: GenerationReport,
        collection: VariableCollection,
        mode_id: str,
        primitive: Optional[VariableCollection] = None,
        primitive_mode_id: Optional[str] = None,
    ) -> None:
        self._check_closing()
        if self._documentation is None:
            self._state.add_warning("Documentation export requested but no documentation service is configured")
            return
        report.documentation = self._documentation.build_rows(
            collection, mode_id, primitive, primitive_mode_id
        )

    # === Steps ===

    def probe_multiple_modes(self) -> bool:
        """Create a throwaway namespace, try adding a second mode, remove it"""
        try:
            probe = self._store.create_collection(f"{self.prefix} Mode Probe")
        except CreateOrUpdateError as e:
            logger.warning("Could not create mode probe collection: %s", e)
            return False

        try:
            self._store.add_mode(probe, "Probe")
            supported = True
        except CreateOrUpdateError as e:
            logger.info("Multiple modes not supported: %s", e)
            supported = False
        finally:
            try:
                self._store.remove_collection(probe)
            except CreateOrUpdateError as e:
                logger.warning("Could not remove mode probe collection: %s", e)
        return supported

    def _active_appearances(self, appearance: str, supports_multiple_modes: bool) -> List[str]:
        if appearance != "both":
            return [appearance]
        if not supports_multiple_modes:
            self._state.add_warning(
                "Multiple modes are not supported, generating the light appearance only"
            )
            return ["light"]
        return ["light", "dark"]

    def _build_themes(self, appearances: List[str]) -> Dict[str, Dict[str, SeedTheme]]:
        options = self._state.options
        seeds = {
            BRAND: options.hex_color,
            NEUTRAL: options.neutral,
            SUCCESS: options.success,
            ERROR: options.error,
        }

        themes: Dict[str, Dict[str, SeedTheme]] = {}
        invalid: List[str] = []
        for appearance in appearances:
            defaults = _SCALE_DEFAULTS[appearance]
            gray = self._setting(f"scale.{appearance}.gray", defaults["gray"])
            background = self._setting(f"scale.{appearance}.background", defaults["background"])
            themes[appearance] = {}
            for role in ROLES:
                try:
                    themes[appearance][role] = self._scale_generator.generate(
                        appearance, seeds[role], gray, background
                    )
                except InvalidColorError as e:
                    message = f"Invalid hex color: {e.value}"
                    self._state.add_error(message)
                    invalid.append(message)

        if invalid:
            raise InvalidThemeError(invalid)
        return themes

    def _create_namespace(
        self, name: str, mode_names: List[str]
    ) -> Tuple[VariableCollection, Dict[str, str]]:
        """Create a namespace whose modes carry the given names, in order"""
        try:
            collection = self._store.create_collection(name)
            modes = {mode_names[0]: collection.default_mode_id}
            self._store.rename_mode(collection, collection.default_mode_id, mode_names[0])
            for mode_name in mode_names[1:]:
                modes[mode_name] = self._store.add_mode(collection, mode_name)
        except CreateOrUpdateError as e:
            logger.error("Failed to create collection %s: %s", name, e)
            self._state.add_error(f"Failed to create collection: {name}")
            raise _RunStopped(GenerationStatus.ABORTED) from e

        logger.info("Created collection %s with modes %s", name, ", ".join(mode_names))
        return collection, modes

    def _check_closing(self) -> None:
        if self._state.is_closing:
            logger.info("Generation cancelled: document is closing")
            raise _RunStopped(GenerationStatus.CANCELLED)

    def _record(self, report: GenerationReport, tier: TierResult) -> None:
        report.tiers.append(tier)
        self._publish(EventType.TIER_COMPLETED, tier)
