# -*- coding: utf-8 -*-
"""
Generation State Module

Single mutable container for one generation run: configuration, user
options, namespace handles and the diagnostics collected along the way.

The state is an explicitly constructed object passed to the components
that need it. It never raises; invalid input is logged and ignored, and
failures elsewhere are only recorded here.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional

from models.results import ValidationResult

logger = logging.getLogger(__name__)

APPEARANCES = ("light", "dark", "both")

DiagnosticSink = Callable[[str, str], None]


class NamespaceKind(Enum):
    """Externally created namespaces tracked by the state"""

    PRIMITIVE = "primitive"
    SEMANTIC = "semantic"
    SPACING = "spacing"
    FONT = "font"


@dataclass
class GenerationConfig:
    """Run configuration"""

    version_number: str = "1.0"
    supports_multiple_modes: bool = False
    is_closing: bool = False


@dataclass
class GenerationOptions:
    """User-supplied generation options"""

    hex_color: str = "#3B82F6"
    neutral: str = "#6B7280"
    success: str = "#10B981"
    error: str = "#EF4444"
    appearance: str = "both"  # "light" | "dark" | "both"
    include_primitives: bool = True
    export_demo: bool = False
    export_documentation: bool = False
    font_family: str = "none"


@dataclass
class GenerationRuntime:
    """Namespace handles and diagnostics"""

    collections: Dict[NamespaceKind, Any] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


@dataclass
class StateSnapshot:
    """Copy of the state at one point in time; namespace handles are shared"""

    config: GenerationConfig
    options: GenerationOptions
    runtime: GenerationRuntime

    @property
    def error_count(self) -> int:
        return len(self.runtime.errors)

    @property
    def warning_count(self) -> int:
        return len(self.runtime.warnings)


def _merge(record: Any, updates: Mapping[str, Any], label: str) -> None:
    names = {f.name for f in fields(record)}
    for key, value in updates.items():
        if key in names:
            setattr(record, key, value)
        else:
            logger.warning("Ignoring unknown %s field: %s", label, key)


class GenerationState:
    """
    Generation State

    Usage Example:
        state = GenerationState()
        state.update_options(hex_color="#FF5733", appearance="dark")

        result = state.validate()
        if not result.is_valid:
            for message in result.errors:
                state.add_error(message)

        snapshot = state.get_snapshot()
        state.reset()
    """

    def __init__(self, sink: Optional[DiagnosticSink] = None):
        """
        Args:
            sink: Optional callback receiving (level, message) for every
                  recorded diagnostic; level is "error" or "warning".
        """
        self._sink = sink
        self._config = GenerationConfig()
        self._options = GenerationOptions()
        self._runtime = GenerationRuntime()

    # === Reads ===

    def get_snapshot(self) -> StateSnapshot:
        """
        Copy of the whole state; mutating it never touches the live state.

        Namespace handles are shared with the live state, not copied.
        """
        runtime = GenerationRuntime(
            collections=dict(self._runtime.collections),
            errors=list(self._runtime.errors),
            warnings=list(self._runtime.warnings),
        )
        return StateSnapshot(
            config=copy.deepcopy(self._config),
            options=copy.deepcopy(self._options),
            runtime=runtime,
        )

    @property
    def config(self) -> GenerationConfig:
        return copy.copy(self._config)

    @property
    def options(self) -> GenerationOptions:
        return copy.copy(self._options)

    @property
    def is_closing(self) -> bool:
        return self._config.is_closing

    @property
    def errors(self) -> List[str]:
        return list(self._runtime.errors)

    @property
    def warnings(self) -> List[str]:
        return list(self._runtime.warnings)

    # === Updates ===

    def update_config(self, updates: Optional[Mapping[str, Any]] = None, **changes: Any) -> None:
        """Shallow-merge fields into the config; unspecified fields are untouched"""
        _merge(self._config, {**(updates or {}), **changes}, "config")

    def update_options(self, updates: Optional[Mapping[str, Any]] = None, **changes: Any) -> None:
        """Shallow-merge fields into the options; unspecified fields are untouched"""
        _merge(self._options, {**(updates or {}), **changes}, "options")

    def set_sink(self, sink: Optional[DiagnosticSink]) -> None:
        self._sink = sink

    # === Namespace handles ===

    def set_namespace_handle(self, kind: NamespaceKind, handle: Any) -> None:
        """Store the handle for a namespace kind, replacing any previous one"""
        try:
            kind = NamespaceKind(kind)
        except ValueError:
            logger.warning("Ignoring handle for unknown namespace kind: %s", kind)
            return
        self._runtime.collections[kind] = handle

    def get_namespace_handle(self, kind: NamespaceKind) -> Any:
        try:
            return self._runtime.collections.get(NamespaceKind(kind))
        except ValueError:
            return None

    # === Diagnostics ===

    def add_error(self, message: str) -> None:
        self._runtime.errors.append(message)
        logger.error("[State] Error added: %s", message)
        self._notify("error", message)

    def add_warning(self, message: str) -> None:
        self._runtime.warnings.append(message)
        logger.warning("[State] Warning added: %s", message)
        self._notify("warning", message)

    def _notify(self, level: str, message: str) -> None:
        if self._sink is None:
            return
        try:
            self._sink(level, message)
        except Exception as e:
            logger.error("Diagnostic sink failed: %s", e)

    def clear_errors(self) -> None:
        self._runtime.errors = []

    def clear_warnings(self) -> None:
        self._runtime.warnings = []

    def clear_all(self) -> None:
        self.clear_errors()
        self.clear_warnings()

    def has_errors(self) -> bool:
        return len(self._runtime.errors) > 0

    def has_warnings(self) -> bool:
        return len(self._runtime.warnings) > 0

    def error_count(self) -> int:
        return len(self._runtime.errors)

    def warning_count(self) -> int:
        return len(self._runtime.warnings)

    # === Validation / lifecycle ===

    def validate(self) -> ValidationResult:
        """Check every rule and report all violations together"""
        errors: List[str] = []

        if not self._config.version_number:
            errors.append("Version number is required")

        if not self._options.hex_color:
            errors.append("Hex color is required")

        if self._options.appearance not in APPEARANCES:
            errors.append(
                "Appearance mode must be one of: " + ", ".join(APPEARANCES)
            )

        return ValidationResult.from_errors(errors)

    def reset(self) -> None:
        """Restore documented defaults and drop handles and diagnostics"""
        self._config = GenerationConfig()
        self._options = GenerationOptions()
        self._runtime = GenerationRuntime()

    def log_state(self) -> None:
        logger.debug("[State] config=%s options=%s", self._config, self._options)
        if self.has_errors():
            logger.debug("[State] errors=%s", self._runtime.errors)
        if self.has_warnings():
            logger.debug("[State] warnings=%s", self._runtime.warnings)
