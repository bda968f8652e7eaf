"""
Result records for token synthesis and generation runs
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class FailureKind(Enum):
    """Why a single token operation or a validation failed"""

    INVALID_COLOR = "invalid_color"
    INVALID_THEME = "invalid_theme"
    CREATE_OR_UPDATE_FAILURE = "create_or_update_failure"
    VALIDATION_FAILURE = "validation_failure"


class GenerationStatus(Enum):
    """Final status of a generation run"""

    COMPLETE = "complete"
    DEGRADED = "degraded"      # Finished, but errors were recorded
    REJECTED = "rejected"      # Invalid options or themes, nothing written
    ABORTED = "aborted"        # A namespace could not be created
    CANCELLED = "cancelled"    # config.is_closing was raised mid-run


@dataclass
class ValidationResult:
    """Outcome of a rule-based validation; every violated rule is listed"""

    is_valid: bool = True
    errors: List[str] = field(default_factory=list)

    @classmethod
    def from_errors(cls, errors: List[str]) -> 'ValidationResult':
        return cls(is_valid=not errors, errors=list(errors))


@dataclass
class TokenOutcome:
    """Result of one upsert"""

    path: str
    mode_id: str
    variable: Any = None
    created: bool = False
    failure: Optional[FailureKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.failure is None


@dataclass
class TierResult:
    """Per-token outcomes of one tier synthesis call"""

    tier: str
    mode_id: str = ""
    outcomes: List[TokenOutcome] = field(default_factory=list)

    def add(self, outcome: TokenOutcome) -> TokenOutcome:
        self.outcomes.append(outcome)
        return outcome

    @property
    def succeeded(self) -> List[TokenOutcome]:
        return [o for o in self.outcomes if o.ok]

    @property
    def failed(self) -> List[TokenOutcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def failed_paths(self) -> List[str]:
        return [o.path for o in self.failed]

    @property
    def ok(self) -> bool:
        return not self.failed

    def __len__(self) -> int:
        return len(self.outcomes)


@dataclass
class DocumentationRow:
    """One documented semantic token"""

    name: str
    variable_path: str
    primitive_source: str
    category: str
    hex_value: str = "#000000"


@dataclass
class GenerationReport:
    """Summary of one generation run"""

    status: GenerationStatus = GenerationStatus.COMPLETE
    version_number: str = ""
    appearances: List[str] = field(default_factory=list)
    collections: Dict[str, Any] = field(default_factory=dict)
    tiers: List[TierResult] = field(default_factory=list)
    documentation: List[DocumentationRow] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def token_operations(self) -> int:
        return sum(len(tier) for tier in self.tiers)

    @property
    def failed_operations(self) -> int:
        return sum(len(tier.failed) for tier in self.tiers)

    @property
    def summary(self) -> str:
        """Return a one-line summary of the run"""
        parts = [f"status={self.status.value}"]
        if self.version_number:
            parts.append(f"version={self.version_number}")
        if self.appearances:
            parts.append(f"appearances={'+'.join(self.appearances)}")
        parts.append(f"tokens={self.token_operations}")
        if self.failed_operations:
            parts.append(f"failed={self.failed_operations}")
        if self.errors:
            parts.append(f"errors={len(self.errors)}")
        if self.warnings:
            parts.append(f"warnings={len(self.warnings)}")
        return " / ".join(parts)
