"""
Data Models Module
"""

from .rgba import RGBA
from .seed_theme import SeedTheme, SCALE_LENGTH
from .variable import Mode, Variable, VariableCollection
from .results import (
    DocumentationRow,
    FailureKind,
    GenerationReport,
    GenerationStatus,
    TierResult,
    TokenOutcome,
    ValidationResult,
)

__all__ = [
    'RGBA',
    'SeedTheme',
    'SCALE_LENGTH',
    'Mode',
    'Variable',
    'VariableCollection',
    'DocumentationRow',
    'FailureKind',
    'GenerationReport',
    'GenerationStatus',
    'TierResult',
    'TokenOutcome',
    'ValidationResult',
]
