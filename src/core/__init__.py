"""
Token Generator Core Module
"""

from .color_math import (
    AA_CONTRAST_RATIO,
    hex_to_rgba,
    meets_accessible_contrast,
    mix_colors,
    normalize_hex,
    parse_hex,
    relative_luminance,
    relative_luminance_contrast,
    rgb_to_hex,
    rgba_to_hex,
)
from .errors import (
    CreateOrUpdateError,
    InvalidColorError,
    InvalidThemeError,
    ModeLimitError,
    StoreWriteError,
    TokenGenerationError,
    ValidationFailureError,
)
from .event_bus import EventBus, EventType
from .generation_state import GenerationState, NamespaceKind
from .scale_generator import SimpleScaleGenerator
from .variable_store import InMemoryVariableStore

__all__ = [
    'AA_CONTRAST_RATIO',
    'hex_to_rgba',
    'meets_accessible_contrast',
    'mix_colors',
    'normalize_hex',
    'parse_hex',
    'relative_luminance',
    'relative_luminance_contrast',
    'rgb_to_hex',
    'rgba_to_hex',
    'CreateOrUpdateError',
    'InvalidColorError',
    'InvalidThemeError',
    'ModeLimitError',
    'StoreWriteError',
    'TokenGenerationError',
    'ValidationFailureError',
    'EventBus',
    'EventType',
    'GenerationState',
    'NamespaceKind',
    'SimpleScaleGenerator',
    'InMemoryVariableStore',
]
