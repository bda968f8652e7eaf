"""
Service Layer Module
"""

from .config_service import ConfigService
from .documentation_service import DocumentationService
from .generation_service import GenerationService, next_version_number
from .token_synthesis_service import TokenSynthesisService, derive_accessible_color

__all__ = [
    'ConfigService',
    'DocumentationService',
    'GenerationService',
    'next_version_number',
    'TokenSynthesisService',
    'derive_accessible_color',
]
