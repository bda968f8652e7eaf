"""
Seed theme data model

One seed color expanded into a 12-step scale for one appearance.
"""

from dataclasses import dataclass, field
from typing import List

SCALE_LENGTH = 12


@dataclass
class SeedTheme:
    """
    Seed theme produced by the scale generator

    Attributes:
        accent_scale: 12 solid scale steps (index 0 is step "1")
        accent_scale_alpha: 12 alpha-blended variants of the same steps
        accent_contrast: Color guaranteed legible on top of the scale
        background: Background color the scale was generated against
    """

    accent_scale: List[str] = field(default_factory=list)
    accent_scale_alpha: List[str] = field(default_factory=list)
    accent_contrast: str = ""
    background: str = ""

    def step(self, number: int) -> str:
        """Solid color for a 1-indexed scale step"""
        return self.accent_scale[number - 1]

    def alpha_step(self, number: int) -> str:
        """Alpha color for a 1-indexed scale step"""
        return self.accent_scale_alpha[number - 1]

    def to_dict(self) -> dict:
        """Convert to dictionary (camelCase keys, as scale generators emit them)"""
        return {
            'accentScale': list(self.accent_scale),
            'accentScaleAlpha': list(self.accent_scale_alpha),
            'accentContrast': self.accent_contrast,
            'background': self.background,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'SeedTheme':
        """Create SeedTheme from a dictionary with camelCase or snake_case keys"""
        return cls(
            accent_scale=list(data.get('accentScale', data.get('accent_scale')) or []),
            accent_scale_alpha=list(
                data.get('accentScaleAlpha', data.get('accent_scale_alpha')) or []
            ),
            accent_contrast=data.get('accentContrast', data.get('accent_contrast', '')) or '',
            background=data.get('background', '') or '',
        )
