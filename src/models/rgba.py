"""
RGBA color value model
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class RGBA:
    """
    Normalized RGBA color

    All four channels are floats in [0, 1]. Alpha defaults to 1 (opaque).
    Instances are immutable, so a value can never be changed through a
    reference held elsewhere.
    """

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    @property
    def is_opaque(self) -> bool:
        """Whether the alpha channel is exactly 1"""
        return self.a == 1

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)

    def to_dict(self) -> dict:
        """Convert to dictionary"""
        return {'r': self.r, 'g': self.g, 'b': self.b, 'a': self.a}

    @classmethod
    def from_dict(cls, data: dict) -> 'RGBA':
        """Create RGBA from a dictionary, alpha falls back to 1"""
        return cls(
            r=float(data.get('r', 0.0)),
            g=float(data.get('g', 0.0)),
            b=float(data.get('b', 0.0)),
            a=float(data.get('a', 1.0)),
        )


# Fixed chrome colors that do not derive from any seed theme
OVERLAY_SCRIM = RGBA(0.0, 0.0, 0.0, 0.65)
ON_OVERLAY = RGBA(1.0, 1.0, 1.0, 1.0)
WHITE = RGBA(1.0, 1.0, 1.0, 1.0)
BLACK = RGBA(0.0, 0.0, 0.0, 1.0)
