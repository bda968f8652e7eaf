"""
Token Catalog

Declarative tables for every token the synthesis engine writes. The
step indices here are a contract: they encode the design system's visual
hierarchy (index 9 is the emphasized variant of index 8 everywhere), so
they are kept in one auditable place instead of inline.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from models.rgba import ON_OVERLAY, OVERLAY_SCRIM, RGBA

# === Seed roles ===

BRAND = "brand"
NEUTRAL = "neutral"
SUCCESS = "success"
ERROR = "error"

ROLES: Tuple[str, ...] = (BRAND, NEUTRAL, SUCCESS, ERROR)

ROLE_LABELS: Dict[str, str] = {
    BRAND: "Brand",
    NEUTRAL: "Neutral",
    SUCCESS: "Success",
    ERROR: "Error",
}

# Roles that get a "<Role> Contrast/1" primitive
CONTRAST_ROLES: Tuple[str, ...] = (BRAND, SUCCESS, ERROR)

# === Token sources ===

SCALE = "scale"
SCALE_ALPHA = "scale_alpha"
CONTRAST = "contrast"
BACKGROUND = "background"
LITERAL = "literal"


@dataclass(frozen=True)
class DirectToken:
    """
    One direct-tier token

    Attributes:
        path: Token path inside the namespace
        role: Seed role the value comes from (None for literals)
        source: SCALE, SCALE_ALPHA, CONTRAST, BACKGROUND or LITERAL
        index: Array index into the scale (step number is index + 1)
        contrast_against: When set, the token is written through the
                          contrast-aware upsert against this role's background
        literal: Fixed value for LITERAL tokens
    """

    path: str
    role: Optional[str]
    source: str
    index: Optional[int] = None
    contrast_against: Optional[str] = None
    literal: Optional[RGBA] = None

    @property
    def group(self) -> str:
        return self.path.split("/", 1)[0]

    @property
    def primitive_source(self) -> str:
        """Matching primitive-tier path, or a display value for literals"""
        if self.source == LITERAL:
            if self.literal == OVERLAY_SCRIM:
                return "#000000 65%"
            return "#FFFFFF"
        if self.contrast_against is not None:
            return "Accessibility/1"
        if self.source == BACKGROUND:
            return "Background/1"
        label = ROLE_LABELS[self.role]
        if self.source == CONTRAST:
            return f"{label} Contrast/1"
        if self.source == SCALE_ALPHA:
            return f"{label} Scale Alpha/{self.index + 1}"
        return f"{label} Scale/{self.index + 1}"


def _scale(path: str, role: str, index: int) -> DirectToken:
    return DirectToken(path=path, role=role, source=SCALE, index=index)


def _alpha(path: str, role: str, index: int) -> DirectToken:
    return DirectToken(path=path, role=role, source=SCALE_ALPHA, index=index)


def _contrast(path: str, role: str) -> DirectToken:
    return DirectToken(path=path, role=role, source=CONTRAST)


# Direct tier (no primitives): role tokens indexed straight into the seed themes.
# The neutral primary surface reads the *brand* theme's background.
DIRECT_TOKENS: Tuple[DirectToken, ...] = (
    # Surface
    DirectToken("surface/sf-neutral-primary", BRAND, BACKGROUND),
    _scale("surface/sf-neutral-secondary", NEUTRAL, 1),
    _scale("surface/sf-brand-primary", BRAND, 1),
    _scale("surface/sf-brand-primary-emphasized", BRAND, 2),
    _alpha("surface/sf-shadow", NEUTRAL, 3),
    # Text & icon
    _scale("text-icon/ti-neutral-primary", NEUTRAL, 11),
    _scale("text-icon/ti-neutral-secondary", NEUTRAL, 10),
    DirectToken("text-icon/ti-brand-primary", BRAND, SCALE, 8, contrast_against=BRAND),
    _contrast("text-icon/ti-on-bg-brand-primary", BRAND),
    _scale("text-icon/ti-on-bg-brand-primary-subtle", BRAND, 10),
    _contrast("text-icon/ti-on-bg-error", ERROR),
    _scale("text-icon/ti-on-bg-error-subtle", ERROR, 10),
    _contrast("text-icon/ti-on-bg-success", SUCCESS),
    _scale("text-icon/ti-on-bg-success-subtle", SUCCESS, 10),
    # Background
    _scale("background/bg-brand-primary", BRAND, 8),
    _scale("background/bg-brand-primary-emphasized", BRAND, 9),
    _scale("background/bg-brand-primary-subtle", BRAND, 2),
    _scale("background/bg-brand-primary-subtle-emphasized", BRAND, 3),
    _alpha("background/bg-brand-primary-overlay", BRAND, 5),
    _scale("background/bg-error", ERROR, 8),
    _scale("background/bg-error-emphasized", ERROR, 9),
    _scale("background/bg-error-subtle", ERROR, 2),
    _scale("background/bg-error-subtle-emphasized", ERROR, 3),
    _scale("background/bg-success", SUCCESS, 8),
    _scale("background/bg-success-emphasized", SUCCESS, 9),
    _scale("background/bg-success-subtle", SUCCESS, 2),
    _scale("background/bg-success-subtle-emphasized", SUCCESS, 3),
    # Border
    _scale("border/br-with-sf-neutral-primary", NEUTRAL, 6),
    _scale("border/br-with-sf-neutral-secondary", NEUTRAL, 7),
    _scale("border/br-with-bg-brand-primary", BRAND, 10),
    _scale("border/br-with-bg-brand-primary-subtle", BRAND, 7),
    _scale("border/br-with-bg-success", SUCCESS, 10),
    _scale("border/br-with-bg-success-subtle", SUCCESS, 7),
    _scale("border/br-with-bg-error", ERROR, 10),
    _scale("border/br-with-bg-error-subtle", ERROR, 7),
    # Fixed chrome
    DirectToken("surface/sf-overlay", None, LITERAL, literal=OVERLAY_SCRIM),
    DirectToken("text-icon/ti-on-surface-overlay", None, LITERAL, literal=ON_OVERLAY),
)

# Semantic tier: curated constants per appearance, independent of the seeds
SEMANTIC_TOKENS: Dict[str, Tuple[Tuple[str, str], ...]] = {
    "light": (
        ("Background/Primary", "#FFFFFF"),
        ("Background/Secondary", "#F8FAFC"),
        ("Background/Tertiary", "#F1F5F9"),
        ("Text/Primary", "#0F172A"),
        ("Text/Secondary", "#475569"),
        ("Text/Tertiary", "#94A3B8"),
        ("Border/Primary", "#E2E8F0"),
        ("Border/Secondary", "#CBD5E1"),
        ("Brand/Primary", "#3B82F6"),
        ("Brand/Secondary", "#1D4ED8"),
        ("Brand/Tertiary", "#1E40AF"),
    ),
    "dark": (
        ("Background/Primary", "#0F172A"),
        ("Background/Secondary", "#1E293B"),
        ("Background/Tertiary", "#334155"),
        ("Text/Primary", "#F8FAFC"),
        ("Text/Secondary", "#CBD5E1"),
        ("Text/Tertiary", "#94A3B8"),
        ("Border/Primary", "#475569"),
        ("Border/Secondary", "#64748B"),
        ("Brand/Primary", "#60A5FA"),
        ("Brand/Secondary", "#3B82F6"),
        ("Brand/Tertiary", "#2563EB"),
    ),
}

# === Spacing tier (scalar tokens) ===

SPACING_GENERAL: Tuple[int, ...] = (
    2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 16, 18, 20, 22, 24, 26, 28, 30,
    32, 34, 36, 40, 42, 44, 48, 52, 56, 57, 58, 59, 60, 61, 62, 63, 64, 68, 72, 80,
    88, 96,
)

SPACING_KERNING: Tuple[float, ...] = (
    -2.5, -2.3, -2.2, -2.1, -1.7, -1.6, -1.5, -1.4, -1.3, -1.2, -1.1, -1.0, -0.9,
    -0.8, -0.7, -0.6, -0.5, -0.4, -0.3, -0.2, -0.1, 0, 0.1, 0.2, 0.3, 0.4, 0.5,
    0.6, 0.7, 0.8, 0.9, 1.0, 1.1, 1.2, 1.3, 1.4, 1.5,
)

SPACING_WEIGHT: Tuple[int, ...] = (100, 200, 300, 400, 500, 600, 700, 800)


def _number_label(value: float) -> str:
    """1.0 -> '1', 0.5 -> '0-5'"""
    text = f"{value:g}"
    return text.replace(".", "-")


def kerning_path(value: float) -> str:
    """Kerning token path; negative values are bracketed: -0.5 -> 'Kerning/[0-5]'"""
    if value < 0:
        return f"Kerning/[{_number_label(abs(value))}]"
    return f"Kerning/{_number_label(value)}"


def spacing_tokens() -> Tuple[Tuple[str, float], ...]:
    """Every (path, value) pair of the spacing tier"""
    tokens = [(f"General/{value}", float(value)) for value in SPACING_GENERAL]
    tokens.extend((kerning_path(value), float(value)) for value in SPACING_KERNING)
    tokens.extend((f"Weight/{value}", float(value)) for value in SPACING_WEIGHT)
    return tuple(tokens)


def primitive_paths(role: str) -> Tuple[str, ...]:
    """All primitive-tier paths written for one role"""
    label = ROLE_LABELS[role]
    paths = [f"{label} Scale/{step}" for step in range(1, 13)]
    paths.extend(f"{label} Scale Alpha/{step}" for step in range(1, 13))
    if role in CONTRAST_ROLES:
        paths.append(f"{label} Contrast/1")
    return tuple(paths)
