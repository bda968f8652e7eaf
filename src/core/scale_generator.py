# -*- coding: utf-8 -*-
"""
Simple Scale Generator Module

Builds a 12-step seed theme from one seed color by mixing it with the
background (light end) and a gray-tinted text color (dark end). Steps
follow the usual 12-step layout:

    1-2   app backgrounds
    3-5   component backgrounds
    6-8   borders
    9-10  solid fills (9 is the seed itself)
    11-12 text
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from core.color_math import (
    mix_colors,
    parse_hex,
    relative_luminance_contrast,
    rgb_to_hex,
    rgba_to_hex,
)
from models.rgba import BLACK, RGBA, WHITE
from models.seed_theme import SeedTheme

logger = logging.getLogger(__name__)

# Share of the seed color in steps 1-8, the rest is background
BACKGROUND_STEP_WEIGHTS: Tuple[float, ...] = (0.03, 0.07, 0.12, 0.18, 0.25, 0.34, 0.46, 0.62)

# Share of the seed in step 10 (rest is the emphasis color) and steps 11-12 (rest is text)
EMPHASIS_WEIGHT = 0.88
TEXT_STEP_WEIGHTS: Tuple[float, float] = (0.7, 0.35)
GRAY_TINT = 0.15


class SimpleScaleGenerator:
    """
    Simple Scale Generator

    Deterministic stand-in for a perceptual scale generator. Implements
    IScaleGenerator.

    Example:
        generator = SimpleScaleGenerator()
        theme = generator.generate("light", "#3B82F6", "#CCCCCC", "#FFFFFF")
        theme.step(9)   # -> "#3B82F6"
    """

    def generate(self, appearance: str, accent: str, gray: str, background: str) -> SeedTheme:
        """
        Raises:
            InvalidColorError: If any input color cannot be decoded
            ValueError: If appearance is not "light" or "dark"
        """
        if appearance not in ("light", "dark"):
            raise ValueError(f"Unsupported appearance: {appearance}")

        seed = self._opaque(parse_hex(accent))
        gray_rgba = self._opaque(parse_hex(gray))
        bg = self._opaque(parse_hex(background))

        # Light scales darken toward black, dark scales brighten toward white
        extreme = BLACK if appearance == "light" else WHITE
        text_end = mix_colors(gray_rgba, extreme, GRAY_TINT)
        emphasis = mix_colors(bg, extreme, 0.5) if appearance == "dark" else extreme

        solids: List[RGBA] = [mix_colors(seed, bg, w) for w in BACKGROUND_STEP_WEIGHTS]
        solids.append(seed)
        solids.append(mix_colors(seed, emphasis, EMPHASIS_WEIGHT))
        solids.extend(mix_colors(seed, text_end, w) for w in TEXT_STEP_WEIGHTS)

        alphas = [rgba_to_hex(seed.r, seed.g, seed.b, w) for w in BACKGROUND_STEP_WEIGHTS]
        alphas.extend(rgb_to_hex(c.r, c.g, c.b) for c in solids[8:])

        theme = SeedTheme(
            accent_scale=[rgb_to_hex(c.r, c.g, c.b) for c in solids],
            accent_scale_alpha=alphas,
            accent_contrast=self._contrast_color(seed),
            background=rgb_to_hex(bg.r, bg.g, bg.b),
        )
        logger.debug("Generated %s scale for %s: %s", appearance, accent, theme.accent_scale)
        return theme

    @staticmethod
    def _opaque(color: RGBA) -> RGBA:
        return RGBA(color.r, color.g, color.b, 1.0)

    @staticmethod
    def _contrast_color(fill: RGBA) -> str:
        if relative_luminance_contrast(fill, WHITE) >= relative_luminance_contrast(fill, BLACK):
            return "#FFFFFF"
        return "#000000"
