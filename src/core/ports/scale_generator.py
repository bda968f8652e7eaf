# -*- coding: utf-8 -*-
"""
Scale Generator Port Interface
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from models.seed_theme import SeedTheme


@runtime_checkable
class IScaleGenerator(Protocol):
    """Turns one seed color into a 12-step seed theme for one appearance

    Current implementation: SimpleScaleGenerator
    """

    def generate(
        self, appearance: str, accent: str, gray: str, background: str
    ) -> SeedTheme:
        """
        Args:
            appearance: "light" or "dark"
            accent: Seed color hex
            gray: Gray reference hex
            background: Background hex

        Returns:
            SeedTheme with 12 solid and 12 alpha steps
        """
        ...
