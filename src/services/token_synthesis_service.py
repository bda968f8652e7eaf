"""
Token Synthesis Service

Turns seed themes into named tokens inside a target namespace and mode.

Every write goes through one upsert path: look the token up by exact path
in the namespace index, update it if present, create it otherwise. Each
token operation is isolated; a failure becomes a TokenOutcome plus an
error diagnostic in the generation state, and the batch carries on.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Sequence

from core.color_math import (
    AA_CONTRAST_RATIO,
    hex_to_rgba,
    mix_colors,
    relative_luminance_contrast,
)
from core.errors import StoreWriteError
from models.results import FailureKind, TierResult, TokenOutcome, ValidationResult
from models.rgba import BLACK, RGBA, WHITE
from models.seed_theme import SCALE_LENGTH, SeedTheme
from models.variable import VariableCollection
from services.token_catalog import (
    BACKGROUND,
    BRAND,
    CONTRAST,
    CONTRAST_ROLES,
    DIRECT_TOKENS,
    ERROR,
    LITERAL,
    NEUTRAL,
    ROLE_LABELS,
    ROLES,
    SCALE_ALPHA,
    SEMANTIC_TOKENS,
    SUCCESS,
    DirectToken,
    spacing_tokens,
)

if TYPE_CHECKING:
    from core.generation_state import GenerationState
    from core.ports.variable_store import IVariableStore

logger = logging.getLogger(__name__)

ACCESSIBILITY_ATTEMPTS = 10


def derive_accessible_color(
    accent: RGBA, text: RGBA, background: RGBA, threshold: float = AA_CONTRAST_RATIO
) -> RGBA:
    """
    Pick a color close to `accent` that is legible on `background`.

    The accent is used as is when it already meets the threshold. Otherwise
    it is mixed toward `text` in 0.1 steps (starting at 0.9 accent share on
    dark backgrounds, 0.8 on light ones) and the first passing mix wins.
    Falls back to white on dark backgrounds and black on light ones.
    """
    if relative_luminance_contrast(accent, background) >= threshold:
        return accent

    is_dark = relative_luminance_contrast(background, WHITE) > relative_luminance_contrast(
        background, BLACK
    )
    start = 0.9 if is_dark else 0.8
    for attempt in range(ACCESSIBILITY_ATTEMPTS):
        weight = round(start - 0.1 * attempt, 2)
        if weight < 0:
            break
        mixed = mix_colors(accent, text, weight)
        if relative_luminance_contrast(mixed, background) >= threshold:
            logger.debug("Accessible mix found at accent share %.1f", weight)
            return mixed

    logger.debug("No accessible mix found, using %s fallback", "white" if is_dark else "black")
    return WHITE if is_dark else BLACK


class TokenSynthesisService:
    """
    Token Synthesis Service

    Usage example:
        engine = TokenSynthesisService(store, state)
        result = engine.synthesize_primitive_tier(
            collection, mode_id, brand, neutral, success, error
        )
        if not result.ok:
            print(result.failed_paths)
    """

    def __init__(
        self,
        store: "IVariableStore",
        state: "GenerationState",
        contrast_threshold: float = AA_CONTRAST_RATIO,
    ):
        self._store = store
        self._state = state
        self._contrast_threshold = contrast_threshold

    # === Single-token upserts ===

    def upsert_color_token(
        self, collection: VariableCollection, mode_id: str, path: str, value: RGBA
    ) -> TokenOutcome:
        """Create or update a color token for one mode"""
        return self._upsert(collection, mode_id, path, value, "COLOR")

    def upsert_color_token_from_hex(
        self, collection: VariableCollection, mode_id: str, path: str, hex_value: str
    ) -> TokenOutcome:
        """Decode hex and upsert; an undecodable color is recorded and nothing is written"""
        rgba = hex_to_rgba(hex_value)
        if rgba is None:
            return self._fail(
                path, mode_id, FailureKind.INVALID_COLOR, f"Invalid hex color: {hex_value}"
            )
        return self.upsert_color_token(collection, mode_id, path, rgba)

    def upsert_contrast_aware_token(
        self,
        collection: VariableCollection,
        mode_id: str,
        path: str,
        foreground_hex: str,
        background_hex: str,
    ) -> TokenOutcome:
        """
        Upsert the foreground color, logging its contrast against the background.

        The contrast check is advisory; a failing pair is still written.
        """
        foreground = hex_to_rgba(foreground_hex)
        background = hex_to_rgba(background_hex)
        if foreground is None or background is None:
            return self._fail(
                path,
                mode_id,
                FailureKind.INVALID_COLOR,
                f"Invalid colors for contrast: {foreground_hex}, {background_hex}",
            )

        ratio = relative_luminance_contrast(foreground, background)
        logger.debug(
            "Contrast ratio for %s: %.2f (AA: %s)",
            path, ratio, ratio >= self._contrast_threshold,
        )
        return self.upsert_color_token(collection, mode_id, path, foreground)

    def upsert_scalar_token(
        self, collection: VariableCollection, mode_id: str, path: str, value: float
    ) -> TokenOutcome:
        """Create or update a numeric token for one mode"""
        return self._upsert(collection, mode_id, path, float(value), "FLOAT")

    def _upsert(
        self,
        collection: VariableCollection,
        mode_id: str,
        path: str,
        value: object,
        resolved_type: str,
    ) -> TokenOutcome:
        try:
            variable = self._store.find_variable(collection, path)
            created = variable is None
            if created:
                if not collection.has_mode(mode_id):
                    raise StoreWriteError(f"Mode {mode_id} not found in '{collection.name}'")
                variable = self._store.create_variable(path, collection, resolved_type)
            self._store.set_value_for_mode(variable, mode_id, value)
        except Exception as e:
            logger.warning("Error creating/updating variable %s: %s", path, e, exc_info=True)
            return self._fail(
                path,
                mode_id,
                FailureKind.CREATE_OR_UPDATE_FAILURE,
                f"Failed to create variable: {path}",
            )

        logger.debug("%s variable: %s", "Created" if created else "Updated", path)
        return TokenOutcome(path=path, mode_id=mode_id, variable=variable, created=created)

    def _fail(self, path: str, mode_id: str, kind: FailureKind, message: str) -> TokenOutcome:
        self._state.add_error(message)
        return TokenOutcome(path=path, mode_id=mode_id, failure=kind, message=message)

    # === Tiers ===

    def synthesize_primitive_tier(
        self,
        collection: VariableCollection,
        mode_id: str,
        brand_theme: SeedTheme,
        neutral_theme: SeedTheme,
        success_theme: SeedTheme,
        error_theme: SeedTheme,
    ) -> TierResult:
        """Numbered scale, alpha scale and contrast tokens for each seed role"""
        themes = self._by_role(brand_theme, neutral_theme, success_theme, error_theme)
        result = TierResult(tier="primitive", mode_id=mode_id)
        logger.info("Creating or updating primitive variables for mode: %s", mode_id)

        for role in ROLES:
            theme = themes[role]
            label = ROLE_LABELS[role]
            for step, color in enumerate(theme.accent_scale, start=1):
                result.add(self.upsert_color_token_from_hex(
                    collection, mode_id, f"{label} Scale/{step}", color
                ))
            for step, color in enumerate(theme.accent_scale_alpha, start=1):
                result.add(self.upsert_color_token_from_hex(
                    collection, mode_id, f"{label} Scale Alpha/{step}", color
                ))
            if role in CONTRAST_ROLES:
                result.add(self.upsert_color_token_from_hex(
                    collection, mode_id, f"{label} Contrast/1", theme.accent_contrast
                ))

        self._log_tier(result)
        return result

    def synthesize_accessibility_tokens(
        self, collection: VariableCollection, mode_id: str, brand_theme: SeedTheme
    ) -> TierResult:
        """Background/1 and a contrast-adjusted Accessibility/1 from the brand theme"""
        result = TierResult(tier="accessibility", mode_id=mode_id)
        result.add(self.upsert_color_token_from_hex(
            collection, mode_id, "Background/1", brand_theme.background
        ))

        try:
            accent = hex_to_rgba(brand_theme.step(9))
            text = hex_to_rgba(brand_theme.step(12))
        except IndexError:
            accent = text = None
        background = hex_to_rgba(brand_theme.background)
        if accent is None or text is None or background is None:
            result.add(self._fail(
                "Accessibility/1",
                mode_id,
                FailureKind.INVALID_THEME,
                "Could not process brand colors for accessibility variable",
            ))
        else:
            color = derive_accessible_color(accent, text, background, self._contrast_threshold)
            result.add(self.upsert_color_token(collection, mode_id, "Accessibility/1", color))

        self._log_tier(result)
        return result

    def synthesize_semantic_tier(
        self,
        semantic_collection: VariableCollection,
        primitive_collection: Optional[VariableCollection],
        appearance: str,
    ) -> TierResult:
        """
        Curated role tokens per appearance pass.

        "light" and "both" run the light pass, "dark" and "both" the dark
        pass. Each pass writes into the mode of the same name ("Light" or
        "Dark") when the namespace has one, otherwise into its first mode.
        """
        result = TierResult(tier="semantic")
        logger.info(
            "Creating semantic variables for appearance: %s (primitives: %s)",
            appearance,
            primitive_collection.name if primitive_collection is not None else "none",
        )

        for pass_name in self._appearance_passes(appearance):
            mode_id = self._mode_for_pass(semantic_collection, pass_name)
            result.mode_id = result.mode_id or mode_id
            for path, hex_value in SEMANTIC_TOKENS[pass_name]:
                result.add(self.upsert_color_token_from_hex(
                    semantic_collection, mode_id, path, hex_value
                ))

        self._log_tier(result)
        return result

    def synthesize_direct_tier(
        self,
        collection: VariableCollection,
        mode_id: str,
        brand_theme: SeedTheme,
        neutral_theme: SeedTheme,
        success_theme: SeedTheme,
        error_theme: SeedTheme,
    ) -> TierResult:
        """Role tokens read straight from fixed scale steps (no primitive tier)"""
        themes = self._by_role(brand_theme, neutral_theme, success_theme, error_theme)
        result = TierResult(tier="direct", mode_id=mode_id)
        logger.info("Creating or updating direct variables for mode: %s", mode_id)

        for token in DIRECT_TOKENS:
            result.add(self._upsert_direct(collection, mode_id, token, themes))

        self._log_tier(result)
        return result

    def _upsert_direct(
        self,
        collection: VariableCollection,
        mode_id: str,
        token: DirectToken,
        themes: Dict[str, SeedTheme],
    ) -> TokenOutcome:
        if token.source == LITERAL:
            return self.upsert_color_token(collection, mode_id, token.path, token.literal)

        try:
            color = self._resolve(token, themes[token.role])
        except IndexError:
            return self._fail(
                token.path,
                mode_id,
                FailureKind.INVALID_THEME,
                f"Missing scale step {token.index + 1} for {token.path}",
            )

        if token.contrast_against is not None:
            return self.upsert_contrast_aware_token(
                collection, mode_id, token.path, color, themes[token.contrast_against].background
            )
        return self.upsert_color_token_from_hex(collection, mode_id, token.path, color)

    @staticmethod
    def _resolve(token: DirectToken, theme: SeedTheme) -> str:
        if token.source == BACKGROUND:
            return theme.background
        if token.source == CONTRAST:
            return theme.accent_contrast
        if token.source == SCALE_ALPHA:
            return theme.accent_scale_alpha[token.index]
        return theme.accent_scale[token.index]

    def synthesize_spacing_tier(self, collection: VariableCollection, mode_id: str) -> TierResult:
        """General, kerning and weight scalar tokens"""
        result = TierResult(tier="spacing", mode_id=mode_id)
        for path, value in spacing_tokens():
            result.add(self.upsert_scalar_token(collection, mode_id, path, value))
        self._log_tier(result)
        return result

    # === Validation ===

    @staticmethod
    def validate_theme_batch(themes: Sequence[SeedTheme]) -> ValidationResult:
        """Check every theme against every rule; all violations are reported"""
        errors: List[str] = []

        for index, theme in enumerate(themes):
            if len(theme.accent_scale or []) != SCALE_LENGTH:
                errors.append(f"Theme {index}: accentScale must have {SCALE_LENGTH} colors")
            if len(theme.accent_scale_alpha or []) != SCALE_LENGTH:
                errors.append(f"Theme {index}: accentScaleAlpha must have {SCALE_LENGTH} colors")
            if not theme.accent_contrast:
                errors.append(f"Theme {index}: accentContrast is required")
            if not theme.background:
                errors.append(f"Theme {index}: background is required")

        return ValidationResult.from_errors(errors)

    # === Helpers ===

    @staticmethod
    def _by_role(
        brand: SeedTheme, neutral: SeedTheme, success: SeedTheme, error: SeedTheme
    ) -> Dict[str, SeedTheme]:
        return {BRAND: brand, NEUTRAL: neutral, SUCCESS: success, ERROR: error}

    @staticmethod
    def _appearance_passes(appearance: str) -> Iterable[str]:
        if appearance in ("light", "both"):
            yield "light"
        if appearance in ("dark", "both"):
            yield "dark"

    @staticmethod
    def _mode_for_pass(collection: VariableCollection, pass_name: str) -> str:
        mode = collection.mode_by_name(pass_name.capitalize())
        return mode.mode_id if mode is not None else collection.default_mode_id

    @staticmethod
    def _log_tier(result: TierResult) -> None:
        logger.info(
            "Finished %s tier: %d tokens, %d failed",
            result.tier, len(result.succeeded), len(result.failed),
        )
