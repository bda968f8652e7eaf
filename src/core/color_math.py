"""
Color Math

Pure conversions between hex strings and normalized RGBA, WCAG contrast
computation and alpha-aware color mixing. Decoding failures are signalled
with None, never with an exception (except in parse_hex, which is the
raising variant for callers that want one).
"""

from __future__ import annotations

import re
from typing import Optional, Union

from core.errors import InvalidColorError
from models.rgba import RGBA

AA_CONTRAST_RATIO = 4.5

_HEX_BODY = re.compile(r"^[0-9A-Fa-f]+$")
_LINEAR_THRESHOLD = 0.03928

Number = Union[int, float]


def _strip_hash(text: str) -> str:
    return text[1:] if text.startswith("#") else text


def _expand_short(body: str) -> str:
    """F00 -> FF0000"""
    return "".join(ch * 2 for ch in body)


def hex_to_rgba(text: str) -> Optional[RGBA]:
    """
    Decode a hex color.

    Accepts an optional leading '#', and a 3, 6 or 8 digit body. The last
    byte of an 8 digit body is alpha. Returns None for anything else.
    """
    if not isinstance(text, str):
        return None
    body = _strip_hash(text)
    if len(body) == 3:
        body = _expand_short(body)
    if len(body) not in (6, 8) or not _HEX_BODY.match(body):
        return None

    alpha = int(body[6:8], 16) / 255 if len(body) == 8 else 1.0
    return RGBA(
        r=int(body[0:2], 16) / 255,
        g=int(body[2:4], 16) / 255,
        b=int(body[4:6], 16) / 255,
        a=alpha,
    )


def parse_hex(text: str) -> RGBA:
    """Like hex_to_rgba, but raises InvalidColorError instead of returning None"""
    rgba = hex_to_rgba(text)
    if rgba is None:
        raise InvalidColorError(text)
    return rgba


def _channel_byte(value: Number) -> int:
    return max(0, min(255, int(round(value * 255))))


def rgb_to_hex(r: Number, g: Number, b: Number) -> str:
    """Encode normalized channels as '#RRGGBB' (always 7 characters, uppercase)"""
    return "#" + "".join(f"{_channel_byte(v):02X}" for v in (r, g, b))


def rgba_to_hex(r: Number, g: Number, b: Number, a: Number = 1) -> str:
    """Encode as '#RRGGBB', appending an alpha byte only for non-opaque colors"""
    color_hex = rgb_to_hex(r, g, b)
    if a == 1:
        return color_hex
    return f"{color_hex}{_channel_byte(a):02X}"


def rgba_value_to_hex(color: RGBA) -> str:
    return rgba_to_hex(color.r, color.g, color.b, color.a)


def normalize_hex(text: str) -> str:
    """
    Canonical display string for a hex color.

    '#fff' -> '#FFFFFF', 'ff0000' -> '#FF0000', '#FF000080' -> '#FF0000 50%'.
    Other lengths come back uppercased behind a '#' without validation.
    """
    body = _strip_hash(text)
    if len(body) == 3:
        return f"#{_expand_short(body).upper()}"
    if len(body) == 8:
        try:
            alpha_byte = int(body[6:8], 16)
        except ValueError:
            return f"#{body.upper()}"
        percentage = int(round(alpha_byte / 255 * 100))
        return f"#{body[:6].upper()} {percentage}%"
    return f"#{body.upper()}"


def _linearize(value: float) -> float:
    if value <= _LINEAR_THRESHOLD:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def relative_luminance(color: RGBA) -> float:
    r, g, b = (_linearize(channel) for channel in (color.r, color.g, color.b))
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def relative_luminance_contrast(color1: RGBA, color2: RGBA) -> float:
    """WCAG contrast ratio between two colors, always >= 1"""
    lum1 = relative_luminance(color1) + 0.05
    lum2 = relative_luminance(color2) + 0.05
    return lum1 / lum2 if lum1 > lum2 else lum2 / lum1


def meets_accessible_contrast(
    hex1: str, hex2: str, threshold: float = AA_CONTRAST_RATIO
) -> bool:
    """True if both colors decode and their contrast ratio reaches the AA threshold"""
    rgba1 = hex_to_rgba(hex1)
    rgba2 = hex_to_rgba(hex2)
    if rgba1 is None or rgba2 is None:
        return False
    return relative_luminance_contrast(rgba1, rgba2) >= threshold


def mix_colors(color1: RGBA, color2: RGBA, weight: float) -> RGBA:
    """
    Alpha-aware mix of two colors.

    Args:
        color1: First color
        color2: Second color
        weight: Blend fraction toward color1, in [0, 1]

    RGB channels use the alpha-corrected weight; the output alpha is the
    plain linear blend of the two alphas.
    """
    w = weight * 2 - 1
    a = color1.a - color2.a

    combined = w if w * a == -1 else (w + a) / (1 + w * a)
    w1 = (combined + 1) / 2
    w2 = 1 - w1

    return RGBA(
        r=color1.r * w1 + color2.r * w2,
        g=color1.g * w1 + color2.g * w2,
        b=color1.b * w1 + color2.b * w2,
        a=color1.a * weight + color2.a * (1 - weight),
    )
