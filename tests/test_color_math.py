"""
Color Math Tests
"""

import pytest


class TestHexDecoding:
    """hex_to_rgba / parse_hex tests"""

    def test_six_digit_with_and_without_hash(self):
        """Leading '#' is optional."""
        from core.color_math import hex_to_rgba
        from models.rgba import RGBA

        assert hex_to_rgba("#FF0000") == RGBA(1.0, 0.0, 0.0, 1.0)
        assert hex_to_rgba("ff0000") == RGBA(1.0, 0.0, 0.0, 1.0)

    def test_short_form_expands(self):
        """'#F00' decodes like '#FF0000'."""
        from core.color_math import hex_to_rgba

        assert hex_to_rgba("#F00") == hex_to_rgba("#FF0000")

    def test_eight_digit_carries_alpha(self):
        """The last byte of an 8 digit body is alpha."""
        from core.color_math import hex_to_rgba

        color = hex_to_rgba("#FF000080")
        assert color is not None
        assert color.a == pytest.approx(128 / 255)
        assert color.r == 1.0 and color.g == 0.0 and color.b == 0.0
        assert color.a == pytest.approx(0.5, abs=1 / 255)
        assert not color.is_opaque

    @pytest.mark.parametrize(
        "text",
        ["", "#", "#GGGGGG", "#12345", "#1234567", "blue", None, " #FF0000\n", " #000000 "],
    )
    def test_invalid_input_returns_none(self, text):
        """Undecodable input yields None instead of raising."""
        from core.color_math import hex_to_rgba

        assert hex_to_rgba(text) is None

    def test_parse_hex_raises(self):
        """parse_hex is the raising variant."""
        from core.color_math import parse_hex
        from core.errors import InvalidColorError

        with pytest.raises(InvalidColorError) as exc_info:
            parse_hex("#XYZ")
        assert exc_info.value.value == "#XYZ"


class TestHexEncoding:
    """rgb_to_hex / rgba_to_hex / normalize_hex tests"""

    def test_rgb_to_hex_is_uppercase_seven_chars(self):
        from core.color_math import rgb_to_hex

        assert rgb_to_hex(0.2, 0.4, 0.6) == "#336699"
        assert len(rgb_to_hex(0, 0, 0)) == 7

    def test_rgb_to_hex_clamps_out_of_range(self):
        """Channels outside [0, 1] are clamped."""
        from core.color_math import rgb_to_hex

        assert rgb_to_hex(1.5, -0.2, 0.5) == "#FF0080"

    def test_rgba_to_hex_appends_alpha_only_when_translucent(self):
        from core.color_math import rgba_to_hex

        assert rgba_to_hex(1, 0, 0) == "#FF0000"
        assert rgba_to_hex(1, 0, 0, 1) == "#FF0000"
        assert rgba_to_hex(1, 0, 0, 0.5) == "#FF000080"

    def test_six_digit_round_trip(self):
        """Decoding then encoding a 6 digit hex returns it uppercased."""
        from core.color_math import hex_to_rgba, rgba_value_to_hex

        for text in ("#3b82f6", "#10B981", "#000000", "#ffffff"):
            assert rgba_value_to_hex(hex_to_rgba(text)) == text.upper()

    def test_normalize_hex(self):
        from core.color_math import normalize_hex

        assert normalize_hex("#fff") == "#FFFFFF"
        assert normalize_hex("ff0000") == "#FF0000"
        assert normalize_hex("#FF000080") == "#FF0000 50%"
        assert normalize_hex("#000000A6") == "#000000 65%"


class TestContrast:
    """Luminance and WCAG contrast tests"""

    def test_black_on_white_is_21(self):
        from core.color_math import relative_luminance_contrast
        from models.rgba import BLACK, WHITE

        assert relative_luminance_contrast(BLACK, WHITE) == pytest.approx(21.0)

    def test_contrast_is_symmetric_and_at_least_one(self):
        from core.color_math import hex_to_rgba, relative_luminance_contrast

        a = hex_to_rgba("#3B82F6")
        b = hex_to_rgba("#1C1C1C")
        assert relative_luminance_contrast(a, b) == pytest.approx(relative_luminance_contrast(b, a))
        assert relative_luminance_contrast(a, a) == pytest.approx(1.0)

    def test_luminance_extremes(self):
        from core.color_math import relative_luminance
        from models.rgba import BLACK, WHITE

        assert relative_luminance(BLACK) == 0
        assert relative_luminance(WHITE) == pytest.approx(1.0)

    def test_meets_accessible_contrast(self):
        from core.color_math import meets_accessible_contrast

        assert meets_accessible_contrast("#000000", "#FFFFFF") is True
        assert meets_accessible_contrast("#777777", "#888888") is False
        # Custom threshold
        assert meets_accessible_contrast("#767676", "#FFFFFF", threshold=4.5) is True
        assert meets_accessible_contrast("#767676", "#FFFFFF", threshold=7.0) is False

    def test_meets_accessible_contrast_false_for_invalid(self):
        """Undecodable colors never pass."""
        from core.color_math import meets_accessible_contrast

        assert meets_accessible_contrast("invalid", "#FFFFFF") is False
        assert meets_accessible_contrast("#CCCCCC", "#DDDDDD") is False
        assert meets_accessible_contrast("#ZZZZZZ", "#FFFFFF") is False
        assert meets_accessible_contrast("#000000", "") is False
        assert meets_accessible_contrast(" #000000 ", "#FFFFFF") is False


class TestMixColors:
    """Alpha-aware mixing tests"""

    def test_weight_extremes_return_inputs(self):
        """Weight 1 gives the first color, weight 0 the second."""
        from core.color_math import mix_colors
        from models.rgba import RGBA

        c1 = RGBA(0.2, 0.4, 0.6, 1.0)
        c2 = RGBA(0.9, 0.1, 0.3, 1.0)

        first = mix_colors(c1, c2, 1.0)
        second = mix_colors(c1, c2, 0.0)
        assert first.as_tuple() == pytest.approx(c1.as_tuple())
        assert second.as_tuple() == pytest.approx(c2.as_tuple())

    def test_opaque_midpoint_is_average(self):
        from core.color_math import mix_colors
        from models.rgba import BLACK, WHITE

        mid = mix_colors(WHITE, BLACK, 0.5)
        assert mid.as_tuple() == pytest.approx((0.5, 0.5, 0.5, 1.0))

    def test_alpha_is_linear_blend(self):
        """Output alpha blends linearly while RGB is alpha corrected."""
        from core.color_math import mix_colors
        from models.rgba import RGBA

        opaque_red = RGBA(1.0, 0.0, 0.0, 1.0)
        clear_blue = RGBA(0.0, 0.0, 1.0, 0.0)

        mixed = mix_colors(opaque_red, clear_blue, 0.5)
        assert mixed.a == pytest.approx(0.5)
        # The opaque color dominates the RGB channels
        assert mixed.r == pytest.approx(1.0)
        assert mixed.b == pytest.approx(0.0)


class TestRGBAModel:
    """RGBA value model"""

    def test_dict_conversion(self):
        from models.rgba import RGBA

        color = RGBA.from_dict({"r": 1, "g": 0.5, "b": 0})

        assert color.a == 1.0
        assert color.is_opaque
        assert color.to_dict() == {"r": 1.0, "g": 0.5, "b": 0.0, "a": 1.0}

    def test_is_immutable(self):
        import dataclasses
        from models.rgba import RGBA

        color = RGBA(0.1, 0.2, 0.3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            color.r = 0.5


class TestMixScenarios:
    """Reference mixing scenarios"""

    def test_red_blue_midpoint(self):
        from core.color_math import mix_colors
        from models.rgba import RGBA

        mixed = mix_colors(RGBA(1, 0, 0, 1), RGBA(0, 0, 1, 1), 0.5)
        assert mixed.r == pytest.approx(0.5)
        assert mixed.b == pytest.approx(0.5)

    def test_differing_alphas(self):
        from core.color_math import mix_colors
        from models.rgba import RGBA

        mixed = mix_colors(RGBA(1, 0, 0, 1), RGBA(0, 0, 1, 0.5), 0.5)
        assert mixed.a == pytest.approx(0.75)
