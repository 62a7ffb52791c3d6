"""Tests for readable text color selection."""

import pytest

from core.theming import (
    DARK_TEXT,
    LIGHT_TEXT,
    contrast_ratio,
    parse_hex_color,
    pick_readable_text_color,
    relative_luminance,
)
from core.theming.contrast import LUMINANCE_THRESHOLD


class TestParseHexColor:
    """Tests for parse_hex_color()."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("#ffffff", (255, 255, 255)),
            ("#FFF", (255, 255, 255)),
            ("000000", (0, 0, 0)),
            ("#4f46e5", (79, 70, 229)),
            ("  #abc  ", (170, 187, 204)),
        ],
    )
    def test_valid(self, value, expected):
        assert parse_hex_color(value) == expected

    @pytest.mark.parametrize("value", ["", "#", "#12345", "#ggg", "red", "#1234567", "rgb(0,0,0)"])
    def test_invalid_returns_none(self, value):
        assert parse_hex_color(value) is None

    def test_non_string_raises(self):
        with pytest.raises(TypeError):
            parse_hex_color(123)


class TestRelativeLuminance:
    """Tests for relative_luminance()."""

    def test_extremes(self):
        assert relative_luminance("#000000") == pytest.approx(0.0)
        assert relative_luminance("#ffffff") == pytest.approx(1.0)

    def test_primary_channel_weights(self):
        assert relative_luminance("#ff0000") == pytest.approx(0.2126)
        assert relative_luminance("#00ff00") == pytest.approx(0.7152)
        assert relative_luminance("#0000ff") == pytest.approx(0.0722)

    def test_unparseable(self):
        assert relative_luminance("nope") is None


class TestContrastRatio:
    """Tests for contrast_ratio()."""

    def test_black_on_white(self):
        assert contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0)

    def test_symmetric(self):
        assert contrast_ratio("#4f46e5", "#ffffff") == pytest.approx(
            contrast_ratio("#ffffff", "#4f46e5")
        )

    def test_same_color(self):
        assert contrast_ratio("#777", "#777777") == pytest.approx(1.0)

    def test_unparseable(self):
        assert contrast_ratio("#000000", "bogus") is None


class TestPickReadableTextColor:
    """Tests for pick_readable_text_color()."""

    @pytest.mark.parametrize(
        "background,expected",
        [
            ("#ffffff", DARK_TEXT),
            ("#fff", DARK_TEXT),
            ("FFFFFF", DARK_TEXT),
            ("#cccccc", DARK_TEXT),
            ("#ffff00", DARK_TEXT),
            ("#00ff00", DARK_TEXT),
            ("#000000", LIGHT_TEXT),
            ("#777777", LIGHT_TEXT),
            ("#0000ff", LIGHT_TEXT),
            ("#ff0000", LIGHT_TEXT),
            ("#4f46e5", LIGHT_TEXT),
            ("#1f2937", LIGHT_TEXT),
        ],
    )
    def test_brightness_decides(self, background, expected):
        assert pick_readable_text_color(background) == expected

    @pytest.mark.parametrize("background", ["", "transparent", "#12", "#zzzzzz"])
    def test_unparseable_is_treated_as_bright(self, background):
        assert pick_readable_text_color(background) == DARK_TEXT

    def test_short_and_long_forms_agree(self):
        for short, long in [("#abc", "#aabbcc"), ("#123", "#112233"), ("#f0f", "#ff00ff")]:
            assert pick_readable_text_color(short) == pick_readable_text_color(long)

    def test_single_flip_across_gray_ramp(self):
        grays = [f"#{level:02x}{level:02x}{level:02x}" for level in range(256)]
        picks = [pick_readable_text_color(gray) for gray in grays]

        flips = [i for i in range(1, len(picks)) if picks[i] != picks[i - 1]]
        assert picks[0] == LIGHT_TEXT
        assert picks[-1] == DARK_TEXT
        assert len(flips) == 1

        flip = flips[0]
        assert relative_luminance(grays[flip - 1]) <= LUMINANCE_THRESHOLD
        assert relative_luminance(grays[flip]) > LUMINANCE_THRESHOLD

    def test_case_insensitive(self):
        assert pick_readable_text_color("#AbCdEf") == pick_readable_text_color("#abcdef")

    def test_output_is_always_one_of_two_colors(self):
        for value in ["#000", "#808080", "#fefefe", "#123456", "junk"]:
            assert pick_readable_text_color(value) in (DARK_TEXT, LIGHT_TEXT)

    def test_non_string_raises(self):
        with pytest.raises(TypeError):
            pick_readable_text_color(None)
