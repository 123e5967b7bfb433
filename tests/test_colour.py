"""Tests for palette_kit.core.colour: HSL/RGB/hex conversion and luminance."""

import math

import pytest
from palette_kit.core.colour import (
    InvalidColourFormat,
    clamp,
    hex_to_rgb,
    hsl_to_rgb,
    parse_hex,
    relative_luminance,
    rgb_to_hex,
)


class TestHslToRgb:
    def test_primaries(self):
        assert hsl_to_rgb(0, 1, 0.5) == (255, 0, 0)
        assert hsl_to_rgb(120, 1, 0.5) == (0, 255, 0)
        assert hsl_to_rgb(240, 1, 0.5) == (0, 0, 255)

    def test_secondaries(self):
        assert hsl_to_rgb(60, 1, 0.5) == (255, 255, 0)
        assert hsl_to_rgb(180, 1, 0.5) == (0, 255, 255)
        assert hsl_to_rgb(300, 1, 0.5) == (255, 0, 255)

    def test_hue_wraps(self):
        assert hsl_to_rgb(360, 1, 0.5) == hsl_to_rgb(0, 1, 0.5)
        assert hsl_to_rgb(-120, 1, 0.5) == (0, 0, 255)
        assert hsl_to_rgb(480, 1, 0.5) == (0, 255, 0)

    def test_rounds_half_up(self):
        # c=0.5, x=0.25, m=0.25 -> (0.25, 0.5, 0.75) * 255 = (63.75, 127.5, 191.25)
        assert hsl_to_rgb(210, 0.5, 0.5) == (64, 128, 191)

    @pytest.mark.parametrize('hue', [0, 45, 123.4, 300, 359.9, -10, 720])
    @pytest.mark.parametrize('lightness,expected', [(0.0, 0), (0.25, 64), (0.5, 128), (1.0, 255)])
    def test_zero_saturation_is_grey(self, hue, lightness, expected):
        assert hsl_to_rgb(hue, 0, lightness) == (expected, expected, expected)

    def test_black_and_white(self):
        assert hsl_to_rgb(200, 0.8, 0.0) == (0, 0, 0)
        assert hsl_to_rgb(200, 0.8, 1.0) == (255, 255, 255)

    @pytest.mark.parametrize('hue', [math.nan, math.inf, -math.inf])
    def test_non_finite_hue_is_zero(self, hue):
        assert hsl_to_rgb(hue, 1, 0.5) == (255, 0, 0)


class TestHex:
    def test_rgb_to_hex_pads_and_lowercases(self):
        assert rgb_to_hex((255, 0, 16)) == '#ff0010'
        assert rgb_to_hex((0, 0, 0)) == '#000000'

    def test_hex_to_rgb(self):
        assert hex_to_rgb('#2563eb') == (37, 99, 235)

    def test_uppercase(self):
        assert hex_to_rgb('#FF0010') == (255, 0, 16)

    def test_no_hash(self):
        assert hex_to_rgb('ff0000') == (255, 0, 0)

    @pytest.mark.parametrize('bad', ['invalid', '#ff', '#fff', '#fffffff', '#ffffffff', '#gggggg', '', '#'])
    def test_malformed_returns_black(self, bad):
        assert hex_to_rgb(bad) == (0, 0, 0)

    @pytest.mark.parametrize('hex_str', ['#000000', '#ffffff', '#1e3a8a', '#0a0b0c', '#7f8081'])
    def test_round_trip(self, hex_str):
        assert rgb_to_hex(hex_to_rgb(hex_str)) == hex_str

    def test_round_trip_normalizes_case(self):
        assert rgb_to_hex(hex_to_rgb('#ABCDEF')) == '#abcdef'


class TestParseHex:
    def test_canonical(self):
        assert parse_hex('#1e3a8a') == '#1e3a8a'

    def test_adds_hash_and_lowercases(self):
        assert parse_hex('1E3A8A') == '#1e3a8a'

    def test_strips_whitespace(self):
        assert parse_hex('  #ffffff ') == '#ffffff'

    @pytest.mark.parametrize('bad', ['xyz', '#12345', '#1234567', 'gggggg', '##ffffff', ''])
    def test_rejects_malformed(self, bad):
        with pytest.raises(InvalidColourFormat):
            parse_hex(bad)

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_hex('nope')


class TestRelativeLuminance:
    def test_black(self):
        assert relative_luminance((0, 0, 0)) == 0.0

    def test_white(self):
        assert relative_luminance((255, 255, 255)) == pytest.approx(1.0)

    def test_channel_weights(self):
        assert relative_luminance((255, 0, 0)) == pytest.approx(0.2126)
        assert relative_luminance((0, 255, 0)) == pytest.approx(0.7152)
        assert relative_luminance((0, 0, 255)) == pytest.approx(0.0722)

    def test_linear_segment(self):
        # 10/255 = 0.0392 is below the 0.03928 knee
        assert relative_luminance((10, 10, 10)) == pytest.approx(10 / 255 / 12.92)

    def test_mid_grey(self):
        assert relative_luminance((118, 118, 118)) == pytest.approx(0.1812, abs=1e-3)


class TestClamp:
    def test_bounds(self):
        assert clamp(-0.5) == 0.0
        assert clamp(1.5) == 1.0
        assert clamp(0.3) == 0.3
        assert clamp(0.95, 0.15, 0.9) == 0.9
