#!/usr/bin/env python3
"""
Tests for color_utils.py
Tests 6-bit <-> 8-bit VGA DAC conversion
"""

import pytest

from spacesim_imageconvert.color_utils import (
    ExpandedColor,
    LegacyColor,
    color_from_rgb24,
    expand_color,
    expand_palette,
    expand_to_8bit,
    quantize_color,
    quantize_palette,
    quantize_to_6bit,
)
from spacesim_imageconvert.exceptions import PaletteError


@pytest.mark.unit
class TestChannelConversion:
    """Test single channel conversion"""

    def test_black_is_preserved(self):
        """Test 0 stays 0"""
        assert expand_to_8bit(0) == 0

    def test_white_is_preserved(self):
        """Test full 6-bit intensity maps to full 8-bit intensity"""
        assert expand_to_8bit(63) == 255

    @pytest.mark.parametrize(
        "value,expected",
        [(0x0E, 0x38), (0x0F, 0x3C), (0x10, 0x41), (0x11, 0x45)],
    )
    def test_documented_values(self, value, expected):
        """Test the top two bits are copied into the bottom two bits"""
        assert expand_to_8bit(value) == expected

    def test_roundtrip_over_6bit_range(self):
        """Test quantize undoes expand for every 6-bit value"""
        for value in range(64):
            assert quantize_to_6bit(expand_to_8bit(value)) == value

    def test_expansion_is_monotonic(self):
        """Test the expanded ramp never goes down"""
        expanded = [expand_to_8bit(value) for value in range(64)]
        assert expanded == sorted(expanded)
        assert len(set(expanded)) == 64

    def test_out_of_range_wraps(self):
        """Test values above 63 lose their high bits instead of being clamped"""
        # 0x40 << 2 == 0x100, which wraps to 0x00
        assert expand_to_8bit(0x40) == 0x00
        # 0xFF << 2 == 0x3FC -> 0xFC, top bits of 0x30 mask give 0b11
        assert expand_to_8bit(0xFF) == 0xFF
        assert all(0 <= expand_to_8bit(value) <= 255 for value in range(256))

    def test_quantize_is_lossy(self):
        """Test several 8-bit values share a 6-bit value"""
        assert quantize_to_6bit(0x38) == 0x0E
        assert quantize_to_6bit(0x39) == 0x0E
        assert quantize_to_6bit(0x3B) == 0x0E
        assert quantize_to_6bit(255) == 63


@pytest.mark.unit
class TestColorConversion:
    """Test whole color conversion"""

    def test_expand_color(self):
        """Test every channel is expanded"""
        assert expand_color(LegacyColor(0x0E, 0x10, 63)) == ExpandedColor(0x38, 0x41, 255)

    def test_quantize_color(self):
        """Test every channel is quantized"""
        assert quantize_color(ExpandedColor(0x38, 0x41, 255)) == LegacyColor(0x0E, 0x10, 63)

    def test_expand_rejects_expanded_color(self):
        """Test an 8-bit color cannot be expanded again"""
        with pytest.raises(PaletteError):
            expand_color(ExpandedColor(1, 2, 3))

    def test_quantize_rejects_legacy_color(self):
        """Test a 6-bit color cannot be quantized again"""
        with pytest.raises(PaletteError):
            quantize_color(LegacyColor(1, 2, 3))

    def test_color_from_rgb24(self):
        """Test unpacking of a 0xRRGGBB value"""
        assert color_from_rgb24(0x3F1010) == LegacyColor(0x3F, 0x10, 0x10)
        assert color_from_rgb24(0x00003F) == LegacyColor(0, 0, 0x3F)


@pytest.mark.unit
class TestPaletteConversion:
    """Test whole palette conversion"""

    @pytest.fixture
    def palette(self):
        return [LegacyColor(i % 64, (i * 3) % 64, 63 - i % 64) for i in range(256)]

    def test_compatibility_colors_are_not_converted(self, palette):
        """Test registers 0-15 keep their raw values"""
        expanded = expand_palette(palette)

        assert all(isinstance(color, ExpandedColor) for color in expanded)
        assert [tuple(c) for c in expanded[:16]] == [tuple(c) for c in palette[:16]]

    def test_remaining_colors_are_converted(self, palette):
        """Test registers 16-255 are expanded"""
        expanded = expand_palette(palette)

        for index in range(16, 256):
            assert expanded[index] == expand_color(palette[index])

    def test_repeated_conversion_keeps_compatibility_colors(self, palette):
        """Test registers 0-15 survive any number of conversions byte-identical"""
        current = palette
        for _ in range(3):
            current = quantize_palette(expand_palette(current))
            assert [tuple(c) for c in current[:16]] == [tuple(c) for c in palette[:16]]

        assert current == palette

    def test_double_expansion_is_rejected(self, palette):
        """Test an expanded palette cannot be expanded twice"""
        expanded = expand_palette(palette)

        with pytest.raises(PaletteError, match="entry 0"):
            expand_palette(expanded)

    def test_double_quantization_is_rejected(self, palette):
        """Test a 6-bit palette cannot be quantized"""
        with pytest.raises(PaletteError):
            quantize_palette(palette)

    def test_plain_tuples_are_rejected(self):
        """Test untagged colors are refused"""
        with pytest.raises(PaletteError):
            expand_palette([(1, 2, 3)])

    def test_short_palette(self):
        """Test palettes shorter than 16 entries are only retagged"""
        palette = [LegacyColor(20, 30, 40)] * 4
        assert expand_palette(palette) == [ExpandedColor(20, 30, 40)] * 4
