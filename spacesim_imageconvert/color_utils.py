#!/usr/bin/env python3
"""
VGA DAC color utilities
6-bit <-> 8-bit channel conversion for SPACESIM palettes
"""

from collections.abc import Iterable
from typing import NamedTuple

from .constants import (
    BYTE_MASK,
    COMPATIBILITY_COLORS,
    VGA_DAC_EXPAND_SHIFT,
    VGA_DAC_TOP_BITS_MASK,
    VGA_DAC_TOP_BITS_SHIFT,
)
from .exceptions import PaletteError


class LegacyColor(NamedTuple):
    """Color as held by the VGA DAC, channels nominally 0-63"""

    r: int
    g: int
    b: int


class ExpandedColor(NamedTuple):
    """Color as shown on a modern display, channels 0-255"""

    r: int
    g: int
    b: int


def expand_to_8bit(value: int) -> int:
    """
    Convert a 6-bit VGA DAC channel to 8 bits.

    The value is shifted left by two and the top two bits of the 6-bit
    value become the bottom two bits of the result:

        0b00000000 -> 0b00000000
        0b00111111 -> 0b11111111
        (0x0E) 0b00001110 -> 0b00111000 (0x38)
        (0x0F) 0b00001111 -> 0b00111100 (0x3C)
        (0x10) 0b00010000 -> 0b01000001 (0x41)
        (0x11) 0b00010001 -> 0b01000101 (0x45)

    Values above 63 are not rejected. Bits shifted past bit 7 are lost,
    the same as the 8-bit arithmetic of the original tool.

    Args:
        value: Channel value, significant in the low 6 bits

    Returns:
        Channel value in 0-255 range
    """
    top_bits = (value & VGA_DAC_TOP_BITS_MASK) >> VGA_DAC_TOP_BITS_SHIFT
    return ((value << VGA_DAC_EXPAND_SHIFT) | top_bits) & BYTE_MASK


def quantize_to_6bit(value: int) -> int:
    """
    Convert an 8-bit channel back to 6 bits.

    Exact inverse of expand_to_8bit for its outputs, in-between values
    are quantized down.
    """
    return (value & BYTE_MASK) >> VGA_DAC_EXPAND_SHIFT


def expand_color(color: LegacyColor) -> ExpandedColor:
    """Expand all three channels of a VGA DAC color."""
    if not isinstance(color, LegacyColor):
        raise PaletteError(f"Expected a 6-bit color, got {color!r}")
    return ExpandedColor(
        expand_to_8bit(color.r), expand_to_8bit(color.g), expand_to_8bit(color.b)
    )


def quantize_color(color: ExpandedColor) -> LegacyColor:
    """Quantize all three channels of a display color."""
    if not isinstance(color, ExpandedColor):
        raise PaletteError(f"Expected an 8-bit color, got {color!r}")
    return LegacyColor(
        quantize_to_6bit(color.r), quantize_to_6bit(color.g), quantize_to_6bit(color.b)
    )


def expand_palette(palette: Iterable[LegacyColor]) -> list[ExpandedColor]:
    """
    Expand a whole palette to 8 bits per channel.

    The first 16 compatibility colors keep their raw values even when
    rendering in an 8-bit context, they are only retagged.

    Args:
        palette: 6-bit palette entries

    Returns:
        New list of 8-bit palette entries

    Raises:
        PaletteError: If an entry is not a 6-bit color
    """
    expanded = []
    for index, color in enumerate(palette):
        if not isinstance(color, LegacyColor):
            raise PaletteError(f"Palette entry {index} is not a 6-bit color: {color!r}")
        if index < COMPATIBILITY_COLORS:
            expanded.append(ExpandedColor(*color))
        else:
            expanded.append(expand_color(color))
    return expanded


def quantize_palette(palette: Iterable[ExpandedColor]) -> list[LegacyColor]:
    """
    Quantize a whole palette back to the values held by the VGA DAC.

    Compatibility colors 0-15 are retagged without conversion.

    Raises:
        PaletteError: If an entry is not an 8-bit color
    """
    quantized = []
    for index, color in enumerate(palette):
        if not isinstance(color, ExpandedColor):
            raise PaletteError(f"Palette entry {index} is not an 8-bit color: {color!r}")
        if index < COMPATIBILITY_COLORS:
            quantized.append(LegacyColor(*color))
        else:
            quantized.append(quantize_color(color))
    return quantized


def color_from_rgb24(value: int) -> LegacyColor:
    """Unpack a 0xRRGGBB integer into a 6-bit color."""
    return LegacyColor(
        (value & 0xFF0000) >> 16,
        (value & 0x00FF00) >> 8,
        value & 0x0000FF,
    )
