#!/usr/bin/env python3
"""
Fixed palette data for SPACESIM

Both tables hold 6-bit VGA DAC values and must stay bit-exact.
"""

from .color_utils import LegacyColor, color_from_rgb24

# Default 6-bit VGA DAC palette, used to initialize colors.
# Registers 248-255 are not part of the table and stay black.
_DEFAULT_VGA_RGB = (
    # Compatibility
    (0x00, 0x00, 0x00), (0x00, 0x00, 0x2a), (0x00, 0x2a, 0x00), (0x00, 0x2a, 0x2a),
    (0x2a, 0x00, 0x00), (0x2a, 0x00, 0x2a), (0x2a, 0x15, 0x00), (0x2a, 0x2a, 0x2a),
    (0x15, 0x15, 0x15), (0x15, 0x15, 0x3f), (0x15, 0x3f, 0x15), (0x15, 0x3f, 0x3f),
    (0x3f, 0x15, 0x15), (0x3f, 0x15, 0x3f), (0x3f, 0x3f, 0x15), (0x3f, 0x3f, 0x3f),
    # Greyscale
    (0x00, 0x00, 0x00), (0x05, 0x05, 0x05), (0x08, 0x08, 0x08), (0x0b, 0x0b, 0x0b),
    (0x0e, 0x0e, 0x0e), (0x11, 0x11, 0x11), (0x14, 0x14, 0x14), (0x18, 0x18, 0x18),
    (0x1c, 0x1c, 0x1c), (0x20, 0x20, 0x20), (0x24, 0x24, 0x24), (0x28, 0x28, 0x28),
    (0x2d, 0x2d, 0x2d), (0x32, 0x32, 0x32), (0x38, 0x38, 0x38), (0x3f, 0x3f, 0x3f),
    # First block of 24x3
    (0x00, 0x00, 0x3f), (0x10, 0x00, 0x3f), (0x1f, 0x00, 0x3f), (0x2f, 0x00, 0x3f),
    (0x3f, 0x00, 0x3f), (0x3f, 0x00, 0x2f), (0x3f, 0x00, 0x1f), (0x3f, 0x00, 0x10),
    (0x3f, 0x00, 0x00), (0x3f, 0x10, 0x00), (0x3f, 0x1f, 0x00), (0x3f, 0x2f, 0x00),
    (0x3f, 0x3f, 0x00), (0x2f, 0x3f, 0x00), (0x1f, 0x3f, 0x00), (0x10, 0x3f, 0x00),
    (0x00, 0x3f, 0x00), (0x00, 0x3f, 0x10), (0x00, 0x3f, 0x1f), (0x00, 0x3f, 0x2f),
    (0x00, 0x3f, 0x3f), (0x00, 0x2f, 0x3f), (0x00, 0x1f, 0x3f), (0x00, 0x10, 0x3f),
    (0x1f, 0x1f, 0x3f), (0x27, 0x1f, 0x3f), (0x2f, 0x1f, 0x3f), (0x37, 0x1f, 0x3f),
    (0x3f, 0x1f, 0x3f), (0x3f, 0x1f, 0x37), (0x3f, 0x1f, 0x2f), (0x3f, 0x1f, 0x27),
    (0x3f, 0x1f, 0x1f), (0x3f, 0x27, 0x1f), (0x3f, 0x2f, 0x1f), (0x3f, 0x37, 0x1f),
    (0x3f, 0x3f, 0x1f), (0x37, 0x3f, 0x1f), (0x2f, 0x3f, 0x1f), (0x27, 0x3f, 0x1f),
    (0x1f, 0x3f, 0x1f), (0x1f, 0x3f, 0x27), (0x1f, 0x3f, 0x2f), (0x1f, 0x3f, 0x37),
    (0x1f, 0x3f, 0x3f), (0x1f, 0x37, 0x3f), (0x1f, 0x2f, 0x3f), (0x1f, 0x27, 0x3f),
    (0x2d, 0x2d, 0x3f), (0x31, 0x2d, 0x3f), (0x36, 0x2d, 0x3f), (0x3a, 0x2d, 0x3f),
    (0x3f, 0x2d, 0x3f), (0x3f, 0x2d, 0x3a), (0x3f, 0x2d, 0x36), (0x3f, 0x2d, 0x31),
    (0x3f, 0x2d, 0x2d), (0x3f, 0x31, 0x2d), (0x3f, 0x36, 0x2d), (0x3f, 0x3a, 0x2d),
    (0x3f, 0x3f, 0x2d), (0x3a, 0x3f, 0x2d), (0x36, 0x3f, 0x2d), (0x31, 0x3f, 0x2d),
    (0x2d, 0x3f, 0x2d), (0x2d, 0x3f, 0x31), (0x2d, 0x3f, 0x36), (0x2d, 0x3f, 0x3a),
    (0x2d, 0x3f, 0x3f), (0x2d, 0x3a, 0x3f), (0x2d, 0x36, 0x3f), (0x2d, 0x31, 0x3f),
    # Second block of 24x3
    (0x00, 0x00, 0x1c), (0x07, 0x00, 0x1c), (0x0e, 0x00, 0x1c), (0x15, 0x00, 0x1c),
    (0x1c, 0x00, 0x1c), (0x1c, 0x00, 0x15), (0x1c, 0x00, 0x0e), (0x1c, 0x00, 0x07),
    (0x1c, 0x00, 0x00), (0x1c, 0x07, 0x00), (0x1c, 0x0e, 0x00), (0x1c, 0x15, 0x00),
    (0x1c, 0x1c, 0x00), (0x15, 0x1c, 0x00), (0x0e, 0x1c, 0x00), (0x07, 0x1c, 0x00),
    (0x00, 0x1c, 0x00), (0x00, 0x1c, 0x07), (0x00, 0x1c, 0x0e), (0x00, 0x1c, 0x15),
    (0x00, 0x1c, 0x1c), (0x00, 0x15, 0x1c), (0x00, 0x0e, 0x1c), (0x00, 0x07, 0x1c),
    (0x0e, 0x0e, 0x1c), (0x11, 0x0e, 0x1c), (0x15, 0x0e, 0x1c), (0x18, 0x0e, 0x1c),
    (0x1c, 0x0e, 0x1c), (0x1c, 0x0e, 0x18), (0x1c, 0x0e, 0x15), (0x1c, 0x0e, 0x11),
    (0x1c, 0x0e, 0x0e), (0x1c, 0x11, 0x0e), (0x1c, 0x15, 0x0e), (0x1c, 0x18, 0x0e),
    (0x1c, 0x1c, 0x0e), (0x18, 0x1c, 0x0e), (0x15, 0x1c, 0x0e), (0x11, 0x1c, 0x0e),
    (0x0e, 0x1c, 0x0e), (0x0e, 0x1c, 0x11), (0x0e, 0x1c, 0x15), (0x0e, 0x1c, 0x18),
    (0x0e, 0x1c, 0x1c), (0x0e, 0x18, 0x1c), (0x0e, 0x15, 0x1c), (0x0e, 0x11, 0x1c),
    (0x14, 0x14, 0x1c), (0x16, 0x14, 0x1c), (0x18, 0x14, 0x1c), (0x1a, 0x14, 0x1c),
    (0x1c, 0x14, 0x1c), (0x1c, 0x14, 0x1a), (0x1c, 0x14, 0x18), (0x1c, 0x14, 0x16),
    (0x1c, 0x14, 0x14), (0x1c, 0x16, 0x14), (0x1c, 0x18, 0x14), (0x1c, 0x1a, 0x14),
    (0x1c, 0x1c, 0x14), (0x1a, 0x1c, 0x14), (0x18, 0x1c, 0x14), (0x16, 0x1c, 0x14),
    (0x14, 0x1c, 0x14), (0x14, 0x1c, 0x16), (0x14, 0x1c, 0x18), (0x14, 0x1c, 0x1a),
    (0x14, 0x1c, 0x1c), (0x14, 0x1a, 0x1c), (0x14, 0x18, 0x1c), (0x14, 0x16, 0x1c),
    # Third block of 24x3
    (0x00, 0x00, 0x10), (0x04, 0x00, 0x10), (0x08, 0x00, 0x10), (0x0c, 0x00, 0x10),
    (0x10, 0x00, 0x10), (0x10, 0x00, 0x0c), (0x10, 0x00, 0x08), (0x10, 0x00, 0x04),
    (0x10, 0x00, 0x00), (0x10, 0x04, 0x00), (0x10, 0x08, 0x00), (0x10, 0x0c, 0x00),
    (0x10, 0x10, 0x00), (0x0c, 0x10, 0x00), (0x08, 0x10, 0x00), (0x04, 0x10, 0x00),
    (0x00, 0x10, 0x00), (0x00, 0x10, 0x04), (0x00, 0x10, 0x08), (0x00, 0x10, 0x0c),
    (0x00, 0x10, 0x10), (0x00, 0x0c, 0x10), (0x00, 0x08, 0x10), (0x00, 0x04, 0x10),
    (0x08, 0x08, 0x10), (0x0a, 0x08, 0x10), (0x0c, 0x08, 0x10), (0x0e, 0x08, 0x10),
    (0x10, 0x08, 0x10), (0x10, 0x08, 0x0e), (0x10, 0x08, 0x0c), (0x10, 0x08, 0x0a),
    (0x10, 0x08, 0x08), (0x10, 0x0a, 0x08), (0x10, 0x0c, 0x08), (0x10, 0x0e, 0x08),
    (0x10, 0x10, 0x08), (0x0e, 0x10, 0x08), (0x0c, 0x10, 0x08), (0x0a, 0x10, 0x08),
    (0x08, 0x10, 0x08), (0x08, 0x10, 0x0a), (0x08, 0x10, 0x0c), (0x08, 0x10, 0x0e),
    (0x08, 0x10, 0x10), (0x08, 0x0e, 0x10), (0x08, 0x0c, 0x10), (0x08, 0x0a, 0x10),
    (0x0b, 0x0b, 0x10), (0x0c, 0x0b, 0x10), (0x0d, 0x0b, 0x10), (0x0f, 0x0b, 0x10),
    (0x10, 0x0b, 0x10), (0x10, 0x0b, 0x0f), (0x10, 0x0b, 0x0d), (0x10, 0x0b, 0x0c),
    (0x10, 0x0b, 0x0b), (0x10, 0x0c, 0x0b), (0x10, 0x0d, 0x0b), (0x10, 0x0f, 0x0b),
    (0x10, 0x10, 0x0b), (0x0f, 0x10, 0x0b), (0x0d, 0x10, 0x0b), (0x0c, 0x10, 0x0b),
    (0x0b, 0x10, 0x0b), (0x0b, 0x10, 0x0c), (0x0b, 0x10, 0x0d), (0x0b, 0x10, 0x0f),
    (0x0b, 0x10, 0x10), (0x0b, 0x0f, 0x10), (0x0b, 0x0d, 0x10), (0x0b, 0x0c, 0x10),
)

# Registers 32-127 of the VGA DAC palette, dumped with the DOSBox-X debugger
# while SPACESIM sits in the starting "FLIGHT" situation. Registers 0-31 match
# the default VGA palette and are not included.
_SIMULATOR_DUMP_RGB24 = (
    # Reds
    0x030101, 0x070202, 0x0b0303, 0x0f0404, 0x130505, 0x170606, 0x1b0707, 0x1f0808,
    0x230909, 0x270a0a, 0x2b0b0b, 0x2f0c0c, 0x330d0d, 0x370e0e, 0x3b0f0f, 0x3f1010,
    # Oranges
    0x030200, 0x070400, 0x0b0600, 0x0f0800, 0x130a00, 0x170c00, 0x1b0e00, 0x1f1000,
    0x231200, 0x271400, 0x2b1600, 0x2f1800, 0x331a00, 0x371c00, 0x3b1e00, 0x3f2000,
    # Yellows
    0x030200, 0x070600, 0x0b0a00, 0x0f0e00, 0x131200, 0x171600, 0x1b1a00, 0x1f1e00,
    0x232200, 0x272600, 0x2b2a00, 0x2f2e00, 0x333200, 0x373600, 0x3b3a00, 0x3f3e00,
    # Greens
    0x000300, 0x010701, 0x020b02, 0x030f03, 0x041304, 0x051705, 0x061b06, 0x071f07,
    0x082308, 0x092709, 0x0a2b0a, 0x0b2f0b, 0x0c330c, 0x0d370d, 0x0e3b0e, 0x0f3f0f,
    # Light blues
    0x010203, 0x030507, 0x05080b, 0x070b0f, 0x090e13, 0x0b1117, 0x0d141b, 0x0f171f,
    0x111a23, 0x131d27, 0x15202b, 0x17232f, 0x192633, 0x1b2937, 0x1d2c3b, 0x1f2f3f,
    # Dark blues
    0x000003, 0x000007, 0x00000b, 0x00000f, 0x000013, 0x000017, 0x00001b, 0x00001f,
    0x000023, 0x000027, 0x00002b, 0x00002f, 0x000033, 0x000037, 0x00003b, 0x00003f,
)

DEFAULT_VGA_PALETTE = tuple(LegacyColor(*rgb) for rgb in _DEFAULT_VGA_RGB)
SIMULATOR_DUMP_PALETTE = tuple(color_from_rgb24(value) for value in _SIMULATOR_DUMP_RGB24)
