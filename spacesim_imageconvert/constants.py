#!/usr/bin/env python3
"""
Constants for the SPACESIM image converter
All magic numbers and file naming rules in one place
"""

# .R8 image specifications
IMAGE_WIDTH = 256  # pixels
IMAGE_HEIGHT = 256  # pixels
IMAGE_BYTES_PER_PIXEL = 1
IMAGE_SIZE_BYTES = IMAGE_WIDTH * IMAGE_HEIGHT * IMAGE_BYTES_PER_PIXEL  # 65536

# Palette specifications
PALETTE_ENTRIES = 256  # VGA DAC registers
BYTES_PER_COLOR = 3  # R, G, B
COMPATIBILITY_COLORS = 16  # Registers 0-15 keep their raw values

# Palette layer offsets
VGA_PALETTE_OFFSET = 0
SIMULATOR_PALETTE_OFFSET = 32
CUSTOM_PALETTE_OFFSET = 128
CUSTOM_PALETTE_ENTRIES = 128

# Flags a missing custom palette
ALARM_COLOR = (0, 255, 0)

# 6-bit <-> 8-bit conversion
VGA_DAC_MAX_VALUE = 63  # 6 bits per color component
RGB888_MAX_VALUE = 255  # 8 bits per color component
VGA_DAC_TOP_BITS_MASK = 0x30  # Bits 5-4 of a 6-bit value
VGA_DAC_TOP_BITS_SHIFT = 4
VGA_DAC_EXPAND_SHIFT = 2
BYTE_MASK = 0xFF

# Swatch sheet layout
SWATCH_COLUMNS = 16
SWATCH_BOX_SIZE = 16  # pixels
SWATCH_BORDER = 1  # pixels
SWATCH_BORDER_COLOR = (0, 0, 0)

# Output naming
OUTPUT_EXTENSION = ".BMP"
OUTPUT_FORMAT = "BMP"
PALETTE_8BIT_SUFFIX = "_PAL_8"
PALETTE_6BIT_SUFFIX = "_PAL_6"
DEBUG_BASENAME = "IMAGECONVERT_DEBUG"
