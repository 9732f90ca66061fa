# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Wire-level constants of the BMP format handled by bmpcodec.

Copyright 2025 DNAi inc.
"""

BMP_SIGNATURE = b'BM'  # 0x42, 0x4D

# Structure sizes in bytes
FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40  # BITMAPINFOHEADER
COLOR_HEADER_SIZE = 84
COLOR_RESERVED_WORDS = 16  # Unused data for sRGB color space

# Info header size when the color mask header follows it (BITMAPV5HEADER)
FULL_INFO_HEADER_SIZE = INFO_HEADER_SIZE + COLOR_HEADER_SIZE
PIXEL_DATA_OFFSET = FILE_HEADER_SIZE + FULL_INFO_HEADER_SIZE

# Canonical BGRA masks
RED_MASK = 0x00FF0000
GREEN_MASK = 0x0000FF00
BLUE_MASK = 0x000000FF
ALPHA_MASK = 0xFF000000

LCS_SRGB = 0x73524742  # 'sRGB'

# Compression methods
BI_RGB = 0
BI_RLE8 = 1
BI_RLE4 = 2
BI_BITFIELDS = 3
BI_JPEG = 4
BI_PNG = 5

COMPRESSION_NAMES = {
    BI_RGB: 'None',
    BI_RLE8: 'RLE8',
    BI_RLE4: 'RLE4',
    BI_BITFIELDS: 'Bitfields',
    BI_JPEG: 'JPEG',
    BI_PNG: 'PNG',
}

SUPPORTED_BIT_DEPTHS = (24, 32)
SUPPORTED_COMPRESSION = {
    24: (BI_RGB,),
    32: (BI_RGB, BI_BITFIELDS),
}

OPAQUE_ALPHA = 255
