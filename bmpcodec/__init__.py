# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
bmpcodec - A Pure Python BMP Codec

Reads uncompressed 24-bit and 32-bit Windows bitmaps into canonical
top-down RGB(A) pixel buffers, and writes pixel buffers back as 32-bit
BGRA bitmaps with the sRGB color mask header.
All parsing is done by directly reading binary file structures.

Copyright 2025 DNAi inc.
"""

__version__ = "0.1.0"
__author__ = "DNAi inc."

from bmpcodec.exceptions import (
    BMPError,
    BMPFileNotFoundError,
    BMPFormatError,
    UnsupportedFormatError,
    TruncatedDataError,
    InvalidArgumentError,
)
from bmpcodec.headers import FileHeader, InfoHeader, ColorMaskHeader
from bmpcodec.pixels import PixelBuffer, row_stride, decode_pixel_rows
from bmpcodec.bmp_parser import BMPParser, ParsedBMP, decode
from bmpcodec.bmp_writer import BMPWriter, encode
from bmpcodec.validation import (
    check_color_mask,
    check_color_space,
    format_header_info,
)
from bmpcodec.core import BMP, read_bmp, write_bmp

__all__ = [
    "BMP",
    "BMPError",
    "BMPFileNotFoundError",
    "BMPFormatError",
    "UnsupportedFormatError",
    "TruncatedDataError",
    "InvalidArgumentError",
    "FileHeader",
    "InfoHeader",
    "ColorMaskHeader",
    "PixelBuffer",
    "row_stride",
    "decode_pixel_rows",
    "BMPParser",
    "ParsedBMP",
    "BMPWriter",
    "decode",
    "encode",
    "check_color_mask",
    "check_color_space",
    "format_header_info",
    "read_bmp",
    "write_bmp",
]
