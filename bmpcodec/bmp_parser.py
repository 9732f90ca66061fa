# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
BMP (Bitmap) decoder

This module reads uncompressed 24-bit and 32-bit bottom-up BMP files into
canonical RGBA pixel buffers. 32-bit files must carry the canonical BGRA
color masks and the sRGB color space.

Copyright 2025 DNAi inc.
"""

import logging
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from bmpcodec.constants import (
    BMP_SIGNATURE,
    FILE_HEADER_SIZE,
    INFO_HEADER_SIZE,
    SUPPORTED_BIT_DEPTHS,
    SUPPORTED_COMPRESSION,
    COMPRESSION_NAMES,
)
from bmpcodec.exceptions import (
    BMPError,
    BMPFileNotFoundError,
    BMPFormatError,
    TruncatedDataError,
    UnsupportedFormatError,
)
from bmpcodec.headers import ColorMaskHeader, FileHeader, InfoHeader
from bmpcodec.pixels import PixelBuffer, decode_pixel_rows, expand_bgr_rows, row_stride
from bmpcodec.validation import check_color_header

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedBMP:
    """Headers of a BMP file together with its decoded pixels."""
    file_header: FileHeader
    info_header: InfoHeader
    color_header: Optional[ColorMaskHeader]
    pixels: PixelBuffer


class BMPParser:
    """
    Decoder for BMP files.

    Supported:
    - BITMAPINFOHEADER or larger DIB headers
    - 24-bit BGR (BI_RGB) with padded rows
    - 32-bit BGRA (BI_RGB or BI_BITFIELDS) with the color mask header
    - Bottom-up row order only
    """

    def __init__(self, file_path: Optional[str] = None, file_data: Optional[bytes] = None):
        """
        Initialize BMP parser.

        Args:
            file_path: Path to BMP file
            file_data: BMP file data bytes
        """
        if file_path is not None:
            self.file_path = Path(file_path)
            self.file_data = None
        elif file_data is not None:
            self.file_data = bytes(file_data)
            self.file_path = None
        else:
            raise ValueError("Either file_path or file_data must be provided")

    def _read(self) -> bytes:
        if self.file_data is None:
            try:
                with open(self.file_path, 'rb') as f:
                    self.file_data = f.read()
            except OSError as e:
                raise BMPFileNotFoundError(self.file_path, e.strerror or str(e)) from e
        return self.file_data

    def parse_headers(self) -> Tuple[FileHeader, InfoHeader, Optional[ColorMaskHeader]]:
        """
        Parse and validate the headers without touching pixel data.

        Returns:
            Tuple of (file header, info header, color mask header or None)
        """
        data = self._read()
        try:
            return _read_headers(data)
        except BMPError:
            raise
        except struct.error as e:
            raise BMPFormatError(f"Failed to parse BMP headers: {str(e)}") from e

    def parse(self) -> ParsedBMP:
        """
        Parse headers and decode pixel data.

        Returns:
            ParsedBMP with an RGBA, top-down pixel buffer
        """
        file_header, info_header, color_header = self.parse_headers()
        pixels = _read_pixels(self.file_data, file_header, info_header)
        return ParsedBMP(file_header, info_header, color_header, pixels)


def _read_headers(data: bytes) -> Tuple[FileHeader, InfoHeader, Optional[ColorMaskHeader]]:
    # Signature gate comes before any length check
    if data[:2] != BMP_SIGNATURE:
        raise BMPFormatError(
            f"Invalid BMP file: missing BMP signature (found {bytes(data[:2])!r})"
        )
    file_header = FileHeader.unpack(data)

    info_header = InfoHeader.unpack(data, FILE_HEADER_SIZE)
    if info_header.size < INFO_HEADER_SIZE:
        raise UnsupportedFormatError(
            f"Unsupported DIB header size {info_header.size}, "
            f"need at least {INFO_HEADER_SIZE}"
        )

    color_header = None
    if info_header.bits_per_pixel == 32:
        if not info_header.has_color_header:
            raise BMPFormatError(
                "Unrecognized file format: the file does not contain "
                "bit mask information"
            )
        color_header = ColorMaskHeader.unpack(data, FILE_HEADER_SIZE + INFO_HEADER_SIZE)
        check_color_header(color_header)

    if info_header.is_top_down:
        raise UnsupportedFormatError(
            "Only BMP images with the origin in the bottom left corner are "
            "supported (negative height found)"
        )
    if info_header.width < 0:
        raise BMPFormatError(f"Invalid BMP width: {info_header.width}")
    # Same policy as the encoder: zero-size images are never produced or accepted
    if info_header.width == 0 or info_header.height == 0:
        raise UnsupportedFormatError(
            f"Zero-size BMP images are not supported "
            f"({info_header.width}x{info_header.height})"
        )
    if info_header.planes != 1:
        raise BMPFormatError(f"Invalid BMP: planes = {info_header.planes} (must be 1)")
    if info_header.bits_per_pixel not in SUPPORTED_BIT_DEPTHS:
        raise UnsupportedFormatError(
            f"Unsupported bit depth: {info_header.bits_per_pixel}"
        )
    if info_header.compression not in SUPPORTED_COMPRESSION[info_header.bits_per_pixel]:
        name = COMPRESSION_NAMES.get(info_header.compression, str(info_header.compression))
        raise UnsupportedFormatError(
            f"Unsupported compression for {info_header.bits_per_pixel}-bit BMP: {name}"
        )
    if file_header.offset_data < FILE_HEADER_SIZE + info_header.size:
        raise BMPFormatError(
            f"Pixel data offset {file_header.offset_data} points inside the headers"
        )

    logger.debug(
        "BMP headers: %dx%d, %d bpp, compression %d, data offset %d",
        info_header.width, info_header.height, info_header.bits_per_pixel,
        info_header.compression, file_header.offset_data,
    )
    return file_header, info_header, color_header


def _read_pixels(data: bytes, file_header: FileHeader, info_header: InfoHeader) -> PixelBuffer:
    """
    Decode the pixel array at the header's data offset.

    Only the pixel array's extent (``height * stride`` bytes) is enforced.
    The file size field is informational and is not compared with the
    number of bytes actually present.
    """
    width = info_header.width
    height = info_header.height
    bits_per_pixel = info_header.bits_per_pixel
    stride = row_stride(width, bits_per_pixel)

    start = file_header.offset_data
    required = stride * height
    payload = data[start:start + required]
    if len(payload) < required:
        raise TruncatedDataError("pixel data", required, len(payload))

    if bits_per_pixel == 24:
        # 24-bit rows become unpadded 32-bit BGRA rows
        payload = expand_bgr_rows(payload, width, height, stride)
        bits_per_pixel = 32
        stride = 4 * width

    channels = bits_per_pixel // 8
    rgba = decode_pixel_rows(payload, width, height, channels, stride, top_down=False)
    return PixelBuffer(rgba, width, height, channels)


def decode(data: bytes) -> PixelBuffer:
    """
    Decode BMP file bytes into a canonical pixel buffer.

    Args:
        data: Complete BMP file contents

    Returns:
        PixelBuffer with RGBA, top-down, unpadded pixel data

    Raises:
        BMPFormatError: Bad signature, missing or non-canonical color masks
        UnsupportedFormatError: Bit depth, compression, row order or a
            zero width/height not handled
        TruncatedDataError: Fewer bytes than the headers or the pixel array
            need (the file size field itself is not enforced)
    """
    return BMPParser(file_data=data).parse().pixels
