# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
BMP (Bitmap) encoder

This module serializes RGB or RGBA pixel buffers into 32-bit BGRA BMP files
carrying the canonical color mask header.

Copyright 2025 DNAi inc.
"""

import logging
from pathlib import Path
from typing import Tuple

from bmpcodec.constants import (
    BI_BITFIELDS,
    FULL_INFO_HEADER_SIZE,
    PIXEL_DATA_OFFSET,
)
from bmpcodec.exceptions import BMPFileNotFoundError, InvalidArgumentError
from bmpcodec.headers import ColorMaskHeader, FileHeader, InfoHeader
from bmpcodec.pixels import to_bgra_rows

logger = logging.getLogger(__name__)


def build_headers(width: int, height: int, payload_size: int) -> Tuple[FileHeader, InfoHeader, ColorMaskHeader]:
    """
    Derive all three headers from the geometry and the payload being written.

    Size fields are never carried over from a decoded file.
    """
    file_header = FileHeader(
        file_size=PIXEL_DATA_OFFSET + payload_size,
        offset_data=PIXEL_DATA_OFFSET,
    )
    info_header = InfoHeader(
        size=FULL_INFO_HEADER_SIZE,
        width=width,
        height=height,
        bits_per_pixel=32,
        compression=BI_BITFIELDS,
        image_size=payload_size,
    )
    return file_header, info_header, ColorMaskHeader()


def validate_buffer(pixels: bytes, width: int, height: int, channels: int) -> None:
    """Reject anything the encoder cannot write, zero-sized images included."""
    if channels not in (3, 4):
        raise InvalidArgumentError(
            f"Invalid channels argument for creating bmp: {channels} (expected 3 or 4)"
        )
    for name, value in (('width', width), ('height', height)):
        if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
            raise InvalidArgumentError(f"BMP {name} must be a positive integer, got {value!r}")
    expected = width * height * channels
    if len(pixels) != expected:
        raise InvalidArgumentError(
            f"Pixel buffer holds {len(pixels)} bytes, expected {expected} "
            f"for {width}x{height}x{channels}"
        )


def encode(pixels: bytes, width: int, height: int, channels: int) -> bytes:
    """
    Encode a canonical pixel buffer as a 32-bit BMP file.

    Args:
        pixels: RGB or RGBA bytes, top-to-bottom rows, no padding
        width: Image width in pixels
        height: Image height in pixels
        channels: 3 (RGB) or 4 (RGBA)

    Returns:
        Complete BMP file bytes

    Raises:
        InvalidArgumentError: Channel count, dimensions or buffer length invalid
    """
    validate_buffer(pixels, width, height, channels)

    payload = to_bgra_rows(bytes(pixels), width, height, channels)
    file_header, info_header, color_header = build_headers(width, height, len(payload))

    logger.debug(
        "Encoding %dx%d %d-channel buffer into %d bytes",
        width, height, channels, file_header.file_size,
    )
    return b''.join((
        file_header.pack(),
        info_header.pack(),
        color_header.pack(),
        payload,
    ))


class BMPWriter:
    """
    Writer for BMP files.

    Output is always 32-bit BGRA with a BITMAPV5-sized info header,
    bottom-up rows and the sRGB color space.
    """

    def write_bmp(
        self,
        output_path: str,
        pixels: bytes,
        width: int,
        height: int,
        channels: int
    ) -> None:
        """
        Encode pixels and write them to a BMP file.

        Args:
            output_path: Path to output BMP file
            pixels: RGB or RGBA bytes, top-to-bottom rows
            width: Image width in pixels
            height: Image height in pixels
            channels: 3 or 4

        Raises:
            InvalidArgumentError: If the buffer cannot be encoded
            BMPFileNotFoundError: If the output file cannot be opened
        """
        data = encode(pixels, width, height, channels)
        try:
            with open(output_path, 'wb') as f:
                f.write(data)
        except OSError as e:
            raise BMPFileNotFoundError(Path(output_path), e.strerror or str(e)) from e
