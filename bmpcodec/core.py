# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
BMP value object and file helpers

A BMP value is built either from a file (read and decode) or from a pixel
buffer (prepared for write). It owns its pixels and keeps no state shared
with other values; headers for writing are derived from the pixels each
time they are needed.

Copyright 2025 DNAi inc.
"""

import logging
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Optional, Tuple, Union

from bmpcodec.bmp_parser import BMPParser, ParsedBMP
from bmpcodec.bmp_writer import BMPWriter, build_headers, encode, validate_buffer
from bmpcodec.headers import ColorMaskHeader, FileHeader, InfoHeader
from bmpcodec.pixels import PixelBuffer
from bmpcodec.validation import format_header_info

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@contextmanager
def _timed(label: str):
    start = time.perf_counter()
    try:
        yield
    finally:
        logger.debug("%s took %.3f ms", label, (time.perf_counter() - start) * 1000.0)


class BMP:
    """
    An image held as canonical RGB(A) pixels.

    Example:
        >>> image = BMP.from_pixels(2, 1, b'\\xff\\x00\\x00\\x00\\xff\\x00', channels=3)
        >>> image.write('out.bmp')
        >>> BMP.from_file('out.bmp').data
        b'\\xff\\x00\\x00\\xff\\x00\\xff\\x00\\xff'
    """

    def __init__(self, pixels: PixelBuffer, source: Optional[ParsedBMP] = None):
        """
        Args:
            pixels: Canonical pixel buffer
            source: Parsed file the pixels were read from, if any
        """
        self._pixels = pixels
        self._source = source

    @classmethod
    def from_file(cls, file_path: PathLike) -> "BMP":
        """
        Read and decode a BMP file.

        Raises:
            BMPFileNotFoundError: If the file cannot be opened
            BMPFormatError, UnsupportedFormatError, TruncatedDataError:
                If the file cannot be decoded
        """
        with _timed(f"Reading {file_path}"):
            parsed = BMPParser(file_path=file_path).parse()
        return cls(parsed.pixels, source=parsed)

    @classmethod
    def from_pixels(cls, width: int, height: int, pixels: bytes, channels: int = 4) -> "BMP":
        """
        Wrap a producer's pixel buffer for writing.

        Raises:
            InvalidArgumentError: If the buffer cannot be encoded
        """
        validate_buffer(pixels, width, height, channels)
        return cls(PixelBuffer(bytes(pixels), width, height, channels))

    @property
    def width(self) -> int:
        return self._pixels.width

    @property
    def height(self) -> int:
        return self._pixels.height

    @property
    def channels(self) -> int:
        return self._pixels.channels

    @property
    def data(self) -> bytes:
        return self._pixels.data

    @property
    def pixels(self) -> PixelBuffer:
        return self._pixels

    def headers(self) -> Tuple[FileHeader, InfoHeader, ColorMaskHeader]:
        """Headers that ``to_bytes`` would write for the current pixels."""
        payload_size = 4 * self.width * self.height
        return build_headers(self.width, self.height, payload_size)

    def to_bytes(self) -> bytes:
        with _timed(f"Encoding {self.width}x{self.height} image"):
            return encode(self.data, self.width, self.height, self.channels)

    def write(self, file_path: PathLike) -> None:
        """
        Write the image as a 32-bit BMP file.

        Raises:
            InvalidArgumentError: If the pixels cannot be encoded
            BMPFileNotFoundError: If the output file cannot be opened
        """
        with _timed(f"Writing {file_path}"):
            BMPWriter().write_bmp(
                str(file_path), self.data, self.width, self.height, self.channels
            )

    def info(self, format_type: str = "text") -> str:
        """
        Dump the headers: those read from disk, or those that would be written.
        """
        if self._source is not None:
            return format_header_info(
                self._source.file_header,
                self._source.info_header,
                self._source.color_header,
                format_type,
            )
        return format_header_info(*self.headers(), format_type=format_type)

    def print_info(self) -> None:
        print(self.info())

    def __repr__(self) -> str:
        return f"BMP(width={self.width}, height={self.height}, channels={self.channels})"


def read_bmp(file_path: PathLike) -> PixelBuffer:
    """
    Read a BMP file into a canonical pixel buffer.

    The result unpacks as ``data, width, height, channels``.
    """
    return BMP.from_file(file_path).pixels


def write_bmp(
    file_path: PathLike,
    width: int,
    height: int,
    channels: int,
    pixels: bytes
) -> None:
    """Encode an RGB/RGBA buffer and write it to ``file_path``."""
    BMP.from_pixels(width, height, pixels, channels).write(file_path)
