# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Pixel buffers and the pure transforms between on-disk and canonical layouts.

On disk, BMP rows are BGR(A), bottom-up and padded to 4-byte boundaries.
Canonical buffers are RGB(A), top-down and unpadded. Every function here
returns a new buffer and leaves its input untouched.

Copyright 2025 DNAi inc.
"""

from dataclasses import dataclass

from bmpcodec.constants import OPAQUE_ALPHA
from bmpcodec.exceptions import InvalidArgumentError, TruncatedDataError


@dataclass(frozen=True)
class PixelBuffer:
    """
    Decoded image: row-major, top-to-bottom, channel-interleaved bytes.

    Channel order is RGB (3 channels), RGBA (4 channels) or grey (1 channel).
    """
    data: bytes
    width: int
    height: int
    channels: int

    def __post_init__(self):
        expected = self.width * self.height * self.channels
        if len(self.data) != expected:
            raise InvalidArgumentError(
                f"Pixel buffer holds {len(self.data)} bytes, expected "
                f"{expected} for {self.width}x{self.height}x{self.channels}"
            )

    def __iter__(self):
        # Allows ``data, width, height, channels = buffer``
        return iter((self.data, self.width, self.height, self.channels))

    @property
    def row_size(self) -> int:
        return self.width * self.channels

    def pixel(self, x: int, y: int) -> bytes:
        """Return the channel bytes of the pixel at column x, row y."""
        start = (y * self.width + x) * self.channels
        return self.data[start:start + self.channels]


def row_stride(width: int, bits_per_pixel: int) -> int:
    """
    Padded byte length of one stored row.

    BMP rows are padded to 4-byte boundaries regardless of pixel size:
    ceil(bits_per_pixel * width / 32) * 4.
    """
    return (bits_per_pixel * width + 31) // 32 * 4


def expand_bgr_rows(data: bytes, width: int, height: int, stride: int) -> bytes:
    """
    Convert padded 24-bit BGR rows into unpadded 32-bit BGRA rows.

    An opaque alpha byte is appended to each pixel and the padding at the
    end of each row is skipped. Row order is preserved.
    """
    data_width = 3 * width
    required = stride * (height - 1) + data_width if height else 0
    if len(data) < required:
        raise TruncatedDataError("24-bit pixel data", required, len(data))

    out = bytearray(4 * width * height)
    alpha = bytes([OPAQUE_ALPHA]) * width
    for row in range(height):
        src = data[row * stride:row * stride + data_width]
        dst = row * 4 * width
        out[dst:dst + 4 * width:4] = src[0::3]
        out[dst + 1:dst + 4 * width:4] = src[1::3]
        out[dst + 2:dst + 4 * width:4] = src[2::3]
        out[dst + 3:dst + 4 * width:4] = alpha
    return bytes(out)


def decode_pixel_rows(
    data: bytes,
    width: int,
    height: int,
    channels: int,
    row_size: int,
    top_down: bool = False
) -> bytes:
    """
    Re-index stored BGR(A) rows into a canonical RGB(A) top-down buffer.

    Output row ``i`` is read from stored row ``height - 1 - i`` for
    bottom-up sources and from stored row ``i`` for top-down sources.

    Args:
        data: Stored pixel rows
        width: Image width in pixels
        height: Image height in pixels (non-negative)
        channels: 1 (grey), 3 (BGR) or 4 (BGRA)
        row_size: Byte length of one stored row, padding included
        top_down: Whether stored row 0 is the top row

    Returns:
        ``width * height * channels`` bytes, RGB(A) or grey, no padding
    """
    if channels not in (1, 3, 4):
        raise InvalidArgumentError(f"Unexpected number of channels: {channels}")
    if height < 0 or width < 0:
        raise InvalidArgumentError(f"Invalid dimensions {width}x{height}")
    out_row = width * channels
    if row_size < out_row:
        raise InvalidArgumentError(
            f"Row size {row_size} is smaller than {out_row} bytes of pixel data"
        )
    required = row_size * (height - 1) + out_row if height else 0
    if len(data) < required:
        raise TruncatedDataError("pixel rows", required, len(data))

    out = bytearray(out_row * height)
    for i in range(height):
        stored = i if top_down else height - 1 - i
        src = data[stored * row_size:stored * row_size + out_row]
        dst = i * out_row
        if channels == 1:
            out[dst:dst + out_row] = src
            continue
        # BGR -> RGB, BGRA -> RGBA
        out[dst:dst + out_row:channels] = src[2::channels]
        out[dst + 1:dst + out_row:channels] = src[1::channels]
        out[dst + 2:dst + out_row:channels] = src[0::channels]
        if channels == 4:
            out[dst + 3:dst + out_row:channels] = src[3::channels]
    return bytes(out)


def to_bgra_rows(data: bytes, width: int, height: int, channels: int) -> bytes:
    """
    Convert a canonical RGB/RGBA top-down buffer to bottom-up BGRA rows.

    Three-channel input gains an opaque alpha byte per pixel. The result
    needs no row padding since ``4 * width`` is always a multiple of 4.
    """
    if channels not in (3, 4):
        raise InvalidArgumentError(
            f"Invalid channels argument for creating bmp: {channels}"
        )
    in_row = width * channels
    out_row = width * 4
    out = bytearray(out_row * height)
    alpha = bytes([OPAQUE_ALPHA]) * width
    for i in range(height):
        src = data[i * in_row:(i + 1) * in_row]
        dst = (height - 1 - i) * out_row
        out[dst:dst + out_row:4] = src[2::channels]
        out[dst + 1:dst + out_row:4] = src[1::channels]
        out[dst + 2:dst + out_row:4] = src[0::channels]
        out[dst + 3:dst + out_row:4] = src[3::4] if channels == 4 else alpha
    return bytes(out)
