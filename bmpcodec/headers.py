# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
BMP header structures

Typed representations of the three fixed-size BMP structures:
- File header (14 bytes)
- DIB info header (40 bytes, BITMAPINFOHEADER)
- Color mask header (84 bytes, the BITMAPV5HEADER tail)

Every field is read and written at its documented byte offset with
explicit little-endian struct formats, so the Python object layout never
leaks into the file layout.

Copyright 2025 DNAi inc.
"""

import struct
from dataclasses import dataclass, field
from typing import Tuple

from bmpcodec.constants import (
    ALPHA_MASK,
    BI_BITFIELDS,
    BLUE_MASK,
    BMP_SIGNATURE,
    COLOR_HEADER_SIZE,
    COLOR_RESERVED_WORDS,
    FILE_HEADER_SIZE,
    GREEN_MASK,
    INFO_HEADER_SIZE,
    LCS_SRGB,
    RED_MASK,
)
from bmpcodec.exceptions import InvalidArgumentError, TruncatedDataError


def _require(data: bytes, offset: int, size: int, what: str) -> None:
    available = max(0, len(data) - offset)
    if available < size:
        raise TruncatedDataError(what, size, available)


@dataclass(frozen=True)
class FileHeader:
    """BMP file header (BITMAPFILEHEADER)."""
    signature: bytes = BMP_SIGNATURE
    file_size: int = 0
    reserved1: int = 0
    reserved2: int = 0
    offset_data: int = 0

    def __post_init__(self):
        if len(self.signature) != 2:
            raise InvalidArgumentError(
                f"BMP signature must be 2 bytes, got {self.signature!r}"
            )

    @classmethod
    def unpack(cls, data: bytes, offset: int = 0) -> "FileHeader":
        """
        Parse a file header starting at ``offset``.

        The signature is returned as found; checking it is the
        decoder's first validation gate.
        """
        _require(data, offset, FILE_HEADER_SIZE, "file header")
        # Offset 0: Signature (2 bytes)
        signature = bytes(data[offset:offset + 2])
        # Offset 2: File size (4 bytes, little-endian)
        file_size = struct.unpack_from('<I', data, offset + 2)[0]
        # Offset 6, 8: Reserved (2 bytes each)
        reserved1 = struct.unpack_from('<H', data, offset + 6)[0]
        reserved2 = struct.unpack_from('<H', data, offset + 8)[0]
        # Offset 10: Pixel data offset (4 bytes)
        offset_data = struct.unpack_from('<I', data, offset + 10)[0]
        return cls(signature, file_size, reserved1, reserved2, offset_data)

    def pack(self) -> bytes:
        buffer = bytearray(FILE_HEADER_SIZE)
        buffer[0:2] = self.signature
        struct.pack_into('<I', buffer, 2, self.file_size)
        struct.pack_into('<H', buffer, 6, self.reserved1)
        struct.pack_into('<H', buffer, 8, self.reserved2)
        struct.pack_into('<I', buffer, 10, self.offset_data)
        return bytes(buffer)


@dataclass(frozen=True)
class InfoHeader:
    """
    DIB header (BITMAPINFOHEADER).

    ``size`` covers the info header plus any color mask header that
    follows it. A positive height means bottom-up rows with the origin
    in the lower left corner; a negative height means top-down rows.
    """
    size: int = INFO_HEADER_SIZE
    width: int = 0
    height: int = 0
    planes: int = 1
    bits_per_pixel: int = 32
    compression: int = BI_BITFIELDS
    image_size: int = 0
    x_pixels_per_meter: int = 0
    y_pixels_per_meter: int = 0
    colors_used: int = 0
    colors_important: int = 0

    @classmethod
    def unpack(cls, data: bytes, offset: int = FILE_HEADER_SIZE) -> "InfoHeader":
        _require(data, offset, INFO_HEADER_SIZE, "info header")
        return cls(
            size=struct.unpack_from('<I', data, offset)[0],
            width=struct.unpack_from('<i', data, offset + 4)[0],
            height=struct.unpack_from('<i', data, offset + 8)[0],
            planes=struct.unpack_from('<H', data, offset + 12)[0],
            bits_per_pixel=struct.unpack_from('<H', data, offset + 14)[0],
            compression=struct.unpack_from('<I', data, offset + 16)[0],
            image_size=struct.unpack_from('<I', data, offset + 20)[0],
            x_pixels_per_meter=struct.unpack_from('<i', data, offset + 24)[0],
            y_pixels_per_meter=struct.unpack_from('<i', data, offset + 28)[0],
            colors_used=struct.unpack_from('<I', data, offset + 32)[0],
            colors_important=struct.unpack_from('<I', data, offset + 36)[0],
        )

    def pack(self) -> bytes:
        buffer = bytearray(INFO_HEADER_SIZE)
        struct.pack_into('<I', buffer, 0, self.size)
        struct.pack_into('<i', buffer, 4, self.width)
        struct.pack_into('<i', buffer, 8, self.height)
        struct.pack_into('<H', buffer, 12, self.planes)
        struct.pack_into('<H', buffer, 14, self.bits_per_pixel)
        struct.pack_into('<I', buffer, 16, self.compression)
        struct.pack_into('<I', buffer, 20, self.image_size)
        struct.pack_into('<i', buffer, 24, self.x_pixels_per_meter)
        struct.pack_into('<i', buffer, 28, self.y_pixels_per_meter)
        struct.pack_into('<I', buffer, 32, self.colors_used)
        struct.pack_into('<I', buffer, 36, self.colors_important)
        return bytes(buffer)

    @property
    def has_color_header(self) -> bool:
        return self.size >= INFO_HEADER_SIZE + COLOR_HEADER_SIZE

    @property
    def is_top_down(self) -> bool:
        return self.height < 0


@dataclass(frozen=True)
class ColorMaskHeader:
    """
    Color mask header following the info header of 32-bit images.

    Defaults are the canonical BGRA masks and the sRGB color space.
    """
    red_mask: int = RED_MASK
    green_mask: int = GREEN_MASK
    blue_mask: int = BLUE_MASK
    alpha_mask: int = ALPHA_MASK
    color_space_type: int = LCS_SRGB
    reserved: Tuple[int, ...] = field(default=(0,) * COLOR_RESERVED_WORDS)

    @classmethod
    def unpack(
        cls,
        data: bytes,
        offset: int = FILE_HEADER_SIZE + INFO_HEADER_SIZE
    ) -> "ColorMaskHeader":
        _require(data, offset, COLOR_HEADER_SIZE, "color mask header")
        masks = [struct.unpack_from('<I', data, offset + 4 * i)[0] for i in range(4)]
        color_space_type = struct.unpack_from('<I', data, offset + 16)[0]
        reserved = struct.unpack_from(f'<{COLOR_RESERVED_WORDS}I', data, offset + 20)
        return cls(*masks, color_space_type=color_space_type, reserved=tuple(reserved))

    def pack(self) -> bytes:
        buffer = bytearray(COLOR_HEADER_SIZE)
        struct.pack_into('<I', buffer, 0, self.red_mask)
        struct.pack_into('<I', buffer, 4, self.green_mask)
        struct.pack_into('<I', buffer, 8, self.blue_mask)
        struct.pack_into('<I', buffer, 12, self.alpha_mask)
        struct.pack_into('<I', buffer, 16, self.color_space_type)
        struct.pack_into(f'<{COLOR_RESERVED_WORDS}I', buffer, 20, *self.reserved)
        return bytes(buffer)
