"""Shared fixtures: hand-built BMP files."""

import struct

import pytest

CANONICAL_MASKS = (0x00FF0000, 0x0000FF00, 0x000000FF, 0xFF000000)
SRGB = 0x73524742


def build_bmp(
    rows,
    bpp=24,
    info_size=None,
    compression=None,
    masks=CANONICAL_MASKS,
    color_space=SRGB,
    planes=1,
    signature=b'BM',
    negative_height=False,
    padding=b'\x00',
):
    """
    Build BMP file bytes from top-down rows of RGB(A) tuples.

    Rows are stored bottom-up, BGR(A), padded to 4 bytes with ``padding``.
    """
    height = len(rows)
    width = len(rows[0]) if rows else 0
    stride = (bpp * width + 31) // 32 * 4

    payload = bytearray()
    for row in reversed(rows):
        stored = bytearray()
        for pixel in row:
            r, g, b = pixel[:3]
            stored += bytes((b, g, r))
            if bpp == 32:
                stored.append(pixel[3] if len(pixel) > 3 else 255)
        stored += padding * (stride - len(stored))
        payload += stored

    if info_size is None:
        info_size = 40 if bpp == 24 else 124
    if compression is None:
        compression = 0 if bpp == 24 else 3

    info = struct.pack(
        '<IiiHHIIiiII',
        info_size,
        width,
        -height if negative_height else height,
        planes,
        bpp,
        compression,
        len(payload),
        2835,
        2835,
        0,
        0,
    )
    extra = b''
    if info_size >= 124:
        extra = struct.pack('<5I', *masks, color_space) + bytes(64)
    elif info_size > 40:
        extra = bytes(info_size - 40)

    offset = 14 + info_size
    file_header = struct.pack('<2sIHHI', signature, offset + len(payload), 0, 0, offset)
    return file_header + info + extra + bytes(payload)


@pytest.fixture
def make_bmp():
    return build_bmp


@pytest.fixture
def rgb_rows():
    """3x2 image: width 3 forces 3 padding bytes per 24-bit row."""
    return [
        [(255, 0, 0), (0, 255, 0), (0, 0, 255)],
        [(10, 20, 30), (40, 50, 60), (70, 80, 90)],
    ]


@pytest.fixture
def rgba_rows():
    return [
        [(255, 0, 0, 255), (0, 255, 0, 128)],
        [(1, 2, 3, 4), (5, 6, 7, 0)],
    ]


def flatten(rows):
    return bytes(value for row in rows for pixel in row for value in pixel)


@pytest.fixture
def flat():
    return flatten
