import pytest

from bmpcodec.exceptions import InvalidArgumentError, TruncatedDataError
from bmpcodec.pixels import (
    PixelBuffer,
    decode_pixel_rows,
    expand_bgr_rows,
    row_stride,
    to_bgra_rows,
)


@pytest.mark.parametrize('width, bpp, stride', [
    (3, 24, 12),
    (4, 24, 12),
    (1, 32, 4),
    (1, 24, 4),
    (5, 24, 16),
    (0, 24, 0),
    (7, 32, 28),
])
def test_row_stride(width, bpp, stride):
    assert row_stride(width, bpp) == stride


def test_expand_bgr_rows_skips_padding():
    # Two rows of one pixel each, 1 padding byte per row set to 0xEE
    data = b'\x01\x02\x03\xee' + b'\x04\x05\x06\xee'
    assert expand_bgr_rows(data, 1, 2, 4) == b'\x01\x02\x03\xff\x04\x05\x06\xff'


def test_expand_bgr_rows_tolerates_missing_final_padding():
    data = b'\x01\x02\x03\x00' + b'\x04\x05\x06'
    assert expand_bgr_rows(data, 1, 2, 4) == b'\x01\x02\x03\xff\x04\x05\x06\xff'


def test_expand_bgr_rows_truncated():
    with pytest.raises(TruncatedDataError):
        expand_bgr_rows(b'\x01\x02\x03\x00\x04', 1, 2, 4)


def test_decode_pixel_rows_bottom_up():
    stored = b'\x01\x02\x03\x04' + b'\x05\x06\x07\x08'  # bottom row first
    out = decode_pixel_rows(stored, 1, 2, 4, 4)
    assert out == b'\x07\x06\x05\x08' + b'\x03\x02\x01\x04'


def test_decode_pixel_rows_top_down():
    stored = b'\x01\x02\x03\x04' + b'\x05\x06\x07\x08'
    out = decode_pixel_rows(stored, 1, 2, 4, 4, top_down=True)
    assert out == b'\x03\x02\x01\x04' + b'\x07\x06\x05\x08'


def test_decode_pixel_rows_three_channels_with_padding():
    # width 1, stride 4: BGR + pad
    stored = b'\x01\x02\x03\x00' + b'\x04\x05\x06\x00'
    out = decode_pixel_rows(stored, 1, 2, 3, 4)
    assert out == b'\x06\x05\x04' + b'\x03\x02\x01'


def test_decode_pixel_rows_single_channel_passthrough():
    stored = b'\x01\x02\x00\x00' + b'\x03\x04\x00\x00'
    assert decode_pixel_rows(stored, 2, 2, 1, 4) == b'\x03\x04\x01\x02'


def test_decode_pixel_rows_rejects_channel_count():
    with pytest.raises(InvalidArgumentError):
        decode_pixel_rows(bytes(8), 1, 2, 2, 4)


def test_decode_pixel_rows_rejects_small_row_size():
    with pytest.raises(InvalidArgumentError):
        decode_pixel_rows(bytes(16), 2, 2, 4, 4)


def test_decode_pixel_rows_truncated():
    with pytest.raises(TruncatedDataError):
        decode_pixel_rows(bytes(6), 1, 2, 4, 4)


def test_to_bgra_rows_from_rgb_adds_alpha_and_flips():
    rgb = b'\x01\x02\x03' + b'\x04\x05\x06'  # 1x2, top row first
    assert to_bgra_rows(rgb, 1, 2, 3) == b'\x06\x05\x04\xff' + b'\x03\x02\x01\xff'


def test_to_bgra_rows_from_rgba_keeps_alpha():
    rgba = b'\x01\x02\x03\x04\x05\x06\x07\x08'  # 2x1
    assert to_bgra_rows(rgba, 2, 1, 4) == b'\x03\x02\x01\x04\x07\x06\x05\x08'


def test_to_bgra_rows_rejects_channel_count():
    with pytest.raises(InvalidArgumentError):
        to_bgra_rows(bytes(2), 1, 1, 2)


def test_pixel_buffer_checks_length():
    with pytest.raises(InvalidArgumentError):
        PixelBuffer(b'\x00' * 5, 1, 1, 4)


def test_pixel_buffer_unpacks_and_indexes():
    buffer = PixelBuffer(bytes(range(8)), 2, 1, 4)
    data, width, height, channels = buffer
    assert (width, height, channels) == (2, 1, 4)
    assert data == bytes(range(8))
    assert buffer.pixel(1, 0) == b'\x04\x05\x06\x07'
    assert buffer.row_size == 8
