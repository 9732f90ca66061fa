import struct

import pytest

from bmpcodec.bmp_parser import BMPParser, decode
from bmpcodec.bmp_writer import BMPWriter, build_headers, encode
from bmpcodec.exceptions import BMPFileNotFoundError, InvalidArgumentError
from bmpcodec.headers import ColorMaskHeader


def test_encoded_headers():
    data = encode(bytes(2 * 3 * 3), 2, 3, 3)
    payload_size = 2 * 3 * 4
    assert data[:2] == b'BM'
    assert struct.unpack_from('<I', data, 2)[0] == len(data) == 138 + payload_size
    assert struct.unpack_from('<I', data, 10)[0] == 138
    assert struct.unpack_from('<IiiHHII', data, 14) == (124, 2, 3, 1, 32, 3, payload_size)
    assert ColorMaskHeader.unpack(data, 54) == ColorMaskHeader()


def test_encode_rgb_red_square():
    width = height = 10
    data = encode(b'\xff\x00\x00' * (width * height), width, height, 3)
    pixels = decode(data)
    assert (pixels.width, pixels.height, pixels.channels) == (10, 10, 4)
    assert pixels.data == b'\xff\x00\x00\xff' * (width * height)


def test_payload_is_bgra_bottom_up():
    # 1x2: top red, bottom blue
    data = encode(b'\xff\x00\x00' + b'\x00\x00\xff', 1, 2, 3)
    assert data[138:] == b'\xff\x00\x00\xff' + b'\x00\x00\xff\xff'


def test_encode_rgba_keeps_alpha(rgba_rows, flat):
    pixels = flat(rgba_rows)
    assert decode(encode(pixels, 2, 2, 4)).data == pixels


def test_32bit_round_trip_is_idempotent(make_bmp, rgba_rows):
    first = decode(make_bmp(rgba_rows, bpp=32))
    second = decode(encode(*first))
    assert second == first


def test_24bit_input_round_trips_through_32bit(make_bmp, rgb_rows):
    first = decode(make_bmp(rgb_rows))
    again = decode(encode(*first))
    assert again.data == first.data


def test_odd_width_needs_no_padding():
    data = encode(bytes(3 * 5 * 3), 3, 5, 3)
    assert len(data) - 138 == 3 * 5 * 4


@pytest.mark.parametrize('channels', [0, 1, 2, 5])
def test_invalid_channel_count(channels):
    with pytest.raises(InvalidArgumentError, match="channels"):
        encode(bytes(4 * max(channels, 1)), 2, 2, channels)


def test_buffer_length_mismatch():
    with pytest.raises(InvalidArgumentError, match="expected 12"):
        encode(bytes(11), 2, 2, 3)


@pytest.mark.parametrize('width, height', [(0, 0), (0, 5), (5, 0), (-1, 2)])
def test_zero_or_negative_size_is_rejected(width, height):
    with pytest.raises(InvalidArgumentError):
        encode(b'', width, height, 4)


def test_non_integer_size_is_rejected():
    with pytest.raises(InvalidArgumentError):
        encode(bytes(4), 1.0, 1, 4)


def test_build_headers_recomputes_sizes():
    file_header, info_header, color_header = build_headers(4, 4, 64)
    assert file_header.file_size == 138 + 64
    assert file_header.offset_data == 138
    assert info_header.size == 124
    assert info_header.image_size == 64
    assert color_header == ColorMaskHeader()


def test_writer_writes_file(tmp_path):
    path = tmp_path / 'out.bmp'
    BMPWriter().write_bmp(str(path), b'\x01\x02\x03', 1, 1, 3)
    parsed = BMPParser(file_path=str(path)).parse()
    assert parsed.pixels.data == b'\x01\x02\x03\xff'
    assert parsed.file_header.file_size == path.stat().st_size


def test_writer_unopenable_path(tmp_path):
    with pytest.raises(BMPFileNotFoundError):
        BMPWriter().write_bmp(str(tmp_path / 'no' / 'such' / 'dir.bmp'), b'\x00' * 3, 1, 1, 3)


def test_writer_validates_before_opening(tmp_path):
    path = tmp_path / 'out.bmp'
    with pytest.raises(InvalidArgumentError):
        BMPWriter().write_bmp(str(path), b'\x00', 1, 1, 3)
    assert not path.exists()
