# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Color mask and color space conformance checks, plus header diagnostics.

The codec reads one canonical dialect of 32-bit BMP: BGRA masks in the
sRGB color space. Anything else fails loudly instead of being
reinterpreted.

Copyright 2025 DNAi inc.
"""

import json
from typing import Any, Dict, Optional

from bmpcodec.constants import (
    COLOR_HEADER_SIZE,
    COMPRESSION_NAMES,
    FILE_HEADER_SIZE,
    INFO_HEADER_SIZE,
)
from bmpcodec.exceptions import BMPFormatError
from bmpcodec.headers import ColorMaskHeader, FileHeader, InfoHeader

_CANONICAL = ColorMaskHeader()


def check_color_mask(header: ColorMaskHeader) -> None:
    """
    Require the canonical BGRA bit masks.

    Raises:
        BMPFormatError: If any mask differs from the canonical set
    """
    found = (header.red_mask, header.green_mask, header.blue_mask, header.alpha_mask)
    expected = (_CANONICAL.red_mask, _CANONICAL.green_mask,
                _CANONICAL.blue_mask, _CANONICAL.alpha_mask)
    if found != expected:
        raise BMPFormatError(
            "Unexpected color mask format! Expected the pixel data to be in "
            "the BGRA format, found masks "
            + ", ".join(f"0x{mask:08X}" for mask in found)
        )


def check_color_space(header: ColorMaskHeader) -> None:
    """
    Require the sRGB color space tag.

    Raises:
        BMPFormatError: If the color space is not sRGB
    """
    if header.color_space_type != _CANONICAL.color_space_type:
        raise BMPFormatError(
            f"Unexpected color space type 0x{header.color_space_type:08X}! "
            f"Expected sRGB values"
        )


def check_color_header(header: ColorMaskHeader) -> None:
    """Run the mask check, then the color space check."""
    check_color_mask(header)
    check_color_space(header)


def header_info_dict(
    file_header: FileHeader,
    info_header: InfoHeader,
    color_header: Optional[ColorMaskHeader] = None
) -> Dict[str, Any]:
    """
    Collect all header fields into a flat dictionary.

    Keys use the ``Group:Field`` naming of the rest of the package output.
    """
    info: Dict[str, Any] = {
        'File:Type': file_header.signature.decode('latin-1'),
        'File:Size': file_header.file_size,
        'File:Reserved1': file_header.reserved1,
        'File:Reserved2': file_header.reserved2,
        'File:DataOffset': file_header.offset_data,
        'Info:Size': info_header.size,
        'Info:Width': info_header.width,
        'Info:Height': info_header.height,
        'Info:Planes': info_header.planes,
        'Info:BitCount': info_header.bits_per_pixel,
        'Info:Compression': COMPRESSION_NAMES.get(
            info_header.compression, f'Unknown ({info_header.compression})'
        ),
        'Info:SizeImage': info_header.image_size,
        'Info:XPixelsPerMeter': info_header.x_pixels_per_meter,
        'Info:YPixelsPerMeter': info_header.y_pixels_per_meter,
        'Info:ColorsUsed': info_header.colors_used,
        'Info:ColorsImportant': info_header.colors_important,
    }
    if color_header is not None:
        info.update({
            'Color:RedMask': f'0x{color_header.red_mask:08X}',
            'Color:GreenMask': f'0x{color_header.green_mask:08X}',
            'Color:BlueMask': f'0x{color_header.blue_mask:08X}',
            'Color:AlphaMask': f'0x{color_header.alpha_mask:08X}',
            'Color:ColorSpaceType': f'0x{color_header.color_space_type:08X}',
        })
    return info


def format_header_info(
    file_header: FileHeader,
    info_header: InfoHeader,
    color_header: Optional[ColorMaskHeader] = None,
    format_type: str = "text"
) -> str:
    """
    Human-readable dump of the BMP headers.

    Args:
        file_header: Parsed file header
        info_header: Parsed info header
        color_header: Color mask header, for 32-bit images
        format_type: 'text' or 'json'

    Returns:
        Formatted header dump
    """
    info = header_info_dict(file_header, info_header, color_header)
    if format_type == "json":
        return json.dumps(info, indent=2)

    sections = [
        ('File', f"BMP file header ({FILE_HEADER_SIZE} bytes):"),
        ('Info', f"BMP info header ({INFO_HEADER_SIZE} bytes):"),
        ('Color', f"Color header ({COLOR_HEADER_SIZE} bytes):"),
    ]
    lines = []
    for group, title in sections:
        fields = [(key.split(':', 1)[1], value) for key, value in info.items()
                  if key.startswith(group + ':')]
        if not fields:
            continue
        lines.append(title)
        lines.extend(f"  {name} = {value}" for name, value in fields)
    return "\n".join(lines)
