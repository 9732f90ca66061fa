# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Command-line interface for bmpcodec

  bmpcodec info FILE [--json]      dump the BMP headers
  bmpcodec convert INPUT OUTPUT    re-encode as canonical 32-bit BGRA

Copyright 2025 DNAi inc.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from bmpcodec import __version__
from bmpcodec.bmp_parser import BMPParser
from bmpcodec.core import BMP
from bmpcodec.exceptions import BMPError
from bmpcodec.validation import format_header_info

logger = logging.getLogger(__name__)


def cmd_info(args: argparse.Namespace) -> int:
    file_header, info_header, color_header = BMPParser(file_path=args.file).parse_headers()
    format_type = "json" if args.json else "text"
    print(format_header_info(file_header, info_header, color_header, format_type))
    return 0


def cmd_convert(args: argparse.Namespace) -> int:
    image = BMP.from_file(args.input)
    image.write(args.output)
    logger.info(
        "Wrote %s (%dx%d, 32-bit BGRA)", args.output, image.width, image.height
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='bmpcodec',
        description='Read, inspect and re-encode 24/32-bit BMP files',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', required=True)

    info = subparsers.add_parser('info', help='Print the BMP headers')
    info.add_argument('file', type=Path, help='BMP file to inspect')
    info.add_argument('--json', action='store_true', help='Output headers as JSON')
    info.set_defaults(func=cmd_info)

    convert = subparsers.add_parser('convert', help='Re-encode a BMP as 32-bit BGRA')
    convert.add_argument('input', type=Path, help='Input BMP file')
    convert.add_argument('output', type=Path, help='Output BMP file')
    convert.set_defaults(func=cmd_convert)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    try:
        return args.func(args)
    except BMPError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
