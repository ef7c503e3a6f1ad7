#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/subcommands/convert.py

import argparse
import sys
from typing import List, Optional

from contrastlab.core import config as c
from contrastlab.logic.convert import engine
from contrastlab.shared.logger import ContrastlabArgumentParser


def get_convert_parser() -> argparse.ArgumentParser:
    """Create argument parser for convert command.

    Returns:
        argparse.ArgumentParser: Configured parser.
    """
    parser = ContrastlabArgumentParser(
        prog="contrastlab convert",
        description="contrastlab convert: convert a color between hex/sRGB and OKLCH",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    formats_list = " ".join(c.OUTPUT_FORMATS)
    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "value",
        help="color value to convert, must be in quotes\n"
        "examples:\n"
        '  "#ff6600"\n'
        '  "oklch(0.7 0.19 45)"',
    )
    parser.add_argument(
        "-t",
        "--to-format",
        choices=list(c.OUTPUT_FORMATS),
        default=None,
        help="the format to convert to (default: the other color space)\n"
        f"all formats: {formats_list}",
    )
    parser.add_argument(
        "--fit",
        action="store_true",
        help="reduce chroma until the color fits the sRGB gamut",
    )
    parser.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="print the conversion verbosely",
    )
    return parser


def handle_convert_command(args: argparse.Namespace) -> int:
    return engine.run(args)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for convert command."""
    parser = get_convert_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    return handle_convert_command(args)


if __name__ == "__main__":
    sys.exit(main())
