#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/main.py

import argparse
import sys
from typing import List, Optional

from contrastlab import __version__
from contrastlab.core import config as c
from contrastlab.subcommands.command_registry import SUBCOMMANDS
from contrastlab.shared.logger import log, ContrastlabArgumentParser


def get_main_parser() -> argparse.ArgumentParser:
    """Create argument parser for the top-level command."""
    parser = ContrastlabArgumentParser(
        prog="contrastlab",
        description="contrastlab: OKLCH color conversion and WCAG contrast validation\n\n"
        "commands:\n"
        "  check      validate palette token files against contrast rules\n"
        "  contrast   contrast ratio between two colors\n"
        "  convert    convert a color between hex/sRGB and OKLCH",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"contrastlab {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for contrastlab CLI"""
    argv = list(sys.argv[1:] if argv is None else argv)

    # Subcommand Routing
    if argv and argv[0].lower() in SUBCOMMANDS:
        return SUBCOMMANDS[argv[0].lower()].main(argv[1:])

    parser = get_main_parser()
    args = parser.parse_args(argv)

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            getter = getattr(module, f"get_{name}_parser")
            getter().print_help()
        return c.EXIT_OK

    if args.command:
        log("error", f"unrecognized command: '{args.command}'")
    else:
        parser.print_help()
    return c.EXIT_CONFIG


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
