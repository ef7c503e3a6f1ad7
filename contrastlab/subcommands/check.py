#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/subcommands/check.py

import argparse
import sys
from typing import List, Optional

from contrastlab.logic.check import engine
from contrastlab.shared.logger import ContrastlabArgumentParser


def get_check_parser() -> argparse.ArgumentParser:
    """Create argument parser for check command."""
    parser = ContrastlabArgumentParser(
        prog="contrastlab check",
        description="contrastlab check: validate palette token files against their contrast rules",
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
        "files",
        nargs="+",
        metavar="FILE",
        help="JSON token file(s); each is validated independently\n"
        "exit status: 0 all rules pass, 1 any rule fails, 2 configuration error",
    )
    parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="print the report as a JSON list of {fg, bg, context, ratio, threshold, pass}",
    )
    parser.add_argument(
        "-S",
        "--suggest",
        action="store_true",
        help="for failing rules, suggest the nearest passing foreground lightness",
    )
    return parser


def handle_check_command(args: argparse.Namespace) -> int:
    return engine.run(args)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for check command."""
    parser = get_check_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    return handle_check_command(args)


if __name__ == "__main__":
    sys.exit(main())
