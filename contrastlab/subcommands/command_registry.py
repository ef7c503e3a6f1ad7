#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/subcommands/command_registry.py

from . import (
    check,
    contrast,
    convert,
)

SUBCOMMANDS = {
    'check': check,
    'contrast': contrast,
    'convert': convert,
}
