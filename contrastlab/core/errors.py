#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/core/errors.py


class ContrastlabError(ValueError):
    """Base class for every error raised by the contrastlab core."""


class DomainError(ContrastlabError):
    """A channel value lies outside its defined range."""


class InvalidInputError(ContrastlabError):
    """Input that cannot be evaluated, e.g. an unparseable color or a transparent layer."""


class ConfigError(ContrastlabError):
    """Malformed configuration: missing or duplicate roles, bad thresholds, bad token files."""
