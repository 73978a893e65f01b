"""
Option/argument parsing and usage generation.

This module provides the per-command parsing engine:
- Schema declaration with ordering rules
- Single-pass token parsing
- Usage text rendering
"""

from .helper import CommandHelper
from .parser import UNPARSED, ParseResult, is_option_token, parse_tokens
from .schema import ArgumentSpec, CommandSchema, OptionSpec, OptionType
from .usage import render_usage

__all__ = [
    "UNPARSED",
    "ArgumentSpec",
    "CommandHelper",
    "CommandSchema",
    "OptionSpec",
    "OptionType",
    "ParseResult",
    "is_option_token",
    "parse_tokens",
    "render_usage",
]
