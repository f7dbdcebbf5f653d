"""
Type aliases for argcfg.

This module provides centralized type definitions used throughout the package
to keep signatures consistent.

Type Aliases:
    ArgsList: List of raw string tokens
    TokenTuple: Immutable ordered sequence of classified tokens
    FlagList: List of flag names with their dashes stripped
    ExitCode: Integer representing exit codes
    ConfigDict: Plain dictionary form of an ArgumentConfig
"""

from typing import Dict, List, Tuple, Union

ArgsList = List[str]
"""List of string tokens as received from the command line."""

TokenTuple = Tuple[str, ...]
"""Immutable ordered sequence of tokens stored on an ArgumentConfig."""

FlagList = List[str]
"""List of flag names without leading dashes (e.g., ['f', 'x', 'verbose'])."""

ExitCode = int
"""Integer representing process exit codes (0 for success, non-zero for errors)."""

ConfigDict = Dict[str, Union[str, List[str]]]
"""Dictionary form of a parsed config (executable plus three token lists)."""
