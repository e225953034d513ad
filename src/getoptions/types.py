"""
Type aliases for getoptions.

This module provides centralized type definitions used throughout the parser
to keep signatures consistent between the matchers, the accumulator and the
configuration layer.

Type Aliases:
    ArgsList: List of raw command-line tokens
    DefinitionIndex: Index into the option table, or -1 when unresolved
    InputIndex: Position of a result among all resolved entries
    FlagValue: Value written into a flag target
    LongSplit: Long option name and its optional "=argument" remainder
    ConfigData: Raw key/value pairs read from a configuration file
    ConfigOverrides: Parsed configuration values keyed by ParserConfig field
"""

from typing import Any, Dict, List, Optional, Tuple

# Common type aliases used throughout the package
ArgsList = List[str]
"""List of string arguments, usually sys.argv[1:]."""

DefinitionIndex = int
"""Index into the option table; -1 marks an unknown or ambiguous option."""

InputIndex = int
"""Zero-based position of a result among every resolved option and non-option."""

FlagValue = Any
"""Value a definition writes into its flag target (most often an int)."""

# Tuple type aliases for common patterns
LongSplit = Tuple[str, Optional[str]]
"""Long option name and the text after '=' (e.g. ('file', 'a.txt') or ('sort', None))."""

ConfigData = Dict[str, str]
"""Dictionary of raw configuration keys and values as read from a file."""

ConfigOverrides = Dict[str, Any]
"""Dictionary of parsed configuration values keyed by ParserConfig field name."""
