"""
SQS request language parsing components.

This package provides the line-oriented command parser and the command
records it produces.
"""

from sqsdsl.parsing.commands import (
    Command,
    CommandBuilder,
    CommandKind,
    DiagnosticSeverity,
    ParseDiagnostic,
)
from sqsdsl.parsing.parser import (
    DELIMITER,
    CommandParser,
    count_brace_delta,
    parse_commands,
)

__all__ = [
    "Command",
    "CommandBuilder",
    "CommandKind",
    "CommandParser",
    "DELIMITER",
    "DiagnosticSeverity",
    "ParseDiagnostic",
    "count_brace_delta",
    "parse_commands",
]
