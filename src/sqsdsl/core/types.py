"""
Core type definitions for the SQS request language.

This module contains the type aliases and small value records shared by the
parser and its consumers.
"""

from attrs import frozen

JsonValue = str | int | float | bool | list | dict | None


@frozen
class SourceRange:
    """
    Inclusive span of document lines occupied by a command.

    Params:
        start_line: 0-based index of the header line
        end_line: 0-based index of the last line belonging to the command
    """

    start_line: int
    end_line: int

    @property
    def line_count(self) -> int:
        return self.end_line - self.start_line + 1

    def contains(self, line: int) -> bool:
        """Check whether a 0-based line index falls inside this range."""
        return self.start_line <= line <= self.end_line
