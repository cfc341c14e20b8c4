"""
Core sqsdsl components.

This package provides the type aliases and value records shared across the
parser, editor helpers and request builders.
"""

from sqsdsl.core.types import JsonValue, SourceRange

__all__ = [
    "JsonValue",
    "SourceRange",
]
