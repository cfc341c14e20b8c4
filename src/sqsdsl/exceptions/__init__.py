"""
sqsdsl exception classes.

This package provides all exception types used throughout sqsdsl for
consistent error handling and reporting.
"""

from sqsdsl.exceptions.core import (
    ConfigurationError,
    MissingMessageBodyError,
    SqsDslError,
)

__all__ = [
    "SqsDslError",
    "ConfigurationError",
    "MissingMessageBodyError",
]
