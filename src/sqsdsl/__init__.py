"""
sqsdsl - a line-oriented request language for message queues

sqsdsl parses documents of SEND / RECEIVE / PURGE blocks into immutable
command records and derives editor run actions, outline symbols and queue
request descriptors from them.
"""

from importlib.metadata import version

from sqsdsl.config import ClientSettings
from sqsdsl.parsing import Command, CommandKind, CommandParser, parse_commands

__version__ = version("sqsdsl")

__all__ = [
    "__version__",
    "ClientSettings",
    "Command",
    "CommandKind",
    "CommandParser",
    "parse_commands",
]
