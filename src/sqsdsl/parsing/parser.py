"""
Parser for the SQS request language.

A document is a sequence of command blocks::

    SEND https://sqs.us-east-1.amazonaws.com/123456789012/orders
    profile: staging
    region: eu-west-1

    {"order_id": 42}
    ###

The scanner walks the document line by line and never fails: unknown lines
are ignored and a malformed JSON body only leaves the command without a body.
Brace counting for JSON bodies is purely lexical, so braces inside string
literals are counted as well. Only the opening brace of a body's first line
is counted, so a one-line body stays open until the next header or the end
of the document.
"""

import logging
import re
from dataclasses import dataclass

from sqsdsl.parsing.commands import Command, CommandBuilder, CommandKind

logger = logging.getLogger(__name__)

DELIMITER = "###"


@dataclass
class _Idle:
    """Not inside any command block."""


@dataclass
class _InCommand:
    """Inside a block, accepting parameter lines."""

    builder: CommandBuilder


@dataclass
class _InJsonBody:
    """Accumulating a brace-delimited JSON body until braces balance."""

    builder: CommandBuilder
    depth: int


ScanState = _Idle | _InCommand | _InJsonBody


def count_brace_delta(line: str) -> int:
    """Return the number of ``{`` minus the number of ``}`` in a line."""
    return line.count("{") - line.count("}")


class CommandParser:
    """Line-oriented state machine turning request documents into commands."""

    HEADER_PATTERN = re.compile(r"^(?P<kind>SEND|RECEIVE|PURGE)\s+(?P<target>\S+)")

    PROFILE_PATTERN = re.compile(r"^profile\s*:\s*(?P<value>.+)$")
    REGION_PATTERN = re.compile(r"^region\s*:\s*(?P<value>.+)$")

    # Only recognized under an open RECEIVE command
    RECEIVE_PARAMETER_PATTERNS = {
        "max_messages": re.compile(r"^max-messages\s*:\s*(?P<value>\d+)$", re.ASCII),
        "visibility_timeout_seconds": re.compile(
            r"^visibility-timeout\s*:\s*(?P<value>\d+)$", re.ASCII
        ),
        "wait_time_seconds": re.compile(r"^wait-time\s*:\s*(?P<value>\d+)$", re.ASCII),
    }

    def parse(
        self, text: str, default_profile: str, default_region: str
    ) -> list[Command]:
        """
        Parse a request document into commands.

        Params:
            text: Full document text
            default_profile: Profile used when a block has no ``profile:`` line
            default_region: Region used when a block has no ``region:`` line

        Returns:
            Sealed commands in the order their headers appear
        """
        lines = text.split("\n")
        commands: list[Command] = []
        state: ScanState = _Idle()

        for index, raw_line in enumerate(lines):
            line = raw_line.strip()

            if not line:
                continue

            if isinstance(state, _InCommand) and line == DELIMITER:
                commands.append(state.builder.seal(index))
                state = _Idle()
                continue

            if line.startswith("#"):
                continue

            header = self.HEADER_PATTERN.match(line)
            if header:
                if not isinstance(state, _Idle):
                    commands.append(state.builder.seal(index - 1))
                state = _InCommand(
                    CommandBuilder(
                        kind=CommandKind(header.group("kind")),
                        target=header.group("target"),
                        profile=default_profile,
                        region=default_region,
                        start_line=index,
                    )
                )
                continue

            if isinstance(state, _InCommand):
                state = self._scan_command_line(state, line, raw_line, index)
            elif isinstance(state, _InJsonBody):
                state = self._scan_body_line(state, raw_line)

        if not isinstance(state, _Idle):
            commands.append(state.builder.seal(len(lines) - 1))

        logger.debug("Parsed %d command(s) from %d line(s)", len(commands), len(lines))
        return commands

    def _scan_command_line(
        self, state: _InCommand, line: str, raw_line: str, index: int
    ) -> ScanState:
        """Handle a non-header line while a command block is open."""
        builder = state.builder

        if self._apply_parameter(builder, line):
            return state

        if builder.kind is CommandKind.SEND and line.startswith("{"):
            # The opening line counts as depth 1; its other braces are not scanned
            builder.start_body(raw_line, index)
            return _InJsonBody(builder, depth=1)

        return state

    def _scan_body_line(self, state: _InJsonBody, raw_line: str) -> ScanState:
        state.builder.add_body_line(raw_line)
        state.depth += count_brace_delta(raw_line)
        if state.depth == 0:
            state.builder.resolve_body()
            return _InCommand(state.builder)
        return state

    def _apply_parameter(self, builder: CommandBuilder, line: str) -> bool:
        """
        Apply a parameter line to the builder.

        Params:
            builder: Command under construction
            line: Stripped line text

        Returns:
            True if the line was consumed as a parameter
        """
        profile = self.PROFILE_PATTERN.match(line)
        if profile:
            builder.profile = profile.group("value").strip()
            return True

        region = self.REGION_PATTERN.match(line)
        if region:
            builder.region = region.group("value").strip()
            return True

        if builder.kind is not CommandKind.RECEIVE:
            return False

        for field_name, pattern in self.RECEIVE_PARAMETER_PATTERNS.items():
            match = pattern.match(line)
            if match:
                try:
                    value = int(match.group("value"))
                except ValueError:
                    # Digit runs beyond the interpreter's int conversion limit
                    return False
                setattr(builder, field_name, value)
                return True

        return False


def parse_commands(
    text: str, default_profile: str, default_region: str
) -> list[Command]:
    """
    Convenience function to parse a request document.

    Params:
        text: Full document text
        default_profile: Profile used when a block has no ``profile:`` line
        default_region: Region used when a block has no ``region:`` line

    Returns:
        Sealed commands in document order
    """
    parser = CommandParser()
    return parser.parse(text, default_profile, default_region)
