"""
Command records produced by the SQS request language parser.

A command starts life as a mutable ``CommandBuilder`` owned by the scan loop.
When its block closes the builder is sealed into an immutable ``Command``
carrying the parsed fields and the lines it occupies.
"""

import json
import logging
from dataclasses import dataclass, field
from enum import Enum

from attrs import field as attrs_field
from attrs import frozen

from sqsdsl.core.types import JsonValue, SourceRange

logger = logging.getLogger(__name__)


class CommandKind(Enum):
    """Queue operation requested by a command block."""

    SEND = "SEND"
    RECEIVE = "RECEIVE"
    PURGE = "PURGE"


class DiagnosticSeverity(Enum):
    """Severity of a recoverable parse diagnostic."""

    WARNING = "warning"


@frozen
class ParseDiagnostic:
    """
    Recoverable problem found while parsing a command.

    Params:
        line: 0-based document line the problem was detected on
        message: Human readable description
        severity: How serious the problem is
    """

    line: int
    message: str
    severity: DiagnosticSeverity = DiagnosticSeverity.WARNING


@frozen
class Command:
    """
    A sealed queue request parsed from one command block.

    Params:
        kind: Operation to perform (SEND, RECEIVE, PURGE)
        target: Queue URL or other opaque queue identifier
        profile: Credential profile name (caller default unless overridden)
        region: Service region (caller default unless overridden)
        source_range: Inclusive line span of the block in the document
        body: Parsed JSON payload, SEND only; None if absent or malformed
        attributes: Message attributes, not populated by the current grammar
        max_messages: RECEIVE only
        visibility_timeout_seconds: RECEIVE only
        wait_time_seconds: RECEIVE only
        diagnostics: Warnings raised while parsing this block
    """

    kind: CommandKind
    target: str
    profile: str
    region: str
    source_range: SourceRange
    body: JsonValue = None
    attributes: JsonValue = None
    max_messages: int | None = None
    visibility_timeout_seconds: int | None = None
    wait_time_seconds: int | None = None
    diagnostics: tuple[ParseDiagnostic, ...] = attrs_field(default=(), converter=tuple)

    @property
    def start_line(self) -> int:
        return self.source_range.start_line

    @property
    def end_line(self) -> int:
        return self.source_range.end_line

    def __str__(self) -> str:
        return f"{self.kind.value} {self.target}"


@dataclass
class CommandBuilder:
    """
    Partially filled command accumulated while its block is scanned.

    Only the scan loop holds a builder; ``seal`` hands out an independent
    ``Command`` so nothing mutable is shared between sealed commands.
    """

    kind: CommandKind
    target: str
    profile: str
    region: str
    start_line: int
    body: JsonValue = None
    max_messages: int | None = None
    visibility_timeout_seconds: int | None = None
    wait_time_seconds: int | None = None
    body_lines: list[str] = field(default_factory=list)
    body_start_line: int | None = None
    body_resolved: bool = True
    diagnostics: list[ParseDiagnostic] = field(default_factory=list)

    def start_body(self, line: str, line_number: int) -> None:
        """
        Begin a JSON body block.

        Lines of a later block are appended to the earlier ones, so once a body
        has parsed any further block fails to parse and leaves it in place.
        """
        self.body_lines.append(line)
        self.body_start_line = line_number
        self.body_resolved = False

    def add_body_line(self, line: str) -> None:
        self.body_lines.append(line)

    def resolve_body(self) -> None:
        """
        Parse the accumulated body lines as JSON.

        On failure the body keeps its previous value (absent unless an earlier
        block parsed) and a warning diagnostic is attached; the command itself
        is still emitted.
        """
        self.body_resolved = True
        text = "\n".join(self.body_lines)
        try:
            self.body = json.loads(text)
        except (ValueError, RecursionError) as e:
            line = self.body_start_line if self.body_start_line is not None else self.start_line
            message = f"Failed to parse message body as JSON: {e}"
            self.diagnostics.append(ParseDiagnostic(line=line, message=message))
            logger.warning("%s %s (line %d): %s", self.kind.value, self.target, line + 1, message)

    def seal(self, end_line: int) -> Command:
        """
        Close the block and produce an immutable command.

        Params:
            end_line: 0-based index of the last line belonging to the block

        Returns:
            The sealed ``Command``
        """
        if not self.body_resolved:
            self.resolve_body()

        command = Command(
            kind=self.kind,
            target=self.target,
            profile=self.profile,
            region=self.region,
            source_range=SourceRange(self.start_line, end_line),
            body=self.body,
            max_messages=self.max_messages,
            visibility_timeout_seconds=self.visibility_timeout_seconds,
            wait_time_seconds=self.wait_time_seconds,
            diagnostics=self.diagnostics,
        )
        logger.debug("Sealed %s at lines %d-%d", command, command.start_line, command.end_line)
        return command
