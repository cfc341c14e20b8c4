"""
Outline symbols for request documents.

Every command becomes a top-level symbol named after its kind and queue,
with child symbols for its parameter lines and JSON body. Editors use the
tree for the outline view and breadcrumb navigation.
"""

from dataclasses import dataclass, field
from enum import Enum

from attrs import frozen

from sqsdsl.config import ClientSettings, load_settings
from sqsdsl.editor.actions import SQS_LANGUAGE_ID
from sqsdsl.parsing import (
    DELIMITER,
    Command,
    CommandKind,
    CommandParser,
    count_brace_delta,
    parse_commands,
)


class SymbolKind(Enum):
    """Outline icon category of a symbol."""

    FUNCTION = "function"
    EVENT = "event"
    INTERFACE = "interface"
    CONSTANT = "constant"
    NUMBER = "number"
    OBJECT = "object"


COMMAND_SYMBOL_KINDS = {
    CommandKind.SEND: SymbolKind.FUNCTION,
    CommandKind.RECEIVE: SymbolKind.EVENT,
    CommandKind.PURGE: SymbolKind.INTERFACE,
}


@frozen
class TextRange:
    """Span between two (line, character) positions, both 0-based."""

    start_line: int
    start_character: int
    end_line: int
    end_character: int


@dataclass
class DocumentSymbol:
    """
    Node of the outline tree.

    Params:
        name: Label shown in the outline
        detail: Secondary text shown next to the name
        kind: Icon category
        range: Full extent of the symbol
        selection_range: Part revealed when the symbol is selected
        children: Nested symbols
    """

    name: str
    detail: str
    kind: SymbolKind
    range: TextRange
    selection_range: TextRange
    children: list["DocumentSymbol"] = field(default_factory=list)


def _line_range(lines: list[str], line: int, length: int | None = None) -> TextRange:
    end_character = len(lines[line]) if length is None else length
    return TextRange(line, 0, line, end_character)


def _number_detail(value: int | None) -> str:
    return "" if value is None else str(value)


def _find_body_end(lines: list[str], start: int, limit: int) -> int:
    """
    Locate the line on which a JSON body opened at ``start`` balances.

    Uses the same lexical brace counting as the parser: the opening line
    counts as depth 1 and later lines are scanned. An unbalanced body runs
    to ``limit``.
    """
    depth = 1
    for index in range(start + 1, limit + 1):
        stripped = lines[index].strip()
        if not stripped or stripped.startswith("#"):
            continue
        depth += count_brace_delta(lines[index])
        if depth == 0:
            return index
    return limit


def _parameter_symbol(
    lines: list[str], line: int, name: str, detail: str, kind: SymbolKind
) -> DocumentSymbol:
    return DocumentSymbol(
        name=name,
        detail=detail,
        kind=kind,
        range=_line_range(lines, line),
        selection_range=_line_range(lines, line, len(name)),
    )


def _child_symbols(command: Command, lines: list[str]) -> list[DocumentSymbol]:
    """Collect parameter and body symbols inside a command's line span."""
    receive_fields = {
        "max_messages": ("Max Messages", command.max_messages),
        "visibility_timeout_seconds": (
            "Visibility Timeout",
            command.visibility_timeout_seconds,
        ),
        "wait_time_seconds": ("Wait Time", command.wait_time_seconds),
    }

    children = []
    end_line = command.end_line
    index = command.start_line + 1
    while index <= end_line:
        line = lines[index].strip()

        if not line or line == DELIMITER or line.startswith("#"):
            index += 1
            continue

        if CommandParser.PROFILE_PATTERN.match(line):
            children.append(
                _parameter_symbol(lines, index, "Profile", command.profile, SymbolKind.CONSTANT)
            )
        elif CommandParser.REGION_PATTERN.match(line):
            children.append(
                _parameter_symbol(lines, index, "Region", command.region, SymbolKind.CONSTANT)
            )
        elif command.kind is CommandKind.RECEIVE:
            for field_name, pattern in CommandParser.RECEIVE_PARAMETER_PATTERNS.items():
                if pattern.match(line):
                    name, value = receive_fields[field_name]
                    children.append(
                        _parameter_symbol(
                            lines, index, name, _number_detail(value), SymbolKind.NUMBER
                        )
                    )
                    break
        elif command.kind is CommandKind.SEND and line.startswith("{"):
            body_end = _find_body_end(lines, index, end_line)
            children.append(
                DocumentSymbol(
                    name="Message Body",
                    detail="JSON Payload",
                    kind=SymbolKind.OBJECT,
                    range=TextRange(index, 0, body_end, len(lines[body_end])),
                    selection_range=_line_range(lines, index),
                )
            )
            index = body_end

        index += 1

    return children


def build_document_symbols(
    text: str,
    default_profile: str,
    default_region: str,
    *,
    language_id: str | None = None,
) -> list[DocumentSymbol]:
    """
    Build the outline tree for a request document.

    Params:
        text: Full document text
        default_profile: Profile for blocks without a ``profile:`` line
        default_region: Region for blocks without a ``region:`` line
        language_id: Editor language of the document; anything other than
            ``sqs`` yields no symbols. None skips the check.

    Returns:
        One top-level symbol per command, in document order
    """
    if language_id is not None and language_id != SQS_LANGUAGE_ID:
        return []

    lines = text.split("\n")
    symbols = []
    for command in parse_commands(text, default_profile, default_region):
        start, end = command.start_line, command.end_line
        queue_name = command.target.rstrip("/").split("/")[-1] or command.target
        symbols.append(
            DocumentSymbol(
                name=f"{command.kind.value} {queue_name}",
                detail=f"Queue: {command.target}",
                kind=COMMAND_SYMBOL_KINDS[command.kind],
                range=TextRange(start, 0, end, len(lines[end])),
                selection_range=_line_range(lines, start),
                children=_child_symbols(command, lines),
            )
        )
    return symbols


def build_document_symbols_from_settings(
    text: str,
    settings: ClientSettings | None = None,
    *,
    language_id: str | None = None,
) -> list[DocumentSymbol]:
    """Build the outline tree using defaults from ``ClientSettings``.

    Raises:
        ConfigurationError: If no settings are given and the environment
            holds an invalid default
    """
    settings = settings or load_settings()
    return build_document_symbols(
        text,
        settings.default_profile,
        settings.default_region,
        language_id=language_id,
    )
