"""
Editor integration helpers.

Pure functions mapping parsed commands onto editor affordances: inline run
actions and the outline symbol tree.
"""

from sqsdsl.editor.actions import (
    ACTION_IDS,
    RUN_ACTION_TITLE,
    SQS_LANGUAGE_ID,
    RunAction,
    build_run_actions,
    build_run_actions_from_settings,
)
from sqsdsl.editor.symbols import (
    DocumentSymbol,
    SymbolKind,
    TextRange,
    build_document_symbols,
    build_document_symbols_from_settings,
)

__all__ = [
    "ACTION_IDS",
    "RUN_ACTION_TITLE",
    "SQS_LANGUAGE_ID",
    "DocumentSymbol",
    "RunAction",
    "SymbolKind",
    "TextRange",
    "build_document_symbols",
    "build_document_symbols_from_settings",
    "build_run_actions",
    "build_run_actions_from_settings",
]
