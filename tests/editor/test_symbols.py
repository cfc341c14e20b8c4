"""
Tests for the outline symbol tree.
"""

import pytest

from sqsdsl.config import ClientSettings
from sqsdsl.editor import (
    SymbolKind,
    TextRange,
    build_document_symbols,
    build_document_symbols_from_settings,
)
from sqsdsl.exceptions import ConfigurationError


def symbols_for(text: str):
    return build_document_symbols(text, "default", "us-east-1")


class TestCommandSymbols:
    """Top-level symbols, one per command."""

    def test_names_and_kinds(self, sample_document):
        symbols = symbols_for(sample_document)

        assert [symbol.name for symbol in symbols] == [
            "SEND orders",
            "RECEIVE events",
            "PURGE dead-letter",
        ]
        assert [symbol.kind for symbol in symbols] == [
            SymbolKind.FUNCTION,
            SymbolKind.EVENT,
            SymbolKind.INTERFACE,
        ]

    def test_detail_shows_full_target(self, sample_document):
        send = symbols_for(sample_document)[0]
        assert send.detail == "Queue: https://sqs.us-east-1.amazonaws.com/1/orders"

    def test_ranges(self, sample_document):
        send, receive, purge = symbols_for(sample_document)
        header = "SEND https://sqs.us-east-1.amazonaws.com/1/orders"

        assert send.range == TextRange(0, 0, 6, 3)
        assert send.selection_range == TextRange(0, 0, 0, len(header))
        assert receive.range == TextRange(7, 0, 11, 3)
        assert purge.range == TextRange(12, 0, 12, len("PURGE https://q/dead-letter/"))

    def test_target_without_path(self):
        symbol = symbols_for("PURGE orders-queue")[0]
        assert symbol.name == "PURGE orders-queue"

    def test_other_language_gets_none(self, sample_document):
        assert build_document_symbols(sample_document, "d", "r", language_id="markdown") == []


class TestChildSymbols:
    """Parameter and body symbols nested under commands."""

    def test_send_children(self, sample_document):
        send = symbols_for(sample_document)[0]

        assert [child.name for child in send.children] == ["Profile", "Message Body"]
        profile, body = send.children
        assert profile.detail == "staging"
        assert profile.kind is SymbolKind.CONSTANT
        assert profile.range == TextRange(1, 0, 1, len("profile: staging"))
        assert profile.selection_range == TextRange(1, 0, 1, len("Profile"))
        assert body.detail == "JSON Payload"
        assert body.kind is SymbolKind.OBJECT
        assert body.range == TextRange(3, 0, 5, 1)
        assert body.selection_range == TextRange(3, 0, 3, 1)

    def test_receive_children(self, sample_document):
        receive = symbols_for(sample_document)[1]

        assert [(child.name, child.detail, child.kind) for child in receive.children] == [
            ("Region", "eu-west-1", SymbolKind.CONSTANT),
            ("Max Messages", "5", SymbolKind.NUMBER),
            ("Wait Time", "10", SymbolKind.NUMBER),
        ]

    def test_visibility_timeout_child(self):
        receive = symbols_for("RECEIVE q\nvisibility-timeout: 45")[0]
        child = receive.children[0]
        assert child.name == "Visibility Timeout"
        assert child.detail == "45"
        assert child.range == TextRange(1, 0, 1, len("visibility-timeout: 45"))

    def test_purge_has_no_children(self, sample_document):
        assert symbols_for(sample_document)[2].children == []

    def test_receive_parameters_under_send_are_not_symbols(self):
        send = symbols_for("SEND q\nmax-messages: 3")[0]
        assert send.children == []

    def test_duplicate_parameter_shows_effective_value(self):
        purge = symbols_for("PURGE q\nprofile: a\nprofile: b")[0]
        assert [child.detail for child in purge.children] == ["b", "b"]

    def test_single_line_body_runs_to_command_end(self):
        send = symbols_for('SEND q\n{"a": 1}\n###')[0]
        body = send.children[0]
        assert body.range == TextRange(1, 0, 2, 3)

    def test_opening_line_braces_are_not_counted(self):
        send = symbols_for('SEND q\n{"text": "}"\n}\n###')[0]
        body = send.children[0]
        assert body.range == TextRange(1, 0, 2, 1)

    def test_unbalanced_body_runs_to_command_end(self):
        send = symbols_for('SEND q\n\n{"a": {"b": 1}\n###')[0]
        body = send.children[0]
        assert body.range == TextRange(2, 0, 3, 3)

    def test_body_lines_are_not_reported_as_parameters(self):
        send = symbols_for('SEND q\n{\n"profile: x": 1\n}')[0]
        assert [child.name for child in send.children] == ["Message Body"]


class TestFromSettings:
    """Defaults drawn from ClientSettings."""

    def test_profile_detail_uses_settings_default(self):
        settings = ClientSettings(default_profile="ops", default_region="eu-central-1")
        symbols = build_document_symbols_from_settings("PURGE q", settings)
        assert symbols[0].name == "PURGE q"
        assert symbols[0].children == []

    def test_invalid_environment_raises_configuration_error(self, monkeypatch):
        monkeypatch.setenv("SQS_CLIENT_DEFAULT_PROFILE", "")
        with pytest.raises(ConfigurationError) as exc_info:
            build_document_symbols_from_settings("PURGE q")
        assert exc_info.value.setting == "default_profile"
