"""
Inline run actions for request documents.

Each parsed command gets one action anchored at its header line. Triggering
the action hands the command to the editor command registered under
``action_id``.
"""

from attrs import frozen

from sqsdsl.config import ClientSettings, load_settings
from sqsdsl.parsing import Command, CommandKind, parse_commands

SQS_LANGUAGE_ID = "sqs"
RUN_ACTION_TITLE = "Send Request"

ACTION_IDS = {
    CommandKind.SEND: "sqs-client.sendSQSCommand",
    CommandKind.RECEIVE: "sqs-client.receiveSQSMessages",
    CommandKind.PURGE: "sqs-client.purgeSQSQueue",
}


@frozen
class RunAction:
    """
    Clickable action shown above a command header.

    Params:
        line: 0-based header line the action is anchored to
        title: Label shown to the user
        action_id: Editor command invoked with ``command`` as its argument
        command: The parsed command the action runs
    """

    line: int
    title: str
    action_id: str
    command: Command


def build_run_actions(
    text: str,
    default_profile: str,
    default_region: str,
    *,
    language_id: str | None = None,
) -> list[RunAction]:
    """
    Build one run action per command in a document.

    Params:
        text: Full document text
        default_profile: Profile for blocks without a ``profile:`` line
        default_region: Region for blocks without a ``region:`` line
        language_id: Editor language of the document; anything other than
            ``sqs`` yields no actions. None skips the check.

    Returns:
        Actions in document order
    """
    if language_id is not None and language_id != SQS_LANGUAGE_ID:
        return []

    return [
        RunAction(
            line=command.start_line,
            title=RUN_ACTION_TITLE,
            action_id=ACTION_IDS[command.kind],
            command=command,
        )
        for command in parse_commands(text, default_profile, default_region)
    ]


def build_run_actions_from_settings(
    text: str,
    settings: ClientSettings | None = None,
    *,
    language_id: str | None = None,
) -> list[RunAction]:
    """Build run actions using defaults from ``ClientSettings``.

    Raises:
        ConfigurationError: If no settings are given and the environment
            holds an invalid default
    """
    settings = settings or load_settings()
    return build_run_actions(
        text,
        settings.default_profile,
        settings.default_region,
        language_id=language_id,
    )
