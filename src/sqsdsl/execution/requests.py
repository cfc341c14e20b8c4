"""
Queue request descriptors built from parsed commands.

These models are the boundary between the parser and whatever queue client
executes the request. ``to_api_params`` dumps them under the queue API's
parameter names; ``profile`` and ``region`` stay out of the dump and tell the
caller which credentials and endpoint to use.
"""

import json
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from sqsdsl.exceptions import MissingMessageBodyError
from sqsdsl.parsing import Command, CommandKind

logger = logging.getLogger(__name__)

DEFAULT_MAX_MESSAGES = 10
DEFAULT_VISIBILITY_TIMEOUT_SECONDS = 30
DEFAULT_WAIT_TIME_SECONDS = 0


class QueueRequest(BaseModel):
    """Common fields of every queue request."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    queue_url: str = Field(alias="QueueUrl")
    profile: str = Field(exclude=True)
    region: str = Field(exclude=True)

    def to_api_params(self) -> dict[str, Any]:
        """Return the request as queue API keyword arguments."""
        return self.model_dump(by_alias=True)


class SendMessageRequest(QueueRequest):
    message_body: str = Field(alias="MessageBody")
    message_attributes: dict[str, Any] = Field(
        default_factory=dict, alias="MessageAttributes"
    )


class ReceiveMessageRequest(QueueRequest):
    max_number_of_messages: int = Field(
        default=DEFAULT_MAX_MESSAGES, alias="MaxNumberOfMessages"
    )
    visibility_timeout: int = Field(
        default=DEFAULT_VISIBILITY_TIMEOUT_SECONDS, alias="VisibilityTimeout"
    )
    wait_time_seconds: int = Field(
        default=DEFAULT_WAIT_TIME_SECONDS, alias="WaitTimeSeconds"
    )


class PurgeQueueRequest(QueueRequest):
    pass


def _or_default(value: int | None, default: int) -> int:
    return default if value is None else value


def build_request(
    command: Command,
) -> SendMessageRequest | ReceiveMessageRequest | PurgeQueueRequest:
    """
    Map a parsed command onto the request its queue operation needs.

    Params:
        command: Sealed command from the parser

    Returns:
        Request descriptor for the command's kind

    Raises:
        MissingMessageBodyError: If a SEND command has no parsed body
    """
    common = {
        "QueueUrl": command.target,
        "profile": command.profile,
        "region": command.region,
    }

    if command.kind is CommandKind.SEND:
        if command.body is None:
            raise MissingMessageBodyError(command.target, command.start_line)
        request = SendMessageRequest(
            **common,
            MessageBody=json.dumps(command.body),
            MessageAttributes=command.attributes or {},
        )
    elif command.kind is CommandKind.RECEIVE:
        request = ReceiveMessageRequest(
            **common,
            MaxNumberOfMessages=_or_default(command.max_messages, DEFAULT_MAX_MESSAGES),
            VisibilityTimeout=_or_default(
                command.visibility_timeout_seconds, DEFAULT_VISIBILITY_TIMEOUT_SECONDS
            ),
            WaitTimeSeconds=_or_default(command.wait_time_seconds, DEFAULT_WAIT_TIME_SECONDS),
        )
    else:
        request = PurgeQueueRequest(**common)

    logger.debug("Built %s for %s", type(request).__name__, command.target)
    return request
