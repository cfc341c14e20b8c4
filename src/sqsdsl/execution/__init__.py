"""
Request descriptors handed to a queue client.
"""

from sqsdsl.execution.requests import (
    DEFAULT_MAX_MESSAGES,
    DEFAULT_VISIBILITY_TIMEOUT_SECONDS,
    DEFAULT_WAIT_TIME_SECONDS,
    PurgeQueueRequest,
    QueueRequest,
    ReceiveMessageRequest,
    SendMessageRequest,
    build_request,
)

__all__ = [
    "DEFAULT_MAX_MESSAGES",
    "DEFAULT_VISIBILITY_TIMEOUT_SECONDS",
    "DEFAULT_WAIT_TIME_SECONDS",
    "PurgeQueueRequest",
    "QueueRequest",
    "ReceiveMessageRequest",
    "SendMessageRequest",
    "build_request",
]
