"""
Exception classes for the SQS request language.

The parser itself is total and never raises for malformed input. These
exceptions cover the layers around it: loading host configuration and
turning parsed commands into queue requests.
"""


class SqsDslError(Exception):
    """Base exception for all sqsdsl errors."""

    pass


class ConfigurationError(SqsDslError):
    """Raised when host-supplied defaults cannot be loaded."""

    def __init__(self, setting: str, reason: str):
        """
        Initialize the exception.

        Params:
            setting: Name of the offending setting
            reason: Why the value was rejected
        """
        self.setting = setting
        self.reason = reason
        super().__init__(f"Invalid setting '{setting}': {reason}")


class MissingMessageBodyError(SqsDslError):
    """Raised when a SEND command has no usable JSON body."""

    def __init__(self, target: str, line: int | None = None):
        """
        Initialize the exception.

        Params:
            target: Queue the message was meant for
            line: Header line of the command, if known
        """
        self.target = target
        self.line = line
        message = f"No message body provided for SEND command to '{target}'"
        if line is not None:
            message += f" (line {line + 1})"
        super().__init__(message)

