"""
Shared request document for editor helper tests.
"""

import pytest

SAMPLE_DOCUMENT = "\n".join(
    [
        "SEND https://sqs.us-east-1.amazonaws.com/1/orders",
        "profile: staging",
        "",
        "{",
        '  "id": 1',
        "}",
        "###",
        "RECEIVE https://sqs.us-east-1.amazonaws.com/1/events",
        "region: eu-west-1",
        "max-messages: 5",
        "wait-time: 10",
        "###",
        "PURGE https://q/dead-letter/",
    ]
)


@pytest.fixture
def sample_document() -> str:
    return SAMPLE_DOCUMENT
