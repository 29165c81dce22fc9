# sns_signature/signing_string.py
"""
Canonical string that SNS signs for a notification.

    Message\n<value>\nMessageId\n<value>\n[Subject\n<value>\n]Timestamp\n<value>\nTopicArn\n<value>\nType\n<value>\n
"""
from typing import List, Mapping

from sns_signature.common.errors import MissingField

SIGNED_KEYS = ("Message", "MessageId", "Subject", "Timestamp", "TopicArn", "Type")
OPTIONAL_KEYS = frozenset({"Subject"})


def signed_keys(message: Mapping) -> List[str]:
    """Keys covered by the signature, in signing order."""
    return [
        key for key in SIGNED_KEYS
        if key not in OPTIONAL_KEYS or message.get(key) is not None
    ]


def build_sign_string(message: Mapping) -> bytes:
    """
    Return the bytes SNS signed for `message`.

    Raises MissingField when a required key is absent or None.
    """
    parts = []
    for key in signed_keys(message):
        value = message.get(key)
        if value is None:
            raise MissingField(key)
        parts.append(f"{key}\n{value}\n")
    return "".join(parts).encode()
