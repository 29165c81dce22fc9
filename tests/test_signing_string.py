import pytest

from sns_signature import MissingField, Notification, build_sign_string
from sns_signature.signing_string import signed_keys

BASE = {
    "Message": "Hello",
    "MessageId": "12345",
    "Timestamp": "2016-01-20T14:37:01Z",
    "TopicArn": "xyz123",
    "Type": "Notification",
}


def test_known_signing_string():
    assert build_sign_string(BASE) == (
        b"Message\nHello\nMessageId\n12345\nTimestamp\n2016-01-20T14:37:01Z\n"
        b"TopicArn\nxyz123\nType\nNotification\n"
    )


def test_subject_goes_after_message_id():
    msg = dict(BASE, Subject="I am a message")
    lines = build_sign_string(msg).decode().split("\n")
    assert lines[:6] == ["Message", "Hello", "MessageId", "12345", "Subject", "I am a message"]
    assert signed_keys(msg) == ["Message", "MessageId", "Subject", "Timestamp", "TopicArn", "Type"]


def test_pair_count_with_and_without_subject():
    without = build_sign_string(BASE).decode()
    with_subject = build_sign_string(dict(BASE, Subject="s")).decode()
    # two lines per pair, plus the empty tail after the final newline
    assert len(without.split("\n")) == 5 * 2 + 1
    assert len(with_subject.split("\n")) == 6 * 2 + 1
    assert without.endswith("Type\nNotification\n")


def test_none_subject_is_treated_as_absent():
    assert build_sign_string(dict(BASE, Subject=None)) == build_sign_string(BASE)


def test_ignores_unsigned_fields_and_input_order():
    noisy = {"Signature": "abc", "SigningCertURL": "https://x", "UnsubscribeURL": "https://y"}
    noisy.update(reversed(list(BASE.items())))
    assert build_sign_string(noisy) == build_sign_string(BASE)


def test_deterministic():
    assert build_sign_string(dict(BASE)) == build_sign_string(dict(BASE))


@pytest.mark.parametrize("field", ["Message", "MessageId", "Timestamp", "TopicArn", "Type"])
def test_changed_field_changes_output(field):
    changed = dict(BASE, **{field: BASE[field] + "x"})
    assert build_sign_string(changed) != build_sign_string(BASE)


@pytest.mark.parametrize("field", ["Message", "MessageId", "Timestamp", "TopicArn", "Type"])
def test_missing_field_raises(field):
    msg = {k: v for k, v in BASE.items() if k != field}
    with pytest.raises(MissingField) as exc:
        build_sign_string(msg)
    assert exc.value.field == field


def test_none_value_is_missing():
    with pytest.raises(MissingField, match="TopicArn is required"):
        build_sign_string(dict(BASE, TopicArn=None))


def test_input_not_mutated():
    msg = dict(BASE)
    build_sign_string(msg)
    assert msg == BASE


def test_unicode_is_utf8_encoded():
    out = build_sign_string(dict(BASE, Message="héllo ✓"))
    assert "héllo ✓".encode("utf-8") in out


def test_notification_model_round_trip():
    n = Notification(**BASE)
    assert n.as_message() == BASE
    assert build_sign_string(n.as_message()) == build_sign_string(BASE)
