# sns_signature/__init__.py
"""
Signature verification for Amazon SNS notifications.

    from sns_signature import SignatureVerifier
    if SignatureVerifier().verify(message): ...
"""
from sns_signature.common.errors import (
    CertificateFetchError,
    CertificateParseError,
    InvalidEncoding,
    MissingField,
    UnsupportedKeyType,
    UnsupportedSignatureVersion,
    VerifyError,
)
from sns_signature.common.protocol import Notification
from sns_signature.fetch import requests_fetcher, session_fetcher
from sns_signature.signing_string import build_sign_string
from sns_signature.verifier import SignatureVerifier, sign_message, verify

__all__ = [
    "CertificateFetchError",
    "CertificateParseError",
    "InvalidEncoding",
    "MissingField",
    "Notification",
    "SignatureVerifier",
    "UnsupportedKeyType",
    "UnsupportedSignatureVersion",
    "VerifyError",
    "build_sign_string",
    "requests_fetcher",
    "session_fetcher",
    "sign_message",
    "verify",
]
