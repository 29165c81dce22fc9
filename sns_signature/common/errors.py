# sns_signature/common/errors.py
"""
Errors raised when a notification's authenticity cannot be determined.

A signature that is well formed but does not match is not an error:
verify() returns False for it. Everything here means "could not verify"
and callers should fail closed.
"""
from typing import Optional


class VerifyError(Exception):
    """Base class for every verification failure."""


class MissingField(VerifyError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} is required")


class InvalidEncoding(VerifyError):
    """Signature text is not valid base64."""


class CertificateFetchError(VerifyError):
    def __init__(self, url: str, reason: str):
        self.url = url
        super().__init__(f"could not fetch certificate from {url}: {reason}")


class CertificateParseError(VerifyError):
    """Certificate bytes are not a PEM encoded X.509 certificate."""


class UnsupportedKeyType(VerifyError):
    def __init__(self, key_type: str):
        self.key_type = key_type
        super().__init__(f"certificate key is {key_type}, expected RSA")


class UnsupportedSignatureVersion(VerifyError):
    def __init__(self, version: Optional[str]):
        self.version = version
        super().__init__(f"unsupported SignatureVersion: {version!r}")
