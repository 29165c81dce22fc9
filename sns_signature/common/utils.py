# sns_signature/common/utils.py
import base64
import binascii

from sns_signature.common.errors import InvalidEncoding


def b64e(b: bytes) -> str:
    """Base64 encode bytes -> str."""
    return base64.b64encode(b).decode()


def b64d(s: str) -> bytes:
    """
    Strict base64 decode str -> bytes.
    Raises InvalidEncoding on non-text input, characters outside the
    alphabet (line breaks included) or bad padding.
    """
    if not isinstance(s, (str, bytes)):
        raise InvalidEncoding(f"signature must be base64 text, got {type(s).__name__}")
    try:
        return base64.b64decode(s, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidEncoding(f"signature is not valid base64: {exc}") from exc


def to_bytes(data) -> bytes:
    """Accept PEM text or bytes, return bytes. Raises TypeError for anything else."""
    if isinstance(data, str):
        return data.encode()
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"expected bytes or str, got {type(data).__name__}")
