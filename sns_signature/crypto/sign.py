# sns_signature/crypto/sign.py
"""
RSA sign / verify helpers using cryptography.
Provides:
 - hash_for_version(version) -> hash algorithm for a SignatureVersion
 - load_private_key(pem_bytes)
 - sign_bytes(priv_key, data: bytes, version) -> signature bytes
 - verify_bytes(pub_key, signature: bytes, data: bytes, version) -> bool
"""
from typing import Optional

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization, hashes
from cryptography.hazmat.primitives.asymmetric import padding

from sns_signature.common.errors import UnsupportedSignatureVersion
from sns_signature.common.utils import to_bytes


def hash_for_version(version: Optional[str]) -> hashes.HashAlgorithm:
    """
    SignatureVersion "1" (or absent) signs with SHA1, "2" with SHA256.
    """
    if version is None or version == "1":
        return hashes.SHA1()
    if version == "2":
        return hashes.SHA256()
    raise UnsupportedSignatureVersion(version)


def load_private_key(pem_bytes):
    """
    Load a PEM-encoded private key (no password).
    """
    return serialization.load_pem_private_key(to_bytes(pem_bytes), password=None)


def sign_bytes(priv_key, data: bytes, version: Optional[str] = "1") -> bytes:
    """
    Sign data (bytes) using PKCS1v15 and the hash for `version`.
    """
    return priv_key.sign(
        data,
        padding.PKCS1v15(),
        hash_for_version(version)
    )


def verify_bytes(pub_key, signature: bytes, data: bytes, version: Optional[str] = "1") -> bool:
    """
    Verify signature (PKCS1v15). Returns True if valid, False otherwise.
    """
    algorithm = hash_for_version(version)
    try:
        pub_key.verify(signature, data, padding.PKCS1v15(), algorithm)
        return True
    except InvalidSignature:
        return False
