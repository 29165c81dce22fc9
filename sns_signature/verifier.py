# sns_signature/verifier.py
"""
Verification of SNS notification signatures.

    verifier = SignatureVerifier()                      # fetches SigningCertURL with requests
    verifier = SignatureVerifier(certificate_fetcher=my_get)
    if verifier.verify(message): ...
    if verifier.verify(message, certificate=pem_bytes): ...   # no fetch

verify() returns False when the signature does not match and raises a
VerifyError subclass when authenticity cannot be determined at all.
"""
import logging
from typing import Mapping, Optional, Union

from cryptography.hazmat.primitives.asymmetric import rsa
from pydantic import BaseModel

from sns_signature.common.config import ConfigError
from sns_signature.common.errors import CertificateFetchError, MissingField
from sns_signature.common.protocol import Notification
from sns_signature.common.utils import b64d, b64e
from sns_signature.crypto import pki
from sns_signature.crypto.sign import hash_for_version, load_private_key, sign_bytes, verify_bytes
from sns_signature.fetch import CertificateFetcher, requests_fetcher
from sns_signature.signing_string import build_sign_string

logger = logging.getLogger(__name__)

MessageLike = Union[Mapping, Notification]


def _as_mapping(message: MessageLike) -> Mapping:
    if isinstance(message, BaseModel):
        return message.as_message()
    return message


class SignatureVerifier:
    """
    Holds only the certificate fetch capability; safe to share between
    threads and to call concurrently.
    """

    def __init__(self, certificate_fetcher: Optional[CertificateFetcher] = None):
        self.certificate_fetcher = certificate_fetcher or requests_fetcher

    def verify(self, message: MessageLike, certificate=None) -> bool:
        message = _as_mapping(message)

        encoded = message.get("Signature")
        if encoded is None:
            raise MissingField("Signature")
        signature = b64d(encoded)

        version = message.get("SignatureVersion")
        # raises UnsupportedSignatureVersion before any network I/O
        hash_for_version(version)

        sign_string = build_sign_string(message)
        logger.debug("signing string for %s is %d bytes", message.get("MessageId"), len(sign_string))

        public_key = self.public_key(message, certificate)
        ok = verify_bytes(public_key, signature, sign_string, version)
        if not ok:
            logger.warning("signature mismatch for MessageId=%s", message.get("MessageId"))
        return ok

    def public_key(self, message: Mapping, certificate=None) -> rsa.RSAPublicKey:
        """Key from the supplied certificate, else from the one at SigningCertURL."""
        if certificate is None:
            certificate = self.fetch_certificate(message)
        cert = pki.load_cert(certificate)
        logger.debug("using certificate sha256=%s", pki.cert_fingerprint_hex(cert))
        return pki.cert_pubkey(cert)

    def fetch_certificate(self, message: Mapping) -> bytes:
        url = message.get("SigningCertURL")
        if not url:
            raise MissingField("SigningCertURL")
        try:
            body = self.certificate_fetcher(url)
        except ConfigError:
            raise
        except CertificateFetchError:
            logger.warning("certificate fetch failed for %s", url)
            raise
        except Exception as exc:
            logger.warning("certificate fetch failed for %s", url)
            raise CertificateFetchError(url, str(exc) or type(exc).__name__) from exc
        if not isinstance(body, (bytes, str)):
            logger.warning("certificate fetcher returned %s for %s", type(body).__name__, url)
            raise CertificateFetchError(url, f"fetcher returned {type(body).__name__}")
        return body


def verify(message: MessageLike, certificate=None,
           certificate_fetcher: Optional[CertificateFetcher] = None) -> bool:
    """One-shot verify() with a fresh SignatureVerifier."""
    return SignatureVerifier(certificate_fetcher).verify(message, certificate)


def sign_message(private_key, message: MessageLike, signature_version: Optional[str] = "1") -> str:
    """
    Producer side: base64 signature over the signing string of `message`.
    `private_key` is an RSA private key object or PEM bytes.
    """
    if isinstance(private_key, (bytes, str)):
        private_key = load_private_key(private_key)
    sign_string = build_sign_string(_as_mapping(message))
    return b64e(sign_bytes(private_key, sign_string, signature_version))
