# sns_signature/crypto/pki.py

from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import rsa

from sns_signature.common.errors import CertificateParseError, UnsupportedKeyType
from sns_signature.common.utils import to_bytes


def load_cert(pem) -> x509.Certificate:
    """Load a PEM-encoded certificate (bytes or str) and return an x509.Certificate object."""
    try:
        return x509.load_pem_x509_certificate(to_bytes(pem))
    except (TypeError, ValueError) as exc:
        raise CertificateParseError(f"not a PEM encoded X.509 certificate: {exc}") from exc


def cert_pubkey(cert: x509.Certificate) -> rsa.RSAPublicKey:
    """Return the RSA public key of a certificate. Raises UnsupportedKeyType for any other key."""
    try:
        key = cert.public_key()
    except (ValueError, UnsupportedAlgorithm) as exc:
        # unknown key algorithm OID
        raise UnsupportedKeyType(f"unknown ({exc})") from exc
    if not isinstance(key, rsa.RSAPublicKey):
        raise UnsupportedKeyType(type(key).__name__)
    return key


def key_from_cert(pem) -> rsa.RSAPublicKey:
    return cert_pubkey(load_cert(pem))


def cert_fingerprint_hex(cert: x509.Certificate) -> str:
    """Return the SHA-256 fingerprint of the certificate as a hex string."""
    return cert.fingerprint(hashes.SHA256()).hex()
