# scripts/gen_cert.py
"""
Create an SNS-style signing key and self-signed certificate for local testing.
Usage: python scripts/gen_cert.py sns-test
Produces:
  $SNS_CERT_DIR/<name>_key.pem   (private)  -- DO NOT COMMIT
  $SNS_CERT_DIR/<name>_cert.pem  (public)
"""
import os, sys, datetime
from cryptography import x509
from cryptography.x509.oid import NameOID
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives import serialization, hashes

from sns_signature.common import config


def make_signing_cert(name: str, days: int = 365):
    """Return (private_key, certificate) for a fresh RSA-2048 self-signed cert."""
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    subject = issuer = x509.Name([
        x509.NameAttribute(NameOID.COMMON_NAME, name),
    ])
    now = datetime.datetime.now(datetime.timezone.utc)
    cert = (
        x509.CertificateBuilder()
        .subject_name(subject)
        .issuer_name(issuer)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - datetime.timedelta(days=1))
        .not_valid_after(now + datetime.timedelta(days=days))
        .sign(key, hashes.SHA256())
    )
    return key, cert


def issue(name):
    out = config.cert_dir()
    os.makedirs(out, exist_ok=True)
    key, cert = make_signing_cert(name)

    key_path = os.path.join(out, f"{name}_key.pem")
    cert_path = os.path.join(out, f"{name}_cert.pem")
    with open(key_path, "wb") as f:
        f.write(key.private_bytes(
            serialization.Encoding.PEM,
            serialization.PrivateFormat.TraditionalOpenSSL,
            serialization.NoEncryption()
        ))
    with open(cert_path, "wb") as f:
        f.write(cert.public_bytes(serialization.Encoding.PEM))

    print("Wrote:", key_path, cert_path)


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python scripts/gen_cert.py <name>")
    else:
        issue(sys.argv[1])
