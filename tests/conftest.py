# tests/conftest.py
import datetime

import pytest
from cryptography import x509
from cryptography.x509.oid import NameOID
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa

from sns_signature import sign_message

CERT_URL = "https://sns.us-east-1.amazonaws.com/SimpleNotificationService-test.pem"


def _self_signed_pem(key, common_name):
    subject = issuer = x509.Name([
        x509.NameAttribute(NameOID.COMMON_NAME, common_name),
    ])
    now = datetime.datetime.now(datetime.timezone.utc)
    cert = (
        x509.CertificateBuilder()
        .subject_name(subject)
        .issuer_name(issuer)          # self-signed: issuer == subject
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - datetime.timedelta(days=1))
        .not_valid_after(now + datetime.timedelta(days=30))
        .sign(key, hashes.SHA256())
    )
    return cert.public_bytes(serialization.Encoding.PEM)


@pytest.fixture(scope="session")
def rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def other_rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def cert_pem(rsa_key):
    return _self_signed_pem(rsa_key, "sns.amazonaws.com")


@pytest.fixture(scope="session")
def other_cert_pem(other_rsa_key):
    return _self_signed_pem(other_rsa_key, "forged-sns")


@pytest.fixture(scope="session")
def ec_cert_pem():
    return _self_signed_pem(ec.generate_private_key(ec.SECP256R1()), "ec-signer")


@pytest.fixture
def message():
    return {
        "Type": "Notification",
        "MessageId": "12345",
        "TopicArn": "xyz123",
        "Message": "Hello",
        "Timestamp": "2016-01-20T14:37:01Z",
        "SignatureVersion": "1",
        "SigningCertURL": CERT_URL,
    }


@pytest.fixture
def signed_message(message, rsa_key):
    message["Signature"] = sign_message(rsa_key, message)
    return message


@pytest.fixture
def failing_fetcher():
    def fetch(url):
        raise AssertionError(f"fetcher must not be called (url={url})")
    return fetch
