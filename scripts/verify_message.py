# scripts/verify_message.py
"""
Verify an SNS notification JSON file.
Usage: python scripts/verify_message.py message.json [cert.pem]
Without a certificate the one at SigningCertURL is downloaded.
Exit status: 0 authentic, 1 not authentic, 2 could not verify.
"""
import logging, sys

from pydantic import ValidationError

from sns_signature import Notification, SignatureVerifier, VerifyError
from sns_signature.common import config

logger = logging.getLogger("verify_message")


def main(argv):
    logging.basicConfig(level=config.log_level(),
                        format="[%(asctime)s] %(levelname)s %(name)s %(message)s")
    if len(argv) < 2:
        print("Usage: python scripts/verify_message.py <message.json> [cert.pem]")
        return 2

    try:
        with open(argv[1], "r") as f:
            notification = Notification.model_validate_json(f.read())
    except (OSError, ValidationError) as e:
        logger.error("cannot read notification: %s", e)
        return 2

    cert = None
    if len(argv) > 2:
        try:
            with open(argv[2], "rb") as f:
                cert = f.read()
        except OSError as e:
            logger.error("cannot read certificate: %s", e)
            return 2

    try:
        ok = SignatureVerifier().verify(notification, certificate=cert)
    except VerifyError as e:
        print(f"Could not verify {notification.MessageId}: {e}")
        return 2

    print(f"Signature valid?: {ok}")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main(sys.argv))
