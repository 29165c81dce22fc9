# scripts/sign_message.py
"""
Sign an SNS notification JSON file with a PEM private key and print it
with the Signature field filled in.
Usage: python scripts/sign_message.py message.json certs/sns-test_key.pem [signature_version]
"""
import json, sys

from sns_signature import Notification, sign_message


def main(argv):
    if len(argv) < 3:
        print("Usage: python scripts/sign_message.py <message.json> <key.pem> [1|2]")
        return 2
    with open(argv[1], "r") as f:
        notification = Notification.model_validate_json(f.read())
    with open(argv[2], "rb") as f:
        key_pem = f.read()

    version = argv[3] if len(argv) > 3 else notification.SignatureVersion or "1"
    message = notification.as_message()
    message["SignatureVersion"] = version
    message["Signature"] = sign_message(key_pem, message, version)
    print(json.dumps(message, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
