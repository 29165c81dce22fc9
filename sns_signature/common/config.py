# sns_signature/common/config.py
"""
Environment driven settings. Read on every call so that a changed
environment (or pytest's monkeypatch.setenv) is picked up.
"""
import os

CERT_FETCH_TIMEOUT_ENV = "SNS_CERT_FETCH_TIMEOUT"
LOG_LEVEL_ENV = "SNS_LOG_LEVEL"
CERT_DIR_ENV = "SNS_CERT_DIR"

DEFAULT_CERT_FETCH_TIMEOUT = 10.0


class ConfigError(ValueError):
    """A setting in the environment has an unusable value."""


def cert_fetch_timeout() -> float:
    """Timeout (seconds) for the default certificate fetcher."""
    raw = os.environ.get(CERT_FETCH_TIMEOUT_ENV)
    if not raw:
        return DEFAULT_CERT_FETCH_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{CERT_FETCH_TIMEOUT_ENV} must be a number, got {raw!r}") from None


def log_level() -> str:
    return os.environ.get(LOG_LEVEL_ENV, "INFO").upper()


def cert_dir() -> str:
    return os.environ.get(CERT_DIR_ENV, "certs")
