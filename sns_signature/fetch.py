# sns_signature/fetch.py
"""
Default certificate fetcher: a plain GET with requests.

Any callable taking a URL and returning the response body as bytes can
replace it (see SignatureVerifier). No host allow-listing is done here.
"""
import logging
from typing import Callable, Optional

import requests

from sns_signature.common import config
from sns_signature.common.errors import CertificateFetchError

logger = logging.getLogger(__name__)

CertificateFetcher = Callable[[str], bytes]


def requests_fetcher(url: str, session: Optional[requests.Session] = None) -> bytes:
    """GET `url` and return the body. Non-2xx and transport errors raise CertificateFetchError."""
    http = session if session is not None else requests
    timeout = config.cert_fetch_timeout()
    logger.debug("fetching signing certificate from %s (timeout=%ss)", url, timeout)
    try:
        resp = http.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise CertificateFetchError(url, str(exc)) from exc
    return resp.content


def session_fetcher(session: requests.Session) -> CertificateFetcher:
    """Bind a fetcher to an existing session (proxies, mTLS, retries adapters ...)."""
    def fetch(url: str) -> bytes:
        return requests_fetcher(url, session=session)
    return fetch
