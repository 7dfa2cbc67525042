"""
Dispatch of signed requests over HTTP.
"""
import logging
from typing import Optional

import requests

from .errors import RequestRejected, TransportFailure
from .models import SignedRequest

logger = logging.getLogger(__name__)


def dispatch(
        signed: SignedRequest,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None
) -> requests.Response:
    """
    Send a signed request and return the response.

    Args:
        signed: Output of ``SigV4Signer.build_signed_request``
        session: Session to send with; a throwaway one is used if omitted
        timeout: Seconds to wait for the server, passed through to requests

    Raises:
        TransportFailure: No response was received
        RequestRejected: The service returned an error status and
                         ``signed.mute_http_exceptions`` is false
    """
    owns_session = session is None
    if owns_session:
        session = requests.Session()
    try:
        response = session.request(
            signed.method,
            signed.url,
            headers=signed.headers,
            data=signed.payload.encode('utf-8') if signed.payload else None,
            timeout=timeout,
        )
    except requests.RequestException as e:
        logger.warning("AWS request %s %s failed: %s", signed.method, signed.url, e)
        raise TransportFailure(str(e)) from e
    finally:
        if owns_session:
            session.close()

    logger.debug("AWS response %s for %s %s", response.status_code, signed.method, signed.url)
    if response.status_code >= 400 and not signed.mute_http_exceptions:
        raise RequestRejected(response.status_code, response.text)
    return response
