"""
Exceptions raised while building, signing and dispatching requests.
"""
from typing import Optional


class SigningError(Exception):
    """Base class for all reqsig errors."""


class MissingParameter(SigningError, ValueError):
    """A mandatory request field (service or action) was not supplied."""

    def __init__(self, parameter: str):
        super().__init__(f"Missing AWS API {parameter}")
        self.parameter = parameter


class MissingCredentials(SigningError):
    """The signer has no access key / secret key to sign with."""

    def __init__(self, message: str = "Signer credentials are not initialized"):
        super().__init__(message)


class MalformedDestination(SigningError, ValueError):
    def __init__(self, uri: str, reason: str = 'Unrecognized URI'):
        super().__init__(f"{reason}: {uri}")
        self.uri = uri


class TransportFailure(SigningError):
    """The HTTP call never produced a response (DNS, connect, timeout...)."""


class RequestRejected(SigningError):
    """The remote service answered with an error status."""

    def __init__(self, status_code: int, body: Optional[str] = None):
        super().__init__(f"Request rejected with HTTP {status_code}")
        self.status_code = status_code
        self.body = body
