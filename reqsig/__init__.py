"""
AWS Signature Version 4 - request building and signing

Turns a description of an AWS API call into a signed, transport-ready
request without depending on botocore.
"""

from .body import EMPTY, Body, EmptyBody, JsonBody, TextBody
from .config import Credentials, SignerConfig
from .errors import (
    MalformedDestination,
    MissingCredentials,
    MissingParameter,
    RequestRejected,
    SigningError,
    TransportFailure,
)
from .models import Headers, RequestIntent, SignedRequest
from .sigv4 import SigV4Signer, UNSIGNED_PAYLOAD, Service, derive_signing_key
from .transport import dispatch

__version__ = "0.1.0"
__all__ = [
    "SigV4Signer", "UNSIGNED_PAYLOAD", "Service", "Headers", "derive_signing_key",
    "RequestIntent", "SignedRequest", "Credentials", "SignerConfig",
    "Body", "EmptyBody", "TextBody", "JsonBody", "EMPTY", "dispatch",
    "SigningError", "MissingParameter", "MissingCredentials", "MalformedDestination",
    "TransportFailure", "RequestRejected",
]
