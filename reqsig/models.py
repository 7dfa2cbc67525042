"""
Request intent (what the caller wants) and signed request (what goes on the wire).
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .body import EMPTY, Body, EmptyBody, JsonBody, TextBody

Headers = Dict[str, Any]


@dataclass(frozen=True)
class RequestIntent:
    """
    Description of one API call before signing.

    ``service`` and ``action`` are mandatory. ``region`` and ``bucket`` fall
    back to the signer's ``SignerConfig``; ``method`` defaults to GET and
    ``path`` to "/". A plain ``str`` payload becomes a ``TextBody``, ``None``
    an empty body and any other non-body value a ``JsonBody``.
    """
    service: Optional[str]
    action: Optional[str]
    params: Optional[Dict[str, Any]] = None
    region: Optional[str] = None
    method: Optional[str] = None
    payload: Body = EMPTY
    headers: Optional[Headers] = None
    path: Optional[str] = None
    bucket: Optional[str] = None
    unsigned_payload: bool = False

    def __post_init__(self) -> None:
        # str is sent as-is, None means no body, anything else is JSON
        payload = self.payload
        if payload is None:
            payload = EMPTY
        elif isinstance(payload, str):
            payload = TextBody(payload)
        elif not isinstance(payload, (EmptyBody, TextBody, JsonBody)):
            payload = JsonBody(payload)
        object.__setattr__(self, 'payload', payload)


@dataclass(frozen=True)
class SignedRequest:
    url: str
    method: str
    headers: Dict[str, str] = field(default_factory=dict)
    payload: str = ''
    mute_http_exceptions: bool = True

    @property
    def authorization(self) -> Optional[str]:
        return self.headers.get('Authorization')
