"""
AWS Signature Version 4 request signing.

Builds the canonical request, derives the scoped signing key and assembles
a transport-ready ``SignedRequest``. Nothing here touches the network; see
``reqsig.transport`` for dispatch.

References:
    https://docs.aws.amazon.com/general/latest/gr/sigv4-create-canonical-request.html
    https://docs.aws.amazon.com/general/latest/gr/signature-v4-examples.html
"""
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple, Union
from urllib.parse import quote

import requests

from .config import Credentials, SignerConfig
from .errors import MissingCredentials, MissingParameter
from .hashing import hmac_sha256, hmac_sha256_hex, sha256_hex
from .hosts import resolve_host
from .models import Headers, RequestIntent, SignedRequest
from .transport import dispatch

logger = logging.getLogger(__name__)

ALGORITHM = 'AWS4-HMAC-SHA256'
TERMINATOR = 'aws4_request'
UNSIGNED_PAYLOAD = 'UNSIGNED-PAYLOAD'
AMZ_DATE_FORMAT = '%Y%m%dT%H%M%SZ'

# RFC 3986 unreserved characters; everything else, including !'()*, is escaped
_SAFE_CHARS = '-_.~'


class Service(str, Enum):
    S3 = 's3'
    EC2 = 'ec2'
    IAM = 'iam'
    STS = 'sts'
    SQS = 'sqs'
    SNS = 'sns'
    LAMBDA = 'lambda'
    DYNAMODB = 'dynamodb'


def _service_name(service: Union[str, Service, None]) -> Optional[str]:
    return service.value if isinstance(service, Service) else service


def derive_signing_key(secret_key: str, date_stamp: str, region: str, service: str) -> bytes:
    """
    Derive the date/region/service scoped signing key.

    Each HMAC output is the key of the next stage:
    kDate -> kRegion -> kService -> kSigning.
    """
    k_date = hmac_sha256(date_stamp, 'AWS4' + secret_key)
    k_region = hmac_sha256(region, k_date)
    k_service = hmac_sha256(service, k_region)
    return hmac_sha256(TERMINATOR, k_service)


def url_encode(value: Any) -> str:
    """
    Percent-encode a query value the way SigV4 expects.

    Unlike browser-style component encoding, ``! ' ( ) *`` are escaped too.
    """
    if isinstance(value, bool):
        value = 'true' if value else 'false'
    return quote(str(value), safe=_SAFE_CHARS)


def build_query_string(action: str, params: Optional[Mapping[str, Any]] = None) -> str:
    query = f"Action={action}"
    for name in sorted(params or {}):
        query += f"&{name}={url_encode(params[name])}"
    return query


def _normalize_header_value(value: Any) -> str:
    return ' '.join(str(value).split())


def canonicalize_headers(headers: Headers) -> Tuple[str, str]:
    """
    Return ``(canonical_headers, signed_headers)`` for a header map.

    Names are lower-cased and sorted; the canonical block has one
    ``name:value`` line per header, each newline-terminated.
    """
    lowered = {name.lower(): _normalize_header_value(value) for name, value in headers.items()}
    names = sorted(lowered)
    canonical = ''.join(f"{name}:{lowered[name]}\n" for name in names)
    return canonical, ';'.join(names)


def canonical_request(
        method: str,
        path: str,
        query: str,
        canonical_headers: str,
        signed_headers: str,
        payload_hash: str
) -> str:
    # canonical_headers carries its own trailing newline, hence the blank line
    return '\n'.join([method, path, query, canonical_headers, signed_headers, payload_hash])


def credential_scope(date_stamp: str, region: str, service: str) -> str:
    return f"{date_stamp}/{region}/{service}/{TERMINATOR}"


def string_to_sign(amz_date: str, scope: str, canonical: str) -> str:
    return '\n'.join([ALGORITHM, amz_date, scope, sha256_hex(canonical)])


def sign(signing_key: bytes, to_sign: str) -> str:
    return hmac_sha256_hex(to_sign, signing_key)


def authorization_header(access_key_id: str, scope: str, signed_headers: str, signature: str) -> str:
    return f"{ALGORITHM} Credential={access_key_id}/{scope}, SignedHeaders={signed_headers},Signature={signature}"


def _utc(now: Optional[datetime]) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def _merge_headers(headers: Optional[Headers], mandatory: Dict[str, str]) -> Dict[str, str]:
    # names compare case-insensitively; the last spelling of a name wins
    by_lower: Dict[str, Tuple[str, str]] = {}
    for name, value in (headers or {}).items():
        by_lower[name.lower()] = (name, str(value))
    for name in list(mandatory) + ['Authorization']:
        by_lower.pop(name.lower(), None)
    merged = dict(by_lower.values())
    merged.update(mandatory)
    return merged


class SigV4Signer:
    """
    Signs AWS REST requests with Signature Version 4.

    The signer owns one credential context; independent signers never share
    state. Usage::

        signer = SigV4Signer()
        signer.init('AKIA...', 'secret')
        signed = signer.build_signed_request(
            RequestIntent('ec2', 'DescribeInstances', {'Version': '2016-11-15'})
        )
    """

    def __init__(self, config: Optional[SignerConfig] = None):
        self.config = config or SignerConfig()

    def init(self, access_key_id: str, secret_key: str, session_token: Optional[str] = None) -> None:
        """Replace the credentials used for signing. The last call wins."""
        self.config = self.config.with_credentials(Credentials(access_key_id, secret_key, session_token))

    def _credentials(self) -> Credentials:
        if self.config.credentials is None:
            raise MissingCredentials()
        return self.config.credentials.require()

    def build_signed_request(self, intent: RequestIntent, now: Optional[datetime] = None) -> SignedRequest:
        """
        Apply defaults, sign and return the request ready for dispatch.

        Args:
            intent: The API call to sign
            now: Signing instant; defaults to the current UTC time

        Raises:
            MissingParameter: service or action is missing
            MissingCredentials: the signer has no usable key pair
        """
        service = _service_name(intent.service)
        if not service:
            raise MissingParameter('Service')
        if not intent.action:
            raise MissingParameter('Action')
        credentials = self._credentials()

        region = intent.region or self.config.region
        bucket = intent.bucket or self.config.bucket
        method = (intent.method or 'GET').upper()
        path = intent.path or '/'
        payload = intent.payload.render()

        amz_date = _utc(now).strftime(AMZ_DATE_FORMAT)
        date_stamp = amz_date[:8]
        payload_hash = UNSIGNED_PAYLOAD if intent.unsigned_payload else sha256_hex(payload)

        host = resolve_host(service, region, bucket, self.config.regional_s3_hosts)
        if method == 'POST':
            query = ''
            url = f"https://{host}{path}"
        else:
            query = build_query_string(intent.action, intent.params)
            url = f"https://{host}{path}?{query}"

        mandatory = {
            'Host': host,
            'X-Amz-Date': amz_date,
            'X-Amz-Target': intent.action,
            'X-Amz-Content-SHA256': payload_hash,
        }
        if credentials.session_token:
            mandatory['X-Amz-Security-Token'] = credentials.session_token
        headers = _merge_headers(intent.headers, mandatory)

        canonical_headers, signed_headers = canonicalize_headers(headers)
        canonical = canonical_request(method, path, query, canonical_headers, signed_headers, payload_hash)
        scope = credential_scope(date_stamp, region, service)
        signing_key = derive_signing_key(credentials.secret_key, date_stamp, region, service)
        signature = sign(signing_key, string_to_sign(amz_date, scope, canonical))

        headers['Authorization'] = authorization_header(
            credentials.access_key_id, scope, signed_headers, signature
        )
        del headers['Host']

        logger.debug("Generated AWS API request: %s %s", method, url)
        return SignedRequest(url=url, method=method, headers=headers, payload=payload)

    def request(
            self,
            intent: RequestIntent,
            session: Optional[requests.Session] = None,
            timeout: Optional[float] = None
    ) -> requests.Response:
        """Sign ``intent`` and send it; returns the ``requests.Response``."""
        return dispatch(self.build_signed_request(intent), session=session, timeout=timeout)
