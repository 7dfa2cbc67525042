"""
Credential and default settings for a signer.

Values resolve in this order: explicit request field, then the
``SignerConfig`` value, then the hardcoded fallbacks below.
"""
import os
from dataclasses import dataclass, field, replace
from typing import Mapping, Optional

from .errors import MissingCredentials

DEFAULT_REGION = 'us-east-1'
DEFAULT_BUCKET = 'DefaultS3Bucket'


@dataclass(frozen=True)
class Credentials:
    access_key_id: str
    secret_key: str = field(repr=False)
    session_token: Optional[str] = field(default=None, repr=False)

    def require(self) -> 'Credentials':
        if not self.access_key_id or not self.secret_key:
            raise MissingCredentials("Access key ID and secret key must both be non-empty")
        return self


@dataclass(frozen=True)
class SignerConfig:
    """
    Settings injected into a ``SigV4Signer``.

    Attributes:
        credentials: Key pair used for signing; may be supplied later through ``SigV4Signer.init``
        region: Region used when a request does not name one
        bucket: S3 bucket used when a request does not name one
        regional_s3_hosts: Address S3 as ``<bucket>.s3.<region>.amazonaws.com`` instead of
                           the region-less ``<bucket>.s3.amazonaws.com``
    """
    credentials: Optional[Credentials] = None
    region: str = DEFAULT_REGION
    bucket: str = DEFAULT_BUCKET
    regional_s3_hosts: bool = False

    def with_credentials(self, credentials: Credentials) -> 'SignerConfig':
        return replace(self, credentials=credentials)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'SignerConfig':
        """
        Build a config from the standard AWS environment variables.

        Credentials stay unset unless both AWS_ACCESS_KEY_ID and
        AWS_SECRET_ACCESS_KEY are present.
        """
        env = os.environ if environ is None else environ
        access_key = env.get('AWS_ACCESS_KEY_ID')
        secret_key = env.get('AWS_SECRET_ACCESS_KEY')
        credentials = None
        if access_key and secret_key:
            credentials = Credentials(access_key, secret_key, env.get('AWS_SESSION_TOKEN') or None)
        return cls(
            credentials=credentials,
            region=env.get('AWS_DEFAULT_REGION') or DEFAULT_REGION,
            bucket=env.get('AWS_DEFAULT_BUCKET') or DEFAULT_BUCKET,
        )
