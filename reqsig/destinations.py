"""
Parsing of export destination URIs such as ``gs://bucket/export/job__*.csv``.
"""
import re
from dataclasses import dataclass

from .errors import MalformedDestination

_DESTINATION_RE = re.compile(r'^gs://([^/]+)/([^*]+)')

DOWNLOAD_BASE_URL = 'https://storage.cloud.google.com'


@dataclass(frozen=True)
class Destination:
    bucket: str
    prefix: str
    wildcard: bool

    def download_url(self) -> str:
        """Direct download link; only defined for destinations without a wildcard."""
        if self.wildcard:
            raise MalformedDestination(f"gs://{self.bucket}/{self.prefix}*", 'Wildcard destination has no single URL')
        return f"{DOWNLOAD_BASE_URL}/{self.bucket}/{self.prefix}"


def parse_destination_uri(uri: str) -> Destination:
    """
    Split a destination URI into bucket and object prefix.

    The prefix stops at the first ``*``.
    """
    match = _DESTINATION_RE.match(uri or '')
    if not match:
        raise MalformedDestination(uri)
    return Destination(bucket=match.group(1), prefix=match.group(2), wildcard='*' in uri)
