"""
Host name resolution for AWS endpoints.
"""
from typing import Optional

AWS_DOMAIN = 'amazonaws.com'
S3 = 's3'


def resolve_host(
        service: str,
        region: Optional[str] = None,
        bucket: Optional[str] = None,
        regional_s3: bool = False
) -> str:
    """
    Return the DNS name a request for ``service`` is sent to.

    S3 uses virtual-hosted-style addressing with the bucket as a subdomain.
    The region is left out of S3 hosts unless ``regional_s3`` is set.

    >>> resolve_host('ec2', 'us-west-2')
    'ec2.us-west-2.amazonaws.com'
    >>> resolve_host('s3', 'eu-west-1', 'mybucket')
    'mybucket.s3.amazonaws.com'
    """
    is_s3 = service == S3
    parts = [
        bucket if is_s3 else None,
        service,
        region if (not is_s3 or regional_s3) else None,
        AWS_DOMAIN,
    ]
    return '.'.join(part for part in parts if part)
