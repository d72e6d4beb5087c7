"""Parsing of s3://bucket/key locations."""

import re
from dataclasses import dataclass
from typing import Optional

from s3_bulk_move.core import get_logger
from s3_bulk_move.core.exceptions import MalformedLocation

logger = get_logger(__name__)

S3_SCHEME = "s3"

_LOCATION_RE = re.compile(r"\As3://([^/]+)/(.*)\Z", re.DOTALL)


@dataclass(frozen=True)
class StoreLocation:
    """A bucket and an optional key prefix inside it.

    Attributes:
        bucket: S3 bucket name
        prefix: Key prefix, or None when the location is the bucket root
    """

    bucket: str
    prefix: Optional[str] = None

    @property
    def effective_prefix(self) -> str:
        return self.prefix or ""

    @property
    def url(self) -> str:
        return f"{S3_SCHEME}://{self.bucket}/{self.effective_prefix}"


def parse_location(location: str) -> StoreLocation:
    """Parse an S3 URL into bucket and prefix components.

    The key path is taken verbatim: no slashes are added or stripped. An empty
    key path means "no prefix".

    Args:
        location: URL in format s3://bucket/prefix or s3://bucket/

    Returns:
        The parsed StoreLocation

    Raises:
        MalformedLocation: If the URL does not have the expected shape
    """
    match = _LOCATION_RE.match(location)
    if match is None:
        raise MalformedLocation(
            f"Expected a URL like s3://bucket/some/key, got: {location!r}"
        )

    bucket, key_path = match.group(1), match.group(2)
    parsed = StoreLocation(bucket=bucket, prefix=key_path or None)
    logger.debug("S3 location parsed", bucket=parsed.bucket, prefix=parsed.prefix)
    return parsed
