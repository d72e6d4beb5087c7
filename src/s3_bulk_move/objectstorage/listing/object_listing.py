"""Paginated enumeration of the objects under an S3 prefix.

Listing uses the ListObjects (V1) API with marker pagination: the marker for
the next request is the key of the last object in the previous page.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Protocol

from botocore.exceptions import BotoCoreError, ClientError

from s3_bulk_move.core import get_logger
from s3_bulk_move.core.exceptions import StorageApiError

logger = get_logger(__name__)


@dataclass(frozen=True)
class ObjectEntry:
    """A listed object.

    Attributes:
        key: Full object key, including the listing prefix
        size: Object size in bytes
    """

    key: str
    size: int


@dataclass(frozen=True)
class ListingPage:
    """One page of a listing: the raw ``Contents`` items and a truncation flag."""

    entries: List[Dict[str, Any]] = field(default_factory=list)
    is_truncated: bool = False


class PageFetcher(Protocol):
    """Protocol for fetching one page of a bucket listing."""

    def fetch_page(
        self, bucket: str, prefix: Optional[str], cursor: Optional[str]
    ) -> Optional[ListingPage]:
        """Return the page of objects following ``cursor``."""
        ...


class S3PageFetcher:
    """Fetches listing pages from S3 with a boto3 client."""

    def __init__(self, client, page_size: Optional[int] = None):
        """Initialize the page fetcher.

        Args:
            client: boto3 S3 client
            page_size: MaxKeys for each request; the service default if None
        """
        self.client = client
        self.page_size = page_size

    def fetch_page(
        self, bucket: str, prefix: Optional[str], cursor: Optional[str]
    ) -> Optional[ListingPage]:
        kwargs: Dict[str, Any] = {"Bucket": bucket}
        if prefix:
            kwargs["Prefix"] = prefix
        if cursor:
            kwargs["Marker"] = cursor
        if self.page_size:
            kwargs["MaxKeys"] = self.page_size

        try:
            response = self.client.list_objects(**kwargs)
        except (ClientError, BotoCoreError) as e:
            error_msg = f"Failed to list objects in s3://{bucket}/{prefix or ''}: {e}"
            logger.error(error_msg, error=str(e), marker=cursor)
            raise StorageApiError(error_msg) from e

        page = ListingPage(
            entries=response.get("Contents") or [],
            is_truncated=bool(response.get("IsTruncated", False)),
        )
        logger.debug(
            "S3 listing page fetched",
            bucket=bucket,
            prefix=prefix,
            marker=cursor,
            entry_count=len(page.entries),
            is_truncated=page.is_truncated,
        )
        return page


def _last_key(entries: List[Dict[str, Any]]) -> Optional[str]:
    for entry in reversed(entries):
        if entry.get("Key") is not None:
            return entry["Key"]
    return None


def enumerate_objects(
    fetcher: PageFetcher, bucket: str, prefix: Optional[str] = None
) -> Iterator[ObjectEntry]:
    """Lazily yield every object under a prefix, page by page.

    Entries without a key or without a size are skipped. Errors raised by the
    fetcher propagate and end the iteration.

    Args:
        fetcher: Source of listing pages
        bucket: Bucket to list
        prefix: Key prefix to list under, or None for the whole bucket

    Yields:
        ObjectEntry for each listed object, in listing order

    Raises:
        StorageApiError: If a page cannot be fetched, or a truncated page
            carries no key to continue from
    """
    cursor: Optional[str] = None
    pages = 0

    while True:
        page = fetcher.fetch_page(bucket, prefix, cursor)
        if page is None or not page.entries:
            break
        pages += 1

        for raw in page.entries:
            key = raw.get("Key")
            size = raw.get("Size")
            if key is None or size is None:
                logger.debug("Skipping incomplete listing entry", key=key, size=size)
                continue
            yield ObjectEntry(key=key, size=size)

        if not page.is_truncated:
            break

        cursor = _last_key(page.entries)
        if cursor is None:
            raise StorageApiError(
                f"Truncated listing page for s3://{bucket}/{prefix or ''} "
                "has no key to continue from"
            )

    logger.info("S3 listing completed", bucket=bucket, prefix=prefix, pages=pages)
