"""Object storage listing operations."""

from .object_listing import (
    ListingPage,
    ObjectEntry,
    PageFetcher,
    S3PageFetcher,
    enumerate_objects,
)

__all__ = [
    "ListingPage",
    "ObjectEntry",
    "PageFetcher",
    "S3PageFetcher",
    "enumerate_objects",
]
