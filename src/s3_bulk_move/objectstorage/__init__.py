"""Object storage operations for S3-compatible services."""

from .clients import S3ClientConfig, S3ClientManager, resolve_region
from .listing import (
    ListingPage,
    ObjectEntry,
    PageFetcher,
    S3PageFetcher,
    enumerate_objects,
)
from .location import StoreLocation, parse_location

__all__ = [
    "ListingPage",
    "ObjectEntry",
    "PageFetcher",
    "S3ClientConfig",
    "S3ClientManager",
    "S3PageFetcher",
    "StoreLocation",
    "enumerate_objects",
    "parse_location",
    "resolve_region",
]
