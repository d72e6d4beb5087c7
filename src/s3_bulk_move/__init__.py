"""Selection and key rewriting for bulk S3 object moves.

This package lists the objects under an S3 prefix, filters them with a regular
expression, derives destination keys from a replacement template and emits
the resulting (key, size) pairs. It decides which objects a bulk move covers
and where each one goes.

Recommended Usage:
    >>> from s3_bulk_move import (
    ...     RecordEmitter, S3ClientConfig, S3ClientManager, S3PageFetcher,
    ...     TransformRule, parse_location, run_selection,
    ... )
    >>> source = parse_location("s3://logs/2020/")
    >>> rule = TransformRule.from_options(r"(\\d+)/(.+)", "archive/$1/$2")
    >>> client = S3ClientManager(S3ClientConfig(region_name="us-east-1")).client
    >>> run_selection(S3PageFetcher(client), source, rule, RecordEmitter())

Lower-level pieces:
    >>> from s3_bulk_move.objectstorage import enumerate_objects
    >>> from s3_bulk_move.transform import transform_key, expand_template
"""

__version__ = "0.1.0"

from .objectstorage import (
    ListingPage,
    ObjectEntry,
    PageFetcher,
    S3ClientConfig,
    S3ClientManager,
    S3PageFetcher,
    StoreLocation,
    enumerate_objects,
    parse_location,
    resolve_region,
)
from .output import RecordEmitter
from .selection import SelectionSummary, run_selection, select_objects
from .transform import TransformRule, expand_template, relative_key, transform_key

__all__ = [
    # Locations
    "StoreLocation",
    "parse_location",
    # Listing
    "ListingPage",
    "ObjectEntry",
    "PageFetcher",
    "S3PageFetcher",
    "enumerate_objects",
    # Clients
    "S3ClientConfig",
    "S3ClientManager",
    "resolve_region",
    # Key transformation
    "TransformRule",
    "expand_template",
    "relative_key",
    "transform_key",
    # Pipeline
    "RecordEmitter",
    "SelectionSummary",
    "run_selection",
    "select_objects",
]
