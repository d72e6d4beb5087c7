"""Core utilities and shared components for s3-bulk-move."""

from .config import Settings, settings
from .exceptions import S3BulkMoveError, ValidationError
from .observability import get_logger, get_tracer

__all__ = [
    "Settings",
    "settings",
    "S3BulkMoveError",
    "ValidationError",
    "get_logger",
    "get_tracer",
]
