"""Exception hierarchy for s3-bulk-move."""


class S3BulkMoveError(Exception):
    """Base exception for all s3-bulk-move errors."""

    pass


class ValidationError(S3BulkMoveError):
    """Raised when user input fails validation."""

    pass


class MalformedLocation(ValidationError):
    """Raised when a location string is not an s3://bucket/key URL."""

    pass


class UnknownRegion(ValidationError):
    """Raised when a region name is not known for S3."""

    pass


class InvalidFilterPattern(ValidationError):
    """Raised when a source filter is not a valid regular expression."""

    pass


class StorageApiError(S3BulkMoveError):
    """Raised when a call to the storage service fails."""

    pass
