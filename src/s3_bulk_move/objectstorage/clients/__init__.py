"""S3 client management, configuration and region resolution."""

from .s3_client import S3ClientConfig, S3ClientManager, known_s3_regions, resolve_region

__all__ = ["S3ClientConfig", "S3ClientManager", "known_s3_regions", "resolve_region"]
