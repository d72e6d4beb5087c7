"""S3 client configuration, region resolution and client management.

The S3ClientManager handles boto3 client creation with different credential
sources. Each side of a move (source and destination) gets its own manager,
built from a region that was resolved once at startup.

Authentication Methods Supported:
    1. AWS CLI profiles (aws_profile)
    2. Explicit credentials (access_key_id, secret_access_key)
    3. IAM roles / environment variables (no explicit credentials)

S3-Compatible Services:
    Custom endpoints (MinIO and friends) are supported via endpoint_url. Region
    names are not checked against the AWS region list for those services.
"""

from functools import lru_cache
from typing import Any, Dict, Optional

import boto3
from pydantic import BaseModel, ConfigDict, Field

from s3_bulk_move.core import get_logger
from s3_bulk_move.core.config import FALLBACK_REGION
from s3_bulk_move.core.exceptions import UnknownRegion

logger = get_logger(__name__)


class S3ClientConfig(BaseModel):
    """Configuration for S3 client connections.

    Authentication Priority:
        1. If aws_profile is provided, use profile-based authentication
        2. If explicit credentials are provided, use them
        3. Otherwise, fall back to default AWS credential chain

    Example:
        # Default credential chain in a given region
        config = S3ClientConfig(region_name="eu-west-1")

        # MinIO endpoint
        config = S3ClientConfig(
            endpoint_url="http://localhost:9000",
            access_key_id="minioadmin",
            secret_access_key="minioadmin"
        )
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    access_key_id: Optional[str] = Field(None, description="AWS access key ID")
    secret_access_key: Optional[str] = Field(None, description="AWS secret access key")
    session_token: Optional[str] = Field(
        None, description="AWS session token for temporary credentials"
    )
    region_name: str = Field(FALLBACK_REGION, description="AWS region name")
    endpoint_url: Optional[str] = Field(
        None, description="Custom S3 endpoint URL for S3-compatible services"
    )
    aws_profile: Optional[str] = Field(
        None, description="AWS CLI profile name to use for credentials"
    )


@lru_cache(maxsize=None)
def known_s3_regions() -> frozenset[str]:
    """Return every S3 region botocore knows about, across all partitions."""
    session = boto3.session.Session()
    regions: set[str] = set()
    for partition in session.get_available_partitions():
        regions.update(session.get_available_regions("s3", partition_name=partition))
    return frozenset(regions)


def resolve_region(
    override: Optional[str], default_region: str, validate: bool = True
) -> str:
    """Pick the region for one side of a move.

    Args:
        override: Region given explicitly for this bucket, if any
        default_region: Process-wide default region
        validate: Check the result against the regions known for S3

    Returns:
        The region name to build the client with

    Raises:
        UnknownRegion: If the chosen region is not a known S3 region
    """
    region = override or default_region
    if validate and region not in known_s3_regions():
        logger.error("Unknown S3 region", region=region)
        raise UnknownRegion(f"Unknown S3 region: {region}")

    logger.debug("Region resolved", region=region, overridden=bool(override))
    return region


class S3ClientManager:
    """Manages an S3 client connection."""

    def __init__(self, config: S3ClientConfig):
        """Initialize S3 client manager.

        Args:
            config: S3 client configuration
        """
        self.config = config
        self._client = None
        logger.info("S3 client manager initialized", region=config.region_name)

    @property
    def client(self):
        """Get or create S3 client instance."""
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def _create_client(self):
        """Create boto3 S3 client with the configured settings."""
        kwargs: Dict[str, Any] = {
            "region_name": self.config.region_name,
        }

        if self.config.endpoint_url:
            kwargs["endpoint_url"] = self.config.endpoint_url

        if self.config.aws_profile:
            session = boto3.Session(profile_name=self.config.aws_profile)
            client = session.client("s3", **kwargs)  # type: ignore
            logger.info(
                "S3 client created with profile", profile=self.config.aws_profile
            )
        else:
            if self.config.access_key_id and self.config.secret_access_key:
                kwargs.update(
                    {
                        "aws_access_key_id": self.config.access_key_id,
                        "aws_secret_access_key": self.config.secret_access_key,
                    }
                )
                if self.config.session_token:
                    kwargs["aws_session_token"] = self.config.session_token
                logger.info("S3 client created with explicit credentials")
            else:
                logger.info("S3 client created with default credential chain")

            client = boto3.client("s3", **kwargs)  # type: ignore

        return client
