"""Configuration management for s3-bulk-move."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

FALLBACK_REGION = "us-east-1"


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "INFO"
    otel_enabled: bool = False
    otel_service_name: str = "s3-bulk-move"
    default_region: str = Field(
        FALLBACK_REGION,
        validation_alias=AliasChoices(
            "S3_BULK_MOVE_DEFAULT_REGION", "AWS_DEFAULT_REGION"
        ),
        description="Region used when no per-bucket region is given",
    )

    model_config = {
        "env_prefix": "S3_BULK_MOVE_",
        "case_sensitive": False,
    }


settings = Settings()
