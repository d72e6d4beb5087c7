"""Tests for application settings."""

from s3_bulk_move.core.config import FALLBACK_REGION, Settings


class TestSettings:
    """Test environment-driven settings."""

    def test_default_region_from_aws_environment(self, monkeypatch):
        """Test the default region follows AWS_DEFAULT_REGION."""
        monkeypatch.setenv("AWS_DEFAULT_REGION", "eu-west-1")
        assert Settings().default_region == "eu-west-1"

    def test_default_region_fallback(self, monkeypatch):
        """Test the fallback region when nothing is configured."""
        monkeypatch.delenv("AWS_DEFAULT_REGION", raising=False)
        assert Settings().default_region == FALLBACK_REGION == "us-east-1"

    def test_own_variable_takes_precedence(self, monkeypatch):
        """Test S3_BULK_MOVE_DEFAULT_REGION wins over AWS_DEFAULT_REGION."""
        monkeypatch.setenv("AWS_DEFAULT_REGION", "eu-west-1")
        monkeypatch.setenv("S3_BULK_MOVE_DEFAULT_REGION", "ap-southeast-2")
        assert Settings().default_region == "ap-southeast-2"

    def test_logging_settings(self, monkeypatch):
        """Test prefixed variables configure logging."""
        monkeypatch.setenv("S3_BULK_MOVE_LOG_LEVEL", "debug")
        settings = Settings()
        assert settings.log_level == "debug"
        assert settings.otel_enabled is False
