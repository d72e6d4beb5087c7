"""Tests for the s3-bulk-move command line."""

import boto3
from moto import mock_aws
from typer.testing import CliRunner

from s3_bulk_move import __version__
from s3_bulk_move.cli import app

runner = CliRunner()


class TestCliValidation:
    """Test argument errors that fail before any listing."""

    def test_version(self):
        """Test --version output."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"s3-bulk-move {__version__}" in result.stdout

    def test_malformed_source(self):
        """Test a source that is not an s3:// URL."""
        result = runner.invoke(app, ["/local/path", "s3://dest/"])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "/local/path" in result.output

    def test_malformed_destination(self):
        """Test a destination without a trailing key path."""
        result = runner.invoke(app, ["s3://src/", "s3://dest"])
        assert result.exit_code == 1
        assert "s3://dest" in result.output

    def test_unknown_region(self):
        """Test an unknown region override."""
        result = runner.invoke(
            app, ["s3://src/", "s3://dest/", "--dest-region", "mars-north-1"]
        )
        assert result.exit_code == 1
        assert "Unknown S3 region: mars-north-1" in result.output

    def test_unknown_default_region(self, monkeypatch):
        """Test an unknown default region from the environment."""
        monkeypatch.setenv("AWS_DEFAULT_REGION", "nowhere-1")
        result = runner.invoke(app, ["s3://src/", "s3://dest/"])
        assert result.exit_code == 1
        assert "nowhere-1" in result.output

    def test_invalid_filter(self):
        """Test a filter that is not a valid regex."""
        result = runner.invoke(
            app, ["s3://src/", "s3://dest/", "--src-filter", "(unclosed"]
        )
        assert result.exit_code == 1
        assert "Invalid filter pattern" in result.output


@mock_aws
class TestCliListing:
    """Test listing output against mocked S3."""

    def setup_method(self, method):
        """Set up test environment."""

        self.s3_client = boto3.client(
            "s3",
            aws_access_key_id="test_key",
            aws_secret_access_key="test_secret",
            region_name="us-east-1",
        )
        self.s3_client.create_bucket(Bucket="test-bucket")

        for key, body in [
            ("logs/2020/x.log", b"12345"),
            ("logs/2020/x.tmp", b"1"),
            ("logs/2021/y.log", b"1234567890"),
            ("logs/readme.txt", b"12"),
            ("other/z.log", b"123"),
        ]:
            self.s3_client.put_object(Bucket="test-bucket", Key=key, Body=body)

    def test_list_all(self):
        """Test listing with no filter prints relative keys and sizes."""
        result = runner.invoke(app, ["s3://test-bucket/logs/", "s3://dest/"])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "2020/x.log\t5",
            "2020/x.tmp\t1",
            "2021/y.log\t10",
            "readme.txt\t2",
        ]

    def test_filter(self):
        """Test a filter-only run."""
        result = runner.invoke(
            app,
            ["s3://test-bucket/logs/", "s3://dest/", "--src-filter", r"\.log$"],
        )

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["2020/x.log\t5", "2021/y.log\t10"]

    def test_filter_and_rename(self):
        """Test a filter-and-rename run with small pages."""
        result = runner.invoke(
            app,
            [
                "s3://test-bucket/logs/",
                "s3://dest/",
                "--src-filter",
                r"(\d+)/(.+)",
                "--dest-replace",
                "archive/$1/$2",
                "--page-size",
                "1",
            ],
        )

        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "archive/2020/x.log\t5",
            "archive/2020/x.tmp\t1",
            "archive/2021/y.log\t10",
        ]

    def test_whole_bucket(self):
        """Test listing a bucket root keeps full keys."""
        result = runner.invoke(
            app,
            ["s3://test-bucket/", "s3://dest/", "--src-filter", r"^other/"],
        )

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["other/z.log\t3"]

    def test_source_region_override(self):
        """Test an explicit source region."""
        result = runner.invoke(
            app,
            ["s3://test-bucket/logs/2021/", "s3://dest/", "--src-region", "us-east-1"],
        )

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["y.log\t10"]

    def test_missing_bucket(self):
        """Test that storage errors exit non-zero with a message."""
        result = runner.invoke(app, ["s3://no-such-bucket/", "s3://dest/"])

        assert result.exit_code == 1
        assert "Failed to list objects in s3://no-such-bucket/" in result.output
