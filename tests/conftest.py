"""Test configuration and fixtures for s3-bulk-move."""

from typing import Optional

import pytest

from s3_bulk_move.objectstorage.listing import ListingPage


@pytest.fixture(autouse=True)
def aws_environment(monkeypatch):
    """Point boto3 at fake credentials and a fixed default region."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "test_key")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "test_secret")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.delenv("AWS_PROFILE", raising=False)
    monkeypatch.delenv("S3_BULK_MOVE_DEFAULT_REGION", raising=False)


def make_page(keys, size=10, truncated=False):
    """Build a listing page with one entry per key."""
    return ListingPage(
        entries=[{"Key": key, "Size": size} for key in keys],
        is_truncated=truncated,
    )


class FakePageFetcher:
    """Serves canned pages and records the cursor of every request."""

    def __init__(self, pages, fail_on: Optional[int] = None, error=None):
        self.pages = list(pages)
        self.fail_on = fail_on
        self.error = error
        self.cursors = []

    def fetch_page(self, bucket, prefix, cursor):
        self.cursors.append(cursor)
        call = len(self.cursors)
        if self.fail_on is not None and call == self.fail_on:
            raise self.error
        if call > len(self.pages):
            return None
        return self.pages[call - 1]


@pytest.fixture
def three_page_fetcher():
    """Fetcher over pages of 2, 3 and 0 objects."""
    return FakePageFetcher(
        [
            make_page(["logs/a.log", "logs/b.tmp"], truncated=True),
            make_page(["logs/c.log", "logs/d.log", "logs/e.tmp"], truncated=True),
            make_page([]),
        ]
    )
