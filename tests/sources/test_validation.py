# ABOUTME: Tests for HTTPS URL classification and partitioning
# ABOUTME: Pure logic, no HTTP calls

import pytest

from reddit_authors.core.models import UrlValidity
from reddit_authors.sources.validation import classify, partition_urls


class TestClassify:
    """Only well-formed https URLs are valid."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com",
            "https://example.com/",
            "https://www.reddit.com/r/python/comments/abc123/some_title/",
            "https://old.reddit.com/r/python/comments/abc123/some_title?context=3",
            "https://example.com:8443/path",
            "HTTPS://example.com",
        ],
    )
    def test_valid_https_urls(self, url):
        assert classify(url) is UrlValidity.VALID

    @pytest.mark.parametrize(
        "url",
        [
            "ftp://example.com",
            "http://example.com",
            "not a url",
            "notaurl",
            "example.com",
            "https://",
            "mailto:someone@example.com",
            "https://exa mple.com",
            "https:example.com",
            "https:/example.com",
            "https:\\\\example.com",
            "https:///example.com",
            "https://example.com\\\\path",
            " https://example.com",
            "",
        ],
    )
    def test_invalid_urls(self, url):
        assert classify(url) is UrlValidity.INVALID


class TestPartitionUrls:
    """Splitting the deduplicated input into two disjoint lists."""

    def test_partition_preserves_order(self):
        urls = ["https://b.com", "ftp://x.com", "https://a.com", "nope"]

        partition = partition_urls(urls)

        assert partition.valid == ["https://b.com", "https://a.com"]
        assert partition.invalid == ["ftp://x.com", "nope"]

    def test_partition_is_disjoint_and_complete(self):
        urls = [
            "https://a.com",
            "http://a.com",
            "https://b.com/x",
            "garbage",
            "https://c.com/",
            "ftp://c.com",
        ]

        partition = partition_urls(urls)

        assert set(partition.valid).isdisjoint(partition.invalid)
        assert set(partition.valid) | set(partition.invalid) == set(urls)
        assert len(partition.valid) + len(partition.invalid) == len(urls)

    def test_empty_input(self):
        partition = partition_urls([])

        assert partition.valid == []
        assert partition.invalid == []

    def test_accepts_generators(self):
        partition = partition_urls(url for url in ["https://a.com", "bad"])

        assert partition.valid == ["https://a.com"]
        assert partition.invalid == ["bad"]
