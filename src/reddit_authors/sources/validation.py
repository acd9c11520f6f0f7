# ABOUTME: HTTPS-only URL classification built on a pydantic TypeAdapter
# ABOUTME: Splits the deduplicated candidate list into valid and invalid URLs

from collections.abc import Iterable
from typing import Annotated

from pydantic import AnyUrl, TypeAdapter, UrlConstraints, ValidationError

from reddit_authors.core.models import UrlPartition, UrlValidity

HttpsUrl = Annotated[AnyUrl, UrlConstraints(allowed_schemes=["https"], host_required=True)]

_https_url_adapter = TypeAdapter(HttpsUrl)

AUTHORITY_PREFIX = "https://"


def classify(url: str) -> UrlValidity:
    """Classify *url* as a valid absolute ``https`` URL or not."""
    # The URL parser silently strips surrounding whitespace and percent-encodes inner spaces
    if not url or any(char.isspace() for char in url):
        return UrlValidity.INVALID
    # It also repairs "https:host", "https:/host", "https:///host" and backslash separators
    if url[: len(AUTHORITY_PREFIX)].lower() != AUTHORITY_PREFIX or "\\" in url:
        return UrlValidity.INVALID
    if url[len(AUTHORITY_PREFIX) : len(AUTHORITY_PREFIX) + 1] in ("", "/"):
        return UrlValidity.INVALID
    try:
        _https_url_adapter.validate_python(url)
    except ValidationError:
        return UrlValidity.INVALID
    return UrlValidity.VALID


def partition_urls(urls: Iterable[str]) -> UrlPartition:
    """Partition *urls* into valid and invalid lists, preserving their order."""
    partition = UrlPartition()
    for url in urls:
        if classify(url) is UrlValidity.VALID:
            partition.valid.append(url)
        else:
            partition.invalid.append(url)
    return partition
