# ABOUTME: Pulls the post author out of a Reddit about.json listing
# ABOUTME: Each body is extracted independently so one bad response only drops its own row

import json
from collections.abc import Iterable
from typing import Any

from reddit_authors.core.models import ExtractedRecord, ExtractionFailure, FetchResult
from reddit_authors.extraction.base import ExtractionError
from reddit_authors.utils.logging import get_logger

logger = get_logger(__name__)

# [0].data.children[0].data.author
AUTHOR_PATH: tuple[int | str, ...] = (0, "data", "children", 0, "data", "author")


def _describe(path: list[int | str]) -> str:
    return "".join(f"[{step}]" if isinstance(step, int) else f".{step}" for step in path) or "<root>"


def _step(node: Any, key: int | str, path: list[int | str]) -> Any:
    """Descend one level, insisting on an array for int keys and an object for str keys."""
    if isinstance(key, int):
        if not isinstance(node, list):
            raise ExtractionError(f"Expected an array at {_describe(path)}, got {type(node).__name__}")
        if key >= len(node):
            raise ExtractionError(f"Array at {_describe(path)} has no index {key}")
        return node[key]

    if not isinstance(node, dict):
        raise ExtractionError(f"Expected an object at {_describe(path)}, got {type(node).__name__}")
    if key not in node:
        raise ExtractionError(f"Missing key {key!r} at {_describe(path)}")
    return node[key]


def extract_author(body: str) -> str:
    """Return ``[0].data.children[0].data.author`` from an about.json body.

    Raises:
        ExtractionError: If the body is not JSON or does not have that shape
    """
    try:
        node: Any = json.loads(body)
    except json.JSONDecodeError as e:
        raise ExtractionError(f"Response is not valid JSON: {e}") from e

    path: list[int | str] = []
    for key in AUTHOR_PATH:
        node = _step(node, key, path)
        path.append(key)

    if not isinstance(node, str):
        raise ExtractionError(f"Expected a string at {_describe(path)}, got {type(node).__name__}")
    return node


def extract_records(results: Iterable[FetchResult]) -> tuple[list[ExtractedRecord], list[ExtractionFailure]]:
    """Extract one record per successful fetch, collecting failures instead of raising."""
    records: list[ExtractedRecord] = []
    failures: list[ExtractionFailure] = []

    for result in results:
        if result.body is None:
            continue
        try:
            author = extract_author(result.body)
        except ExtractionError as e:
            logger.warning("Author extraction failed", url=result.url, error=str(e))
            failures.append(ExtractionFailure(url=result.url, error=str(e)))
            continue
        records.append(ExtractedRecord(author=author, url=result.url))

    return records, failures
