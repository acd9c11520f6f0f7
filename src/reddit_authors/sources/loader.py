# ABOUTME: Reads the newline-delimited URL list that drives a batch run
# ABOUTME: Trims lines, drops blanks and deduplicates while keeping first-seen order

from pathlib import Path

from reddit_authors.utils.logging import get_logger

logger = get_logger(__name__)


class InputFileError(OSError):
    """Raised when the URL list cannot be opened or decoded."""

    pass


def ensure_input_dir(input_dir: Path) -> None:
    """Create the input directory so a first run leaves the expected layout behind."""
    input_dir.mkdir(parents=True, exist_ok=True)


def load_candidate_urls(path: Path) -> list[str]:
    """Return the unique, non-blank, trimmed lines of *path* in input order.

    Raises:
        InputFileError: If the file is missing, unreadable or not UTF-8
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Could not read URL list", path=str(path), error=str(e))
        raise InputFileError(f"Cannot read URL list {path}: {e}") from e

    seen: set[str] = set()
    urls: list[str] = []
    for line in text.split("\n"):
        candidate = line.strip()
        if candidate and candidate not in seen:
            seen.add(candidate)
            urls.append(candidate)

    logger.info("Loaded URL list", path=str(path), unique_urls=len(urls))
    return urls
