# ABOUTME: Input side of the batch: URL list loading and HTTPS validation
# ABOUTME: Exports the loader, the classifier and the input error type

from reddit_authors.sources.loader import InputFileError, ensure_input_dir, load_candidate_urls
from reddit_authors.sources.validation import classify, partition_urls

__all__ = [
    "InputFileError",
    "classify",
    "ensure_input_dir",
    "load_candidate_urls",
    "partition_urls",
]
