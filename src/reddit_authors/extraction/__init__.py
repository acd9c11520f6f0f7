# ABOUTME: Data extraction from Reddit about.json documents
# ABOUTME: Sequential HTTP fetch and author field extraction

"""
Extraction Layer: Get author names from remote about.json documents

This layer handles:
- Deriving the about.json request URL and issuing GET requests one by one
- Parsing each body and walking to the post author

Data Flow: Valid URLs → FetchResults → ExtractedRecords → Report layer
"""

from .author import extract_author, extract_records
from .base import ExtractionError, ProgressCallback
from .fetcher import AboutJsonFetcher, build_about_url

__all__ = [
    "AboutJsonFetcher",
    "ExtractionError",
    "ProgressCallback",
    "build_about_url",
    "extract_author",
    "extract_records",
]
