# ABOUTME: Orchestration layer and shared domain models
# ABOUTME: Batch run: URL list → validation → fetch → author extraction → CSV report

"""
Core Layer: Batch orchestration and domain models

This layer handles:
- Domain models passed between the stages
- The batch pipeline that wires loader, validator, fetcher, extractor and writer

Data Flow: input/urls.txt → sources/ → extraction/ → report/ → output/<timestamp>.csv
"""

from .models import (
    ExtractedRecord,
    ExtractionFailure,
    FetchResult,
    HarvestSummary,
    ReportResult,
    UrlPartition,
    UrlValidity,
)

# Import the pipeline on-demand to avoid circular imports
# Use: from reddit_authors.core.pipeline import HarvestPipeline

__all__ = [
    "ExtractedRecord",
    "ExtractionFailure",
    "FetchResult",
    "HarvestSummary",
    "ReportResult",
    "UrlPartition",
    "UrlValidity",
]
