# ABOUTME: Domain models shared by every stage of the author harvest
# ABOUTME: URL partition, per-URL fetch results, extracted records and the run summary

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class UrlValidity(str, Enum):
    """Classification of one candidate URL."""

    VALID = "valid"
    INVALID = "invalid"


class UrlPartition(BaseModel):
    """Deduplicated input split into valid and invalid URLs, both in input order."""

    valid: list[str] = Field(default_factory=list)
    invalid: list[str] = Field(default_factory=list)


class FetchResult(BaseModel):
    """Outcome of one GET attempt. ``body`` is None when the request failed."""

    url: str = Field(description="Source URL as read from the input file")
    target_url: str = Field(description="URL actually requested")
    body: str | None = None
    status_code: int | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.body is not None


class ExtractedRecord(BaseModel):
    """One report row."""

    author: str
    url: str


class ExtractionFailure(BaseModel):
    """A fetched body whose author could not be extracted."""

    url: str
    error: str


class ReportResult(BaseModel):
    """Where the report went and whether writing it hit an I/O error."""

    path: Path
    lines_written: int = 0
    error: str | None = None


class HarvestSummary(BaseModel):
    """Everything one batch run produced."""

    input_path: Path
    partition: UrlPartition
    fetch_results: list[FetchResult] = Field(default_factory=list)
    records: list[ExtractedRecord] = Field(default_factory=list)
    extraction_failures: list[ExtractionFailure] = Field(default_factory=list)
    report: ReportResult | None = None

    @property
    def malformed_urls(self) -> list[str]:
        return self.partition.invalid

    @property
    def failed_urls(self) -> list[str]:
        return [result.url for result in self.fetch_results if not result.ok]

    @property
    def successful_fetches(self) -> int:
        return sum(1 for result in self.fetch_results if result.ok)
