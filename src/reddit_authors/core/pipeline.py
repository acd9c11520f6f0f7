# ABOUTME: Batch pipeline that coordinates every stage of one harvest run
# ABOUTME: Load → validate → fetch sequentially → extract per record → write timestamped CSV

from reddit_authors.config import Config, get_config
from reddit_authors.core.models import HarvestSummary
from reddit_authors.extraction.author import extract_records
from reddit_authors.extraction.base import ProgressCallback
from reddit_authors.extraction.fetcher import AboutJsonFetcher
from reddit_authors.report.writer import ReportWriter
from reddit_authors.sources.loader import ensure_input_dir, load_candidate_urls
from reddit_authors.sources.validation import partition_urls
from reddit_authors.utils.logging import get_logger


class HarvestPipeline:
    """Runs one pass over the URL list and produces a CSV report.

    Stages:
    1. Load the URL list (trimmed, deduplicated, input order kept)
    2. Partition into valid/invalid HTTPS URLs; invalid ones are only reported
    3. Fetch ``about.json`` for each valid URL, one request at a time
    4. Extract the author from every body, isolating failures per record
    5. Write ``author,url`` lines to ``<output_dir>/<timestamp>.csv``

    Only an unreadable input file aborts the run (``InputFileError``).
    """

    def __init__(
        self,
        config: Config | None = None,
        fetcher: AboutJsonFetcher | None = None,
        writer: ReportWriter | None = None,
    ):
        self.config = config or get_config()
        self.fetcher = fetcher or AboutJsonFetcher.from_config(self.config)
        self.writer = writer or ReportWriter(self.config.output_dir)
        self.logger = get_logger(__name__)

    async def run(self, on_progress: ProgressCallback | None = None) -> HarvestSummary:
        ensure_input_dir(self.config.input_dir)
        self.config.output_dir.mkdir(parents=True, exist_ok=True)

        input_path = self.config.input_path
        partition = partition_urls(load_candidate_urls(input_path))
        summary = HarvestSummary(input_path=input_path, partition=partition)

        if partition.invalid:
            self.logger.warning("Malformed URLs skipped", count=len(partition.invalid), urls=partition.invalid)

        summary.fetch_results = await self.fetcher.fetch_all(partition.valid, on_progress=on_progress)

        if summary.failed_urls:
            self.logger.warning("GET requests failed", count=len(summary.failed_urls), urls=summary.failed_urls)

        summary.records, summary.extraction_failures = extract_records(summary.fetch_results)
        summary.report = self.writer.write(summary.records)

        self.logger.info(
            "Harvest complete",
            valid=len(partition.valid),
            malformed=len(partition.invalid),
            fetched=summary.successful_fetches,
            records=len(summary.records),
            extraction_failures=len(summary.extraction_failures),
            report=str(summary.report.path),
        )
        return summary

    async def close(self) -> None:
        """Release the HTTP client."""
        await self.fetcher.close()
