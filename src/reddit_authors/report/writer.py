# ABOUTME: Writes author,url CSV reports to timestamped files in the output directory
# ABOUTME: Files are created exclusively so no run ever overwrites an earlier report

import csv
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import TextIO

from reddit_authors.core.models import ExtractedRecord, ReportResult
from reddit_authors.utils.logging import get_logger


def report_filename(now: datetime) -> str:
    """ISO-8601 local timestamp with ``:`` replaced for filesystem safety, plus ``.csv``."""
    return now.isoformat().replace(":", "-") + ".csv"


class ReportWriter:
    """Writes one CSV line per extracted record."""

    def __init__(self, output_dir: Path):
        self.output_dir = output_dir
        self.logger = get_logger(__name__)

    def _open_new_file(self, now: datetime) -> tuple[Path, TextIO]:
        """Create a report file that did not exist before, adding -1, -2, ... on collision."""
        stem = report_filename(now).removesuffix(".csv")
        attempt = 0
        while True:
            name = f"{stem}.csv" if attempt == 0 else f"{stem}-{attempt}.csv"
            path = self.output_dir / name
            try:
                return path, path.open("x", encoding="utf-8", newline="")
            except FileExistsError:
                attempt += 1

    def write(self, records: Sequence[ExtractedRecord], now: datetime | None = None) -> ReportResult:
        """Write *records* in order to a new timestamped file.

        I/O errors while writing or flushing are logged and returned in
        ``ReportResult.error``; lines already written stay on disk.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path, handle = self._open_new_file(now or datetime.now())

        result = ReportResult(path=path)
        try:
            with handle:
                writer = csv.writer(handle, lineterminator="\n")
                for record in records:
                    writer.writerow([record.author, record.url])
                    result.lines_written += 1
        except OSError as e:
            result.error = str(e)
            self.logger.error("Error encountered when writing report", path=str(path), error=str(e))
            return result

        self.logger.info("Report written", path=str(path), lines=result.lines_written)
        return result
