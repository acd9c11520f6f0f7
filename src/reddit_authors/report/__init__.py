# ABOUTME: CSV report output for extracted authors
# ABOUTME: Exports the writer and the timestamped file naming helper

from .writer import ReportWriter, report_filename

__all__ = ["ReportWriter", "report_filename"]
