# ABOUTME: Rich tables for the harvest CLI: URL lists, extraction failures, run summary and logging status
# ABOUTME: Every table shares one border and title layout via _styled_table

from typing import Any

from rich.box import ROUNDED, SIMPLE
from rich.console import Console
from rich.table import Table

from reddit_authors.core.models import ExtractionFailure, HarvestSummary


def _styled_table(title: str, title_style: str, box=ROUNDED, expand: bool = True) -> Table:
    return Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        box=box,
        header_style="bold magenta",
        border_style="cyan",
        title_justify="left",
        row_styles=["", "dim"],
        expand=expand,
    )


def create_url_list_table(title: str, urls: list[str], url_style: str = "white") -> Table:
    """Numbered list of URLs, used for malformed URLs and failed requests."""
    table = _styled_table(title, "bold red")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("URL", style=url_style, overflow="fold")
    for index, url in enumerate(urls, start=1):
        table.add_row(str(index), url)
    return table


def create_extraction_failures_table(failures: list[ExtractionFailure]) -> Table:
    """URLs whose response body did not contain an author."""
    table = _styled_table(f"🧩 Author extraction failed ({len(failures)})", "bold yellow")
    table.add_column("URL", style="white", overflow="fold")
    table.add_column("Reason", style="yellow")
    for failure in failures:
        table.add_row(failure.url, failure.error)
    return table


def create_summary_table(summary: HarvestSummary) -> Table:
    """Create the end-of-run summary table.

    Counts come straight from the summary so the table and the stderr lists
    always agree.

    Args:
        summary: Result of a completed batch run

    Returns:
        Styled summary table
    """
    table = _styled_table("🔄 Harvest Summary", "bold green", box=SIMPLE, expand=False)
    table.add_column("Stage", style="cyan")
    table.add_column("Result", style="white", justify="right")

    report = summary.report
    table.add_row("📄 Input", str(summary.input_path))
    table.add_row("✅ Valid URLs", str(len(summary.partition.valid)))
    table.add_row("🚫 Malformed URLs", str(len(summary.malformed_urls)))
    table.add_row("🌐 Successful GETs", str(summary.successful_fetches))
    table.add_row("❌ Failed GETs", str(len(summary.failed_urls)))
    table.add_row("🧩 Extraction failures", str(len(summary.extraction_failures)))
    if report is None:
        table.add_row("📝 Report", "Not written")
    else:
        table.add_row("📝 Report", str(report.path))
        table.add_row("📊 Lines written", str(report.lines_written))
        if report.error:
            table.add_row("⚠️ Write error", f"[red]{report.error}[/red]")
    return table


def create_logging_status_table(status: dict[str, Any]) -> Table:
    """Mode, log locations and suppressed libraries as reported by get_logging_status()."""
    table = _styled_table("🔍 Logging Configuration", "bold green", expand=False)
    table.add_column("Setting", style="blue")
    table.add_column("Value", style="white")

    table.add_row("🔧 Mode", status["mode"].title())
    table.add_row("📁 Log Directory", status["log_directory"] or "N/A (production mode)")
    table.add_row("🔇 Suppressed Libraries", ", ".join(status["third_party_suppressed"]))

    log_files = status["log_files"]
    for label, key in (("📝 Main Log", "main"), ("📊 JSON Log", "json"), ("🚨 Error Log", "errors")):
        if log_files[key]:
            table.add_row(label, log_files[key])
    return table


def print_rich_table(console: Console, table: Table) -> None:
    """Print *table* with a blank line either side."""
    console.print()
    console.print(table)
    console.print()
