# ABOUTME: Main CLI application entry point using asyncclick for native async support
# ABOUTME: Runs the author harvest with no arguments; also offers validate and logging-status commands

from pathlib import Path

import asyncclick as click
from rich.console import Console
from rich.panel import Panel

from reddit_authors.config import Config, get_config
from reddit_authors.core.models import HarvestSummary
from reddit_authors.sources import InputFileError, ensure_input_dir, load_candidate_urls, partition_urls
from reddit_authors.utils.logging import (
    LoggingMode,
    configure_logging,
    create_request_progress,
    detect_logging_mode,
    get_logging_status,
    with_batch_context,
)
from reddit_authors.utils.rich_tables import (
    create_extraction_failures_table,
    create_logging_status_table,
    create_summary_table,
    create_url_list_table,
    print_rich_table,
)

console = Console()
err_console = Console(stderr=True)


def _config_with_overrides(
    input_path: Path | None = None, output_dir: Path | None = None, fail_on_http_error: bool = False
) -> Config:
    """Apply per-run CLI overrides on top of the environment configuration."""
    config = get_config()
    overrides: dict = {}
    if input_path is not None:
        overrides["input_dir"] = input_path.parent
        overrides["input_filename"] = input_path.name
    if output_dir is not None:
        overrides["output_dir"] = output_dir
    if fail_on_http_error:
        overrides["fail_on_http_error"] = True
    return config.model_copy(update=overrides) if overrides else config


def _display_harvest_results(summary: HarvestSummary) -> None:
    """Malformed and failed URLs go to stderr, the success count and summary to stdout."""
    err_console.print(f"\nNumber of malformed URLs: [bold]{len(summary.malformed_urls)}[/bold]")
    if summary.malformed_urls:
        print_rich_table(err_console, create_url_list_table("🚫 Malformed URLs", summary.malformed_urls))

    err_console.print(f"Number of failed GET requests: [bold]{len(summary.failed_urls)}[/bold]")
    if summary.failed_urls:
        print_rich_table(err_console, create_url_list_table("❌ Failed GET requests", summary.failed_urls))

    console.print(f"Number of successful GET requests: [bold green]{summary.successful_fetches}[/bold green]")
    if summary.extraction_failures:
        print_rich_table(err_console, create_extraction_failures_table(summary.extraction_failures))

    if summary.report and summary.report.error:
        err_console.print(
            f"[red]❌ Error encountered when writing output to file: {summary.report.path} "
            f"({summary.report.error})[/red]"
        )

    print_rich_table(console, create_summary_table(summary))


async def _run_async(
    json_output: bool,
    input_path: Path | None = None,
    output_dir: Path | None = None,
    fail_on_http_error: bool = False,
) -> HarvestSummary:
    """Run one harvest, with a live progress bar unless JSON output was requested."""
    from reddit_authors.core.pipeline import HarvestPipeline

    config = _config_with_overrides(input_path, output_dir, fail_on_http_error)

    with with_batch_context("author_harvest", input=str(config.input_path)) as logger:
        logger.info("Starting harvest", output_dir=str(config.output_dir))
        pipeline = HarvestPipeline(config)

        try:
            if json_output:
                summary = await pipeline.run()
            else:
                _progress, _task_id, tracker = create_request_progress(console)
                with tracker:
                    summary = await pipeline.run(on_progress=tracker)
        except InputFileError as e:
            raise click.ClickException(str(e)) from e
        finally:
            await pipeline.close()

        logger.info("Harvest finished", report=str(summary.report.path) if summary.report else None)

    if not json_output:
        _display_harvest_results(summary)
    return summary


@click.command(name="run")
@click.option("--input", "input_path", type=click.Path(path_type=Path), help="URL list to read")
@click.option("--output-dir", type=click.Path(path_type=Path), help="Directory for the CSV report")
@click.option("--fail-on-http-error", is_flag=True, help="Treat 4xx/5xx responses as failed requests")
@click.pass_context
async def run(ctx, input_path: Path | None, output_dir: Path | None, fail_on_http_error: bool):
    """
    🌐 Fetch every post's about.json and write an author,url CSV report.
    """
    await _run_async(ctx.obj["json_output"], input_path, output_dir, fail_on_http_error)


@click.command(name="validate")
@click.option("--input", "input_path", type=click.Path(path_type=Path), help="URL list to read")
@click.pass_context
async def validate(ctx, input_path: Path | None):
    """
    🔎 Check the URL list without sending any requests.
    """
    config = _config_with_overrides(input_path)
    ensure_input_dir(config.input_dir)
    try:
        partition = partition_urls(load_candidate_urls(config.input_path))
    except InputFileError as e:
        raise click.ClickException(str(e)) from e

    if ctx.obj["json_output"]:
        click.echo(partition.model_dump_json())
        return

    console.print(
        Panel.fit(
            f"📄 {config.input_path}\n"
            f"✅ [bold green]{len(partition.valid)}[/bold green] valid  "
            f"🚫 [bold red]{len(partition.invalid)}[/bold red] malformed",
            border_style="magenta",
        )
    )
    if partition.valid:
        print_rich_table(console, create_url_list_table("✅ Valid URLs", partition.valid, url_style="green"))
    if partition.invalid:
        print_rich_table(err_console, create_url_list_table("🚫 Malformed URLs", partition.invalid))


def _resolve_logging_mode(json_output: bool) -> str:
    """--json forces production, otherwise the configured mode or terminal detection."""
    if json_output:
        return LoggingMode.PRODUCTION
    return get_config().log_mode or detect_logging_mode()


def _initialize_logging(json_output: bool, log_level: str | None = None, log_file: str | None = None) -> str:
    """Initialize logging configuration and return the mode in effect."""
    config = get_config()
    mode = _resolve_logging_mode(json_output)

    # Use config defaults when CLI parameters are not provided
    final_log_level = log_level or config.log_level
    final_log_file = log_file or (str(config.log_file) if config.log_file else None)

    configure_logging(mode=mode, log_level=final_log_level, log_file=final_log_file)
    return mode


@click.command(name="logging-status")
@click.pass_context
def logging_status(ctx):
    """
    📊 Show current logging configuration and status.
    """
    status = get_logging_status(ctx.obj["log_mode"])
    logging_table = create_logging_status_table(status)
    print_rich_table(console, logging_table)


@click.group(invoke_without_command=True)
@click.option("--json", is_flag=True, help="Output structured JSON logs instead of rich interface")
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ERROR)")
@click.option("--log-file", help="Custom log file path")
@click.pass_context
async def app(ctx, json: bool, log_level: str | None, log_file: str | None):
    """
    📰 Reddit Authors - harvest post authors from about.json

    Reads input/urls.txt, fetches <url>/about.json for every valid https URL
    and writes author,url lines to output/<timestamp>.csv.
    Run without a command to start the harvest.
    """
    # Store global options in context for commands to access
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json

    # Initialize logging once here instead of in each command
    ctx.obj["log_mode"] = _initialize_logging(json, log_level, log_file)

    # No command means a plain harvest with configured defaults
    if ctx.invoked_subcommand is None:
        await _run_async(json)


# Add commands to the main group
app.add_command(run)
app.add_command(validate)
app.add_command(logging_status)


if __name__ == "__main__":
    app()
