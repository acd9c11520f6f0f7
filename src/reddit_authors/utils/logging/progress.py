# ABOUTME: Request progress tracking using Rich's built-in progress bar
# ABOUTME: Turns (done, total) callbacks from the fetch loop into a live n/total display

from typing import Any

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn, TimeElapsedColumn


class RequestProgressTracker:
    """Adapter between the fetcher's progress callback and a Rich task."""

    def __init__(self, progress: Progress, task_id: Any):
        self.progress = progress
        self.task_id = task_id

    def __call__(self, done: int, total: int) -> None:
        self.progress.update(self.task_id, completed=done, total=total)

    def __enter__(self):
        self.progress.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.progress.stop()


def create_request_progress(
    console: Console, description: str = "GET requests progress"
) -> tuple[Progress, Any, RequestProgressTracker]:
    """Create a progress bar showing requests issued out of requests planned.

    Args:
        console: Rich console instance
        description: Label shown left of the bar

    Returns:
        Tuple of (progress, task_id, tracker)
    """
    progress = Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
    )

    task_id = progress.add_task(description, total=None)
    tracker = RequestProgressTracker(progress, task_id)

    return progress, task_id, tracker
