# ABOUTME: Logging configuration, progress tracking, and structured logger helpers
# ABOUTME: Provides rich console progress and loguru/structlog logging for the batch run

from .config import LoggingMode, configure_logging, detect_logging_mode, get_logging_status
from .progress import RequestProgressTracker, create_request_progress
from .utils import get_logger, log_api_call, with_batch_context

__all__ = [
    # Configuration
    "LoggingMode",
    "configure_logging",
    "detect_logging_mode",
    "get_logging_status",
    # Progress
    "RequestProgressTracker",
    "create_request_progress",
    # Utilities
    "get_logger",
    "log_api_call",
    "with_batch_context",
]
