"""
Logging setup shared by the CLI and the HTTP API.

Log records go to stderr (and optionally a rotating file) so stdout stays
free for the JSON documents and timelines the CLI prints. The chatty HTTP
loggers of the LLM SDKs are held at WARNING unless debug logging is on.
Long operations (renders, planning calls) report their stages through
`progress_context`.
"""

import logging
import logging.handlers
import sys
import time
from contextlib import contextmanager
from enum import Enum
from pathlib import Path
from typing import List, Optional


class LogLevel(Enum):
    """Supported logging levels."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def numeric(self) -> int:
        return getattr(logging, self.name)


# SDK loggers that log every HTTP request at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "openai", "anthropic", "google_genai", "urllib3")

CONSOLE_FORMAT = "%(asctime)s %(levelname)s %(message)s"
DEBUG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ProgressIndicator:
    """Stage reporter for one long-running operation, written to stderr."""

    def __init__(self, description: str, stream=None):
        self.description = description
        self.stream = stream or sys.stderr
        self.start_time = time.time()
        self.stages: List[str] = []

    @property
    def elapsed(self) -> float:
        return time.time() - self.start_time

    def update(self, message: str) -> None:
        self.stages.append(message)
        self.stream.write(f"  {self.description}: {message} [{self.elapsed:.1f}s]\n")
        self.stream.flush()

    def finish(self, message: Optional[str] = None) -> None:
        self.stream.write(f"  {message or self.description + ' done'} [{self.elapsed:.1f}s]\n")
        self.stream.flush()


class LoggingConfig:
    """Process-wide logging setup; configure once, `reset()` to reconfigure."""

    def __init__(self):
        self._configured = False
        self._handlers: List[logging.Handler] = []
        self.level = LogLevel.INFO

    def configure_logging(
        self,
        level: str = "info",
        log_file: Optional[str] = None,
        max_log_file_size: int = 10 * 1024 * 1024,
        backup_count: int = 5,
    ) -> None:
        """
        Install console (and optional file) handlers on the root logger.

        Args:
            level: debug, info, warning or error (unknown values mean info)
            log_file: Optional path of a rotating log file
            max_log_file_size: Rotate the log file past this size (bytes)
            backup_count: Number of rotated files to keep
        """
        if self._configured:
            return

        try:
            self.level = LogLevel(level.lower())
        except ValueError:
            self.level = LogLevel.INFO
        debug = self.level is LogLevel.DEBUG

        root_logger = logging.getLogger()
        root_logger.setLevel(self.level.numeric)
        root_logger.handlers.clear()

        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter(DEBUG_FORMAT if debug else CONSOLE_FORMAT, datefmt="%H:%M:%S"))
        self._install(console)

        if log_file:
            self._install_file_handler(log_file, max_log_file_size, backup_count)

        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.DEBUG if debug else logging.WARNING)

        self._configured = True
        logging.getLogger(__name__).debug(f"Logging configured: level={self.level.value}, file={log_file}")

    def reset(self) -> None:
        """Remove installed handlers so logging can be configured again."""
        root_logger = logging.getLogger()
        for handler in self._handlers:
            root_logger.removeHandler(handler)
            handler.close()
        self._handlers = []
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.NOTSET)
        self._configured = False

    def _install(self, handler: logging.Handler) -> None:
        handler.setLevel(self.level.numeric)
        logging.getLogger().addHandler(handler)
        self._handlers.append(handler)

    def _install_file_handler(self, log_file: str, max_size: int, backup_count: int) -> None:
        try:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=max_size,
                backupCount=backup_count,
                encoding="utf-8",
            )
        except OSError as e:
            # console logging keeps working without the file
            logging.getLogger(__name__).warning(f"Failed to set up log file {log_file}: {e}")
            return
        handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        self._install(handler)

    @contextmanager
    def progress_context(self, description: str):
        """
        Report the stages of a long operation.

        Usage:
            with logging_config.progress_context("Rendering btc-crash") as progress:
                progress.update("renderer finished")
        """
        progress = ProgressIndicator(description)
        try:
            yield progress
        except Exception as e:
            progress.finish(f"{description} failed: {e}")
            raise
        else:
            progress.finish()

    def log_provider_selection(self, provider: str, reason: str, available: List[str]) -> None:
        logger = logging.getLogger(__name__)
        logger.info(f"Selected LLM provider: {provider} ({reason})")
        logger.debug(f"Providers tried in order: {', '.join(available)}")

    def log_operation_timing(self, operation: str, duration: float) -> None:
        logger = logging.getLogger(__name__)
        if duration < 1.0:
            logger.debug(f"{operation} completed in {duration * 1000:.0f}ms")
        else:
            logger.info(f"{operation} completed in {duration:.1f}s")


logging_config = LoggingConfig()


def configure_logging(level: str = "info", log_file: Optional[str] = None) -> None:
    logging_config.configure_logging(level=level, log_file=log_file)


def get_progress_context(description: str):
    return logging_config.progress_context(description)
