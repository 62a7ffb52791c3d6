"""Logging handlers for module-based dispatch.

ModuleDispatchHandler routes records from this repository's loggers to
per-module files; ThirdPartyHandler collects everything else (httpx,
langchain, anthropic) into a single run-3p.log.

Both handlers write synchronously.
"""

import logging
from pathlib import Path
from typing import TextIO


def _rotate_log_file(log_dir: Path, log_name: str, stream: TextIO | None) -> TextIO:
    """Rename current.log -> previous.log and return a fresh handle.

    Args:
        log_dir: Directory containing log files
        log_name: Base name of the log file (without .log extension)
        stream: Existing stream to close, or None
    """
    current = log_dir / f"{log_name}.log"
    previous = log_dir / f"{log_name}.previous.log"

    if stream:
        stream.close()

    if previous.exists():
        previous.unlink()
    if current.exists():
        current.rename(previous)

    return current.open("a", encoding="utf-8")


class ModuleDispatchHandler(logging.Handler):
    """Single handler that routes records to per-module log files.

    Keeps one open handle per log name instead of one FileHandler per
    module, opens files lazily and keeps at most two files per module
    (current + previous).

    Usage:
        handler = ModuleDispatchHandler(Path("logs"))
        handler.setFormatter(logging.Formatter("%(asctime)s - %(message)s"))
        logging.getLogger().addHandler(handler)
    """

    def __init__(self, log_dir: Path):
        super().__init__()
        self.log_dir = log_dir
        self._file_cache: dict[str, TextIO] = {}

    def emit(self, record: logging.LogRecord) -> None:
        try:
            # Deferred to avoid an import cycle with core.logging
            from core.logging.run_manager import (
                is_project_module,
                module_to_log_name,
                should_rotate,
            )

            if not is_project_module(record.name):
                return

            log_name = module_to_log_name(record.name)
            if should_rotate(log_name):
                self._rotate_file(log_name)

            file = self._get_or_open_file(log_name)
            file.write(self.format(record) + "\n")
            file.flush()

        except Exception:
            self.handleError(record)

    def _rotate_file(self, log_name: str) -> None:
        existing_stream = self._file_cache.pop(log_name, None)
        self._file_cache[log_name] = _rotate_log_file(self.log_dir, log_name, existing_stream)

    def _get_or_open_file(self, log_name: str) -> TextIO:
        if log_name not in self._file_cache:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            path = self.log_dir / f"{log_name}.log"
            self._file_cache[log_name] = open(path, "a", encoding="utf-8")
        return self._file_cache[log_name]

    def close(self) -> None:
        """Close all cached file handles."""
        self.acquire()
        try:
            for file in self._file_cache.values():
                try:
                    file.close()
                except OSError:
                    pass  # Best effort
            self._file_cache.clear()
        finally:
            self.release()
        super().close()


class ThirdPartyHandler(logging.FileHandler):
    """Handler for third-party library logs (single run-3p.log).

    Supports run-based rotation like ModuleDispatchHandler.
    """

    LOG_NAME = "run-3p"

    def __init__(self, log_dir: Path, **kwargs):
        self.log_dir = log_dir
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"{self.LOG_NAME}.log"
        super().__init__(log_file, mode="a", encoding="utf-8", delay=True, **kwargs)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            from core.logging.run_manager import is_project_module, should_rotate

            if is_project_module(record.name):
                return

            if should_rotate(self.LOG_NAME):
                self._rotate_file()

            super().emit(record)

        except Exception:
            self.handleError(record)

    def _rotate_file(self) -> None:
        self.stream = _rotate_log_file(self.log_dir, self.LOG_NAME, self.stream)
