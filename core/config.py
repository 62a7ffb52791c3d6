"""Diagram service configuration and environment setup.

This module provides centralized environment handling: `.env` loading,
development mode detection and LangSmith tracing setup for the LLM step.
"""

import os

from dotenv import load_dotenv

load_dotenv()


def is_dev_mode() -> bool:
    """Check if running in development mode.

    Returns:
        True if DIAGRAM_MODE is set to 'dev', False otherwise.
    """
    return os.getenv("DIAGRAM_MODE", "prod").lower() == "dev"


def get_log_dir() -> str:
    """Directory for module log files (DIAGRAM_LOG_DIR, default 'logs')."""
    return os.getenv("DIAGRAM_LOG_DIR", "logs")


def configure_langsmith() -> None:
    """Configure LangSmith tracing based on DIAGRAM_MODE.

    When DIAGRAM_MODE=dev:
        - Enables LangSmith tracing
        - Sets project to 'article-diagrams-dev'

    When DIAGRAM_MODE=prod (or unset):
        - Disables LangSmith tracing

    This function is idempotent and safe to call multiple times.
    """
    if is_dev_mode():
        os.environ.setdefault("LANGSMITH_TRACING", "true")
        os.environ.setdefault("LANGSMITH_PROJECT", "article-diagrams-dev")
    else:
        os.environ["LANGSMITH_TRACING"] = "false"
