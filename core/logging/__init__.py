"""Module-based logging with run-based rotation.

Per-module log files, rotated at run boundaries (one article batch or one
test module).

Usage:
    # At run entry points (article workflow, tests):
    from core.logging import configure_logging, start_run, end_run

    configure_logging()
    start_run("article-3f9c")
    try:
        # ... do work ...
    finally:
        end_run()

    # In modules:
    import logging
    logger = logging.getLogger(__name__)
    logger.info("This goes to the appropriate module log file")

Log files are created in logs/ (or DIAGRAM_LOG_DIR):
    - logs/theming.log, logs/diagrams.log, logs/rendering.log, ...
    - logs/run-3p.log (all third-party libraries)
    - logs/*.previous.log (previous run's logs)
"""

from core.logging.handlers import ModuleDispatchHandler, ThirdPartyHandler
from core.logging.run_manager import (
    MODULE_TO_LOG,
    end_run,
    get_current_run_id,
    module_to_log_name,
    start_run,
)
from core.logging.setup import configure_logging

__all__ = [
    "configure_logging",
    "start_run",
    "end_run",
    "get_current_run_id",
    "module_to_log_name",
    "ModuleDispatchHandler",
    "ThirdPartyHandler",
    "MODULE_TO_LOG",
]
