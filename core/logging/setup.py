"""Root logger wiring for module-based log files."""

import logging
from pathlib import Path

from core.config import get_log_dir

from .handlers import ModuleDispatchHandler, ThirdPartyHandler

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def configure_logging(level: int = logging.INFO, log_dir: Path | None = None) -> None:
    """Install the module and third-party handlers on the root logger.

    Idempotent: handlers are only added on the first call.

    Args:
        level: Root logger level
        log_dir: Override for the log directory (default: DIAGRAM_LOG_DIR)
    """
    global _configured
    if _configured:
        return

    directory = log_dir or Path(get_log_dir())
    formatter = logging.Formatter(LOG_FORMAT)

    module_handler = ModuleDispatchHandler(directory)
    module_handler.setFormatter(formatter)
    third_party_handler = ThirdPartyHandler(directory)
    third_party_handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(module_handler)
    root.addHandler(third_party_handler)
    _configured = True
