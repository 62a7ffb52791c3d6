"""Run-based log rotation manager.

A "run" is one logical unit of work: a batch of diagrams generated from one
article, or one test module. The first write to each module's log file
inside a run rotates that file.

Usage:
    from core.logging import start_run, end_run

    start_run("article-3f9c")
    try:
        # ... extract and render diagrams ...
    finally:
        end_run()
"""

from contextvars import ContextVar

# Per-context state: concurrent tasks each track their own rotations
_current_run_id: ContextVar[str | None] = ContextVar("current_run_id", default=None)
_rotated_this_run: ContextVar[set[str] | None] = ContextVar("rotated_this_run", default=None)

_module_log_cache: dict[str, str] = {}

# Longest-prefix-match from logger name to log file name.
# Unmapped modules go to "misc.log"
MODULE_TO_LOG = {
    # Pure pipeline stages
    "core.theming": "theming",
    "core.diagrams": "diagrams",
    # Rendering backends and coordinator
    "core.rendering": "rendering",
    "core.rendering.renderers": "renderers",
    # Infrastructure
    "core.utils": "utils",
    "core.config": "config",
    "core.logging": "logging-internal",
    # Workflows
    "workflows.article_to_diagrams": "article-to-diagrams",
    "workflows.shared": "workflows-shared",
    "testing": "testing",
}

_SORTED_PREFIXES = sorted(MODULE_TO_LOG.keys(), key=len, reverse=True)


def start_run(run_id: str) -> None:
    """Signal start of a new run.

    Safe to call repeatedly; each call resets rotation tracking.

    Args:
        run_id: Unique identifier for this run (e.g., article hash, test name)
    """
    _current_run_id.set(run_id)
    _rotated_this_run.set(set())


def end_run() -> None:
    """Signal end of run (best effort; rotation is driven by start_run)."""
    _current_run_id.set(None)
    _rotated_this_run.set(None)


def get_current_run_id() -> str | None:
    """Get the current run ID, if any."""
    return _current_run_id.get()


def should_rotate(log_name: str) -> bool:
    """Return True exactly once per log file per run.

    Marks the log as rotated before returning.

    Args:
        log_name: The log file name (without .log extension)
    """
    run_id = _current_run_id.get()
    rotated = _rotated_this_run.get()

    if run_id is None or rotated is None:
        return False

    if log_name in rotated:
        return False

    rotated.add(log_name)
    return True


def module_to_log_name(module_name: str) -> str:
    """Resolve a logger name to its log file name (cached).

    Args:
        module_name: The __name__ of the module (e.g., "core.rendering.coordinator")

    Returns:
        Log file name without extension (e.g., "rendering")
    """
    if module_name not in _module_log_cache:
        _module_log_cache[module_name] = _compute_log_name(module_name)
    return _module_log_cache[module_name]


def is_project_module(module_name: str) -> bool:
    """True for loggers that belong to this repository's packages."""
    return module_name.split(".", 1)[0] in {"core", "workflows", "testing"}


def _compute_log_name(module_name: str) -> str:
    for prefix in _SORTED_PREFIXES:
        if module_name == prefix or module_name.startswith(prefix + "."):
            return MODULE_TO_LOG[prefix]
    return "misc"
