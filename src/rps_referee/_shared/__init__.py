# Area: Shared
"""
Shared utilities used by the runner and the CLI.

This package contains:
- Logging configuration
- Text rendering for prompts, the outcome table and results
"""

from .logging_config import (
    setup_logging,
    log_fatal_error,
    enable_interactive_mode,
    disable_interactive_mode,
)
from .display import (
    render_menu,
    render_relation_table,
    render_result,
)

__all__ = [
    "setup_logging",
    "log_fatal_error",
    "enable_interactive_mode",
    "disable_interactive_mode",
    "render_menu",
    "render_relation_table",
    "render_result",
]
