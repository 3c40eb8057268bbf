"""UI feature - Rich console output and logging."""

from ffpress.ui.console import (
    configure_logging,
    console,
    print_error,
    print_info,
    print_success,
)

__all__ = [
    "configure_logging",
    "console",
    "print_error",
    "print_info",
    "print_success",
]
