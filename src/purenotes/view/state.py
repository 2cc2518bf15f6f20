"""Global view state using context variables for thread-safe state management."""

# SPDX-License-Identifier: MIT

from contextvars import ContextVar

# Context variable for controlling header visibility
# Default is True (show headers)
_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)

# Timezone used for displayed dates and monthly groups
_timezone_var: ContextVar[str] = ContextVar("timezone", default="local")


def set_show_header(value: bool) -> None:
    """Set whether headers should be displayed.

    Args:
        value: True to show headers, False to hide them
    """
    _show_header_var.set(value)


def get_show_header() -> bool:
    return _show_header_var.get()


def set_timezone(value: str) -> None:
    _timezone_var.set(value)


def get_timezone() -> str:
    return _timezone_var.get()
