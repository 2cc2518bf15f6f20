# SPDX-License-Identifier: MIT

from collections.abc import Callable
from typing import TypeVar

import typer

from purenotes.errors import LoadError, PureNotesError
from purenotes.log import get_logger
from purenotes.view.views.note import load_error_view

logger = get_logger(__name__)

T = TypeVar("T")


def exit_on_error(operation: Callable[[], T]) -> T:
    """Run operation, turning a PureNotesError into a printed message and exit 1."""
    try:
        return operation()
    except LoadError as e:
        load_error_view(e.message, str(e.path) if e.path is not None else None)
        raise typer.Exit(code=1) from e
    except PureNotesError as e:
        logger.info("command_failed", error=e.message)
        load_error_view(e.message)
        raise typer.Exit(code=1) from e
