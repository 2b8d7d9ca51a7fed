"""Error presentation utilities.

Centralized release error formatting and exit code mapping.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from relman.core.config import ConfigError
from relman.core.errors import ErrorCode
from relman.services.release.errors import ReleaseError

if TYPE_CHECKING:
    from relman.output.console import ConsoleProtocol

__all__ = ["print_config_error", "print_release_error", "release_error_exit_code"]


def print_release_error(error: ReleaseError, console: ConsoleProtocol) -> None:
    """Print a release error with its hint and detail lines."""
    console.error(error.message)
    match error:
        case ReleaseError(kind="dirty_working_tree", details=details) if details:
            console.detail("Uncommitted changes:")
            for line in details:
                console.detail(f"  {line}")
        case ReleaseError(details=details):
            for line in details:
                console.detail(f"  {line}")
    if error.hint:
        console.detail(f"hint: {error.hint}")


def print_config_error(error: ConfigError, console: ConsoleProtocol) -> None:
    console.error(error.message)


def release_error_exit_code(error: ReleaseError) -> int:
    """Exit code for a release error.

    Only a push failure leaves the exit status at 0; the tag exists locally.
    """
    if error.kind == "push_failed":
        return int(ErrorCode.OK)
    return int(ErrorCode.RELEASE_ERROR)
