"""Reportable per-path errors and their exit-status severities."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

logger = logging.getLogger(__name__)


class Severity(IntEnum):
    """Exit-status contribution of one error."""

    OK = 0
    MISSING = 1
    SERIOUS = 2


@dataclass(frozen=True)
class PathError:
    """A filesystem failure tied to one path, already formatted for display."""

    path: str
    severity: Severity
    message: str


def path_error_from_exception(path: str, exc: OSError, action: str = "access") -> PathError:
    """Classify ``exc`` raised while working on ``path``.

    Missing paths are minor problems; anything else is serious trouble and is
    logged with its traceback for diagnosis.
    """
    if isinstance(exc, FileNotFoundError):
        return PathError(
            path=path,
            severity=Severity.MISSING,
            message=f"ls: cannot access {path}: No such file or directory",
        )
    logger.debug("unexpected error on %s", path, exc_info=exc)
    reason = exc.strerror or str(exc)
    return PathError(
        path=path,
        severity=Severity.SERIOUS,
        message=f"ls: cannot {action} '{path}': {reason}",
    )


def max_severity(errors: Iterable[PathError]) -> Severity:
    """Return the worst severity in ``errors`` or ``Severity.OK``."""
    return max((error.severity for error in errors), default=Severity.OK)


__all__ = [
    "Severity",
    "PathError",
    "path_error_from_exception",
    "max_severity",
]
