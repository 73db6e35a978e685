#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/utils/decorators.py
"""Decorators and context managers shared by the parser and the sink."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, Sequence

from md2docx.exceptions import DependencyError
from md2docx.utils.packages import PackageSpec, find_missing_dependencies


def requires_dependencies(component_name: str, packages: Sequence[PackageSpec]) -> Callable:
    """Check that third-party packages are importable before a method runs.

    Parameters
    ----------
    component_name : str
        Name shown in the error message (e.g. ``"docx sink"``)
    packages : sequence of (install_name, import_name, version_spec)
        Required packages. ``version_spec`` may be empty to accept any version.

    Returns
    -------
    Callable
        Decorator that raises ``DependencyError`` when a package is missing
        or too old, and otherwise calls the wrapped method unchanged

    Examples
    --------
        >>> @requires_dependencies("docx sink", [("python-docx", "docx", ">=1.1.0")])
        ... def write(self, document, output):
        ...     from docx import Document

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing, mismatches, original_error = find_missing_dependencies(packages)
            if missing or mismatches:
                raise DependencyError(
                    component_name=component_name,
                    missing_packages=missing,
                    version_mismatches=mismatches,
                    original_import_error=original_error,
                ) from original_error
            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Log how long the enclosed block took, at DEBUG level only.

    Parameters
    ----------
    logger : logging.Logger
        Logger to report to
    operation : str
        Label for the timed block, e.g. ``"Rendering"``

    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return

    start = time.perf_counter()
    yield
    logger.debug("%s completed in %.2fs", operation, time.perf_counter() - start)
