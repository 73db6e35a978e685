#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docx/utils/packages.py
"""Helpers for checking installed third-party packages."""

from __future__ import annotations

import importlib
from importlib import metadata
from typing import Optional, Sequence, Tuple

from packaging.specifiers import InvalidSpecifier, SpecifierSet
from packaging.version import InvalidVersion, Version

PackageSpec = Tuple[str, str, str]


def get_package_version(distribution_name: str) -> Optional[str]:
    """Return the installed version of a distribution, or None if it is absent.

    Parameters
    ----------
    distribution_name : str
        Name the package is installed under (``python-docx``, not ``docx``)

    """
    try:
        return metadata.version(distribution_name)
    except metadata.PackageNotFoundError:
        return None


def check_version_requirement(distribution_name: str, version_spec: str) -> Tuple[bool, Optional[str]]:
    """Check whether the installed distribution satisfies ``version_spec``.

    Parameters
    ----------
    distribution_name : str
        Name the package is installed under
    version_spec : str
        PEP 440 specifier, e.g. ``">=1.1.0"``

    Returns
    -------
    tuple of (bool, str or None)
        Whether the requirement is met, and the installed version

    """
    installed = get_package_version(distribution_name)
    if installed is None:
        return False, None

    try:
        return Version(installed) in SpecifierSet(version_spec), installed
    except (InvalidSpecifier, InvalidVersion):
        # Unparseable metadata: trust the import that already succeeded
        return True, installed


def find_missing_dependencies(
    packages: Sequence[PackageSpec],
) -> Tuple[list[tuple[str, str]], list[tuple[str, str, str]], Optional[ImportError]]:
    """Import each package and compare its version against the requirement.

    Parameters
    ----------
    packages : sequence of (install_name, import_name, version_spec)
        Packages to check

    Returns
    -------
    tuple
        ``(missing, version_mismatches, first_import_error)``

    """
    missing: list[tuple[str, str]] = []
    mismatches: list[tuple[str, str, str]] = []
    first_error: Optional[ImportError] = None

    for install_name, import_name, version_spec in packages:
        try:
            importlib.import_module(import_name)
        except ImportError as e:
            missing.append((install_name, version_spec))
            first_error = first_error or e
            continue

        if version_spec:
            ok, installed = check_version_requirement(install_name, version_spec)
            # Importable but without distribution metadata counts as satisfied
            if not ok and installed is not None:
                mismatches.append((install_name, version_spec, installed))

    return missing, mismatches, first_error
