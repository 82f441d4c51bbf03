"""Installed-package discovery by walking a file's directory ancestry.

Mirrors Node's module lookup: for each ancestor directory, nearest first,
look for ``node_modules/<name>/package.json`` and report its declared version.
No caching happens here; callers memoize per start directory.
"""
from __future__ import annotations

import json
import logging
import os
from typing import Iterator, Optional

from lintversion.common.logging_utils import Timer, extra_context, is_debug_enabled
from lintversion.constants import Constants

logger = logging.getLogger(__name__)


def resolve_basedir(file_path: str) -> str:
    """Return the directory a lookup for file_path should start from.

    Linters may hand out virtual filenames for code embedded in another file
    (``/repo/a.md/0_snippet.js``, possibly nested several levels deep). Trailing
    components are dropped until the path exists: an existing file yields its
    directory, an existing directory is used as-is. When nothing on the path
    exists the current working directory is used.
    """
    path = os.path.abspath(file_path) if file_path else os.getcwd()
    while True:
        if os.path.isfile(path):
            return os.path.dirname(path)
        if os.path.isdir(path):
            return path
        parent = os.path.dirname(path)
        if parent == path:
            return os.getcwd()
        path = parent


def iter_ancestors(start_dir: str) -> Iterator[str]:
    """Yield start_dir and each of its ancestors up to the filesystem root."""
    current = os.path.abspath(start_dir)
    while True:
        yield current
        parent = os.path.dirname(current)
        if parent == current:
            return
        current = parent


def manifest_path(directory: str, package_name: str) -> str:
    """Path of package_name's package.json as installed under directory."""
    return os.path.join(
        directory,
        Constants.NODE_MODULES_DIR,
        *package_name.split("/"),
        Constants.PACKAGE_JSON_FILE,
    )


def _read_manifest_version(path: str) -> Optional[str]:
    """Read the version field of an installed package.json.

    Unreadable or malformed manifests are treated as absent.
    """
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
    except FileNotFoundError:
        return None
    except (OSError, ValueError) as e:
        logger.warning("Failed to read %s: %s", path, e)
        return None
    if not isinstance(data, dict) or data.get("version") is None:
        logger.debug("No version declared in %s", path)
        return None
    return str(data["version"])


def find_installed_version(start_dir: str, package_name: str) -> Optional[str]:
    """Walk upward from start_dir and return the nearest installed version."""
    for directory in iter_ancestors(start_dir):
        # node_modules/node_modules is never a lookup location
        if os.path.basename(directory) == Constants.NODE_MODULES_DIR:
            continue
        path = manifest_path(directory, package_name)
        if not os.path.isfile(path):
            continue
        version = _read_manifest_version(path)
        if version is not None:
            return version
    return None


def locate(file_path: str, package_name: str) -> Optional[str]:
    """Return the version of package_name installed for file_path, or None.

    Args:
        file_path: Absolute path of the file under lint, possibly virtual.
        package_name: npm package name, scoped names included.

    Returns:
        The declared version string of the nearest installation, or None.
    """
    with Timer() as t:
        basedir = resolve_basedir(file_path)
        version = find_installed_version(basedir, package_name)
    if is_debug_enabled(logger):
        logger.debug(
            "Package lookup finished",
            extra=extra_context(
                event="package_lookup",
                component="locator",
                target=package_name,
                basedir=basedir,
                outcome="found" if version is not None else "not_found",
                version=version,
                duration_ms=t.duration_ms(),
            ),
        )
    return version
