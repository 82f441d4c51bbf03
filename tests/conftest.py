"""Shared fixtures for version resolution tests."""

import json
from pathlib import Path
from typing import List

import pytest

from lintversion.versioning.cache import VersionCache
from lintversion.versioning.resolver import VersionResolver


def install_package(project_dir: Path, package_name: str, version) -> Path:
    """Write node_modules/<package_name>/package.json under project_dir."""
    pkg_dir = project_dir / "node_modules" / Path(*package_name.split("/"))
    pkg_dir.mkdir(parents=True, exist_ok=True)
    manifest = pkg_dir / "package.json"
    manifest.write_text(json.dumps({"name": package_name, "version": version}))
    return manifest


@pytest.fixture
def version_fixtures(tmp_path):
    """Build projects with and without react/flow-bin installed.

    detect-version/                    react 1.2.3, flow-bin 0.92.0
    detect-version/detect-version-child/  react 3.4.5, flow-bin 3.92.0
    detect-version-sibling/            react 2.3.4, flow-bin 2.92.0
    detect-version-missing/            nothing installed
    """
    base = tmp_path / "version"
    layout = {
        "detect-version": ("1.2.3", "0.92.0"),
        "detect-version/detect-version-child": ("3.4.5", "3.92.0"),
        "detect-version-sibling": ("2.3.4", "2.92.0"),
    }
    for rel, (react, flow) in layout.items():
        project = base / rel
        project.mkdir(parents=True, exist_ok=True)
        install_package(project, "react", react)
        install_package(project, "flow-bin", flow)
        (project / "test.js").write_text("")
    missing = base / "detect-version-missing"
    missing.mkdir(parents=True)
    (missing / "test.js").write_text("")
    return base


@pytest.fixture
def cache():
    """Create a fresh cache for each test."""
    return VersionCache()


@pytest.fixture
def warnings_seen() -> List[str]:
    return []


@pytest.fixture
def resolver(cache, warnings_seen):
    """Resolver whose warning channel appends to warnings_seen."""
    return VersionResolver(cache, warn=warnings_seen.append)
