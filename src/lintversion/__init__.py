"""Version gates for lint rules.

Resolves the effective React and Flow versions of the project a file belongs
to and tests them against semver ranges. Module-level functions share one
session cache; hosts that need isolation build their own ``VersionResolver``.
"""

from lintversion.settings import LintContext, SettingsError, load_settings
from lintversion.versioning import (
    FLOW,
    REACT,
    WILDCARD,
    VersionCache,
    VersionResolver,
    satisfies,
)

__version__ = "0.1.0"

default_cache = VersionCache()
_default_resolver = VersionResolver(default_cache)


def test_react_version(context, range_expr: str) -> bool:
    """Return True when the React version for context satisfies range_expr."""
    return _default_resolver.test(context, REACT, range_expr)


def test_flow_version(context, range_expr: str) -> bool:
    """Return True when the Flow version for context satisfies range_expr."""
    return _default_resolver.test(context, FLOW, range_expr)


def reset_warning_flag() -> None:
    default_cache.reset_warning_flag()


def reset_detected_version() -> None:
    default_cache.reset_detected_version()


def reset_default_version() -> None:
    default_cache.reset_default_version()


# pytest must not collect these when they are imported into test modules
test_react_version.__test__ = False  # type: ignore[attr-defined]
test_flow_version.__test__ = False  # type: ignore[attr-defined]

__all__ = [
    "FLOW",
    "REACT",
    "WILDCARD",
    "LintContext",
    "SettingsError",
    "VersionCache",
    "VersionResolver",
    "default_cache",
    "load_settings",
    "reset_default_version",
    "reset_detected_version",
    "reset_warning_flag",
    "satisfies",
    "test_flow_version",
    "test_react_version",
]
