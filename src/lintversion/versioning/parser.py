"""Parsing utilities for version settings."""

import re
from typing import Any, Mapping, Optional

import semantic_version

from lintversion.constants import Constants, SpecKind
from .models import TrackedPackage, VersionSpec

_FIRST_DIGIT = re.compile(r'\d')
_VERSION_CHARS = re.compile(r'^[0-9A-Za-z.+-]+$')


def classify(raw: Any) -> VersionSpec:
    """Classify a raw version setting as detect, explicit or absent.

    Falsy values (missing, None, false, empty string, zero) count as absent.
    """
    if raw is None or raw is False or raw == '':
        return VersionSpec(kind=SpecKind.ABSENT)
    if isinstance(raw, (int, float)) and not isinstance(raw, bool) and raw == 0:
        return VersionSpec(kind=SpecKind.ABSENT)
    if isinstance(raw, str) and raw == Constants.DETECT:
        return VersionSpec(kind=SpecKind.DETECT)
    return VersionSpec(kind=SpecKind.EXPLICIT, raw=raw)


def settings_section(settings: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    """Return the shared plugin section of a settings mapping, or an empty one."""
    if not isinstance(settings, Mapping):
        return {}
    section = settings.get(Constants.SETTINGS_SECTION)
    return section if isinstance(section, Mapping) else {}


def read_version_spec(settings: Optional[Mapping[str, Any]], package: TrackedPackage) -> VersionSpec:
    """Classify the version setting configured for package."""
    return classify(settings_section(settings).get(package.version_setting))


def read_default_setting(settings: Optional[Mapping[str, Any]], package: TrackedPackage) -> Any:
    """Return the raw default-version setting for package, or None."""
    return settings_section(settings).get(package.default_setting)


def type_name(value: Any) -> str:
    """Name a value's type using the vocabulary of JS-style settings files."""
    if value is None:
        return "undefined"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return "object"


def stringify(value: Any) -> str:
    """Stringify a settings value the way it was written in the settings file."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "undefined"
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else stringify(item) for item in value)
    if isinstance(value, Mapping):
        return "[object Object]"
    return str(value)


def coerce_version(raw: str) -> Optional[semantic_version.Version]:
    """Loosely coerce raw into a full semantic version.

    Only the first whitespace-delimited token is considered and anything before
    its first digit is skipped, so "15", "15.0", "v16.8" and "^16.0.0" coerce
    while "latest" does not. Tokens carrying characters that never occur in a
    version (quotes, brackets) are rejected.

    Returns:
        The coerced Version, or None when raw holds no version.
    """
    tokens = str(raw).strip().split()
    if not tokens:
        return None
    token = tokens[0]
    match = _FIRST_DIGIT.search(token)
    if not match:
        return None
    candidate = token[match.start():]
    if not _VERSION_CHARS.match(candidate):
        return None
    try:
        return semantic_version.Version.coerce(candidate)
    except ValueError:
        return None
