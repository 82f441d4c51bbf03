"""Version settings resolution and range checks."""

from .cache import NOT_FOUND, VersionCache
from .comparator import InvalidRangeError, InvalidVersionError, satisfies
from .locator import locate, resolve_basedir
from .models import FLOW, REACT, WILDCARD, TrackedPackage, VersionSpec, Wildcard
from .resolver import VersionResolver

__all__ = [
    "FLOW",
    "NOT_FOUND",
    "REACT",
    "WILDCARD",
    "InvalidRangeError",
    "InvalidVersionError",
    "TrackedPackage",
    "VersionCache",
    "VersionResolver",
    "VersionSpec",
    "Wildcard",
    "locate",
    "resolve_basedir",
    "satisfies",
]
