"""Process-wide memo of detected versions, warned packages and defaults."""

from __future__ import annotations

import threading
from enum import Enum
from typing import Any, Dict, Optional, Set, Tuple, Union

from .models import ResolvedVersion


class Detection(Enum):
    """Marker cached when a lookup found nothing."""
    NOT_FOUND = "not_found"


NOT_FOUND = Detection.NOT_FOUND

DetectedEntry = Union[str, Detection]
DetectionKey = Tuple[str, str]


class VersionCache:
    """Mutable state shared by every resolution in a lint session.

    Holds detected versions keyed by (package name, lookup directory), the set
    of packages already warned about, and each package's validated default
    version. Nothing expires; entries are dropped only by the reset methods.
    One instance per host session; the lock makes check-then-write sequences
    atomic when a host shares the instance between threads.
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self._detected: Dict[DetectionKey, DetectedEntry] = {}
        self._warned: Set[str] = set()
        self._defaults: Dict[str, ResolvedVersion] = {}

    # Detected versions

    def get_detected(self, package_name: str, basedir: str) -> Optional[DetectedEntry]:
        """Return the cached detection for (package_name, basedir), or None if never looked up."""
        with self.lock:
            return self._detected.get((package_name, basedir))

    def set_detected(self, package_name: str, basedir: str, entry: DetectedEntry) -> None:
        """Record a detection result (a version string or NOT_FOUND)."""
        with self.lock:
            self._detected[(package_name, basedir)] = entry

    # Warned packages

    def has_warned(self, package_name: str) -> bool:
        with self.lock:
            return package_name in self._warned

    def mark_warned(self, package_name: str) -> None:
        with self.lock:
            self._warned.add(package_name)

    # Validated defaults

    def get_default(self, package_name: str) -> Optional[ResolvedVersion]:
        with self.lock:
            return self._defaults.get(package_name)

    def set_default(self, package_name: str, resolved: ResolvedVersion) -> None:
        with self.lock:
            self._defaults[package_name] = resolved

    # Resets

    def reset_warning_flag(self) -> None:
        """Forget which packages have been warned about."""
        with self.lock:
            self._warned.clear()

    def reset_detected_version(self) -> None:
        """Drop every cached detection so the filesystem is queried again."""
        with self.lock:
            self._detected.clear()

    def reset_default_version(self) -> None:
        """Drop validated defaults so settings are re-read."""
        with self.lock:
            self._defaults.clear()

    def clear(self) -> None:
        """Reset all cached state."""
        with self.lock:
            self.reset_warning_flag()
            self.reset_detected_version()
            self.reset_default_version()

    def stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        with self.lock:
            return {
                "detected_entries": len(self._detected),
                "not_found_entries": sum(1 for v in self._detected.values() if v is NOT_FOUND),
                "warned_packages": sorted(self._warned),
                "default_entries": len(self._defaults),
            }
