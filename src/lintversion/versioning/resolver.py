"""Resolution of configured, detected or defaulted dependency versions.

A version setting is either the literal "detect", an explicit value, or
missing. Every path ends in a concrete version or the wildcard; malformed or
undetectable input never raises. Diagnostics go to the warning channel: value
problems are reported on every call, while "not installed" and "not
specified" are reported at most once per package until the cache is reset.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional

from lintversion.common.logging_utils import extra_context, is_debug_enabled
from lintversion.constants import Constants, Messages

from .cache import NOT_FOUND, VersionCache
from .comparator import satisfies
from .locator import locate, resolve_basedir
from .models import FLOW, REACT, WILDCARD, ResolvedVersion, TrackedPackage
from .parser import (
    classify,
    coerce_version,
    read_default_setting,
    read_version_spec,
    stringify,
    type_name,
)

logger = logging.getLogger(__name__)

WarningChannel = Callable[[str], None]
Locator = Callable[[str, str], Optional[str]]


def log_warning(message: str) -> None:
    """Default warning channel: one WARNING record per diagnostic."""
    logging.getLogger(Constants.WARNING_LOGGER).warning(message)


def _context_settings(context: Any) -> Optional[Mapping[str, Any]]:
    settings = getattr(context, "settings", None)
    return settings if isinstance(settings, Mapping) else None


def _context_filename(context: Any) -> str:
    get_filename = getattr(context, "get_filename", None)
    if callable(get_filename):
        return get_filename() or ""
    return getattr(context, "filename", "") or ""


class VersionResolver:
    """Resolve tracked package versions for a lint context.

    Args:
        cache: Session state; a fresh VersionCache when omitted.
        locator: Filesystem lookup, ``(file_path, package_name) -> version | None``.
        warn: Warning channel receiving one line per diagnostic.
    """

    def __init__(
        self,
        cache: Optional[VersionCache] = None,
        locator: Locator = locate,
        warn: Optional[WarningChannel] = None,
    ):
        self.cache = cache if cache is not None else VersionCache()
        self._locate = locator
        self._warn = warn or log_warning

    def resolve(self, context: Any, package: TrackedPackage) -> ResolvedVersion:
        """Return the effective version of package for context, or WILDCARD."""
        settings = _context_settings(context)
        spec = read_version_spec(settings, package)
        with self.cache.lock:
            if spec.is_detect:
                return self._resolve_detected(context, settings, package)
            if spec.is_absent:
                return self._resolve_unspecified(settings, package)
            return self._resolve_value(package, spec.raw)

    def test(self, context: Any, package: TrackedPackage, range_expr: str) -> bool:
        """Return True when package's effective version satisfies range_expr."""
        return satisfies(self.resolve(context, package), range_expr)

    def test_react_version(self, context: Any, range_expr: str) -> bool:
        return self.test(context, REACT, range_expr)

    def test_flow_version(self, context: Any, range_expr: str) -> bool:
        return self.test(context, FLOW, range_expr)

    def _emit(self, template: str, package: TrackedPackage, **fields: Any) -> None:
        self._warn(template.format(
            display=package.display_name,
            source=Constants.SETTINGS_SOURCE,
            package=package.package_name,
            url=Constants.CONFIGURATION_URL,
            **fields,
        ))

    def _resolve_value(self, package: TrackedPackage, raw: Any) -> ResolvedVersion:
        """Validate an explicit (or detected) value; reported on every call."""
        if not isinstance(raw, str):
            self._emit(Messages.NON_STRING_VERSION, package, type_name=type_name(raw))
            raw = stringify(raw)
        version = coerce_version(raw)
        if version is None:
            self._emit(Messages.INVALID_VERSION, package, raw=raw)
            return WILDCARD
        return version

    def _resolve_detected(
        self, context: Any, settings: Optional[Mapping[str, Any]], package: TrackedPackage
    ) -> ResolvedVersion:
        filename = _context_filename(context)
        basedir = resolve_basedir(filename)
        entry = self.cache.get_detected(package.package_name, basedir)
        if entry is None:
            found = self._locate(filename, package.package_name)
            entry = found if found is not None else NOT_FOUND
            self.cache.set_detected(package.package_name, basedir, entry)
        elif is_debug_enabled(logger):
            logger.debug(
                "Detected version cache hit",
                extra=extra_context(
                    event="cache_hit",
                    component="resolver",
                    target=package.package_name,
                    basedir=basedir,
                ),
            )

        if entry is not NOT_FOUND:
            return self._resolve_value(package, entry)

        warned = self.cache.has_warned(package.package_name)
        fallback = self._default_version(settings, package, report=not warned)
        if not warned:
            if fallback is WILDCARD:
                assumption = Messages.ASSUME_LATEST.format(display=package.display_name)
            else:
                assumption = Messages.ASSUME_DEFAULT.format(
                    display=package.display_name, default=str(fallback)
                )
            self._emit(Messages.NOT_INSTALLED, package, assumption=assumption)
            self.cache.mark_warned(package.package_name)
        return fallback

    def _resolve_unspecified(
        self, settings: Optional[Mapping[str, Any]], package: TrackedPackage
    ) -> ResolvedVersion:
        warned = self.cache.has_warned(package.package_name)
        fallback = self._default_version(settings, package, report=not warned)
        if not warned:
            self._emit(Messages.NOT_SPECIFIED, package)
            self.cache.mark_warned(package.package_name)
        return fallback

    def _default_version(
        self, settings: Optional[Mapping[str, Any]], package: TrackedPackage, report: bool
    ) -> ResolvedVersion:
        """Validate the configured default once and remember the outcome.

        An absent or invalid default means WILDCARD. Problems with the value are
        only reported while report is set, so a package is told about them once.
        """
        cached = self.cache.get_default(package.package_name)
        if cached is not None:
            return cached

        raw = read_default_setting(settings, package)
        resolved: ResolvedVersion = WILDCARD
        if not classify(raw).is_absent:
            if not isinstance(raw, str):
                if report:
                    self._emit(Messages.NON_STRING_DEFAULT, package, type_name=type_name(raw))
                raw = stringify(raw)
            version = coerce_version(raw)
            if version is None:
                if report:
                    self._emit(Messages.INVALID_DEFAULT, package, raw=raw)
            else:
                resolved = version

        self.cache.set_default(package.package_name, resolved)
        return resolved
