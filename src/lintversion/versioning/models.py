"""Data models for version settings and resolution."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

import semantic_version

from lintversion.constants import SpecKind


class Wildcard(Enum):
    """Resolved version that satisfies every range.

    Produced whenever resolution fails open (nothing detected, invalid value).
    """
    LATEST = "latest"


WILDCARD = Wildcard.LATEST

ResolvedVersion = Union[semantic_version.Version, Wildcard]


@dataclass(frozen=True)
class TrackedPackage:
    """A dependency whose version lint rules can be gated on."""
    key: str
    display_name: str  # used in diagnostics, e.g. "React"
    package_name: str  # name under node_modules, e.g. "flow-bin"
    version_setting: str
    default_setting: str


REACT = TrackedPackage(
    key="react",
    display_name="React",
    package_name="react",
    version_setting="version",
    default_setting="defaultVersion",
)

FLOW = TrackedPackage(
    key="flow",
    display_name="Flow",
    package_name="flow-bin",
    version_setting="flowVersion",
    default_setting="defaultFlowVersion",
)


@dataclass(frozen=True)
class VersionSpec:
    """Classified version setting; raw is only meaningful for EXPLICIT."""
    kind: SpecKind
    raw: Optional[Any] = None

    @property
    def is_detect(self) -> bool:
        return self.kind is SpecKind.DETECT

    @property
    def is_absent(self) -> bool:
        return self.kind is SpecKind.ABSENT
