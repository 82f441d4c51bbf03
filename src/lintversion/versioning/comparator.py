"""Range checks for resolved versions using semantic versioning.

Ranges use npm syntax (comparators, ``||``, hyphen, x-, tilde and caret
ranges). Each range is expanded into primitive comparators and evaluated with
plain semver precedence, so a prerelease such as ``16.9.0-rc.0`` sits between
``16.8.0`` and ``16.9.0`` instead of being excluded from plain ranges.
"""

import operator
import re
from typing import Callable, Dict, List, Optional, Tuple, Union

import semantic_version

from .models import ResolvedVersion, Wildcard
from .parser import coerce_version


class InvalidRangeError(ValueError):
    """Raised when a range expression cannot be parsed."""


class InvalidVersionError(ValueError):
    """Raised when a concrete version cannot be coerced to semver."""


Comparator = Tuple[str, semantic_version.Version]

_OPERATORS: Dict[str, Callable[[semantic_version.Version, semantic_version.Version], bool]] = {
    '=': operator.eq,
    '>': operator.gt,
    '>=': operator.ge,
    '<': operator.lt,
    '<=': operator.le,
}

# ">= 1.2.3" is accepted by npm; comparators want the operator glued to its operand.
_OPERATOR_GAP = re.compile(r'(<=|>=|<|>|=|\^|~)\s+(?=[0-9vxX*])')

_COMPARATOR = re.compile(r"""
    ^(?P<op><=|>=|<|>|=|\^|~)?
    v?
    (?P<major>\d+|[xX*])
    (?:\.(?P<minor>\d+|[xX*]))?
    (?:\.(?P<patch>\d+|[xX*]))?
    (?:-(?P<prerelease>[0-9A-Za-z.-]+))?
    (?:\+[0-9A-Za-z.-]+)?$
    """, re.VERBOSE)

_NEVER: List[Comparator] = [('<', semantic_version.Version('0.0.0-0'))]

Partial = Tuple[Optional[int], Optional[int], Optional[int], Optional[str]]


def normalize_range(range_expr: str) -> str:
    """Normalize npm range whitespace so every comparator is a single token."""
    s = str(range_expr).strip()
    s = _OPERATOR_GAP.sub(r'\1', s)
    return re.sub(r'\s+', ' ', s)


def _number(part: Optional[str]) -> Optional[int]:
    if part is None or part in ('x', 'X', '*'):
        return None
    return int(part)


def _split(token: str, range_expr: str) -> Tuple[str, Partial]:
    """Split a comparator token into its operator and (major, minor, patch, prerelease)."""
    m = _COMPARATOR.match(token)
    if not m:
        raise InvalidRangeError(f"Invalid semver range {range_expr!r}: bad comparator {token!r}")
    major, minor, patch = (_number(m.group(k)) for k in ('major', 'minor', 'patch'))
    # anything after a wildcard component is wildcarded too
    if major is None:
        minor = patch = None
    elif minor is None:
        patch = None
    prerelease = m.group('prerelease') if patch is not None else None
    return m.group('op') or '=', (major, minor, patch, prerelease)


def _floor(partial: Partial) -> semantic_version.Version:
    major, minor, patch, prerelease = partial
    text = f"{major or 0}.{minor or 0}.{patch or 0}"
    return semantic_version.Version(f"{text}-{prerelease}" if prerelease else text)


def _next_release(major: int, minor: Optional[int]) -> semantic_version.Version:
    """First release past X (minor None) or X.Y."""
    if minor is None:
        return semantic_version.Version(f"{major + 1}.0.0")
    return semantic_version.Version(f"{major}.{minor + 1}.0")


def _ceiling(major: int, minor: Optional[int]) -> semantic_version.Version:
    """Exclusive upper bound below every prerelease of the next release."""
    nxt = _next_release(major, minor)
    return semantic_version.Version(f"{nxt}-0")


def _expand(token: str, range_expr: str) -> List[Comparator]:
    """Expand one npm comparator token into primitive comparators."""
    op, partial = _split(token, range_expr)
    major, minor, patch, _ = partial

    if major is None:
        return _NEVER if op in ('<', '>') else []

    low = _floor(partial)
    if op == '=':
        if patch is not None:
            return [('=', low)]
        return [('>=', low), ('<', _ceiling(major, minor))]
    if op in ('>=', '<'):
        return [(op, low)]
    if op == '>':
        return [('>', low)] if patch is not None else [('>=', _next_release(major, minor))]
    if op == '<=':
        return [('<=', low)] if patch is not None else [('<', _ceiling(major, minor))]
    if op == '~':
        return [('>=', low), ('<', _ceiling(major, minor))]

    # caret: allow changes that keep the left-most non-zero component
    if major > 0 or minor is None:
        upper = _ceiling(major, None)
    elif minor > 0 or patch is None:
        upper = _ceiling(0, minor)
    else:
        upper = semantic_version.Version(f"0.0.{patch + 1}-0")
    return [('>=', low), ('<', upper)]


def _expand_hyphen(group: str, range_expr: str) -> List[Comparator]:
    """Expand "A - B" into an inclusive pair of comparators."""
    left, right = (part.strip() for part in group.split(' - ', 1))
    left_op, low = _split(left, range_expr)
    right_op, high = _split(right, range_expr)
    if left_op != '=' or right_op != '=':
        raise InvalidRangeError(f"Invalid semver range {range_expr!r}: operator in hyphen range")

    comparators: List[Comparator] = []
    if low[0] is not None:
        comparators.append(('>=', _floor(low)))
    major, minor, patch, _ = high
    if major is not None:
        if patch is not None:
            comparators.append(('<=', _floor(high)))
        else:
            comparators.append(('<', _ceiling(major, minor)))
    return comparators


def parse_range(range_expr: str) -> List[List[Comparator]]:
    """Parse a range into alternatives, each a list of comparators that must all hold.

    A bare version means exact equality; an empty alternative matches everything.

    Raises:
        InvalidRangeError: if the expression is malformed.
    """
    alternatives: List[List[Comparator]] = []
    for group in normalize_range(range_expr).split('||'):
        group = group.strip()
        if ' - ' in group:
            alternatives.append(_expand_hyphen(group, range_expr))
            continue
        comparators: List[Comparator] = []
        for token in group.split():
            comparators.extend(_expand(token, range_expr))
        alternatives.append(comparators)
    return alternatives


def satisfies(version: Union[ResolvedVersion, str], range_expr: str) -> bool:
    """Return True when version satisfies range_expr.

    The wildcard satisfies every range, including ones that would not parse.
    Concrete version strings are loosely coerced first ("15" -> "15.0.0").
    Build metadata is ignored; prereleases order below their release.

    Raises:
        InvalidRangeError: if range_expr is malformed.
        InvalidVersionError: if version is a string holding no version.
    """
    if isinstance(version, Wildcard):
        return True
    if not isinstance(version, semantic_version.Version):
        coerced = coerce_version(version)
        if coerced is None:
            raise InvalidVersionError(f"Invalid semver version {version!r}")
        version = coerced
    version = version.truncate('prerelease')
    return any(
        all(_OPERATORS[op](version, target) for op, target in comparators)
        for comparators in parse_range(range_expr)
    )
