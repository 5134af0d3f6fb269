"""Data models shared by the resolved and unresolved version specifications."""

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Any, Generic, Optional, TypeVar

import semantic_version

from constants import Constants
from errors import VersionParseError


class SpecKind(Enum):
    """Tag for the active variant of a version specification."""
    ALIAS = "alias"
    CANARY = "canary"
    VERSION = "version"
    REQ = "req"
    REQ_ANY = "req_any"


# Kinds a resolved specification may carry.
RESOLVED_KINDS = frozenset({SpecKind.ALIAS, SpecKind.CANARY, SpecKind.VERSION})

# Kinds whose payload is a requirement range.
RANGE_KINDS = frozenset({SpecKind.REQ, SpecKind.REQ_ANY})

SpecT = TypeVar("SpecT")


@dataclass(frozen=True)
class ParseResult(Generic[SpecT]):
    """Outcome of a non-raising parse: exactly one of ``spec`` or ``error`` is set."""
    value: str
    spec: Optional[SpecT] = None
    error: Optional[VersionParseError] = None

    @property
    def ok(self) -> bool:
        """True when parsing succeeded."""
        return self.error is None

    def unwrap(self) -> SpecT:
        """Return the parsed spec or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.spec  # type: ignore[return-value]


def spec_text(other: Any) -> Optional[str]:
    """Return the canonical text used to compare against ``other``, if comparable."""
    if isinstance(other, str):
        return other
    canonical = getattr(other, "canonical_form", None)
    if callable(canonical):
        return canonical()
    return None


@total_ordering
class VersionSpecBase:
    """Behavior shared by both specification families.

    Equality, hashing and ordering are defined over ``canonical_form()``
    so that requirement ranges differing only in term order compare equal.
    Concrete classes provide ``kind``, ``name``, ``version`` and ``__str__``.
    """

    kind: SpecKind
    name: Optional[str]
    version: Optional[semantic_version.Version]

    def canonical_form(self) -> str:
        """Return the canonical text of this specification."""
        return str(self)

    def equals(self, other: Any) -> bool:
        """Return True if ``other`` (a spec of either family or a string) has the same canonical form."""
        return self.canonical_form() == spec_text(other)

    def __eq__(self, other: Any) -> bool:
        text = spec_text(other)
        if text is None:
            return NotImplemented
        return self.canonical_form() == text

    def __hash__(self) -> int:
        return hash(self.canonical_form())

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, VersionSpecBase):
            return NotImplemented
        if self.version is not None and other.version is not None:
            return self.version < other.version
        return self.canonical_form() < other.canonical_form()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.value}={self.canonical_form()!r})"

    def to_json(self) -> str:
        """Return the JSON representation, which is the canonical string."""
        return self.canonical_form()

    def as_version(self) -> Optional[semantic_version.Version]:
        """Return the exact semantic version, if this is a ``VERSION`` spec."""
        return self.version

    def is_alias(self, name: str) -> bool:
        """Return True if this is an alias (or canary) with the provided name."""
        return self.kind in (SpecKind.ALIAS, SpecKind.CANARY) and self.name == name

    def is_canary(self) -> bool:
        """Return True for the canary variant or an alias named ``canary``."""
        return self.is_alias(Constants.CANARY)

    def is_latest(self) -> bool:
        """Return True for the ``latest`` alias."""
        return self.kind == SpecKind.ALIAS and self.name == Constants.LATEST
