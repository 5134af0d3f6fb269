"""Resolved version specification: an exact version, an alias, or canary."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

import semantic_version

from common.logging_utils import extra_context, is_debug_enabled
from constants import Constants
from errors import VersionParseError

from .models import RESOLVED_KINDS, ParseResult, SpecKind, VersionSpecBase
from .utils import clean_version_string, is_alias_name

if TYPE_CHECKING:
    from .unresolved_spec import UnresolvedVersionSpec

logger = logging.getLogger(__name__)


def make_version(value: Union[str, semantic_version.Version]) -> semantic_version.Version:
    """Build an exact semantic version, raising ``VersionParseError`` on failure."""
    if isinstance(value, semantic_version.Version):
        return value
    try:
        return semantic_version.Version(value)
    except ValueError as exc:
        raise VersionParseError(value, cause=exc) from exc


@dataclass(frozen=True, eq=False, repr=False)
class ResolvedVersionSpec(VersionSpecBase):
    """Represents a resolved version or alias.

    Exactly one variant is active, selected by ``kind``:

    - ``ALIAS``: ``name`` holds the alias (``latest``, ``stable``, ...).
    - ``CANARY``: an alias fixed to the name ``canary``.
    - ``VERSION``: ``version`` holds a fully-qualified semantic version.
    """

    kind: SpecKind
    name: Optional[str] = None
    version: Optional[semantic_version.Version] = None

    def __post_init__(self):
        if self.kind not in RESOLVED_KINDS:
            raise ValueError(f"{self.kind} is not a resolved specification kind")
        if self.kind == SpecKind.CANARY and self.name != Constants.CANARY:
            raise ValueError("canary specification must be named 'canary'")
        if self.kind == SpecKind.ALIAS and not self.name:
            raise ValueError("alias specification requires a name")
        if self.kind == SpecKind.VERSION and self.version is None:
            raise ValueError("version specification requires a version")

    @classmethod
    def for_alias(cls, name: str) -> ResolvedVersionSpec:
        return cls(kind=SpecKind.ALIAS, name=name)

    @classmethod
    def for_canary(cls) -> ResolvedVersionSpec:
        return cls(kind=SpecKind.CANARY, name=Constants.CANARY)

    @classmethod
    def for_version(cls, value: Union[str, semantic_version.Version]) -> ResolvedVersionSpec:
        """Build a ``VERSION`` spec, raising ``VersionParseError`` for an invalid version."""
        return cls(kind=SpecKind.VERSION, version=make_version(value))

    @classmethod
    def default(cls) -> ResolvedVersionSpec:
        """Return the ``latest`` alias."""
        return cls.for_alias(Constants.LATEST)

    @classmethod
    def parse(cls, value: str) -> ResolvedVersionSpec:
        """Parse the provided string into a resolved specification.

        Rules, in order:

        - If the value is ``canary``, map as ``CANARY``.
        - Clean the value with ``clean_version_string``.
        - If an alias name, map as ``ALIAS``.
        - Else parse as an exact semantic version and map as ``VERSION``.

        Raises:
            VersionParseError: If the value is not an alias and not a
                full ``major.minor.patch`` version.
        """
        if value == Constants.CANARY:
            spec = cls.for_canary()
        else:
            cleaned = clean_version_string(value)
            if is_alias_name(cleaned):
                spec = cls.for_alias(cleaned)
            else:
                try:
                    spec = cls.for_version(cleaned)
                except VersionParseError as exc:
                    if is_debug_enabled(logger):
                        logger.debug(
                            "Resolved spec parse failed",
                            extra=extra_context(
                                event="parse_error",
                                component="resolved_spec",
                                action="parse",
                                target=value,
                            ),
                        )
                    raise VersionParseError(value, cause=exc) from exc

        if is_debug_enabled(logger):
            logger.debug(
                "Parsed resolved spec",
                extra=extra_context(
                    event="decision",
                    component="resolved_spec",
                    action="parse",
                    target=value,
                    outcome=spec.kind.value,
                ),
            )
        return spec

    @classmethod
    def try_parse(cls, value: str) -> ParseResult[ResolvedVersionSpec]:
        """Parse without raising; the error is returned in the result instead."""
        try:
            return ParseResult(value=value, spec=cls.parse(value))
        except VersionParseError as exc:
            return ParseResult(value=value, error=exc)

    @classmethod
    def from_json(cls, value: str) -> ResolvedVersionSpec:
        return cls.parse(value)

    def to_unresolved_spec(self) -> UnresolvedVersionSpec:
        """Convert to the equivalent unresolved specification. Never fails."""
        from .unresolved_spec import UnresolvedVersionSpec  # pylint: disable=import-outside-toplevel

        if self.kind == SpecKind.CANARY:
            return UnresolvedVersionSpec.for_canary()
        if self.kind == SpecKind.ALIAS:
            return UnresolvedVersionSpec.for_alias(self.name)
        return UnresolvedVersionSpec.for_version(self.version)

    def __str__(self) -> str:
        if self.kind == SpecKind.VERSION:
            return str(self.version)
        return self.name
