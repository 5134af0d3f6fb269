"""Canonical npm-style version requirement ranges.

Ranges are validated and matched by ``semantic_version.NpmSpec``. Each
comparator is desugared by the npm parser into primitive comparators
(``>=1.2.0 <2.0.0`` for ``^1.2``), rendered back to text and sorted, within
each OR-group and across groups, so that two ranges that only differ in
ordering share the same textual form and compare equal as plain strings.

Primitive comparators always carry a full version, so the canonical text
parses back to the same comparators.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Tuple, Union

import semantic_version
from semantic_version.base import Range

from common.logging_utils import extra_context, is_debug_enabled
from constants import Constants
from errors import VersionParseError

logger = logging.getLogger(__name__)

# semantic_version spells equality "=="; npm ranges only accept "=".
_NPM_OPERATORS = {Range.OP_EQ: "="}

Groups = Tuple[Tuple[str, ...], ...]


def _prepare(expression: str) -> str:
    """Treat commas as AND separators and collapse whitespace in each group."""
    groups = expression.replace(",", " ").split(Constants.OR_SEPARATOR)
    return Constants.OR_SEPARATOR.join(" ".join(group.split()) for group in groups)


def _render_comparator(clause) -> str:
    if isinstance(clause, Range):
        operator = _NPM_OPERATORS.get(clause.operator, clause.operator)
        return f"{operator}{clause.target}"
    return str(clause)


def _desugar_group(group: str) -> List[str]:
    """Expand one AND-group into primitive comparators, the way ``NpmSpec`` reads it.

    The expansion stops before ``NpmSpec`` splits prerelease comparators into
    extra OR-groups, so the rendered text describes the group as written.
    """
    parser = semantic_version.NpmSpec.Parser
    if not group:
        group = ">=0.0.0"
    if parser.HYPHEN in group:
        low, high = group.split(parser.HYPHEN, 1)
        blocks = [">=" + low, "<=" + high]
    else:
        blocks = group.split(Constants.AND_SEPARATOR)
    return [_render_comparator(c) for block in blocks for c in parser.parse_simple(block)]


def _parse_spec(expression: str) -> semantic_version.NpmSpec:
    try:
        return semantic_version.NpmSpec(expression)
    except ValueError as exc:
        if is_debug_enabled(logger):
            logger.debug(
                "Invalid version range",
                extra=extra_context(
                    event="parse_error",
                    component="ranges",
                    action="parse",
                    target=expression,
                    error=str(exc),
                ),
            )
        raise VersionParseError(expression, cause=exc) from exc


def _sorted_groups(expression: str) -> Groups:
    groups = [tuple(sorted(_desugar_group(group))) for group in expression.split(Constants.OR_SEPARATOR)]
    return tuple(sorted(groups, key=" ".join))


def canonicalize_range(expression: str) -> str:
    """Return the canonical text of an npm-style requirement range.

    Raises:
        VersionParseError: If the expression is not a valid range.
    """
    return VersionRange.parse(expression).raw


@dataclass(frozen=True)
class VersionRange:
    """An OR of AND-groups of comparators, in canonical order."""

    raw: str
    groups: Groups
    spec: semantic_version.NpmSpec = field(compare=False, repr=False)

    @classmethod
    def parse(cls, expression: str) -> "VersionRange":
        """Parse and canonicalize ``expression``.

        Comparators are sorted inside each group and groups are sorted by
        their joined text; the result is joined with ``||`` and parsed once
        more to make sure the canonical text is itself a legal range.

        Raises:
            VersionParseError: If the expression is not a valid range.
        """
        prepared = _prepare(expression)
        _parse_spec(prepared)
        groups = _sorted_groups(prepared)
        raw = Constants.OR_SEPARATOR.join(" ".join(group) for group in groups)
        spec = _parse_spec(raw)

        if is_debug_enabled(logger):
            logger.debug(
                "Canonicalized version range",
                extra=extra_context(
                    event="decision",
                    component="ranges",
                    action="canonicalize",
                    target=expression,
                    outcome=raw,
                    count=len(groups),
                ),
            )
        return cls(raw=raw, groups=groups, spec=spec)

    @classmethod
    def from_comparators(cls, *comparators: Union[str, Range]) -> "VersionRange":
        """Build a single-group range from comparators joined with AND.

        Raises:
            VersionParseError: If the comparators are invalid or spell more
                than one OR-group.
        """
        expression = Constants.AND_SEPARATOR.join(_render_comparator(c) for c in comparators)
        version_range = cls.parse(expression)
        if len(version_range.groups) != 1:
            raise VersionParseError(expression)
        return version_range

    @property
    def comparators(self) -> Tuple[str, ...]:
        """Comparators of the first OR-group."""
        return self.groups[0] if self.groups else ()

    def match(self, version: Union[str, semantic_version.Version]) -> bool:
        """Return True if ``version`` satisfies this range.

        Raises:
            VersionParseError: If ``version`` is not a full semantic version.
        """
        if not isinstance(version, semantic_version.Version):
            try:
                version = semantic_version.Version(version)
            except ValueError as exc:
                raise VersionParseError(version, cause=exc) from exc
        return self.spec.match(version)

    def __str__(self) -> str:
        return self.raw
