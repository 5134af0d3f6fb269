"""Version specification model for tool plugins."""

from .models import ParseResult, SpecKind
from .ranges import VersionRange, canonicalize_range
from .resolved_spec import ResolvedVersionSpec
from .unresolved_spec import UnresolvedVersionSpec
from .utils import clean_version_string, is_alias_name

__all__ = [
    "ParseResult",
    "SpecKind",
    "VersionRange",
    "canonicalize_range",
    "ResolvedVersionSpec",
    "UnresolvedVersionSpec",
    "clean_version_string",
    "is_alias_name",
]
