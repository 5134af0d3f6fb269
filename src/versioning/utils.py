"""String helpers applied to version strings before classification."""

import re

from constants import Constants

ALIAS_PATTERN = r"[a-zA-Z][a-zA-Z0-9\-_/.*]"

_TAG_PREFIX = re.compile(r"^[vV](?=\d)")
_COMPARATOR_SPACE = re.compile(r"([><]=?)\s+(\d)")
_AND_SEPARATORS = re.compile(r"[, ]+")


def is_alias_name(value: str) -> bool:
    """Return True if the provided value is an alias.

    An alias is a word that maps to a version, for example
    ``"latest" -> "1.2.3"``. A value is considered an alias if a letter is
    followed by a letter, digit, ``-``, ``_``, ``/``, ``.`` or ``*``
    anywhere in the string (the match is not anchored).
    """
    return re.search(ALIAS_PATTERN, value) is not None


def clean_version_string(value: str) -> str:
    """Clean a potential version or requirement string.

    Removes each occurrence of ``.*`` and a leading ``v``/``V`` tag prefix,
    converts ``&&`` and commas into single spaces, and tightens comparators
    such as ``>= 1.2.3``. Each side of an ``||`` is cleaned separately and
    rejoined with ``" || "``. Cleaning an already clean string is a no-op.
    """
    version = value.strip()

    while ".*" in version:
        version = version.replace(".*", "")
    version = version.replace("&&", " ")

    if Constants.OR_SEPARATOR in version:
        return " || ".join(
            clean_version_string(part) for part in version.split(Constants.OR_SEPARATOR)
        )

    version = _AND_SEPARATORS.sub(" ", version).strip()
    version = _TAG_PREFIX.sub("", version)
    version = _COMPARATOR_SPACE.sub(r"\1\2", version)

    return version
