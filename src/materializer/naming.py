"""Identifier helpers for project names and package identifiers."""

from __future__ import annotations

import re
import unicodedata

__all__ = [
    "DEFAULT_PACKAGE_PREFIX",
    "ascii_lower",
    "derive_package_identifier",
    "is_valid_package_identifier",
    "normalize_module_name",
    "slugify",
]


DEFAULT_PACKAGE_PREFIX = "com.example"

_SEPARATORS = re.compile(r"[\s\-]+")
_INVALID_IDENTIFIER = re.compile(r"[^0-9a-zA-Z_]")
_MULTIPLE_UNDERSCORES = re.compile(r"_+")
_PACKAGE_SEGMENT = r"[A-Za-z_][A-Za-z0-9_]*"
_PACKAGE_IDENTIFIER = re.compile(rf"{_PACKAGE_SEGMENT}(?:\.{_PACKAGE_SEGMENT})+")
_ASCII_FOLD = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def ascii_lower(value: str) -> str:
    """Lowercase ``A-Z`` only, independent of locale and unicode case rules."""

    return value.translate(_ASCII_FOLD)


def slugify(value: str, *, separator: str = "-") -> str:
    """Create an ASCII slug from ``value`` joined with ``separator``."""

    text = unicodedata.normalize("NFKD", str(value))
    text = text.encode("ascii", "ignore").decode("ascii")
    text = re.sub(r"[\s]+", " ", text)
    text = re.sub(r"[^\w\- ]", "", text)
    text = text.strip().lower()

    if not text:
        return ""

    collapsed = _SEPARATORS.sub(separator, text)
    collapsed = re.sub(rf"{re.escape(separator)}+", separator, collapsed)
    return collapsed.strip(separator)


def normalize_module_name(name: str) -> str:
    """Return a valid identifier segment from ``name``."""

    candidate = slugify(name, separator="_")
    candidate = _INVALID_IDENTIFIER.sub("_", candidate)
    candidate = _MULTIPLE_UNDERSCORES.sub("_", candidate)
    candidate = candidate.strip("_")

    if not candidate:
        candidate = "app"

    if candidate[0].isdigit():
        candidate = f"_{candidate}"

    return candidate


def derive_package_identifier(project_name: str, *, sanitize: bool = False) -> str:
    """Build the default package identifier for ``project_name``.

    Parameters
    ----------
    project_name:
        The display name of the project.
    sanitize:
        When ``False`` (the default) the name is only ASCII-lowercased, so
        ``"My App"`` yields ``"com.example.my app"``. Callers are expected to
        check the result with :func:`is_valid_package_identifier`. When
        ``True`` the segment is normalised into a valid identifier instead.
    """

    if sanitize:
        segment = normalize_module_name(project_name)
    else:
        segment = ascii_lower(project_name)
    return f"{DEFAULT_PACKAGE_PREFIX}.{segment}"


def is_valid_package_identifier(value: str) -> bool:
    """Return ``True`` when ``value`` is a dotted reverse-DNS identifier."""

    return _PACKAGE_IDENTIFIER.fullmatch(value) is not None
