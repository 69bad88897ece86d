"""Group naming rules.

This module provides centralized validation and defaults for group names.
Groups share the character set of the resource names they are encoded into,
which must satisfy the most restrictive cloud provider rules:
- Alphanumeric characters and hyphens only
- Non-empty
"""

import os
import re

from .exceptions import InvalidGroupError

DEFAULT_PREFIX = "jclouds"
"""Prefix marking resources created by this library as safe to delete."""

DEFAULT_DELIMITER = "-"
"""Separator between prefix, group and suffix segments."""

DEFAULT_SUFFIX_LENGTH = 3
"""Three hex characters give 4096 combinations per group."""

DEFAULT_SUFFIX_ALPHABET = "0123456789abcdef"

PREFIX_ENV_VAR = "GROUP_NAMING_PREFIX"
"""Environment variable for overriding the default prefix.

Set to an empty string to disable the prefix entirely.
"""

DELIMITER_ENV_VAR = "GROUP_NAMING_DELIMITER"
"""Environment variable for overriding the default delimiter."""

# Hostname style: alphanumeric and hyphens only
GROUP_PATTERN = re.compile(r"^[A-Za-z0-9-]+$")


def validate_group(group: str) -> None:
    """
    Validate a group identifier against the permitted character set.

    Args:
        group: The caller-supplied group

    Raises:
        InvalidGroupError: If the group is empty or contains invalid characters
    """
    if not isinstance(group, str):
        raise InvalidGroupError(group, "Group must be a string")
    if not group:
        raise InvalidGroupError(group, "Group cannot be empty")

    # Check for common invalid characters with helpful messages
    if "_" in group:
        raise InvalidGroupError(
            group,
            "Contains underscore. Use hyphens instead (e.g., 'my-cluster' not 'my_cluster')",
        )
    if "." in group:
        raise InvalidGroupError(
            group,
            "Contains period. Only alphanumeric characters and hyphens are allowed.",
        )
    if " " in group:
        raise InvalidGroupError(
            group,
            "Contains spaces. Use hyphens instead (e.g., 'my-cluster' not 'my cluster')",
        )

    # Full pattern validation (fullmatch so a trailing newline is rejected)
    if not GROUP_PATTERN.fullmatch(group):
        raise InvalidGroupError(
            group,
            "Must contain only alphanumeric characters and hyphens.",
        )


def is_valid_group(group: object) -> bool:
    """Return True if ``group`` is a non-empty string of permitted characters."""
    return isinstance(group, str) and GROUP_PATTERN.fullmatch(group) is not None


def resolve_prefix(prefix: str | None) -> str:
    """Resolve prefix from explicit arg, env var, or default.

    Resolution order: ``prefix`` arg → ``GROUP_NAMING_PREFIX`` env var → ``"jclouds"``.
    An explicit or environment value of ``""`` means "no prefix".

    Args:
        prefix: Explicit prefix, or ``None`` to use env/default.

    Returns:
        Resolved prefix (possibly empty).
    """
    if prefix is not None:
        return prefix
    return os.environ.get(PREFIX_ENV_VAR, DEFAULT_PREFIX)


def resolve_delimiter(delimiter: str | None) -> str:
    """Resolve delimiter from explicit arg, env var, or default.

    Resolution order: ``delimiter`` arg → ``GROUP_NAMING_DELIMITER`` env var → ``"-"``.

    Args:
        delimiter: Explicit delimiter, or ``None`` to use env/default.

    Returns:
        Resolved delimiter. An explicit value is returned as-is, even if empty,
        so that invalid input reaches option validation.
    """
    if delimiter is not None:
        return delimiter
    return os.environ.get(DELIMITER_ENV_VAR) or DEFAULT_DELIMITER
