"""Formatting and parsing of group-scoped resource names.

Shared names look like ``[prefix-]group`` and unique names like
``[prefix-]group-suffix``. Decoding is purely structural: no mapping from
names to groups is kept anywhere.

Groups may contain the delimiter, so the suffix segment is located from the
right: it is the final delimiter followed by exactly ``suffix_length``
characters of the suffix alphabet. A group whose own final segment has that
shape could not be told apart from a unique name, so it is rejected on encode
and never produced on decode.
"""

import logging
import re

from .exceptions import InvalidGroupError, ValidationError
from .models import NamingOptions
from .naming import is_valid_group, validate_group
from .suffix import RandomSuffixGenerator, SuffixSource

logger = logging.getLogger(__name__)


class GroupNameCodec:
    """Bidirectional transform between groups and encoded resource names."""

    def __init__(
        self,
        options: NamingOptions | None = None,
        suffix_source: SuffixSource | None = None,
    ) -> None:
        self._options = options if options is not None else NamingOptions()
        if suffix_source is None:
            suffix_source = RandomSuffixGenerator(
                length=self._options.suffix_length,
                alphabet=self._options.suffix_alphabet,
            )
        self._suffix_source = suffix_source
        delimiter = re.escape(self._options.delimiter)
        suffix_chars = "[" + re.escape(self._options.suffix_alphabet) + "]"
        self._suffix_re = re.compile(f"{suffix_chars}{{{self._options.suffix_length}}}")
        self._trailing_suffix_re = re.compile(
            f"(?P<head>.+){delimiter}(?P<suffix>{suffix_chars}{{{self._options.suffix_length}}})"
        )
        self._shared_lead = (
            self._options.prefix + self._options.delimiter if self._options.has_prefix else ""
        )

    @property
    def options(self) -> NamingOptions:
        return self._options

    @property
    def suffix_source(self) -> SuffixSource:
        return self._suffix_source

    # -------------------------------------------------------------------------
    # Encoding
    # -------------------------------------------------------------------------

    def encode_shared(self, group: str) -> str:
        """
        Encode ``group`` into a name that exists once per group.

        Raises:
            InvalidGroupError: If the group is empty, contains characters outside
                the permitted set, or ends in a suffix-shaped segment
        """
        self._check_group(group)
        return self._shared_lead + group

    def encode_unique(self, group: str, suffix: str | None = None) -> str:
        """
        Encode ``group`` into a name that may exist many times per group.

        Args:
            group: Group to encode
            suffix: Explicit suffix; drawn from the suffix source when omitted

        Raises:
            InvalidGroupError: If the group is invalid
            ValidationError: If the suffix (explicit or generated) has the wrong shape
        """
        shared = self.encode_shared(group)
        if suffix is None:
            suffix = self._suffix_source.next_suffix()
        if not isinstance(suffix, str) or not self._suffix_re.fullmatch(suffix):
            raise ValidationError(
                "suffix",
                suffix,
                f"Suffix must be {self._options.suffix_length} characters "
                f"from {self._options.suffix_alphabet!r}",
            )
        name = f"{shared}{self._options.delimiter}{suffix}"
        logger.debug("Generated unique name %s for group %s", name, group)
        return name

    # -------------------------------------------------------------------------
    # Decoding (never raises)
    # -------------------------------------------------------------------------

    def decode_shared(self, name: str) -> str | None:
        """Return the group encoded in a shared name, or ``None``."""
        if not isinstance(name, str):
            return None
        if not name.startswith(self._shared_lead):
            return None
        group = name[len(self._shared_lead) :]
        if not self.is_encodable(group):
            return None
        return group

    def decode_unique(self, name: str) -> str | None:
        """Return the group encoded in a unique name, or ``None``."""
        if not isinstance(name, str):
            return None
        match = self._trailing_suffix_re.fullmatch(name)
        if match is None:
            return None
        return self.decode_shared(match.group("head"))

    def extract(self, name: str) -> str | None:
        """
        Return the group in a shared or unique name, or ``None``.

        Unique decoding is attempted first: a unique name is also shaped like
        a shared name with an extra trailing segment.
        """
        group = self.decode_unique(name)
        if group is None:
            group = self.decode_shared(name)
        if group is None:
            logger.debug("No group encoded in %r", name)
        return group

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def is_encodable(self, group: object) -> bool:
        """Return True if ``group`` would be accepted by the encode operations."""
        if not isinstance(group, str) or not is_valid_group(group):
            return False
        return self._trailing_suffix_re.fullmatch(group) is None

    def _check_group(self, group: str) -> None:
        validate_group(group)
        if self._trailing_suffix_re.fullmatch(group) is not None:
            raise InvalidGroupError(
                group,
                f"Ends in a segment reserved for unique-name suffixes "
                f"({self._options.suffix_length} characters from "
                f"{self._options.suffix_alphabet!r} after {self._options.delimiter!r}). "
                f"Rename the last segment (e.g., '{group}x'), or configure a different "
                f"suffix_length or delimiter.",
            )
