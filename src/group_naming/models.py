"""Core models for group-naming."""

from dataclasses import dataclass, replace

from .exceptions import ConfigurationError
from .naming import (
    DEFAULT_DELIMITER,
    DEFAULT_PREFIX,
    DEFAULT_SUFFIX_ALPHABET,
    DEFAULT_SUFFIX_LENGTH,
    GROUP_PATTERN,
    resolve_delimiter,
    resolve_prefix,
)


@dataclass(frozen=True)
class NamingOptions:
    """
    Configuration for a naming convention instance.

    Fixed for the life of the convention built from it.

    Attributes:
        prefix: Literal token prepended (with a trailing delimiter) to every
            encoded name. Empty disables the prefix segment.
        delimiter: Single character separating prefix, group and suffix
        suffix_length: Number of characters in a unique-name suffix
        suffix_alphabet: Characters a suffix is drawn from
    """

    prefix: str = DEFAULT_PREFIX
    delimiter: str = DEFAULT_DELIMITER
    suffix_length: int = DEFAULT_SUFFIX_LENGTH
    suffix_alphabet: str = DEFAULT_SUFFIX_ALPHABET

    def __post_init__(self) -> None:
        if not isinstance(self.prefix, str):
            raise ConfigurationError("prefix", self.prefix, "Prefix must be a string")
        if self.prefix and not GROUP_PATTERN.fullmatch(self.prefix):
            raise ConfigurationError(
                "prefix",
                self.prefix,
                "Must contain only alphanumeric characters and hyphens.",
            )
        if not isinstance(self.delimiter, str) or len(self.delimiter) != 1:
            raise ConfigurationError(
                "delimiter", self.delimiter, "Delimiter must be a single character"
            )
        if self.delimiter.isalnum() or self.delimiter.isspace():
            raise ConfigurationError(
                "delimiter",
                self.delimiter,
                "Delimiter cannot be alphanumeric or whitespace",
            )
        if not isinstance(self.suffix_length, int) or self.suffix_length < 1:
            raise ConfigurationError(
                "suffix_length", self.suffix_length, "Suffix length must be a positive integer"
            )
        if not self.suffix_alphabet:
            raise ConfigurationError(
                "suffix_alphabet", self.suffix_alphabet, "Suffix alphabet cannot be empty"
            )
        if len(set(self.suffix_alphabet)) != len(self.suffix_alphabet):
            raise ConfigurationError(
                "suffix_alphabet",
                self.suffix_alphabet,
                "Suffix alphabet cannot contain duplicate characters",
            )
        if self.delimiter in self.suffix_alphabet:
            raise ConfigurationError(
                "suffix_alphabet",
                self.suffix_alphabet,
                f"Suffix alphabet cannot contain the delimiter {self.delimiter!r}",
            )
        if not GROUP_PATTERN.fullmatch(self.suffix_alphabet):
            raise ConfigurationError(
                "suffix_alphabet",
                self.suffix_alphabet,
                "Must contain only alphanumeric characters and hyphens.",
            )

    @classmethod
    def from_env(
        cls,
        prefix: str | None = None,
        delimiter: str | None = None,
        suffix_length: int = DEFAULT_SUFFIX_LENGTH,
        suffix_alphabet: str = DEFAULT_SUFFIX_ALPHABET,
    ) -> "NamingOptions":
        """Build options, filling prefix and delimiter from the environment.

        See ``resolve_prefix`` and ``resolve_delimiter`` for resolution order.
        """
        return cls(
            prefix=resolve_prefix(prefix),
            delimiter=resolve_delimiter(delimiter),
            suffix_length=suffix_length,
            suffix_alphabet=suffix_alphabet,
        )

    def without_prefix(self) -> "NamingOptions":
        """Return a copy of these options with the prefix segment omitted."""
        return replace(self, prefix="")

    @property
    def has_prefix(self) -> bool:
        """True unless the prefix segment is omitted."""
        return bool(self.prefix)

    @property
    def suffix_space(self) -> int:
        """Number of distinct suffixes (4096 for three hex characters)."""
        return len(self.suffix_alphabet) ** self.suffix_length
