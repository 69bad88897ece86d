"""Random suffixes for unique resource names.

A suffix only supplies entropy. Nothing here guarantees that a generated
name is free at the provider: resource creation code is expected to detect
the conflict and ask for another unique name.
"""

import itertools
import secrets
import threading
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from .exceptions import ConfigurationError
from .naming import DEFAULT_SUFFIX_ALPHABET, DEFAULT_SUFFIX_LENGTH


@runtime_checkable
class SuffixSource(Protocol):
    """
    Protocol for suffix entropy sources.

    Example:
        class Fixed:
            def next_suffix(self) -> str:
                return "f3e"

        assert isinstance(Fixed(), SuffixSource)  # True at runtime
    """

    def next_suffix(self) -> str:
        """Return the next suffix token."""
        ...


class RandomSuffixGenerator:
    """
    Draws suffixes uniformly from a fixed alphabet.

    Uses ``secrets`` (OS entropy), so concurrent callers never share a seeded
    generator state and are never serialized behind a lock.
    """

    def __init__(
        self,
        length: int = DEFAULT_SUFFIX_LENGTH,
        alphabet: str = DEFAULT_SUFFIX_ALPHABET,
    ) -> None:
        if length < 1:
            raise ConfigurationError("suffix_length", length, "Suffix length must be positive")
        if not alphabet:
            raise ConfigurationError("suffix_alphabet", alphabet, "Suffix alphabet cannot be empty")
        self._length = length
        self._alphabet = alphabet

    @property
    def length(self) -> int:
        return self._length

    @property
    def alphabet(self) -> str:
        return self._alphabet

    def next_suffix(self) -> str:
        return "".join(secrets.choice(self._alphabet) for _ in range(self._length))

    def __repr__(self) -> str:
        return f"RandomSuffixGenerator(length={self._length}, alphabet={self._alphabet!r})"


class SequenceSuffixSource:
    """
    Replays a fixed sequence of suffixes, cycling when exhausted.

    Useful for tests and for callers that need reproducible names.
    """

    def __init__(self, suffixes: Iterable[str]) -> None:
        values = list(suffixes)
        if not values:
            raise ConfigurationError("suffixes", values, "At least one suffix is required")
        self._values = tuple(values)
        self._cycle = itertools.cycle(self._values)
        self._lock = threading.Lock()

    def next_suffix(self) -> str:
        with self._lock:
            return next(self._cycle)

    def __repr__(self) -> str:
        return f"SequenceSuffixSource({list(self._values)!r})"
