"""
Naming convention factory.

Selects the prefixed or prefix-less flavor of the default convention at
construction time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .codec import GroupNameCodec
from .convention import FormatSharedNamesAndAppendUniqueSuffix
from .models import NamingOptions
from .suffix import RandomSuffixGenerator

if TYPE_CHECKING:
    from .convention import NamingConvention
    from .suffix import SuffixSource


class NamingConventionFactory:
    """
    Produces configured naming conventions.

    Options default to ``NamingOptions.from_env()``, so the prefix honors the
    ``GROUP_NAMING_PREFIX`` env var. Unless a suffix source is injected, every
    created convention gets its own ``RandomSuffixGenerator``.
    """

    def __init__(
        self,
        options: NamingOptions | None = None,
        suffix_source: SuffixSource | None = None,
    ) -> None:
        self._options = options if options is not None else NamingOptions.from_env()
        self._suffix_source = suffix_source

    @property
    def options(self) -> NamingOptions:
        return self._options

    def create(self) -> NamingConvention:
        """Create a convention that prepends the configured prefix."""
        return self._build(self._options)

    def create_without_prefix(self) -> NamingConvention:
        """
        Create a convention without a prefix.

        Top-level resources do not need a prefix, yet still may need to
        follow a naming convention.
        """
        return self._build(self._options.without_prefix())

    def _build(self, options: NamingOptions) -> NamingConvention:
        suffix_source = self._suffix_source
        if suffix_source is None:
            suffix_source = RandomSuffixGenerator(
                length=options.suffix_length,
                alphabet=options.suffix_alphabet,
            )
        return FormatSharedNamesAndAppendUniqueSuffix(GroupNameCodec(options, suffix_source))


def create_naming_convention(
    with_prefix: bool = True,
    suffix_source: SuffixSource | None = None,
    **options: Any,
) -> NamingConvention:
    """
    Create a naming convention in one call.

    Args:
        with_prefix: Omit the prefix segment when False
        suffix_source: Optional entropy source for unique names
        **options: Passed to ``NamingOptions.from_env``:
            - prefix (str): Prefix token (default: env var or "jclouds")
            - delimiter (str): Segment separator (default: env var or "-")
            - suffix_length (int): Suffix characters (default: 3)
            - suffix_alphabet (str): Suffix characters (default: hex digits)

    Raises:
        ConfigurationError: If the options are invalid
    """
    factory = NamingConventionFactory(NamingOptions.from_env(**options), suffix_source)
    if with_prefix:
        return factory.create()
    return factory.create_without_prefix()
