"""
group-naming: reversible names for group-scoped cloud resources.

This library encodes a logical group into provider-safe resource names:
- Shared names, created once per group (``jclouds-mycluster``)
- Unique names, created per group member (``jclouds-mycluster-f3e``)
- Structural decoding back to the group, returning None for foreign names
- Predicates for picking out the resources a group owns

Example:
    from group_naming import NamingConventionFactory

    naming = NamingConventionFactory().create()

    naming.shared_name_for_group("mycluster")  # "jclouds-mycluster"
    naming.unique_name_for_group("mycluster")  # e.g. "jclouds-mycluster-f3e"
    naming.extract_group("jclouds-mycluster-f3e")  # "mycluster"
    naming.extract_group("random-bucket-42")  # None

    owned = [n for n in listing if naming.contains_group("mycluster")(n)]
"""

from importlib.metadata import PackageNotFoundError, version

from .codec import GroupNameCodec
from .convention import (
    FormatSharedNamesAndAppendUniqueSuffix,
    NamePredicate,
    NamingConvention,
)
from .exceptions import (
    ConfigurationError,
    GroupNamingError,
    InvalidGroupError,
    ValidationError,
)
from .factory import NamingConventionFactory, create_naming_convention
from .models import NamingOptions
from .naming import (
    DEFAULT_DELIMITER,
    DEFAULT_PREFIX,
    DEFAULT_SUFFIX_ALPHABET,
    DEFAULT_SUFFIX_LENGTH,
    validate_group,
)
from .suffix import RandomSuffixGenerator, SequenceSuffixSource, SuffixSource

try:
    __version__ = version("group-naming")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Main classes
    "NamingConvention",
    "NamingConventionFactory",
    "FormatSharedNamesAndAppendUniqueSuffix",
    "GroupNameCodec",
    "NamePredicate",
    "create_naming_convention",
    # Models
    "NamingOptions",
    # Suffixes
    "SuffixSource",
    "RandomSuffixGenerator",
    "SequenceSuffixSource",
    # Naming rules
    "DEFAULT_PREFIX",
    "DEFAULT_DELIMITER",
    "DEFAULT_SUFFIX_LENGTH",
    "DEFAULT_SUFFIX_ALPHABET",
    "validate_group",
    # Exceptions
    "GroupNamingError",
    "ValidationError",
    "InvalidGroupError",
    "ConfigurationError",
]
