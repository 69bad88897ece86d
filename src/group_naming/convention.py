"""Group naming convention.

Resource creation code needs to tell the resources it creates apart from
those supplied by the user. A security group created for a cluster can be
deleted during cleanup; one the user attached manually must be left alone.

The convention covers two kinds of names:

- **shared**: exists once per group and is fully retrievable via api,
  e.g. a security group or network (``jclouds-mycluster``)
- **unique**: created redundantly for members of a group, e.g. node names or
  key pairs whose private material the provider does not keep
  (``jclouds-mycluster-f3e`` the first time, ``jclouds-mycluster-e64`` the next)

Unique names are not guaranteed unique. When a provider reports a conflict
the caller asks for another name and retries the creation.
"""

from collections.abc import Callable, Iterable, Iterator
from typing import Protocol, runtime_checkable

from .codec import GroupNameCodec
from .models import NamingOptions

NamePredicate = Callable[[str], bool]


@runtime_checkable
class NamingConvention(Protocol):
    """
    Protocol for group naming conventions.

    Callers depend on this capability, not on a concrete class. Instances are
    obtained from ``NamingConventionFactory``.
    """

    def shared_name_for_group(self, group: str) -> str:
        """Encode ``group`` into a name that exists only once in the group."""
        ...

    def unique_name_for_group(self, group: str) -> str:
        """
        Encode ``group`` into a name that exists more than once in the group.

        Do not expect this name to be guaranteed unique, though it should be
        in one or two tries.
        """
        ...

    def group_in_shared_name_or_none(self, encoded: str) -> str | None:
        """Retrieve the group from a shared name."""
        ...

    def group_in_unique_name_or_none(self, encoded: str) -> str | None:
        """Retrieve the group from a unique name."""
        ...

    def extract_group(self, encoded: str) -> str | None:
        """Retrieve the group from a shared or unique name."""
        ...

    def contains_group(self, group: str) -> NamePredicate:
        """Predicate identifying names that have ``group`` encoded in them."""
        ...

    def contains_any_group(self) -> NamePredicate:
        """Predicate identifying names that have any group encoded in them."""
        ...

    def filter_names(self, names: Iterable[str], group: str | None = None) -> Iterator[str]:
        """Yield the names belonging to ``group``, or to any group when ``None``."""
        ...


class FormatSharedNamesAndAppendUniqueSuffix:
    """
    Default naming convention.

    Shared names are ``prefix + delimiter + group``; unique names append
    ``delimiter + suffix`` with a few random hex characters.
    """

    def __init__(self, codec: GroupNameCodec) -> None:
        self._codec = codec

    @property
    def options(self) -> NamingOptions:
        return self._codec.options

    @property
    def prefix(self) -> str:
        return self._codec.options.prefix

    @property
    def delimiter(self) -> str:
        return self._codec.options.delimiter

    def shared_name_for_group(self, group: str) -> str:
        return self._codec.encode_shared(group)

    def unique_name_for_group(self, group: str) -> str:
        return self._codec.encode_unique(group)

    def group_in_shared_name_or_none(self, encoded: str) -> str | None:
        return self._codec.decode_shared(encoded)

    def group_in_unique_name_or_none(self, encoded: str) -> str | None:
        return self._codec.decode_unique(encoded)

    def extract_group(self, encoded: str) -> str | None:
        return self._codec.extract(encoded)

    def contains_group(self, group: str) -> NamePredicate:
        def predicate(name: str) -> bool:
            return self.extract_group(name) == group

        return predicate

    def contains_any_group(self) -> NamePredicate:
        def predicate(name: str) -> bool:
            return self.extract_group(name) is not None

        return predicate

    def filter_names(self, names: Iterable[str], group: str | None = None) -> Iterator[str]:
        """
        Yield the names created under this convention.

        Args:
            names: Candidate resource names, e.g. from a provider listing
            group: Only yield names of this group; any group when ``None``
        """
        predicate = self.contains_any_group() if group is None else self.contains_group(group)
        return (name for name in names if predicate(name))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(prefix={self.prefix!r}, delimiter={self.delimiter!r})"
        )
