"""Directory – DirectoryClient port (the group-membership backend)."""
from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Protocol, TypeVar

T = TypeVar("T")

Attributes = Mapping[str, Sequence[str]]
AttributesMapper = Callable[[Attributes], T]


class DirectoryClient(Protocol):
    """Port: the three search shapes role resolution needs.

    Search bases are relative to the client's root DN.  Filter templates use
    ``{n}`` placeholders; implementations escape *params* before substitution.
    Backend failures are raised as
    :class:`~accessctl.kernel.errors.DirectoryError` subclasses.
    """

    async def search_for_single_entry(
        self, base: str, filter_template: str, params: Sequence[str]
    ) -> str:
        """Return the DN (relative to the root) of the only matching entry.

        Raises :class:`~accessctl.kernel.errors.IncorrectResultSizeError`
        unless exactly one entry matches.
        """
        ...

    async def search_for_single_attribute_values(
        self, base: str, filter_template: str, params: Sequence[str], attribute: str
    ) -> list[str]:
        """Values of *attribute* across matching entries, in backend order, deduplicated."""
        ...

    async def search(self, base: str, search_filter: str, mapper: AttributesMapper[T]) -> list[T]:
        """Apply *mapper* to the attributes of every entry matching the ready-made filter."""
        ...


__all__ = ["Attributes", "AttributesMapper", "DirectoryClient"]
