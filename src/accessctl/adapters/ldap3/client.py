"""ldap3 adapter – Ldap3DirectoryClient."""
from __future__ import annotations

import asyncio
import functools
import logging
import threading
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from accessctl.kernel.errors import (
    DirectoryConnectionError,
    DirectoryError,
    DirectoryTimeoutError,
    IncorrectResultSizeError,
)
from accessctl.roles.directory.dn import format_filter, parse_root_dn_from_url
from accessctl.roles.directory.port import AttributesMapper

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _require_ldap3() -> Any:
    try:
        import ldap3  # type: ignore[import-untyped]
        import ldap3.core.exceptions  # type: ignore[import-untyped]  # noqa: F401
        return ldap3
    except ImportError as exc:
        raise ImportError("Install 'accessctl[ldap]' (ldap3) to use the ldap3 adapter") from exc


def _as_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value]
    return [str(value)]


class Ldap3DirectoryClient:
    """:class:`~accessctl.roles.directory.port.DirectoryClient` over ldap3.

    Search bases are relative to the root DN in *server_url*
    (``ldap://host:389/dc=example,dc=com``).  ldap3 is blocking, so every
    operation runs in the default executor.  A pre-built ldap3 ``Connection``
    may be passed in; otherwise one is bound lazily on first use.

    ldap3's synchronous strategy keeps the last result on
    ``Connection.response``, so a search and the read of its response run
    under one lock.  Concurrent lookups share the connection one at a time.
    """

    def __init__(
        self,
        server_url: str,
        *,
        bind_dn: str | None = None,
        password: str | None = None,
        connection: Any | None = None,
    ) -> None:
        self._ldap3 = _require_ldap3()
        self._server_url = server_url
        self._bind_dn = bind_dn
        self._password = password
        self._connection = connection
        self._lock = threading.Lock()
        self._root_dn = parse_root_dn_from_url(server_url)

    # ------------------------------------------------------------------
    # DirectoryClient
    # ------------------------------------------------------------------

    async def search_for_single_entry(
        self, base: str, filter_template: str, params: Sequence[str]
    ) -> str:
        entries = await self._run(
            self._sync_search, base, format_filter(filter_template, params), ["1.1"]
        )
        if len(entries) != 1:
            raise IncorrectResultSizeError(1, len(entries))
        return self._relative_dn(entries[0]["dn"])

    async def search_for_single_attribute_values(
        self, base: str, filter_template: str, params: Sequence[str], attribute: str
    ) -> list[str]:
        entries = await self._run(
            self._sync_search, base, format_filter(filter_template, params), [attribute]
        )
        values: dict[str, None] = {}
        for entry in entries:
            for value in self._attributes(entry).get(attribute, []):
                values.setdefault(value, None)
        return list(values)

    async def search(self, base: str, search_filter: str, mapper: AttributesMapper[T]) -> list[T]:
        entries = await self._run(
            self._sync_search, base, search_filter, [self._ldap3.ALL_ATTRIBUTES]
        )
        return [mapper(self._attributes(entry)) for entry in entries]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _run(self, fn: Callable[..., T], *args: Any) -> T:
        errors = self._ldap3.core.exceptions
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(None, functools.partial(fn, *args))
        except errors.LDAPResponseTimeoutError as exc:
            raise DirectoryTimeoutError(f"LDAP operation timed out on '{self._server_url}'", cause=exc) from exc
        except errors.LDAPCommunicationError as exc:
            raise DirectoryConnectionError(self._server_url, cause=exc) from exc
        except errors.LDAPException as exc:
            raise DirectoryError(f"LDAP operation failed: {exc}", cause=exc) from exc

    def _sync_connection(self) -> Any:
        # Caller holds self._lock.
        if self._connection is None:
            ldap3 = self._ldap3
            self._connection = ldap3.Connection(
                ldap3.Server(self._server_url),
                user=self._bind_dn,
                password=self._password,
                auto_bind=True,
                read_only=True,
                raise_exceptions=True,
            )
        return self._connection

    def _sync_search(self, base: str, search_filter: str, attributes: list[str]) -> list[dict[str, Any]]:
        search_base = self._absolute_dn(base)
        logger.debug("ldap3.search base=%s filter=%s", search_base, search_filter)
        with self._lock:
            connection = self._sync_connection()
            connection.search(
                search_base,
                search_filter,
                search_scope=self._ldap3.SUBTREE,
                attributes=attributes,
            )
            response = list(connection.response or [])
        return [e for e in response if e.get("type") == "searchResEntry"]

    def _attributes(self, entry: dict[str, Any]) -> dict[str, list[str]]:
        return {name: _as_list(value) for name, value in (entry.get("attributes") or {}).items()}

    def _absolute_dn(self, base: str) -> str:
        if not self._root_dn:
            return base
        return f"{base},{self._root_dn}" if base else self._root_dn

    def _relative_dn(self, dn: str) -> str:
        suffix = f",{self._root_dn}"
        if self._root_dn and dn.lower().endswith(suffix.lower()):
            return dn[: -len(suffix)]
        return dn


__all__ = ["Ldap3DirectoryClient"]
