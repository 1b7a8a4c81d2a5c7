"""Directory – DirectoryUserRolesProvider.

Resolves external roles from a directory's group entries.

* :meth:`DirectoryUserRolesProvider.load_roles` locates the user's full DN
  and asks for the role attribute of every group whose membership filter
  matches ``{0}`` = full DN or ``{1}`` = raw user id.
* :meth:`DirectoryUserRolesProvider.multi_load_roles` picks a
  :class:`~accessctl.roles.strategy.LookupStrategy`: one scan over all
  groups (reading members back through ``group_user_attribute``) for large
  batches, otherwise one :meth:`load_roles` per identity.

Batch failure policy: the per-identity strategy attempts every identity.
When any of them fails, :class:`~accessctl.kernel.errors.PartialResolutionError`
is raised once all lookups have finished; it carries the roles of the
identities that succeeded next to the per-identity exceptions.
"""

from __future__ import annotations

import asyncio
import itertools
from collections.abc import Collection, Sequence

from accessctl.kernel.errors import (
    BaseError,
    IncorrectResultSizeError,
    InvalidDnError,
    PartialResolutionError,
)
from accessctl.kernel.security import ExternalIdentity, Role, RoleSource, normalize_role_name
from accessctl.observability.logging import get_logger
from accessctl.roles.directory.dn import (
    DnPattern,
    decode_dn_value,
    encode_dn_value,
    format_filter,
    join_dn,
    parse_root_dn_from_url,
)
from accessctl.roles.directory.port import Attributes, DirectoryClient
from accessctl.roles.directory.settings import DirectorySettings
from accessctl.roles.merger import IdentityRoleMerger, dedupe_roles, roles_from_memberships
from accessctl.roles.strategy import LookupStrategy, choose_strategy

logger = get_logger(__name__)


def _attribute_values(attributes: Attributes, name: str) -> Sequence[str]:
    """Case-insensitive attribute lookup; directory attribute names are."""
    if name in attributes:
        return attributes[name]
    lowered = name.lower()
    for key, values in attributes.items():
        if key.lower() == lowered:
            return values
    return ()


class DirectoryUserRolesProvider:
    """:class:`~accessctl.roles.provider.UserRolesProvider` backed by a directory."""

    def __init__(
        self,
        client: DirectoryClient,
        settings: DirectorySettings,
        *,
        merger: IdentityRoleMerger | None = None,
    ) -> None:
        self._client = client
        self._settings = settings
        self._merger = merger or IdentityRoleMerger()
        self._user_dn_pattern = DnPattern(settings.user_dn_pattern)
        self._root_dn = parse_root_dn_from_url(settings.url)

    @property
    def settings(self) -> DirectorySettings:
        return self._settings

    def strategy_for(self, identity_count: int) -> LookupStrategy:
        return choose_strategy(
            identity_count,
            self._settings.threshold_to_use_group_membership,
            self._settings.group_user_attribute,
        )

    # ------------------------------------------------------------------
    # Single identity
    # ------------------------------------------------------------------

    async def load_roles(self, identity: ExternalIdentity) -> list[Role]:
        user_id = identity.id
        log = logger.bind(user_id=user_id)
        if not self._settings.group_search_enabled:
            log.debug("directory.group_search_disabled")
            return []

        full_dn = await self._resolve_user_dn(user_id)
        if full_dn is None:
            # Likely a service principal outside the people subtree.
            log.debug("directory.user_dn_not_found")
            return []

        params = [full_dn, user_id]
        log.debug(
            "directory.group_search",
            group_search_base=self._settings.group_search_base,
            group_search_filter=self._settings.group_search_filter,
            params=params,
            group_role_attribute=self._settings.group_role_attribute,
        )
        values = await self._client.search_for_single_attribute_values(
            self._settings.group_search_base,
            self._settings.group_search_filter,
            params,
            self._settings.group_role_attribute,
        )
        roles = roles_from_memberships(values, RoleSource.DIRECTORY)
        log.debug("directory.roles_loaded", roles=[r.name for r in roles])
        return roles

    async def _resolve_user_dn(self, user_id: str) -> str | None:
        encoded = encode_dn_value(user_id)
        if self._settings.user_search_filter:
            try:
                partial = await self._client.search_for_single_entry(
                    self._settings.user_search_base,
                    self._settings.user_search_filter,
                    [encoded],
                )
            except IncorrectResultSizeError as exc:
                logger.warning(
                    "directory.user_entry_not_unique",
                    user_id=user_id,
                    expected=exc.expected,
                    actual=exc.actual,
                )
                return None
        else:
            partial = self._user_dn_pattern.format(encoded)

        try:
            return join_dn(self._root_dn, partial)
        except InvalidDnError as exc:
            logger.error("directory.user_dn_invalid", user_id=user_id, dn=exc.value, reason=exc.reason)
            return None

    # ------------------------------------------------------------------
    # Batch
    # ------------------------------------------------------------------

    async def multi_load_roles(self, identities: Collection[ExternalIdentity]) -> dict[str, list[Role]]:
        """Resolve roles for many identities; absent ids resolve to no roles."""
        if not self._settings.group_search_enabled:
            return {}

        unique = {identity.id: identity for identity in identities}
        strategy = self.strategy_for(len(unique))
        logger.debug("directory.multi_load_roles", identities=len(unique), strategy=strategy.value)
        if strategy is LookupStrategy.BULK:
            return await self._load_from_group_members(set(unique))
        return await self._load_each(list(unique.values()))

    async def populate(self, identities: Collection[ExternalIdentity]) -> list[ExternalIdentity]:
        """Resolve *identities* and attach the result to each of them."""
        resolved = await self.multi_load_roles(identities)
        return self._merger.apply(identities, resolved)

    async def _load_from_group_members(self, user_ids: set[str]) -> dict[str, list[Role]]:
        settings = self._settings
        skipped = 0

        def map_group(attributes: Attributes) -> list[tuple[str, Role]]:
            nonlocal skipped
            names = [
                n for n in _attribute_values(attributes, settings.group_role_attribute)
                if normalize_role_name(n)
            ]
            if not names:
                return []
            role = Role(names[0], RoleSource.DIRECTORY)
            members: list[tuple[str, Role]] = []
            for member in _attribute_values(attributes, settings.group_user_attribute):
                try:
                    member_id = decode_dn_value(self._user_dn_pattern.parse(member)[0])
                except InvalidDnError:
                    skipped += 1
                    logger.warning("directory.member_unparseable", group=role.name, member=member)
                    continue
                members.append((member_id, role))
            return members

        # Same two-parameter filter as load_roles, with wildcards for both.
        search_filter = format_filter(settings.group_search_filter, ["*", "*"], escape=False)
        rows = await self._client.search(settings.group_search_base, search_filter, map_group)

        grouped: dict[str, list[Role]] = {}
        for member_id, role in itertools.chain.from_iterable(rows):
            if member_id in user_ids:
                grouped.setdefault(member_id, []).append(role)
        result = {member_id: dedupe_roles(roles) for member_id, roles in grouped.items()}
        logger.info(
            "directory.bulk_load_complete",
            groups=len(rows),
            requested=len(user_ids),
            matched=len(result),
            skipped_members=skipped,
        )
        return result

    async def _load_each(self, identities: list[ExternalIdentity]) -> dict[str, list[Role]]:
        semaphore = asyncio.Semaphore(self._settings.fan_out_concurrency)

        async def _load(identity: ExternalIdentity) -> list[Role]:
            async with semaphore:
                return await self.load_roles(identity)

        outcomes = await asyncio.gather(*(_load(i) for i in identities), return_exceptions=True)

        resolved: dict[str, list[Role]] = {}
        failures: dict[str, BaseException] = {}
        for identity, outcome in zip(identities, outcomes):
            if isinstance(outcome, Exception):
                fields = outcome.log_fields() if isinstance(outcome, BaseError) else {"error": repr(outcome)}
                logger.warning("directory.load_roles_failed", user_id=identity.id, **fields)
                failures[identity.id] = outcome
            elif isinstance(outcome, BaseException):
                raise outcome
            else:
                resolved[identity.id] = outcome
        if failures:
            raise PartialResolutionError(resolved, failures)
        return resolved


__all__ = ["DirectoryUserRolesProvider"]
