"""Unit tests for role normalization and IdentityRoleMerger."""

from __future__ import annotations

from accessctl.kernel.security import ExternalIdentity, Role, RoleSource
from accessctl.roles import IdentityRoleMerger, dedupe_roles, roles_from_memberships


class TestRolesFromMemberships:
    def test_normalizes_and_dedupes(self) -> None:
        roles = roles_from_memberships([" Ops ", "ops", "OPS", ""], RoleSource.DIRECTORY)
        assert roles == [Role("ops")]
        assert roles[0].source is RoleSource.DIRECTORY

    def test_preserves_discovery_order(self) -> None:
        roles = roles_from_memberships(["zeta", "Alpha", "mid"], RoleSource.EXTERNAL)
        assert [r.name for r in roles] == ["zeta", "alpha", "mid"]

    def test_none(self) -> None:
        assert roles_from_memberships(None, RoleSource.EXTERNAL) == []


class TestDedupeRoles:
    def test_first_occurrence_wins(self) -> None:
        roles = dedupe_roles([Role("ops", RoleSource.DIRECTORY), Role("OPS", RoleSource.STATIC), Role("dev")])
        assert roles == [Role("ops"), Role("dev")]
        assert roles[0].source is RoleSource.DIRECTORY


class TestIdentityRoleMerger:
    def test_merge_replaces_previous_roles(self) -> None:
        merger = IdentityRoleMerger()
        identity = ExternalIdentity("alice", roles=[Role("stale")])
        merger.merge(identity, ["Ops", "dev"])
        assert identity.roles == [Role("ops"), Role("dev")]

    def test_merge_is_idempotent(self) -> None:
        merger = IdentityRoleMerger()
        identity = ExternalIdentity("alice")
        merger.merge(identity, ["ops", "dev"], RoleSource.DIRECTORY)
        first = list(identity.roles)
        merger.merge(identity, ["ops", "dev"], RoleSource.DIRECTORY)
        assert identity.roles == first

    def test_merge_tags_source(self) -> None:
        identity = IdentityRoleMerger().merge(ExternalIdentity("bot"), ["ops"], RoleSource.EXTERNAL)
        assert identity.roles[0].source is RoleSource.EXTERNAL

    def test_apply_batch_result(self) -> None:
        alice, bob = ExternalIdentity("alice"), ExternalIdentity("bob", roles=[Role("old")])
        result = IdentityRoleMerger().apply([alice, bob], {"alice": [Role("ops"), Role("ops")]})
        assert result == [alice, bob]
        assert alice.roles == [Role("ops")]
        assert bob.roles == []
