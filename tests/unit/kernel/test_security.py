"""Unit tests for kernel security – authorizations, roles and permissions."""

from __future__ import annotations

import pytest

from accessctl.kernel.errors import ValidationError
from accessctl.kernel.security import (
    ALL_AUTHORIZATIONS,
    NO_AUTHORIZATIONS,
    Authorization,
    ExternalIdentity,
    Permissions,
    Role,
    RoleSource,
    normalize_memberships,
    normalize_role_name,
    parse_authorizations,
)

READ, WRITE, EXECUTE, CREATE = (
    Authorization.READ,
    Authorization.WRITE,
    Authorization.EXECUTE,
    Authorization.CREATE,
)


# ---------------------------------------------------------------------------
# Authorization
# ---------------------------------------------------------------------------


class TestAuthorization:
    def test_all_is_every_member(self) -> None:
        assert ALL_AUTHORIZATIONS == frozenset(Authorization)
        assert ALL_AUTHORIZATIONS == {READ, WRITE, EXECUTE, CREATE}

    def test_none_is_empty(self) -> None:
        assert NO_AUTHORIZATIONS == frozenset()

    def test_string_values(self) -> None:
        assert Authorization.READ == "READ"

    def test_parse_accepts_names_and_members(self) -> None:
        assert parse_authorizations(["read", " Write ", EXECUTE]) == {READ, WRITE, EXECUTE}

    def test_parse_rejects_unknown(self) -> None:
        with pytest.raises(ValidationError) as info:
            parse_authorizations(["read", "delete"])
        assert info.value.errors == [{"field": "authorization", "value": "delete"}]


# ---------------------------------------------------------------------------
# Role
# ---------------------------------------------------------------------------


class TestRole:
    def test_name_is_normalized(self) -> None:
        assert Role("  Ops Team ").name == "ops team"

    def test_default_source_is_external(self) -> None:
        assert Role("ops").source is RoleSource.EXTERNAL

    def test_equality_ignores_source(self) -> None:
        assert Role("ops", RoleSource.DIRECTORY) == Role("OPS", RoleSource.STATIC)
        assert len({Role("ops", RoleSource.DIRECTORY), Role("ops")}) == 1

    def test_blank_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Role("   ")

    def test_frozen(self) -> None:
        with pytest.raises((AttributeError, TypeError)):
            Role("ops").name = "dev"  # type: ignore[misc]

    def test_str(self) -> None:
        assert str(Role("Ops")) == "ops"

    def test_normalize_role_name(self) -> None:
        assert normalize_role_name(" ADMIN\t") == "admin"


class TestNormalizeMemberships:
    def test_collapses_case_and_whitespace(self) -> None:
        assert normalize_memberships([" Ops ", "ops", "OPS", ""]) == ["ops"]

    def test_keeps_first_seen_order(self) -> None:
        assert normalize_memberships(["b", "A", "a", "c"]) == ["b", "a", "c"]

    def test_none_is_empty(self) -> None:
        assert normalize_memberships(None) == []

    def test_bare_string_is_one_name(self) -> None:
        assert normalize_memberships(" Ops ") == ["ops"]


# ---------------------------------------------------------------------------
# Permissions
# ---------------------------------------------------------------------------


@pytest.fixture
def permissions() -> Permissions:
    return Permissions.from_grants({"ops": [READ, WRITE], "admin": ALL_AUTHORIZATIONS})


class TestPermissionsResolve:
    def test_scenario_matching_role(self, permissions: Permissions) -> None:
        assert permissions.resolve({Role("ops")}, is_admin=False) == {READ, WRITE}

    def test_scenario_unknown_role(self, permissions: Permissions) -> None:
        assert permissions.resolve({Role("guest")}, is_admin=False) == frozenset()

    def test_scenario_admin_without_roles(self, permissions: Permissions) -> None:
        assert permissions.resolve(set(), is_admin=True) == ALL_AUTHORIZATIONS

    def test_admin_overrides_empty_permissions(self) -> None:
        assert Permissions.EMPTY.resolve({Role("guest")}, is_admin=True) == ALL_AUTHORIZATIONS

    def test_no_roles_no_access(self, permissions: Permissions) -> None:
        assert permissions.resolve([], is_admin=False) == frozenset()

    def test_union_over_roles(self) -> None:
        perms = Permissions.from_grants({"ops": ["read"], "deploy": ["execute"]})
        assert perms.resolve([Role("ops"), Role("deploy"), Role("x")], False) == {READ, EXECUTE}

    def test_plain_strings_are_normalized(self, permissions: Permissions) -> None:
        assert permissions.resolve([" OPS "], False) == {READ, WRITE}

    def test_empty_permissions_grant_nothing(self) -> None:
        assert Permissions.EMPTY.resolve([Role("ops")], False) == frozenset()


class TestPermissionsConstruction:
    def test_keys_normalized_and_merged(self) -> None:
        perms = Permissions.from_grants({"Ops": ["read"], " ops": ["write"], "": ["create"]})
        assert perms.all_roles() == {"ops"}
        assert perms.resolve(["ops"], False) == {READ, WRITE}

    def test_from_authorization_map(self) -> None:
        perms = Permissions.from_authorization_map({"READ": ["ops", "Dev"], WRITE: ["ops"]})
        assert perms.resolve(["dev"], False) == {READ}
        assert perms.resolve(["ops"], False) == {READ, WRITE}

    def test_roles_with(self, permissions: Permissions) -> None:
        assert permissions.roles_with(WRITE) == {"ops", "admin"}
        assert permissions.roles_with(EXECUTE) == {"admin"}

    def test_is_restricted(self, permissions: Permissions) -> None:
        assert permissions.is_restricted() is True
        assert Permissions.EMPTY.is_restricted() is False

    def test_to_dict(self) -> None:
        perms = Permissions.from_grants({"ops": ["write", "read"]})
        assert perms.to_dict() == {"ops": ["READ", "WRITE"]}

    def test_equality_and_hash(self) -> None:
        a = Permissions.from_grants({"ops": ["read"]})
        b = Permissions.from_grants({"OPS": [READ]})
        assert a == b
        assert hash(a) == hash(b)

    def test_constructor_rejects_unknown_authorization(self) -> None:
        with pytest.raises(ValidationError) as info:
            Permissions({"ops": ["READ", "bogus"]})
        assert info.value.errors == [{"field": "authorization", "value": "bogus"}]

    def test_constructor_parses_names(self) -> None:
        perms = Permissions({"ops": ["read", WRITE]})
        assert perms.resolve(["ops"], False) == {READ, WRITE}
        assert perms.to_dict() == {"ops": ["READ", "WRITE"]}

    def test_single_name_is_one_authorization(self) -> None:
        assert Permissions({"ops": "read"}).resolve(["ops"], False) == {READ}
        assert parse_authorizations("execute") == {EXECUTE}

    def test_single_role_in_authorization_map(self) -> None:
        perms = Permissions.from_authorization_map({"READ": "ops"})
        assert perms.all_roles() == {"ops"}

    def test_grants_are_read_only(self, permissions: Permissions) -> None:
        with pytest.raises(TypeError):
            permissions._grants["ops"] = frozenset()  # type: ignore[index]


# ---------------------------------------------------------------------------
# ExternalIdentity
# ---------------------------------------------------------------------------


class TestExternalIdentity:
    def test_starts_without_roles(self) -> None:
        assert ExternalIdentity("alice").roles == []

    def test_role_lists_are_not_shared(self) -> None:
        a, b = ExternalIdentity("a"), ExternalIdentity("b")
        a.roles.append(Role("ops"))
        assert b.roles == []
