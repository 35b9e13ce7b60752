"""Unit tests for the identity entities."""

from uuid import UUID

from idstore.domain import IdentityRole, IdentityUser, IdentityUserRole
from tests.shared.fixtures.factories import SequentialIdProvider


class TestIdentityRole:
    def test_create_generates_uuid_id(self):
        role = IdentityRole.create("Admin")

        assert UUID(role.id)
        assert role.name == "Admin"

    def test_create_uses_given_provider(self):
        role = IdentityRole.create("Admin", id_provider=SequentialIdProvider("role"))

        assert role.id == "role-0001"

    def test_explicit_id_wins(self):
        role = IdentityRole("Admin", id="fixed")

        assert role.id == "fixed"

    def test_name_is_optional(self):
        role = IdentityRole()

        assert role.name is None
        assert role.id

    def test_equality_by_id(self):
        first = IdentityRole.reconstitute(id="r1", name="Admin")
        renamed = IdentityRole.reconstitute(id="r1", name="Administrators")
        other = IdentityRole.reconstitute(id="r2", name="Admin")

        assert first == renamed
        assert first != other
        assert hash(first) == hash(renamed)

    def test_not_equal_to_other_types(self):
        assert IdentityRole("Admin", id="r1") != "r1"


class TestIdentityUser:
    def test_create_defaults(self):
        user = IdentityUser.create("alice")

        assert UUID(user.id)
        assert user.user_name == "alice"
        assert user.password_hash is None
        assert user.security_stamp is None
        assert user.email is None
        assert user.email_confirmed is False
        assert user.access_failed_count == 0
        assert user.roles == []

    def test_create_with_email_and_provider(self):
        user = IdentityUser.create(
            "alice",
            email="alice@example.com",
            id_provider=SequentialIdProvider("user"),
        )

        assert user.id == "user-0001"
        assert user.email == "alice@example.com"

    def test_role_ids_follow_associations(self):
        user = IdentityUser(
            "alice",
            id="u1",
            roles=[IdentityUserRole("u1", "r1"), IdentityUserRole("u1", "r2")],
        )

        assert user.role_ids == ["r1", "r2"]

    def test_roles_list_is_copied(self):
        roles = [IdentityUserRole("u1", "r1")]
        user = IdentityUser("alice", id="u1", roles=roles)

        user.roles.append(IdentityUserRole("u1", "r2"))

        assert len(roles) == 1

    def test_users_do_not_share_role_lists(self):
        first = IdentityUser("alice")
        second = IdentityUser("bob")

        first.roles.append(IdentityUserRole(first.id, "r1"))

        assert second.roles == []

    def test_reconstitute(self):
        user = IdentityUser.reconstitute(
            id="u1",
            user_name="alice",
            password_hash="hash",
            security_stamp="stamp",
            email="alice@example.com",
            email_confirmed=True,
            access_failed_count=2,
            roles=[IdentityUserRole("u1", "r1")],
        )

        assert user.id == "u1"
        assert user.password_hash == "hash"
        assert user.security_stamp == "stamp"
        assert user.email_confirmed is True
        assert user.access_failed_count == 2
        assert user.role_ids == ["r1"]

    def test_equality_by_id(self):
        assert IdentityUser("alice", id="u1") == IdentityUser("bob", id="u1")
        assert IdentityUser("alice", id="u1") != IdentityUser("alice", id="u2")


class TestIdentityUserRole:
    def test_value_equality(self):
        assert IdentityUserRole("u1", "r1") == IdentityUserRole("u1", "r1")
        assert IdentityUserRole("u1", "r1") != IdentityUserRole("u2", "r1")
