"""Unit tests for the User aggregate.

Tests cover:
- Creation: validation, role parsing, default permissions, UserCreated
- Update: atomic validation, UserUpdated, identifier is immutable
- Role changes reset permissions to the role defaults
- Permission grant/revoke including no-op cases
"""

from uuid import uuid4

import pytest

from src.domain.errors import ValidationError
from src.domain.events import (
    UserCreated,
    UserPermissionAdded,
    UserPermissionRemoved,
    UserRoleUpdated,
    UserUpdated,
)
from src.domain.models.user_models import UserForUpdate
from src.domain.value_objects import Permission, UserRole
from tests.conftest import create_user


def _event_types(user):
    return [type(event) for event in user.domain_events]


@pytest.mark.unit
class TestUserCreate:
    """Test User.create()."""

    def test_create_populates_fields_and_queues_one_event(self):
        # Arrange
        tenant_id = uuid4()

        # Act
        user = create_user(tenant_id=tenant_id)

        # Assert
        assert user.tenant_id == tenant_id
        assert user.full_name == "Ada Lovelace"
        assert user.email.as_str() == "ada@example.com"
        assert user.role == UserRole.user()
        assert user.permissions == ()
        assert _event_types(user) == [UserCreated]

        event = user.domain_events[0]
        assert event.user_id == user.id
        assert event.tenant_id == tenant_id
        assert event.identifier == "auth0|ada"
        assert event.email == "ada@example.com"
        assert event.role == "User"

    def test_admin_receives_default_permissions(self):
        user = create_user(role="admin")

        assert user.role.value == "Admin"
        assert user.has_permission(Permission.do_something_special())
        assert [grant.permission.value for grant in user.permissions] == [
            "do_something_special"
        ]
        assert all(grant.user_id == user.id for grant in user.permissions)
        # Default grants do not queue their own events
        assert _event_types(user) == [UserCreated]

    def test_blank_email_is_allowed(self):
        user = create_user(email="  ")

        assert user.email.as_str() is None
        assert user.domain_events[0].email is None

    @pytest.mark.parametrize(
        ("overrides", "field"),
        [
            ({"first_name": ""}, "first_name"),
            ({"last_name": "  "}, "last_name"),
            ({"identifier": ""}, "identifier"),
            ({"username": ""}, "username"),
            ({"email": "nope"}, "email"),
            ({"role": "root"}, "role"),
        ],
    )
    def test_invalid_input_raises_with_field(self, overrides, field):
        with pytest.raises(ValidationError) as exc_info:
            create_user(**overrides)

        assert exc_info.value.field == field


@pytest.mark.unit
class TestUserUpdate:
    """Test User.update()."""

    def test_update_replaces_profile_fields(self):
        # Arrange
        user = create_user()
        user.clear_domain_events()

        # Act
        user.update(
            UserForUpdate(
                first_name="Augusta",
                last_name="King",
                email="augusta@example.com",
                username="augusta",
            )
        )

        # Assert
        assert user.full_name == "Augusta King"
        assert user.email.as_str() == "augusta@example.com"
        assert user.username == "augusta"
        assert user.identifier == "auth0|ada"
        assert _event_types(user) == [UserUpdated]

    def test_invalid_email_leaves_user_unchanged(self):
        # Arrange
        user = create_user()
        user.clear_domain_events()

        # Act
        with pytest.raises(ValidationError) as exc_info:
            user.update(
                UserForUpdate(
                    first_name="Augusta",
                    last_name="King",
                    email="not-an-email",
                    username="augusta",
                )
            )

        # Assert
        assert exc_info.value.field == "email"
        assert user.first_name == "Ada"
        assert user.username == "ada"
        assert user.domain_events == ()

    def test_blank_name_leaves_user_unchanged(self):
        user = create_user()
        user.clear_domain_events()

        with pytest.raises(ValidationError):
            user.update(
                UserForUpdate(
                    first_name="", last_name="King", email=None, username="a"
                )
            )

        assert user.last_name == "Lovelace"
        assert user.domain_events == ()

    def test_update_from_idp_queues_user_updated(self):
        user = create_user()
        user.clear_domain_events()

        user.update_from_idp("Ada", "Byron", None, "ada.b")

        assert user.last_name == "Byron"
        assert user.email.as_str() is None
        assert _event_types(user) == [UserUpdated]


@pytest.mark.unit
class TestUserRoleAndPermissions:
    """Test role assignment and permission grants."""

    def test_update_role_resets_permissions(self):
        # Arrange
        user = create_user(role="Admin")
        user.clear_domain_events()

        # Act
        user.update_role(UserRole.user())

        # Assert
        assert user.role.value == "User"
        assert user.permissions == ()
        assert _event_types(user) == [UserRoleUpdated]
        assert user.domain_events[0].role == "User"

    def test_promote_to_admin_grants_defaults(self):
        user = create_user()

        user.update_role(UserRole.admin())

        assert user.has_permission(Permission.do_something_special())

    def test_add_permission(self):
        user = create_user()
        user.clear_domain_events()

        user.add_permission(Permission.do_something_special())

        assert user.has_permission(Permission.do_something_special())
        assert _event_types(user) == [UserPermissionAdded]
        assert user.domain_events[0].permission == "do_something_special"

    def test_add_held_permission_is_noop(self):
        user = create_user(role="Admin")
        user.clear_domain_events()

        user.add_permission(Permission.do_something_special())

        assert len(user.permissions) == 1
        assert user.domain_events == ()

    def test_remove_permission(self):
        user = create_user(role="Admin")
        user.clear_domain_events()

        user.remove_permission(Permission.do_something_special())

        assert user.permissions == ()
        assert _event_types(user) == [UserPermissionRemoved]

    def test_remove_missing_permission_is_noop(self):
        user = create_user()
        user.clear_domain_events()

        user.remove_permission(Permission.do_something_special())

        assert user.domain_events == ()
