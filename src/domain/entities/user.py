"""User domain entity.

Pure business logic, no framework dependencies.

Roles and permissions:
    - A user holds exactly one role (Admin or User)
    - Assigning a role resets the user's permissions to that role's defaults
    - Extra permissions can be granted and revoked individually
"""

from dataclasses import dataclass, field
from uuid import UUID

from src.domain.entities.base_entity import BaseEntity
from src.domain.entities.user_permission import UserPermission
from src.domain.errors import ValidationError
from src.domain.events.user_events import (
    UserCreated,
    UserPermissionAdded,
    UserPermissionRemoved,
    UserRoleUpdated,
    UserUpdated,
)
from src.domain.models.user_models import UserForCreation, UserForUpdate
from src.domain.value_objects.email_address import EmailAddress
from src.domain.value_objects.permission import Permission
from src.domain.value_objects.user_role import UserRole


@dataclass(eq=False, kw_only=True)
class User(BaseEntity):
    """User aggregate.

    Business Rules:
        - first_name, last_name, identifier and username are required
        - email may be absent (EmailAddress with value None) but never malformed
        - Every change is validated before any field is replaced

    Attributes:
        first_name: Given name.
        last_name: Family name.
        identifier: Identity-provider subject. Set once at creation.
        email: Validated email address (value may be None).
        username: Username.
        role: Current role.
        tenant_id: Owning tenant, if any.

    Example:
        >>> user = User.create(UserForCreation(
        ...     first_name="Ada", last_name="Lovelace", identifier="sub-1",
        ...     email="ada@example.com", username="ada", role="admin",
        ... ))
        >>> user.full_name
        'Ada Lovelace'
        >>> user.has_permission(Permission.do_something_special())
        True
    """

    first_name: str
    last_name: str
    identifier: str
    email: EmailAddress
    username: str
    role: UserRole = field(default_factory=UserRole.user)
    tenant_id: UUID | None = None

    _permissions: list[UserPermission] = field(
        default_factory=list, init=False, repr=False
    )

    def __post_init__(self) -> None:
        self._validate(
            first_name=self.first_name,
            last_name=self.last_name,
            identifier=self.identifier,
            username=self.username,
            email=self.email,
        )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def permissions(self) -> tuple[UserPermission, ...]:
        """Granted permissions (read-only view)."""
        return tuple(self._permissions)

    @classmethod
    def create(cls, user_for_creation: UserForCreation) -> "User":
        """Create a user with the role's default permissions.

        Queues a single UserCreated event.

        Raises:
            ValidationError: If a required field is blank, the email is
                malformed, or the role is unknown.
        """
        user = cls(
            tenant_id=user_for_creation.tenant_id,
            first_name=user_for_creation.first_name,
            last_name=user_for_creation.last_name,
            identifier=user_for_creation.identifier,
            email=EmailAddress.of(user_for_creation.email),
            username=user_for_creation.username,
            role=UserRole.of(user_for_creation.role),
        )
        user._reset_permissions()

        user.queue_domain_event(
            UserCreated(
                user_id=user.id,
                tenant_id=user.tenant_id,
                identifier=user.identifier,
                email=user.email.as_str(),
                role=user.role.value,
            )
        )
        return user

    def update(self, user_for_update: UserForUpdate) -> "User":
        """Replace profile fields and queue UserUpdated.

        Returns:
            User: self, for chaining.

        Raises:
            ValidationError: The user is left unchanged and no event is queued.
        """
        return self._apply_profile(
            first_name=user_for_update.first_name,
            last_name=user_for_update.last_name,
            email=user_for_update.email,
            username=user_for_update.username,
        )

    def update_from_idp(
        self, first_name: str, last_name: str, email: str | None, username: str
    ) -> "User":
        """Sync profile fields from identity-provider claims.

        Same validation and event as update().
        """
        return self._apply_profile(
            first_name=first_name,
            last_name=last_name,
            email=email,
            username=username,
        )

    def update_role(self, role: UserRole) -> "User":
        """Assign a new role and reset permissions to its defaults."""
        self.role = role
        self._reset_permissions()
        self.queue_domain_event(UserRoleUpdated(user_id=self.id, role=role.value))
        return self

    def add_permission(self, permission: Permission) -> "User":
        """Grant a permission. Granting one already held is a no-op."""
        if self.has_permission(permission):
            return self

        self._permissions.append(UserPermission.create(self, permission))
        self.queue_domain_event(
            UserPermissionAdded(user_id=self.id, permission=permission.value)
        )
        return self

    def remove_permission(self, permission: Permission) -> "User":
        """Revoke a permission. Revoking one not held is a no-op."""
        if not self.has_permission(permission):
            return self

        self._permissions = [
            grant for grant in self._permissions if grant.permission != permission
        ]
        self.queue_domain_event(
            UserPermissionRemoved(user_id=self.id, permission=permission.value)
        )
        return self

    def has_permission(self, permission: Permission) -> bool:
        return any(grant.permission == permission for grant in self._permissions)

    def _apply_profile(
        self, *, first_name: str, last_name: str, email: str | None, username: str
    ) -> "User":
        new_email = EmailAddress.of(email)
        self._validate(
            first_name=first_name,
            last_name=last_name,
            identifier=self.identifier,
            username=username,
            email=new_email,
        )

        self.first_name = first_name
        self.last_name = last_name
        self.email = new_email
        self.username = username
        self.queue_domain_event(UserUpdated(user_id=self.id))
        return self

    def _reset_permissions(self) -> None:
        self._permissions = [
            UserPermission.create(self, permission)
            for permission in self.role.default_permissions()
        ]

    @staticmethod
    def _validate(
        *,
        first_name: str | None,
        last_name: str | None,
        identifier: str | None,
        username: str | None,
        email: EmailAddress | None,
    ) -> None:
        ValidationError.throw_when_null_or_whitespace(
            first_name, "Please provide a first name.", field="first_name"
        )
        ValidationError.throw_when_null_or_whitespace(
            last_name, "Please provide a last name.", field="last_name"
        )
        ValidationError.throw_when_null_or_whitespace(
            identifier, "Please provide an identifier.", field="identifier"
        )
        ValidationError.throw_when_null_or_whitespace(
            username, "Please provide a username.", field="username"
        )
        ValidationError.throw_when_null(
            email, "Please provide a valid email.", field="email"
        )
