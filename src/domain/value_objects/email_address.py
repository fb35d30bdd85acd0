"""EmailAddress value object with validation.

Immutable value object that validates email format at construction.
"""

from dataclasses import dataclass

import email_validator
from email_validator import EmailNotValidError, validate_email

from src.domain.errors import ValidationError

# Internal-network names are legitimate addresses (admin@corp.local,
# user@localhost). email-validator rejects them as special-use unless they
# are removed from its (editable) list; arpa, invalid and onion stay rejected.
INTERNAL_DOMAIN_NAMES = ("local", "localhost")

for _name in INTERNAL_DOMAIN_NAMES:
    if _name in email_validator.SPECIAL_USE_DOMAIN_NAMES:
        email_validator.SPECIAL_USE_DOMAIN_NAMES.remove(_name)


@dataclass(frozen=True)
class EmailAddress:
    """Email address value object.

    A blank input is a valid state meaning "no email": the instance is
    created with ``value`` set to None. Any other input must be a
    well-formed address and is stored verbatim, without normalization.

    Only syntax is checked (email-validator, no DNS lookup). Addresses on
    private or test domains are accepted: "admin@corp.local",
    "user@localhost" and "x@y.test" are all valid.

    Attributes:
        value: The email address as supplied, or None.

    Raises:
        ValidationError: If a non-blank input is not a valid address.

    Example:
        >>> EmailAddress("User@Example.com").value
        'User@Example.com'
        >>> EmailAddress("   ").value is None
        True
        >>> EmailAddress("not-an-email")
        Traceback (most recent call last):
        ...
        ValidationError: Please provide a valid email address.
    """

    value: str | None

    def __post_init__(self) -> None:
        """Validate email format after initialization.

        Raises:
            ValidationError: If email format is invalid.
        """
        if self.value is None or not self.value.strip():
            # Use object.__setattr__ because dataclass is frozen
            object.__setattr__(self, "value", None)
            return

        try:
            validate_email(
                self.value,
                check_deliverability=False,
                globally_deliverable=False,
                test_environment=True,
            )
        except EmailNotValidError as e:
            raise ValidationError(
                "Please provide a valid email address.", field="email"
            ) from e

    @classmethod
    def of(cls, value: str | None) -> "EmailAddress":
        """Build a validated EmailAddress."""
        return cls(value)

    @classmethod
    def _unvalidated(cls, value: str | None) -> "EmailAddress":
        """Rehydrate a stored value without validation.

        Reserved for the persistence layer, which only ever stores values
        that already passed validation. Never call from domain code.
        """
        instance = object.__new__(cls)
        object.__setattr__(instance, "value", value)
        return instance

    def as_str(self) -> str | None:
        """Return the raw address, or None when no email was given."""
        return self.value

    def __str__(self) -> str:
        """Return the address for display ("" when absent)."""
        return self.value or ""

    def __repr__(self) -> str:
        """Return repr for debugging."""
        return f"EmailAddress({self.value!r})"
