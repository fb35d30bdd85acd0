"""Unit tests for tenant and user mapping functions.

Tests cover:
- Entity -> DTO field mapping (unwrapped email, role name, permission names)
- DTOs never expose audit metadata or soft-delete state
- Batch mappers are lazy generators
- Request DTO -> domain input mapping, including the tenant_id override
"""

from types import GeneratorType
from uuid import uuid4

import pytest

from src.application.mappers import (
    to_tenant_dto,
    to_tenant_dtos,
    to_tenant_for_creation,
    to_tenant_for_update,
    to_user_dto,
    to_user_dtos,
    to_user_for_creation,
    to_user_for_update,
)
from src.schemas.tenant_schemas import TenantForCreationDto, TenantForUpdateDto
from src.schemas.user_schemas import UserForCreationDto, UserForUpdateDto
from tests.conftest import create_tenant, create_user


@pytest.mark.unit
class TestTenantMapper:
    """Test tenant mapping."""

    def test_to_tenant_dto(self):
        tenant = create_tenant("Acme")

        dto = to_tenant_dto(tenant)

        assert dto.id == tenant.id
        assert dto.name == "Acme"
        assert set(dto.model_dump()) == {"id", "name"}

    def test_to_tenant_dtos_is_lazy(self):
        consumed = []

        def source():
            for name in ("A", "B"):
                consumed.append(name)
                yield create_tenant(name)

        dtos = to_tenant_dtos(source())

        assert isinstance(dtos, GeneratorType)
        assert consumed == []
        assert [dto.name for dto in dtos] == ["A", "B"]
        assert consumed == ["A", "B"]

    def test_request_dtos_to_domain_inputs(self):
        assert to_tenant_for_creation(TenantForCreationDto(name="Acme")).name == "Acme"
        assert to_tenant_for_update(TenantForUpdateDto(name="Beta")).name == "Beta"


@pytest.mark.unit
class TestUserMapper:
    """Test user mapping."""

    def test_to_user_dto(self):
        # Arrange
        tenant_id = uuid4()
        user = create_user(role="Admin", tenant_id=tenant_id)

        # Act
        dto = to_user_dto(user)

        # Assert
        assert dto.id == user.id
        assert dto.tenant_id == tenant_id
        assert dto.full_name == "Ada Lovelace"
        assert dto.email == "ada@example.com"
        assert dto.role == "Admin"
        assert dto.permissions == ["do_something_special"]
        dumped = dto.model_dump()
        assert "is_deleted" not in dumped
        assert "created_on" not in dumped
        assert "domain_events" not in dumped

    def test_absent_email_maps_to_none(self):
        assert to_user_dto(create_user(email=None)).email is None

    def test_to_user_dtos_maps_every_user(self):
        users = [create_user(identifier="a"), create_user(identifier="b")]

        assert [dto.identifier for dto in to_user_dtos(users)] == ["a", "b"]

    def test_to_user_for_creation_uses_dto_tenant(self):
        tenant_id = uuid4()
        dto = UserForCreationDto(
            tenant_id=tenant_id,
            first_name="Ada",
            last_name="Lovelace",
            identifier="auth0|ada",
            email="ada@example.com",
            username="ada",
            role="admin",
        )

        model = to_user_for_creation(dto)

        assert model.tenant_id == tenant_id
        assert model.role == "admin"
        assert model.identifier == "auth0|ada"

    def test_to_user_for_creation_override_wins(self):
        override = uuid4()
        dto = UserForCreationDto(tenant_id=uuid4(), identifier="x")

        assert to_user_for_creation(dto, tenant_id=override).tenant_id == override

    def test_to_user_for_update(self):
        dto = UserForUpdateDto(
            first_name="A", last_name="B", email=None, username="ab"
        )

        model = to_user_for_update(dto)

        assert (model.first_name, model.last_name, model.email, model.username) == (
            "A",
            "B",
            None,
            "ab",
        )
