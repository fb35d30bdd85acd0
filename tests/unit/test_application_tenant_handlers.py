"""Unit tests for tenant command and query handlers.

Tests cover:
- AddTenant: success commits, blank name fails without staging
- UpdateTenant: not found, validation failure rolls back
- DeleteTenant: stages removal and commits
- GetTenant / ListTenants: DTO mapping and page metadata

Architecture:
- Unit tests with a mocked unit of work (AsyncMock/Mock)
"""

from unittest.mock import AsyncMock, Mock
from uuid import uuid4

import pytest

from src.application.commands.handlers.tenant_handlers import (
    AddTenantHandler,
    DeleteTenantHandler,
    UpdateTenantHandler,
)
from src.application.commands.tenant_commands import (
    AddTenant,
    DeleteTenant,
    UpdateTenant,
)
from src.application.errors import ApplicationErrorCode
from src.application.queries.handlers.tenant_query_handlers import (
    GetTenantHandler,
    ListTenantsHandler,
)
from src.application.queries.tenant_queries import GetTenant, ListTenants
from src.core.result import Failure, Success
from src.schemas.tenant_schemas import TenantForCreationDto, TenantForUpdateDto
from tests.conftest import create_tenant


@pytest.fixture
def mock_uow():
    """Unit of work double with tenant and user repositories."""
    uow = Mock()
    uow.tenants = Mock()
    uow.tenants.find_by_id = AsyncMock(return_value=None)
    uow.tenants.list_page = AsyncMock(return_value=([], 0))
    uow.tenants.remove = AsyncMock()
    uow.users = Mock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.mark.unit
class TestAddTenantHandler:
    """Test AddTenantHandler."""

    @pytest.mark.asyncio
    async def test_add_tenant_success(self, mock_uow):
        # Arrange
        handler = AddTenantHandler(uow=mock_uow)

        # Act
        result = await handler.handle(AddTenant(tenant=TenantForCreationDto(name="Acme")))

        # Assert
        assert isinstance(result, Success)
        assert result.value.name == "Acme"
        added = mock_uow.tenants.add.call_args.args[0]
        assert added.id == result.value.id
        mock_uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_add_tenant_blank_name_fails(self, mock_uow):
        # Arrange
        handler = AddTenantHandler(uow=mock_uow)

        # Act
        result = await handler.handle(AddTenant(tenant=TenantForCreationDto(name="  ")))

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code is ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.details == {"field": "name"}
        mock_uow.tenants.add.assert_not_called()
        mock_uow.commit.assert_not_awaited()


@pytest.mark.unit
class TestUpdateTenantHandler:
    """Test UpdateTenantHandler."""

    @pytest.mark.asyncio
    async def test_update_tenant_success(self, mock_uow):
        # Arrange
        tenant = create_tenant()
        mock_uow.tenants.find_by_id.return_value = tenant
        handler = UpdateTenantHandler(uow=mock_uow)

        # Act
        result = await handler.handle(
            UpdateTenant(tenant_id=tenant.id, tenant=TenantForUpdateDto(name="Beta"))
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value.name == "Beta"
        assert tenant.name == "Beta"
        mock_uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_update_missing_tenant_is_not_found(self, mock_uow):
        handler = UpdateTenantHandler(uow=mock_uow)

        result = await handler.handle(
            UpdateTenant(tenant_id=uuid4(), tenant=TenantForUpdateDto(name="Beta"))
        )

        assert isinstance(result, Failure)
        assert result.error.code is ApplicationErrorCode.NOT_FOUND
        mock_uow.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_blank_name_rolls_back(self, mock_uow):
        # Arrange
        tenant = create_tenant()
        mock_uow.tenants.find_by_id.return_value = tenant
        handler = UpdateTenantHandler(uow=mock_uow)

        # Act
        result = await handler.handle(
            UpdateTenant(tenant_id=tenant.id, tenant=TenantForUpdateDto(name=""))
        )

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code is ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert tenant.name == "Acme"
        mock_uow.rollback.assert_awaited_once()
        mock_uow.commit.assert_not_awaited()


@pytest.mark.unit
class TestDeleteTenantHandler:
    """Test DeleteTenantHandler."""

    @pytest.mark.asyncio
    async def test_delete_tenant_success(self, mock_uow):
        tenant = create_tenant()
        mock_uow.tenants.find_by_id.return_value = tenant
        handler = DeleteTenantHandler(uow=mock_uow)

        result = await handler.handle(DeleteTenant(tenant_id=tenant.id))

        assert result == Success(value=None)
        mock_uow.tenants.remove.assert_awaited_once_with(tenant)
        mock_uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_missing_tenant_is_not_found(self, mock_uow):
        handler = DeleteTenantHandler(uow=mock_uow)

        result = await handler.handle(DeleteTenant(tenant_id=uuid4()))

        assert isinstance(result, Failure)
        assert result.error.code is ApplicationErrorCode.NOT_FOUND
        mock_uow.tenants.remove.assert_not_awaited()


@pytest.mark.unit
class TestTenantQueryHandlers:
    """Test GetTenantHandler and ListTenantsHandler."""

    @pytest.mark.asyncio
    async def test_get_tenant(self, mock_uow):
        tenant = create_tenant()
        mock_uow.tenants.find_by_id.return_value = tenant

        result = await GetTenantHandler(uow=mock_uow).handle(
            GetTenant(tenant_id=tenant.id)
        )

        assert isinstance(result, Success)
        assert result.value.id == tenant.id

    @pytest.mark.asyncio
    async def test_get_missing_tenant(self, mock_uow):
        result = await GetTenantHandler(uow=mock_uow).handle(
            GetTenant(tenant_id=uuid4())
        )

        assert isinstance(result, Failure)
        assert result.error.code is ApplicationErrorCode.NOT_FOUND

    @pytest.mark.asyncio
    async def test_list_tenants_builds_paged_list(self, mock_uow):
        # Arrange
        tenants = [create_tenant("A"), create_tenant("B")]
        mock_uow.tenants.list_page.return_value = (tenants, 5)

        # Act
        result = await ListTenantsHandler(uow=mock_uow).handle(
            ListTenants(page_number=1, page_size=2)
        )

        # Assert
        assert isinstance(result, Success)
        page = result.value
        assert [dto.name for dto in page.items] == ["A", "B"]
        assert page.total_count == 5
        assert page.total_pages == 3
        assert page.has_next is True
        mock_uow.tenants.list_page.assert_awaited_once_with(1, 2)
