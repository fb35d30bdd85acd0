"""Integration tests for TenantRepository and UserRepository.

Tests cover:
- Loading aggregates with their grants, identity within a session
- Identifier lookups, reuse of a deleted user's identifier
- Paging in creation order, explicit tenant filter
- Tenant scope: the acting user only sees users of their own tenant

Architecture:
- Real in-memory SQLite database (fresh per test)
"""

import pytest

from src.domain.value_objects import Permission
from tests.conftest import create_tenant, create_user


async def _seed_two_tenants(unit_of_work):
    """Tenants Acme and Beta, each with one member, plus a tenantless admin."""
    acme = create_tenant("Acme")
    beta = create_tenant("Beta")
    ada = create_user(identifier="auth0|ada", tenant_id=acme.id)
    bob = create_user(identifier="auth0|bob", username="bob", tenant_id=beta.id)
    root = create_user(identifier="auth0|root", username="root", role="Admin")
    async with unit_of_work(current_user=None) as uow:
        for tenant in (acme, beta):
            uow.tenants.add(tenant)
        for user in (ada, bob, root):
            uow.users.add(user)
        await uow.commit()
    return acme, beta, ada, bob


@pytest.mark.integration
class TestRepositoryReads:
    """Test loading aggregates."""

    @pytest.mark.asyncio
    async def test_find_by_id_returns_same_instance_within_session(
        self, unit_of_work
    ):
        tenant = create_tenant()
        async with unit_of_work() as uow:
            uow.tenants.add(tenant)
            await uow.commit()

        async with unit_of_work() as uow:
            first = await uow.tenants.find_by_id(tenant.id)
            second = await uow.tenants.find_by_id(tenant.id)

        assert first is second
        assert first is not tenant
        assert first.name == "Acme"

    @pytest.mark.asyncio
    async def test_user_loaded_with_grants(self, unit_of_work):
        user = create_user(role="Admin", email=None)
        async with unit_of_work() as uow:
            uow.users.add(user)
            await uow.commit()

        async with unit_of_work() as uow:
            loaded = await uow.users.find_by_id(user.id)

        assert loaded.identifier == user.identifier
        assert loaded.email.as_str() is None
        assert loaded.role.value == "Admin"
        assert loaded.has_permission(Permission.do_something_special())

    @pytest.mark.asyncio
    async def test_find_by_identifier_sees_staged_users(self, unit_of_work):
        user = create_user(identifier="auth0|staged")

        async with unit_of_work() as uow:
            uow.users.add(user)

            assert await uow.users.find_by_identifier("auth0|staged") is user
            assert await uow.users.find_by_identifier("auth0|other") is None

    @pytest.mark.asyncio
    async def test_deleted_identifier_can_be_reused(self, unit_of_work):
        # Arrange
        original = create_user(identifier="auth0|reused")
        async with unit_of_work() as uow:
            uow.users.add(original)
            await uow.commit()
        async with unit_of_work() as uow:
            await uow.users.remove(await uow.users.find_by_id(original.id))
            await uow.commit()

        # Act
        async with unit_of_work() as uow:
            in_use_after_delete = await uow.users.identifier_in_use("auth0|reused")
            missing = await uow.users.find_by_identifier("auth0|reused")
            replacement = create_user(identifier="auth0|reused")
            uow.users.add(replacement)
            await uow.commit()

        # Assert
        assert in_use_after_delete is False
        assert missing is None
        async with unit_of_work() as uow:
            assert await uow.users.identifier_in_use("auth0|reused") is True
            found = await uow.users.find_by_identifier("auth0|reused")
            assert found.id == replacement.id


@pytest.mark.integration
class TestListPage:
    """Test paged listing."""

    @pytest.mark.asyncio
    async def test_list_page_in_creation_order_with_tenant_filter(self, unit_of_work):
        # Arrange
        acme = create_tenant("Acme")
        beta = create_tenant("Beta")
        async with unit_of_work() as uow:
            uow.tenants.add(acme)
            uow.tenants.add(beta)
            for identifier, tenant in (("u1", acme), ("u2", beta), ("u3", acme)):
                uow.users.add(create_user(identifier=identifier, tenant_id=tenant.id))
            await uow.commit()

        # Act
        async with unit_of_work(current_user=None) as uow:
            all_page, all_total = await uow.users.list_page(1, 2)
            first_ids = [user.identifier for user in all_page]
            second_page, _ = await uow.users.list_page(2, 2)
            second_ids = [user.identifier for user in second_page]
            acme_page, acme_total = await uow.users.list_page(1, 10, tenant_id=acme.id)
            acme_ids = [user.identifier for user in acme_page]

        # Assert
        assert first_ids == ["u1", "u2"]
        assert all_total == 3
        assert second_ids == ["u3"]
        assert acme_ids == ["u1", "u3"]
        assert acme_total == 2

    @pytest.mark.asyncio
    async def test_list_page_past_the_end(self, unit_of_work):
        async with unit_of_work() as uow:
            uow.tenants.add(create_tenant())
            await uow.commit()

        async with unit_of_work() as uow:
            page, total = await uow.tenants.list_page(3, 10)
            assert list(page) == []

        assert total == 1


@pytest.mark.integration
class TestTenantScope:
    """Test that the acting user's tenant restricts user lookups."""

    @pytest.mark.asyncio
    async def test_member_sees_only_own_tenant(self, unit_of_work):
        # Arrange
        acme, beta, ada, bob = await _seed_two_tenants(unit_of_work)

        # Act
        async with unit_of_work(current_user="auth0|ada") as uow:
            scope = await uow.current_tenant_id()
            own = await uow.users.find_by_id(ada.id)
            other_by_id = await uow.users.find_by_id(bob.id)
            other_by_identifier = await uow.users.find_by_identifier("auth0|bob")
            page, total = await uow.users.list_page(1, 10)
            visible = [user.identifier for user in page]
            other_tenant_page, other_total = await uow.users.list_page(
                1, 10, tenant_id=beta.id
            )
            other_tenant_visible = list(other_tenant_page)

        # Assert
        assert scope == acme.id
        assert own is not None
        assert other_by_id is None
        assert other_by_identifier is None
        assert visible == ["auth0|ada"]
        assert total == 1
        assert other_tenant_visible == []
        assert other_total == 0

    @pytest.mark.asyncio
    async def test_identifier_in_use_ignores_scope(self, unit_of_work):
        await _seed_two_tenants(unit_of_work)

        async with unit_of_work(current_user="auth0|ada") as uow:
            assert await uow.users.identifier_in_use("auth0|bob") is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "current_user", [None, "auth0|root", "auth0|unknown"]
    )
    async def test_unscoped_callers_see_every_tenant(self, unit_of_work, current_user):
        await _seed_two_tenants(unit_of_work)

        async with unit_of_work(current_user=current_user) as uow:
            scope = await uow.current_tenant_id()
            page, total = await uow.users.list_page(1, 10)
            visible = sorted(user.identifier for user in page)

        assert scope is None
        assert total == 3
        assert visible == ["auth0|ada", "auth0|bob", "auth0|root"]

    @pytest.mark.asyncio
    async def test_tenant_lookups_are_not_scoped(self, unit_of_work):
        acme, beta, _, _ = await _seed_two_tenants(unit_of_work)

        async with unit_of_work(current_user="auth0|ada") as uow:
            assert await uow.tenants.find_by_id(beta.id) is not None
