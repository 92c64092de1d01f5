"""
Tests for parametrization endpoints.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_create_parametrization(client: AsyncClient):
    """Test creating a toggle returns it with ID and camelCase fields."""
    response = await client.post(
        "/api/parametrizations",
        json={"key": "DARK_MODE", "description": "Enable Dark Mode", "enabled": False},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["id"] is not None
    assert data["key"] == "DARK_MODE"
    assert data["enabled"] is False
    assert "createdAt" in data


@pytest.mark.asyncio
async def test_create_duplicate_key(client: AsyncClient, toggle_factory):
    """Test that a duplicate key is rejected with 409."""
    await toggle_factory.create(key="DARK_MODE")

    response = await client.post(
        "/api/parametrizations",
        json={"key": "DARK_MODE", "description": "again", "enabled": True},
    )

    assert response.status_code == 409
    assert response.json()["key"] == "DARK_MODE"


@pytest.mark.asyncio
async def test_create_invalid_payload(client: AsyncClient):
    """Test that an empty key fails validation."""
    response = await client.post(
        "/api/parametrizations",
        json={"key": "", "description": "x", "enabled": True},
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_parametrizations(client: AsyncClient, toggle_factory):
    """Test listing toggles in ID order."""
    await toggle_factory.create(key="FIRST")
    await toggle_factory.create(key="SECOND")

    response = await client.get("/api/parametrizations")

    assert response.status_code == 200
    assert [t["key"] for t in response.json()] == ["FIRST", "SECOND"]


@pytest.mark.asyncio
async def test_get_parametrization(client: AsyncClient, toggle_factory):
    """Test lookups by ID and by key."""
    toggle = await toggle_factory.create(key="BETA_FEATURES")

    by_id = await client.get(f"/api/parametrizations/{toggle.id}")
    by_key = await client.get("/api/parametrizations/key/BETA_FEATURES")

    assert by_id.status_code == 200
    assert by_id.json()["key"] == "BETA_FEATURES"
    assert by_key.status_code == 200
    assert by_key.json()["id"] == toggle.id


@pytest.mark.asyncio
async def test_get_parametrization_not_found(client: AsyncClient):
    """Test that unknown IDs and keys are 404."""
    assert (await client.get("/api/parametrizations/9999")).status_code == 404
    assert (await client.get("/api/parametrizations/key/NOPE")).status_code == 404


@pytest.mark.asyncio
async def test_update_parametrization(client: AsyncClient, toggle_factory):
    """Test full replacement through PUT."""
    toggle = await toggle_factory.create(key="OLD", description="old")

    response = await client.put(
        f"/api/parametrizations/{toggle.id}",
        json={"key": "NEW", "description": "new", "enabled": True},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == toggle.id
    assert data["key"] == "NEW"
    assert data["enabled"] is True


@pytest.mark.asyncio
async def test_update_parametrization_not_found(client: AsyncClient):
    """Test that PUT on an unknown ID is 404 and creates nothing."""
    response = await client.put(
        "/api/parametrizations/9999",
        json={"key": "GHOST", "description": "x", "enabled": True},
    )

    assert response.status_code == 404
    assert (await client.get("/api/parametrizations")).json() == []


@pytest.mark.asyncio
async def test_enable_parametrization(client: AsyncClient, toggle_factory):
    """Test toggling the enabled flag."""
    toggle = await toggle_factory.create(enabled=False)
    await client.get(f"/api/parametrizations/{toggle.id}")

    response = await client.patch(
        f"/api/parametrizations/{toggle.id}/enable",
        params={"enable": "true"},
    )

    assert response.status_code == 204
    assert (await client.get(f"/api/parametrizations/{toggle.id}")).json()["enabled"] is True


@pytest.mark.asyncio
async def test_enable_unknown_parametrization(client: AsyncClient):
    """Test that toggling an unknown ID is a silent no-op."""
    response = await client.patch("/api/parametrizations/9999/enable", params={"enable": "false"})

    assert response.status_code == 204


@pytest.mark.asyncio
async def test_delete_parametrization(client: AsyncClient, toggle_factory):
    """Test that delete removes the toggle from cached reads too."""
    toggle = await toggle_factory.create()
    await client.get(f"/api/parametrizations/{toggle.id}")

    response = await client.delete(f"/api/parametrizations/{toggle.id}")

    assert response.status_code == 204
    assert (await client.get(f"/api/parametrizations/{toggle.id}")).status_code == 404


@pytest.mark.asyncio
async def test_delete_parametrization_nocache(client: AsyncClient, store, toggle_factory):
    """Test that the cache-bypassing delete leaves the cached copy readable."""
    toggle = await toggle_factory.create()
    await client.get(f"/api/parametrizations/{toggle.id}")

    response = await client.delete(f"/api/parametrizations/{toggle.id}/nocache")

    assert response.status_code == 204
    assert await store.find_by_id(toggle.id) is None
    stale = await client.get(f"/api/parametrizations/{toggle.id}")
    assert stale.status_code == 200
    assert stale.json()["id"] == toggle.id


@pytest.mark.asyncio
async def test_delete_unknown_parametrization(client: AsyncClient):
    """Test that deleting an unknown ID is a silent no-op."""
    assert (await client.delete("/api/parametrizations/9999")).status_code == 204
    assert (await client.delete("/api/parametrizations/9999/nocache")).status_code == 204


@pytest.mark.asyncio
async def test_request_id_is_echoed(client: AsyncClient):
    """Test that the caller's request ID comes back on the response."""
    response = await client.get("/api/parametrizations", headers={"X-Request-ID": "abc-123"})

    assert response.headers["X-Request-ID"] == "abc-123"


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    """Test the health endpoint."""
    response = await client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "cache_backend" in data


@pytest.mark.asyncio
async def test_request_id_is_generated(client: AsyncClient):
    """Test that a request without an ID gets a fresh one."""
    first = await client.get("/health")
    second = await client.get("/health")

    assert first.headers["X-Request-ID"]
    assert first.headers["X-Request-ID"] != second.headers["X-Request-ID"]
