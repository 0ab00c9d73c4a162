import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from app.v1.app import v1_app
from app.dependencies.repositories.chain_config_repository import (
    get_chain_config_repository,
)


@pytest_asyncio.fixture
async def async_client(chain_config_repository):
    v1_app.dependency_overrides[get_chain_config_repository] = (
        lambda: chain_config_repository
    )
    transport = ASGITransport(app=v1_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    v1_app.dependency_overrides.clear()
