import pytest
from app.core.config import DEFAULT_CHAINS_CONFIG_DIR
from app.models.enums.chain import Environment
from app.repositories.chain_config_repository import (
    ChainConfigRepository,
    ChainConfigurationError,
)


@pytest.mark.asyncio
async def test_loads_environment_document(chain_config_repository, mainnet_chains):
    config = await chain_config_repository.load_chain_configuration(Environment.MAINNET)
    assert config.environment is Environment.MAINNET
    assert config.chains_config == mainnet_chains


@pytest.mark.asyncio
async def test_missing_document_raises(tmp_path):
    repository = ChainConfigRepository(str(tmp_path))
    with pytest.raises(ChainConfigurationError, match="not found"):
        await repository.load_chain_configuration(Environment.TESTNET)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "content, match",
    [
        ("{not json", "not valid JSON"),
        ('{"networks": {}}', "no 'chains' object"),
        ('{"chains": {"ethereum-mainnet": 1}}', "is not an object"),
    ],
)
async def test_malformed_document_raises(tmp_path, content, match):
    (tmp_path / "mainnet.json").write_text(content)
    repository = ChainConfigRepository(str(tmp_path))
    with pytest.raises(ChainConfigurationError, match=match):
        await repository.load_chain_configuration(Environment.MAINNET)


@pytest.mark.asyncio
@pytest.mark.parametrize("environment", list(Environment))
async def test_bundled_configuration_loads(environment):
    repository = ChainConfigRepository(DEFAULT_CHAINS_CONFIG_DIR)
    config = await repository.load_chain_configuration(environment)
    assert config.chains_config
