from .chain_config_repository_fixture import (
    chain_config_repository,
    mainnet_chains,
    testnet_chains,
)

__all__ = [
    "chain_config_repository",
    "mainnet_chains",
    "testnet_chains",
]
