from enum import Enum


class Environment(str, Enum):
    MAINNET = "mainnet"
    TESTNET = "testnet"


class ChainFamily(str, Enum):
    EVM = "evm"
    SOLANA = "solana"
    APTOS = "aptos"


class OutputKey(str, Enum):
    """Chain record fields a response can be keyed by."""

    CHAIN_ID = "chainId"
    SELECTOR = "selector"
    INTERNAL_ID = "internalId"
