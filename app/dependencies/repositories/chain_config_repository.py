from app.core.config import settings
from app.repositories.chain_config_repository import ChainConfigRepository


def get_chain_config_repository() -> ChainConfigRepository:
    return ChainConfigRepository(settings.CHAINS_CONFIG_DIR)
