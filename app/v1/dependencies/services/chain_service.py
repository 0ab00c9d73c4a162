from fastapi import Depends
from app.v1.services.chain_service import ChainService
from app.lib.request_context import ChainRequestContext
from app.repositories.chain_config_repository import ChainConfigRepository
from app.dependencies.repositories.chain_config_repository import (
    get_chain_config_repository,
)
from app.v1.dependencies.context.get_request_context import get_request_context


def get_chain_service(
    chain_config_repository: ChainConfigRepository = Depends(
        get_chain_config_repository
    ),
    context: ChainRequestContext = Depends(get_request_context),
) -> ChainService:
    return ChainService(
        chain_config_repository=chain_config_repository,
        context=context,
    )
