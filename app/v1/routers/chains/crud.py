from fastapi import Depends, Response
from app.core.config import settings
from app.core.exception_handlers.error_response import REQUEST_ID_HEADER
from app.lib.request_context import ChainRequestContext
from app.v1.schemas.chain import (
    ChainApiResponse,
    ChainSearchParams,
)
from app.v1.schemas.common.error import ErrorResponse
from app.v1.dependencies.context.get_request_context import get_request_context
from app.v1.dependencies.query_params.get_chain_search_params import (
    get_chain_search_params,
)
from app.v1.dependencies.services.chain_service import get_chain_service
from app.v1.services.chain_service import ChainService

from app.core.routers.api_router import APIRouter

router = APIRouter(prefix="/chains", tags=["Chains"])


@router.get(
    "",
    response_model=ChainApiResponse,
    response_model_by_alias=True,
    response_model_exclude_none=True,
    name="chains:list_chains",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid query parameters."},
        500: {"model": ErrorResponse, "description": "Chain data unavailable."},
    },
)
async def list_chains(
    response: Response,
    context: ChainRequestContext = Depends(get_request_context),
    search_params: ChainSearchParams = Depends(get_chain_search_params),
    service: ChainService = Depends(get_chain_service),
):
    """
    Retrieve CCIP chains grouped by chain family and keyed by `outputKey`.
    """
    result = await service.get_chains(search_params=search_params)
    response.headers["Cache-Control"] = settings.CACHE_CONTROL
    response.headers[REQUEST_ID_HEADER] = context.request_id
    return result
