from typing import Optional
from fastapi import Depends, Query
from app.lib.request_context import ChainRequestContext
from app.models.enums.chain import Environment, OutputKey
from app.v1.dependencies.context.get_request_context import get_request_context
from app.v1.schemas.chain.search_params import ChainFilters, ChainSearchParams
from app.v1.schemas.common.validators import (
    validate_environment,
    validate_filters,
    validate_output_key,
)


def get_chain_search_params(
    environment: Optional[str] = Query(
        None, description=f"One of: {', '.join(e.value for e in Environment)}."
    ),
    chain_id: Optional[str] = Query(
        None, alias="chainId", description="Comma-separated native chain IDs."
    ),
    selector: Optional[str] = Query(
        None, description="Comma-separated CCIP chain selectors."
    ),
    internal_id: Optional[str] = Query(
        None, alias="internalId", description="Comma-separated internal chain IDs."
    ),
    output_key: Optional[str] = Query(
        None,
        alias="outputKey",
        description=f"Field to key chains by: {', '.join(k.value for k in OutputKey)}.",
    ),
    context: ChainRequestContext = Depends(get_request_context),
) -> ChainSearchParams:
    resolved_environment = validate_environment(environment)
    context.debug("Environment validated", environment=resolved_environment.value)

    filters = validate_filters(
        ChainFilters(
            chain_id=chain_id or None,
            selector=selector or None,
            internal_id=internal_id or None,
        )
    )
    context.debug(
        "Filters validated",
        filters=filters.model_dump(by_alias=True, exclude_none=True),
    )

    resolved_output_key = validate_output_key(output_key)
    context.debug(
        "Output key validated",
        outputKey=resolved_output_key.value if resolved_output_key else None,
    )

    return ChainSearchParams(
        environment=resolved_environment,
        filters=filters,
        output_key=resolved_output_key,
    )
