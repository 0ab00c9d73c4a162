from typing import Callable, Dict, List, Mapping, Optional, Any

from app.lib.exception.api_exception import CCIPError, to_ccip_error
from app.lib.request_context import ChainRequestContext
from app.models.enums.chain import OutputKey
from app.repositories.chain_config_repository import ChainConfigRepository
from app.v1.schemas.chain import (
    ChainApiResponse,
    ChainDetails,
    ChainResponseMeta,
    ChainSearchParams,
)
from app.v1.services.chain_data_service import ChainDataService

DEFAULT_OUTPUT_KEY = OutputKey.INTERNAL_ID

_FIELD_ACCESSORS: Dict[OutputKey, Callable[[ChainDetails], Any]] = {
    OutputKey.CHAIN_ID: lambda chain: chain.chain_id,
    OutputKey.SELECTOR: lambda chain: chain.selector,
    OutputKey.INTERNAL_ID: lambda chain: chain.internal_id,
}


def chain_field_value(chain: ChainDetails, key: OutputKey) -> str:
    return str(_FIELD_ACCESSORS[key](chain))


def reshape_chain_families(
    families: Mapping[str, List[ChainDetails]],
    output_key: Optional[OutputKey] = None,
) -> Dict[str, Dict[str, ChainDetails]]:
    """
    Key every family's chains by `output_key` (internalId when not given).
    A later chain with an already-used key replaces the earlier one.
    """
    key = output_key or DEFAULT_OUTPUT_KEY
    return {
        family: {chain_field_value(chain, key): chain for chain in chains}
        for family, chains in families.items()
    }


class ChainService:
    def __init__(
        self,
        chain_config_repository: ChainConfigRepository,
        context: ChainRequestContext,
        data_service_factory: Callable[..., ChainDataService] = ChainDataService,
    ):
        self.chain_config_repository = chain_config_repository
        self.context = context
        self.data_service_factory = data_service_factory

    async def get_chains(self, search_params: ChainSearchParams) -> ChainApiResponse:
        """
        Retrieve the chains of an environment matching the filters, keyed by
        the requested output key within each chain family.
        """
        try:
            return await self._get_chains(search_params)
        except CCIPError:
            raise
        except Exception as exc:
            raise to_ccip_error(exc) from exc

    async def _get_chains(self, search_params: ChainSearchParams) -> ChainApiResponse:
        environment = search_params.environment
        filters = search_params.filters

        config = await self.chain_config_repository.load_chain_configuration(
            environment
        )
        self.context.debug(
            "Chain configuration loaded",
            environment=environment.value,
            chainCount=len(config.chains_config),
        )

        data_service = self.data_service_factory(config.chains_config)
        result = await data_service.get_filtered_chains(environment, filters)
        self.context.info(
            "Chain data retrieved successfully",
            validChainCount=result.metadata.valid_chain_count,
            errorCount=len(result.errors),
            filters=filters.model_dump(by_alias=True, exclude_none=True),
        )

        metadata = ChainResponseMeta(
            environment=environment,
            ignored_chain_count=result.metadata.ignored_chain_count,
            valid_chain_count=result.metadata.valid_chain_count,
        )
        data = reshape_chain_families(result.data, search_params.output_key)
        for family, chains in result.data.items():
            if len(data[family]) < len(chains):
                self.context.warning(
                    "Output key collision, later chains replaced earlier ones",
                    family=family,
                    outputKey=(search_params.output_key or DEFAULT_OUTPUT_KEY).value,
                    chainCount=len(chains),
                    keyedCount=len(data[family]),
                )

        response = ChainApiResponse(metadata=metadata, data=data, ignored=result.errors)
        self.context.info(
            "Sending successful response",
            metadata=metadata.model_dump(mode="json", by_alias=True),
        )
        return response
