from typing import List, Optional, Union
from pydantic import BaseModel, Field, ConfigDict
from app.models.enums.chain import ChainFamily


class ChainDetails(BaseModel):
    chain_id: Union[int, str] = Field(
        ...,
        alias="chainId",
        description="Native chain ID (numeric for EVM, genesis hash otherwise).",
    )
    display_name: str = Field(..., alias="displayName", description="Chain name.")
    selector: str = Field(..., description="CCIP chain selector.")
    internal_id: str = Field(
        ..., alias="internalId", description="Internal chain identifier."
    )
    chain_family: ChainFamily = Field(
        ..., alias="chainFamily", description="Chain family (evm, solana, ...)."
    )
    router: str = Field(..., description="CCIP router address.")
    rmn: Optional[str] = Field(None, description="Risk management network address.")
    fee_tokens: List[str] = Field(
        default_factory=list,
        alias="feeTokens",
        description="Symbols of the tokens fees can be paid with.",
    )
    token_admin_registry: Optional[str] = Field(
        None, alias="tokenAdminRegistry", description="Token admin registry address."
    )
    registry_module: Optional[str] = Field(
        None, alias="registryModule", description="Registry module owner address."
    )
    token_pool_factory: Optional[str] = Field(
        None, alias="tokenPoolFactory", description="Token pool factory address."
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)
