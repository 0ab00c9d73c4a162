from typing import List, Optional, Union
from pydantic import BaseModel, Field, ConfigDict


class IgnoredEntry(BaseModel):
    chain_id: Optional[Union[int, str]] = Field(
        None, alias="chainId", description="Native chain ID, when known."
    )
    internal_id: str = Field(
        ..., alias="internalId", description="Internal chain identifier."
    )
    reason: str = Field(..., description="Why the chain was left out.")
    missing_fields: List[str] = Field(
        default_factory=list,
        alias="missingFields",
        description="Required fields absent from the chain configuration.",
    )

    model_config = ConfigDict(populate_by_name=True)
