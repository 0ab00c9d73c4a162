from pydantic import BaseModel, Field, ConfigDict
from app.models.enums.chain import Environment


class ChainResponseMeta(BaseModel):
    environment: Environment = Field(..., description="Environment queried.")
    ignored_chain_count: int = Field(
        0,
        alias="ignoredChainCount",
        description="Chains matching the filters that were left out.",
        json_schema_extra={"example": 0},
    )
    valid_chain_count: int = Field(
        0,
        alias="validChainCount",
        description="Chains returned in `data`.",
        json_schema_extra={"example": 42},
    )

    model_config = ConfigDict(populate_by_name=True)
