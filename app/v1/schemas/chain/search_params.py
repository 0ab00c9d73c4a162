from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict
from app.models.enums.chain import Environment, OutputKey


def split_filter_values(value: Optional[str]) -> Optional[List[str]]:
    """
    Split a comma-separated filter value ("1,56") into its items.
    Whitespace around items is dropped; empty items are kept so they can be
    rejected by validation.
    """
    if value is None:
        return None
    return [item.strip() for item in value.split(",")]


class ChainFilters(BaseModel):
    chain_id: Optional[str] = Field(None, alias="chainId")
    selector: Optional[str] = None
    internal_id: Optional[str] = Field(None, alias="internalId")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def values_for(self, field_name: str) -> Optional[List[str]]:
        return split_filter_values(getattr(self, field_name))


class ChainSearchParams(BaseModel):
    environment: Environment
    filters: ChainFilters = Field(default_factory=ChainFilters)
    output_key: Optional[OutputKey] = None
