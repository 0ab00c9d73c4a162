from typing import Dict, List
from pydantic import BaseModel
from app.v1.schemas.chain.read import ChainDetails
from app.v1.schemas.chain.ignored import IgnoredEntry
from app.v1.schemas.chain.list_response_meta import ChainResponseMeta


class ChainApiResponse(BaseModel):
    metadata: ChainResponseMeta
    data: Dict[str, Dict[str, ChainDetails]]
    ignored: List[IgnoredEntry]
