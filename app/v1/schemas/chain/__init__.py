from .read import ChainDetails
from .read_list import ChainApiResponse
from .ignored import IgnoredEntry
from .list_response_meta import ChainResponseMeta
from .search_params import ChainFilters, ChainSearchParams

__all__ = [
    "ChainDetails",
    "ChainApiResponse",
    "IgnoredEntry",
    "ChainResponseMeta",
    "ChainFilters",
    "ChainSearchParams",
]
