from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

from pydantic import ValidationError

from app.core.logger import get_structured_logger
from app.models.enums.chain import ChainFamily, Environment
from app.v1.schemas.chain import ChainDetails, ChainFilters, IgnoredEntry

logger = get_structured_logger(__name__)

REQUIRED_FIELDS = ("chainId", "displayName", "selector", "chainFamily", "router")

# filter attribute -> raw configuration key
FILTER_FIELDS = {
    "chain_id": "chainId",
    "selector": "selector",
    "internal_id": "internalId",
}


@dataclass(frozen=True)
class ChainQueryCounts:
    valid_chain_count: int = 0
    ignored_chain_count: int = 0


@dataclass
class ChainQueryResult:
    data: Dict[str, List[ChainDetails]] = field(default_factory=dict)
    errors: List[IgnoredEntry] = field(default_factory=list)
    metadata: ChainQueryCounts = field(default_factory=ChainQueryCounts)


class ChainDataService:
    def __init__(self, chains_config: Dict[str, Dict[str, Any]]):
        self.chains_config = chains_config

    async def get_filtered_chains(
        self, environment: Environment, filters: ChainFilters
    ) -> ChainQueryResult:
        """
        Apply the filters to every configured chain and group the matches by
        chain family.
        Filters combine conjunctively; a filter holding several values matches
        any of them. Matching chains whose configuration is incomplete are
        reported in `errors` instead of `data`.
        """
        data: Dict[str, List[ChainDetails]] = {}
        errors: List[IgnoredEntry] = []

        wanted = self._wanted_values(filters)
        for key, raw_entry in self.chains_config.items():
            entry = {**raw_entry, "internalId": str(raw_entry.get("internalId") or key)}
            if not self._matches(entry, wanted):
                continue

            chain, ignored = self._to_chain_details(entry)
            if ignored is not None:
                errors.append(ignored)
                continue
            data.setdefault(chain.chain_family.value, []).append(chain)

        counts = ChainQueryCounts(
            valid_chain_count=sum(len(chains) for chains in data.values()),
            ignored_chain_count=len(errors),
        )
        logger.debug(
            "Chains filtered",
            environment=environment.value,
            configuredChainCount=len(self.chains_config),
            validChainCount=counts.valid_chain_count,
            ignoredChainCount=counts.ignored_chain_count,
        )
        return ChainQueryResult(data=data, errors=errors, metadata=counts)

    @staticmethod
    def _wanted_values(filters: ChainFilters) -> Dict[str, Set[str]]:
        """Split each present filter once; keyed by raw configuration key."""
        wanted: Dict[str, Set[str]] = {}
        for attr, config_key in FILTER_FIELDS.items():
            values = filters.values_for(attr)
            if values is not None:
                wanted[config_key] = set(values)
        return wanted

    @staticmethod
    def _matches(entry: Dict[str, Any], wanted: Dict[str, Set[str]]) -> bool:
        for config_key, values in wanted.items():
            value = entry.get(config_key)
            if value is None or str(value) not in values:
                return False
        return True

    @staticmethod
    def _to_chain_details(
        entry: Dict[str, Any],
    ) -> tuple[Optional[ChainDetails], Optional[IgnoredEntry]]:
        internal_id = entry["internalId"]
        chain_id = entry.get("chainId")
        if not isinstance(chain_id, (int, str)):
            chain_id = None

        missing = [name for name in REQUIRED_FIELDS if entry.get(name) in (None, "")]
        if missing:
            return None, IgnoredEntry(
                chain_id=chain_id,
                internal_id=internal_id,
                reason="Missing required fields",
                missing_fields=missing,
            )

        family = entry["chainFamily"]
        if not isinstance(family, str) or family not in {f.value for f in ChainFamily}:
            return None, IgnoredEntry(
                chain_id=chain_id,
                internal_id=internal_id,
                reason=f"Unsupported chain family '{family}'",
            )

        try:
            return ChainDetails.model_validate(entry), None
        except ValidationError as exc:
            first = exc.errors()[0]
            location = ".".join(str(loc) for loc in first.get("loc", ()))
            return None, IgnoredEntry(
                chain_id=chain_id,
                internal_id=internal_id,
                reason=f"Invalid chain configuration: {location}: {first.get('msg')}",
            )
