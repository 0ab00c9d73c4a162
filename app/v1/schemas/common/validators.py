from __future__ import annotations

import re
from typing import Callable, Dict, Optional

from app.core.config import settings
from app.lib.exception.api_exception import CCIPError
from app.models.enums.chain import Environment, OutputKey
from app.v1.schemas.chain.search_params import ChainFilters

NUMERIC_CHAIN_ID_RE = re.compile(r"^[0-9]+$")
# Solana/Aptos style genesis hashes
BASE58_CHAIN_ID_RE = re.compile(r"^[1-9A-HJ-NP-Za-km-z]{32,44}$")
SELECTOR_RE = re.compile(r"^[0-9]{1,20}$")
INTERNAL_ID_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

MAX_SELECTOR = 2**64 - 1


def _is_chain_id(value: str) -> bool:
    return bool(NUMERIC_CHAIN_ID_RE.match(value) or BASE58_CHAIN_ID_RE.match(value))


def _is_selector(value: str) -> bool:
    return bool(SELECTOR_RE.match(value)) and int(value) <= MAX_SELECTOR


def _is_internal_id(value: str) -> bool:
    return bool(INTERNAL_ID_RE.match(value))


# attribute name -> (query parameter name, item check, expected shape)
_FILTER_RULES: Dict[str, tuple[str, Callable[[str], bool], str]] = {
    "chain_id": (
        "chainId",
        _is_chain_id,
        "a numeric chain ID or a base58 genesis hash",
    ),
    "selector": (
        "selector",
        _is_selector,
        "an unsigned 64-bit decimal chain selector",
    ),
    "internal_id": (
        "internalId",
        _is_internal_id,
        "a lowercase kebab-case identifier such as 'ethereum-mainnet'",
    ),
}


def validate_environment(raw: Optional[str]) -> Environment:
    """
    Resolve the requested environment.
    Missing or empty values fall back to DEFAULT_ENVIRONMENT.
    """
    if not raw:
        return Environment(settings.DEFAULT_ENVIRONMENT)
    try:
        return Environment(raw)
    except ValueError:
        allowed = ", ".join(e.value for e in Environment)
        raise CCIPError.validation(
            f"Invalid environment '{raw}'. Must be one of: {allowed}",
            {"field": "environment", "value": raw},
        )


def validate_filters(candidate: ChainFilters) -> ChainFilters:
    """
    Check the shape of every present filter value.
    Each filter may hold a comma-separated list; every item must match the
    shape expected for that field. Absent filters are not checked.
    """
    for attr, (param, is_valid, expected) in _FILTER_RULES.items():
        values = candidate.values_for(attr)
        if values is None:
            continue
        for value in values:
            if not value or not is_valid(value):
                raise CCIPError.validation(
                    f"Invalid {param} '{value}': expected {expected}",
                    {"field": param, "value": getattr(candidate, attr)},
                )
    return candidate


def validate_output_key(raw: Optional[str]) -> Optional[OutputKey]:
    """Returns None when no output key was requested."""
    if not raw:
        return None
    try:
        return OutputKey(raw)
    except ValueError:
        allowed = ", ".join(k.value for k in OutputKey)
        raise CCIPError.validation(
            f"Invalid outputKey '{raw}'. Must be one of: {allowed}",
            {"field": "outputKey", "value": raw},
        )
