import asyncio
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from app.models.enums.chain import Environment


class ChainConfigurationError(Exception):
    pass


@dataclass(frozen=True)
class ChainConfiguration:
    environment: Environment
    # internal id -> raw chain entry
    chains_config: Dict[str, Dict[str, Any]]


class ChainConfigRepository:
    """Reads the per-environment chain configuration documents."""

    def __init__(self, config_dir: str):
        self.config_dir = Path(config_dir)

    def path_for(self, environment: Environment) -> Path:
        return self.config_dir / f"{environment.value}.json"

    async def load_chain_configuration(
        self, environment: Environment
    ) -> ChainConfiguration:
        path = self.path_for(environment)
        raw = await asyncio.to_thread(self._read, path)
        chains = raw.get("chains") if isinstance(raw, dict) else None
        if not isinstance(chains, dict):
            raise ChainConfigurationError(
                f"Chain configuration {path.name} has no 'chains' object"
            )
        for internal_id, entry in chains.items():
            if not isinstance(entry, dict):
                raise ChainConfigurationError(
                    f"Chain configuration entry '{internal_id}' in {path.name} is not an object"
                )
        return ChainConfiguration(environment=environment, chains_config=chains)

    @staticmethod
    def _read(path: Path) -> Any:
        try:
            with path.open(encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError as exc:
            raise ChainConfigurationError(
                f"Chain configuration not found: {path.name}"
            ) from exc
        except json.JSONDecodeError as exc:
            raise ChainConfigurationError(
                f"Chain configuration {path.name} is not valid JSON: {exc}"
            ) from exc
