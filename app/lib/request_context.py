from dataclasses import dataclass, field
from typing import Any
from uuid import uuid4

from app.core.logger import StructuredLogger, get_structured_logger


@dataclass(frozen=True)
class ChainRequestContext:
    """Correlation id plus the sink every stage of a request logs through."""

    request_id: str = field(default_factory=lambda: str(uuid4()))
    logger: StructuredLogger = field(
        default_factory=lambda: get_structured_logger("app.v1.chains")
    )

    def debug(self, message: str, **fields: Any) -> None:
        self.logger.debug(message, requestId=self.request_id, **fields)

    def info(self, message: str, **fields: Any) -> None:
        self.logger.info(message, requestId=self.request_id, **fields)

    def warning(self, message: str, **fields: Any) -> None:
        self.logger.warning(message, requestId=self.request_id, **fields)

    def error(self, message: str, **fields: Any) -> None:
        self.logger.error(message, requestId=self.request_id, **fields)
