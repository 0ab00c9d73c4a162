from typing import Any, Dict, Optional
from pydantic import BaseModel, Field
from app.lib.error_code import ErrorCode


class ErrorResponse(BaseModel):
    error: ErrorCode = Field(..., description="Error type tag.")
    message: str = Field(..., description="Human readable error message.")
    details: Optional[Dict[str, Any]] = Field(
        None, description="Additional context about the failure."
    )
