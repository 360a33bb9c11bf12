"""Error response body shared by every API error."""

from typing import Any, Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    detail: Any
    error_code: Optional[str] = None
    errors: Optional[list[dict]] = None
