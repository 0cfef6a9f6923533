from pydantic import BaseModel
from typing import Dict, Optional

class HealthResponse(BaseModel):
    ok: bool
    snapshots: Dict[str, bool]

class ErrorResponse(BaseModel):
    message: str
    error: Optional[str] = None
