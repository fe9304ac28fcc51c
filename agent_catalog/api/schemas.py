"""Response bodies exposed by the catalog API."""

from typing import Any, Dict

from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str


class SubmissionResponse(BaseModel):
    message: str
    agent: Dict[str, Any]  # stored record, approved is always false


class HealthResponse(BaseModel):
    service: str
    version: str
    status: str
