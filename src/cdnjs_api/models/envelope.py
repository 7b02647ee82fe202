from pydantic import BaseModel, Field
from typing import Any, Dict, List


class LibrariesEnvelope(BaseModel):
	results: List[Dict[str, Any]] = Field(default_factory=list)
	total: int
	available: int


class ErrorBody(BaseModel):
	error: str
	status: int
