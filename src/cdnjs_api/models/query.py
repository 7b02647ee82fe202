from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Tuple
from enum import Enum

from cdnjs_api.models.library import DEFAULT_PROJECTION


class OutputModeEnum(str, Enum):
	JSON = "json"
	HUMAN = "human"

	def __repr__(self):
		return self.value


class QueryRequest(BaseModel):
	""" Typed form of the /libraries query string, before allow-list filtering
	"""
	model_config = ConfigDict(frozen=True)

	rawSearch: Optional[str] = Field(default=None)
	searchFields: Tuple[str, ...] = Field(default=())
	projectionFields: Tuple[str, ...] = Field(default=DEFAULT_PROJECTION)
	limit: Optional[int] = Field(default=None, gt=0)
	outputMode: OutputModeEnum = Field(default=OutputModeEnum.JSON)

	@property
	def isSearch(self) -> bool:
		return self.rawSearch is not None
