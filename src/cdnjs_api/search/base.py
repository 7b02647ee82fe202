from abc import ABC, abstractmethod
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional, Tuple


class SearchQuery(BaseModel):
	""" Outbound request to a search backend.

	term is None for a listing. restrictTo is None when every searchable
	attribute may match. limit is None when uncapped: a listing then returns the
	whole catalog, a search one backend page.
	"""
	model_config = ConfigDict(frozen=True)

	term: Optional[str] = Field(default=None)
	restrictTo: Optional[Tuple[str, ...]] = Field(default=None)
	limit: Optional[int] = Field(default=None, gt=0)

	@property
	def isListing(self) -> bool:
		return self.term is None


class SearchHits(BaseModel):
	""" Raw records in provider order and the number of matches the provider reports before the cap
	"""
	hits: List[Dict[str, Any]] = Field(default_factory=list)
	available: int = 0


class SearchIndex(ABC):
	backend = "abstract"

	@abstractmethod
	async def search(self, query: SearchQuery) -> SearchHits:
		pass

	async def close(self):
		pass

	def __str__(self):
		return f"{self.__class__.__name__}(backend={self.backend})"
