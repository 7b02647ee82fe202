import json
import pathlib
from typing import Any, Dict, Sequence

from cdnjs_api.core.logging import searchLogger
from cdnjs_api.models.errors import SearchQueryRejected
from cdnjs_api.search.base import SearchIndex, SearchQuery, SearchHits
from cdnjs_api.search.ranking import rankRecords


class MemorySearchIndex(SearchIndex):
	""" In-process index over a fixed list of library records.

	Used for local development from a JSON catalog dump, and as the fake
	provider in tests. Mirrors the hosted provider's behaviour closely enough
	for the endpoint contract: catalog order for listings, name-first
	relevance for searches, and rejection of over-long queries.
	"""
	backend = "memory"

	def __init__(
			self,
			records: Sequence[Dict[str, Any]],
			searchableFields: Sequence[str],
			maxQueryLength: int = 512,
			pageSize: int = 1000
	):
		self.records = list(records)
		self.searchableFields = tuple(searchableFields)
		self.maxQueryLength = maxQueryLength
		self.pageSize = pageSize

	@classmethod
	def fromFile(
			cls,
			catalogPath,
			searchableFields: Sequence[str],
			maxQueryLength: int = 512,
			pageSize: int = 1000
	):
		catalogPath = pathlib.Path(catalogPath)
		with catalogPath.open("r", encoding="utf-8") as catalogFile:
			records = json.load(catalogFile)

		searchLogger.info(f"Loaded {len(records)} libraries from {catalogPath}")
		return cls(
			records,
			searchableFields,
			maxQueryLength=maxQueryLength,
			pageSize=pageSize
		)

	async def search(self, query: SearchQuery) -> SearchHits:
		if query.isListing:
			matched = self.records
		else:
			if len(query.term) > self.maxQueryLength:
				raise SearchQueryRejected(
					message=f"Query is longer than {self.maxQueryLength} characters",
					backend=self.backend
				)
			fields = query.restrictTo or self.searchableFields
			matched = rankRecords(self.records, query.term, fields)

		if query.limit is not None:
			return SearchHits(hits=matched[:query.limit], available=len(matched))

		# uncapped listings serve the whole catalog, uncapped searches one page
		hits = matched if query.isListing else matched[:self.pageSize]
		return SearchHits(hits=hits, available=len(hits))
