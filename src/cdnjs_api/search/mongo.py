import asyncio
import re
from typing import Sequence

from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from cdnjs_api.core.logging import searchLogger
from cdnjs_api.models.errors import SearchQueryRejected, SearchProviderUnavailable
from cdnjs_api.search.base import SearchIndex, SearchQuery, SearchHits
from cdnjs_api.search.ranking import rankRecords

# find().limit() must fit a signed 32 bit int
MAX_CURSOR_LIMIT = 2**31 - 1


class MongoSearchIndex(SearchIndex):
	""" Search the catalog collection directly.

	Matching is a case-insensitive regex over each searchable path, so array
	fields like keywords match on any element. Ordering of search results
	uses the same relevance rules as the in-memory index.
	"""
	backend = "mongo"

	def __init__(
			self,
			collection: Collection,
			searchableFields: Sequence[str],
			maxQueryLength: int = 512,
			pageSize: int = 1000
	):
		self.collection = collection
		self.searchableFields = tuple(searchableFields)
		self.maxQueryLength = maxQueryLength
		self.pageSize = pageSize

	async def search(self, query: SearchQuery) -> SearchHits:
		# pymongo blocks, keep it off the event loop
		return await asyncio.to_thread(self._search, query)

	def _search(self, query: SearchQuery) -> SearchHits:
		try:
			if query.isListing:
				return self._listing(query)
			return self._ranked(query)
		except PyMongoError as e:
			raise SearchProviderUnavailable(
				message=f"Catalog store error: {str(e)}",
				backend=self.backend
			)

	def _listing(self, query: SearchQuery) -> SearchHits:
		cursor = self.collection.find({}, projection={"_id": False})

		if query.limit is None:
			hits = list(cursor)
			return SearchHits(hits=hits, available=len(hits))

		hits = list(cursor.limit(min(query.limit, MAX_CURSOR_LIMIT)))
		return SearchHits(hits=hits, available=self.collection.count_documents({}))

	def _ranked(self, query: SearchQuery) -> SearchHits:
		if len(query.term) > self.maxQueryLength:
			raise SearchQueryRejected(
				message=f"Query is longer than {self.maxQueryLength} characters",
				backend=self.backend
			)

		fields = query.restrictTo or self.searchableFields
		pattern = re.compile(re.escape(query.term.strip()), re.IGNORECASE)
		searchLogger.debug(f"Mongo search over {len(fields)} fields")

		matchedDocuments = self.collection.find(
			{"$or": [{field: pattern} for field in fields]},
			projection={"_id": False}
		)
		ranked = rankRecords(matchedDocuments, query.term, fields)

		if query.limit is not None:
			return SearchHits(hits=ranked[:query.limit], available=len(ranked))

		hits = ranked[:self.pageSize]
		return SearchHits(hits=hits, available=len(hits))
