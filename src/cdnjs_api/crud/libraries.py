from cdnjs_api.crud.cdnjs_request import CdnjsRequest
from cdnjs_api.crud.cdnjs_response import CdnjsResponse
from cdnjs_api.crud.allow_list import filterProjection
from cdnjs_api.crud.envelope import buildEnvelope
from cdnjs_api.crud.projector import projectHits
from cdnjs_api.crud.query_builder import buildSearchQuery
from cdnjs_api.core.logging import searchLogger
from cdnjs_api.models.errors import SearchQueryRejected, SearchProviderUnavailable
from cdnjs_api.models.envelope import ErrorBody
from cdnjs_api.models.query import QueryRequest
from cdnjs_api.search.base import SearchHits


class CdnjsLibrariesRequest(CdnjsRequest):

	async def listLibraries(self, queryRequest: QueryRequest) -> CdnjsResponse:
		""" Run a listing or search against the index and shape the envelope.

		A query the provider rejects yields an empty envelope. Only an
		unreachable or failing provider produces an unsuccessful response.
		"""
		registry = self.config.fieldRegistry
		searchQuery = buildSearchQuery(queryRequest, registry)
		projection = filterProjection(queryRequest.projectionFields, registry)

		try:
			searchHits = await self.config.searchIndex.search(searchQuery)

		except SearchQueryRejected as e:
			searchLogger.warning(f"{e.backend} rejected query: {e.message}")
			searchHits = SearchHits(hits=[], available=0)

		except SearchProviderUnavailable as e:
			searchLogger.error(f"{e.backend} unavailable: {e.message}")
			return CdnjsResponse(
				success=False,
				statusCode=e.statusCode,
				error=ErrorBody(
					error="Search provider unavailable",
					status=e.statusCode
				).model_dump()
			)

		results, dropped = projectHits(
			searchHits.hits,
			projection,
			self.config.cdnBaseUrl
		)
		if queryRequest.limit is not None:
			results = results[:queryRequest.limit]

		return CdnjsResponse(
			success=True,
			statusCode=200,
			model=buildEnvelope(results, searchHits.available - dropped)
		)
