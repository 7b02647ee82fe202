from cdnjs_api.crud.allow_list import filterSearch
from cdnjs_api.crud.fields import FieldRegistry
from cdnjs_api.models.query import QueryRequest
from cdnjs_api.search.base import SearchQuery


def buildSearchQuery(
	queryRequest: QueryRequest,
	registry: FieldRegistry
) -> SearchQuery:
	""" Translate a parsed request into the backend search request.

	The search term is forwarded verbatim, whatever its length. Search fields
	only apply to ranked searches and never include anything the registry
	does not know, since the provider errors on unknown attributes.
	"""
	if not queryRequest.isSearch:
		return SearchQuery(
			term=None,
			restrictTo=None,
			limit=queryRequest.limit
		)

	searchFields = filterSearch(queryRequest.searchFields, registry)

	return SearchQuery(
		term=queryRequest.rawSearch,
		restrictTo=searchFields or None,
		limit=queryRequest.limit
	)
