"""Algolia search integration over the REST API.

Listings go through the browse endpoint so results keep the catalog order;
searches go through the query endpoint so results keep Algolia's ranking.
"""

import json
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

import httpx

from cdnjs_api.core.logging import searchLogger
from cdnjs_api.models.errors import SearchQueryRejected, SearchProviderUnavailable
from cdnjs_api.search.base import SearchIndex, SearchQuery, SearchHits

# Algolia refuses hitsPerPage above this value
MAX_HITS_PER_PAGE = 1000


class AlgoliaSearchIndex(SearchIndex):
    backend = "algolia"

    def __init__(
        self,
        appId: str,
        apiKey: str,
        indexName: str,
        timeout: float = 4.0,
        pageSize: int = MAX_HITS_PER_PAGE,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.indexName = indexName
        self.pageSize = pageSize
        self.client = httpx.AsyncClient(
            base_url=f"https://{appId}-dsn.algolia.net",
            headers={
                "X-Algolia-Application-Id": appId,
                "X-Algolia-API-Key": apiKey,
            },
            timeout=timeout,
            transport=transport,
        )

    async def close(self):
        await self.client.aclose()

    async def search(self, query: SearchQuery) -> SearchHits:
        searchLogger.debug(
            f"Algolia {'browse' if query.isListing else 'query'} on {self.indexName} limit={query.limit}"
        )

        if query.isListing:
            # an uncapped listing walks the whole catalog
            hits, nbHits = await self._browse(query.limit)
        else:
            hits, nbHits = await self._query(
                query.term, query.restrictTo, query.limit or self.pageSize
            )

        if query.limit is not None:
            return SearchHits(hits=hits, available=max(nbHits, len(hits)))
        return SearchHits(hits=hits, available=len(hits))

    def _params(self, **params) -> str:
        params["attributesToHighlight"] = "[]"
        params["attributesToSnippet"] = "[]"
        return urlencode(params)

    async def _browse(self, cap: Optional[int]):
        """ Walk the browse cursor until cap hits are collected or the index is exhausted
        """
        path = f"/1/indexes/{self.indexName}/browse"
        hitsPerPage = min(cap or MAX_HITS_PER_PAGE, MAX_HITS_PER_PAGE)
        body = await self._post(path, {"params": self._params(query="", hitsPerPage=hitsPerPage)})

        hits: List[Dict[str, Any]] = list(body.get("hits", []))
        nbHits = body.get("nbHits", len(hits))
        cursor = body.get("cursor")

        while cursor and (cap is None or len(hits) < cap):
            body = await self._post(path, {"cursor": cursor})
            hits.extend(body.get("hits", []))
            cursor = body.get("cursor")

        if cap is None:
            return hits, nbHits
        return hits[:cap], nbHits

    async def _query(self, term: str, restrictTo, cap: int):
        """ Page through ranked results until cap hits are collected or pages run out
        """
        path = f"/1/indexes/{self.indexName}/query"
        hitsPerPage = min(cap, MAX_HITS_PER_PAGE)
        params = {"query": term, "hitsPerPage": hitsPerPage}
        if restrictTo:
            params["restrictSearchableAttributes"] = json.dumps(list(restrictTo))

        hits: List[Dict[str, Any]] = []
        nbHits = 0
        page = 0
        nbPages = 1
        while page < nbPages and len(hits) < cap:
            body = await self._post(path, {"params": self._params(page=page, **params)})
            hits.extend(body.get("hits", []))
            nbHits = body.get("nbHits", len(hits))
            nbPages = body.get("nbPages", 0)
            page += 1

        return hits[:cap], nbHits

    async def _post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        try:
            response = await self.client.post(path, json=payload)
        except httpx.TimeoutException as e:
            raise SearchProviderUnavailable(
                message=f"Algolia request timed out: {str(e)}",
                backend=self.backend,
                statusCode=504,
            )
        except httpx.RequestError as e:
            raise SearchProviderUnavailable(
                message=f"Algolia unreachable: {str(e)}",
                backend=self.backend,
            )

        if response.status_code == 400:
            raise SearchQueryRejected(
                message=_errorMessage(response),
                backend=self.backend,
            )
        if response.status_code >= 400:
            raise SearchProviderUnavailable(
                message=f"Algolia error {response.status_code}: {_errorMessage(response)}",
                backend=self.backend,
            )

        return response.json()


def _errorMessage(response: httpx.Response) -> str:
    try:
        return response.json().get("message", response.text)
    except ValueError:
        return response.text
