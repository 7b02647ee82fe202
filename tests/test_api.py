import re

import pytest

from cdnjs_api.models.library import LIBRARY_FIELDS

CACHE_CONTROL = "public, max-age=21600"
LATEST_PATTERN = re.compile(r"https://cdnjs\.cloudflare\.com/ajax/libs/.+/.+/.*")
LONG_QUERY = (
	"this-is-a-very-very-long-query-that-the-provider-wont-like-and-will-return-an-error-for-"
	"as-it-is-longer-than-512-chars-"
) * 6


def assertEnvelope(response):
	assert response.status_code == 200
	assert response.headers["Cache-Control"] == CACHE_CONTROL
	assert response.headers["content-type"].startswith("application/json")

	body = response.json()
	assert isinstance(body["results"], list)
	assert isinstance(body["total"], int)
	assert isinstance(body["available"], int)
	return body


def assertAllHits(body):
	assert len(body["results"]) == body["total"] == body["available"]


def test_listing(client, catalog):
	body = assertEnvelope(client.get("/libraries"))
	assertAllHits(body)
	assert body["total"] == len(catalog)

	for result in body["results"]:
		assert len(result) == 2
		assert isinstance(result["name"], str)
		assert result["latest"] is None or LATEST_PATTERN.fullmatch(result["latest"])


def test_null_latest_is_kept(client):
	body = assertEnvelope(client.get("/libraries"))
	freshLib = [result for result in body["results"] if result["name"] == "fresh-lib"][0]

	assert "latest" in freshLib
	assert freshLib["latest"] is None


def test_cors_headers(client):
	response = client.get("/libraries", headers={"Origin": "https://example.com"})
	assert response.headers["access-control-allow-origin"] == "*"


def test_human_output(client):
	response = client.get("/libraries?output=human", headers={"Origin": "https://example.com"})

	assert response.status_code == 200
	assert response.headers["Cache-Control"] == CACHE_CONTROL
	assert response.headers["content-type"].startswith("text/html")
	assert response.headers["access-control-allow-origin"] == "*"
	assert "<pre>" in response.text
	assert "&quot;results&quot;" in response.text


def test_limit(client):
	body = assertEnvelope(client.get("/libraries?limit=10"))

	assert len(body["results"]) == 10
	assert body["total"] == 10
	assert body["available"] > 10


@pytest.mark.parametrize("limit", ["abc", "0", "-3", "", "99999999999999999999"])
def test_invalid_limit_is_ignored(client, limit):
	body = assertEnvelope(client.get(f"/libraries?limit={limit}"))
	assertAllHits(body)


def test_single_field(client):
	body = assertEnvelope(client.get("/libraries?fields=version"))
	assertAllHits(body)

	for result in body["results"]:
		assert set(result.keys()) == {"name", "latest", "version"}
		assert isinstance(result["version"], str)


@pytest.mark.parametrize("path", [
	"/libraries?fields=filename,version",
	"/libraries?fields=filename&fields=version",
])
def test_multiple_fields(client, path):
	body = assertEnvelope(client.get(path))
	assertAllHits(body)

	for result in body["results"]:
		assert set(result.keys()) == {"name", "latest", "filename", "version"}


def test_unknown_fields_are_dropped(client):
	body = assertEnvelope(client.get("/libraries?fields=version,not-a-field"))

	for result in body["results"]:
		assert set(result.keys()) == {"name", "latest", "version"}


def test_all_fields(client):
	body = assertEnvelope(client.get("/libraries?fields=*"))
	assertAllHits(body)

	for result in body["results"]:
		assert set(result.keys()) == set(LIBRARY_FIELDS)
		assert isinstance(result["name"], str)
		assert result["latest"] is None or isinstance(result["latest"], str)
		assert result["keywords"] is None or isinstance(result["keywords"], list)
		assert isinstance(result["alternativeNames"], list)
		assert result["github"] is None or isinstance(result["github"], dict)
		assert result["repository"] is None or isinstance(result["repository"], dict)
		assert isinstance(result["objectID"], str)


def test_search(client):
	body = assertEnvelope(client.get("/libraries?search=twitter-bootstrap"))
	assertAllHits(body)

	assert body["results"][0]["name"] == "twitter-bootstrap"
	for result in body["results"]:
		assert len(result) == 2
		assert isinstance(result["latest"], str)


def test_long_search_does_not_error(client):
	assert len(LONG_QUERY) > 512
	body = assertEnvelope(client.get("/libraries", params={"search": LONG_QUERY}))
	assertAllHits(body)


@pytest.mark.parametrize("path", [
	"/libraries?search=backbone.js&search_fields=keywords,github.user",
	"/libraries?search=backbone.js&search_fields=keywords&search_fields=github.user",
])
def test_search_with_fields(client, path):
	body = assertEnvelope(client.get(path))
	assertAllHits(body)

	assert body["results"]
	for result in body["results"]:
		assert len(result) == 2
		assert result["name"] != "backbone.js"


def test_search_with_invalid_fields(client):
	body = assertEnvelope(client.get("/libraries?search=backbone.js&search_fields=this-field-doesnt-exist"))
	assertAllHits(body)

	assert body["results"][0]["name"] == "backbone.js"


def test_same_query_same_results(client):
	first = client.get("/libraries?search=backbone&fields=*").json()
	second = client.get("/libraries?search=backbone&fields=*").json()
	assert first == second


def test_provider_unavailable(client):
	from cdnjs_api.main import app
	from cdnjs_api.deps import getLibrariesRequest, librariesRequest
	from cdnjs_api.core.config import CdnjsConfig
	from cdnjs_api.crud.libraries import CdnjsLibrariesRequest
	from cdnjs_api.models.errors import SearchProviderUnavailable
	from cdnjs_api.search.base import SearchIndex

	class DownIndex(SearchIndex):
		backend = "down"

		async def search(self, query):
			raise SearchProviderUnavailable("timed out", self.backend, statusCode=504)

	downRequest = CdnjsLibrariesRequest(CdnjsConfig(
		searchIndex=DownIndex(),
		fieldRegistry=librariesRequest.config.fieldRegistry,
		cdnBaseUrl=librariesRequest.config.cdnBaseUrl,
		cacheMaxAge=librariesRequest.config.cacheMaxAge
	))
	app.dependency_overrides[getLibrariesRequest] = lambda: downRequest
	try:
		response = client.get("/libraries", headers={"Origin": "https://example.com"})
	finally:
		app.dependency_overrides.clear()

	assert response.status_code == 504
	assert response.headers["Cache-Control"] == "no-store"
	assert response.headers["access-control-allow-origin"] == "*"
	assert response.json() == {"error": "Search provider unavailable", "status": 504}


def test_healthz(client):
	assert client.get("/healthz").json() == {"status": "healthy"}


def test_process_time_header(client):
	assert "X-Process-Time" in client.get("/healthz").headers
