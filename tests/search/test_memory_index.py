import asyncio

import pytest

from cdnjs_api.models.errors import SearchQueryRejected
from cdnjs_api.search.base import SearchQuery
from cdnjs_api.search.memory import MemorySearchIndex
from cdnjs_api.search.ranking import resolvePath, rankRecords


def names(searchHits):
	return [hit["name"] for hit in searchHits.hits]


def test_listing_keeps_catalog_order(memory_index, catalog):
	searchHits = asyncio.run(memory_index.search(SearchQuery()))

	assert names(searchHits) == [record["name"] for record in catalog]
	assert searchHits.available == len(catalog)


def test_capped_listing_reports_available(memory_index, catalog):
	searchHits = asyncio.run(memory_index.search(SearchQuery(limit=10)))

	assert len(searchHits.hits) == 10
	assert searchHits.available == len(catalog)


def test_exact_name_ranks_first(memory_index):
	searchHits = asyncio.run(memory_index.search(SearchQuery(term="twitter-bootstrap")))

	assert names(searchHits)[0] == "twitter-bootstrap"
	assert "bootstrap-datepicker" in names(searchHits)
	assert searchHits.available == len(searchHits.hits)


def test_restricted_search_skips_name(memory_index):
	searchHits = asyncio.run(memory_index.search(
		SearchQuery(term="backbone.js", restrictTo=("keywords", "github.user"))
	))

	assert "backbone.js" not in names(searchHits)
	assert set(names(searchHits)) == {"backbone.marionette", "backbone.localStorage"}


def test_search_is_case_insensitive(memory_index):
	searchHits = asyncio.run(memory_index.search(SearchQuery(term="JQUERY")))
	assert names(searchHits)[0] == "jquery"


def test_long_query_rejected(memory_index):
	with pytest.raises(SearchQueryRejected):
		asyncio.run(memory_index.search(SearchQuery(term="a" * 513)))


def test_uncapped_listing_ignores_page_size(catalog):
	index = MemorySearchIndex(catalog, ("name",), pageSize=5)
	searchHits = asyncio.run(index.search(SearchQuery()))

	assert len(searchHits.hits) == searchHits.available == len(catalog)


def test_page_size_caps_uncapped_search(catalog):
	index = MemorySearchIndex(catalog, ("name", "description"), pageSize=2)
	searchHits = asyncio.run(index.search(SearchQuery(term="a")))

	assert len(searchHits.hits) == 2
	assert searchHits.available == 2


def test_limit_above_page_size_is_served_in_full(catalog):
	index = MemorySearchIndex(catalog, ("name",), pageSize=5)
	searchHits = asyncio.run(index.search(SearchQuery(limit=12)))

	assert len(searchHits.hits) == 12
	assert searchHits.available == len(catalog)


def test_from_file(tmp_path, catalog):
	catalogFile = tmp_path / "catalog.json"
	catalogFile.write_text('[{"name": "a"}, {"name": "b"}]')

	index = MemorySearchIndex.fromFile(catalogFile, ("name",))
	assert [record["name"] for record in index.records] == ["a", "b"]


def test_resolve_path():
	record = {"github": {"user": "twbs"}, "keywords": ["a"]}

	assert resolvePath(record, "github.user") == "twbs"
	assert resolvePath(record, "github.repo") is None
	assert resolvePath(record, "keywords.user") is None
	assert resolvePath({"github": None}, "github.user") is None


def test_rank_ties_keep_input_order():
	records = [
		{"name": "b", "keywords": ["shared"]},
		{"name": "a", "keywords": ["shared"]},
		{"name": "shared"},
	]
	ranked = rankRecords(records, "shared", ("name", "keywords"))

	assert [record["name"] for record in ranked] == ["shared", "b", "a"]
