import os
import json
import pathlib

import pytest

dataPath = pathlib.Path(__file__).parent / "data"
catalogPath = dataPath / "libraries.json"

# the app builds its search index at import, point it at the seed catalog first
os.environ["CDNJS_SEARCH_BACKEND"] = "memory"
os.environ["CDNJS_CATALOG_PATH"] = str(catalogPath)

from cdnjs_api.crud.fields import libraryFieldRegistry
from cdnjs_api.search.memory import MemorySearchIndex


def load_test_data(filename):
	with open(dataPath / filename, 'r') as f:
		return json.load(f)


@pytest.fixture(scope="session")
def catalog():
	return load_test_data("libraries.json")


@pytest.fixture
def memory_index(catalog):
	return MemorySearchIndex(catalog, libraryFieldRegistry.searchableFields())


@pytest.fixture(scope="module")
def client():
	from fastapi.testclient import TestClient
	from cdnjs_api.main import app

	with TestClient(app) as testClient:
		yield testClient
