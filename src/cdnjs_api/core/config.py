from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Literal, Optional
import pathlib
import pymongo

from cdnjs_api.crud.fields import FieldRegistry, libraryFieldRegistry
from cdnjs_api.search.base import SearchIndex
from cdnjs_api.search.algolia import AlgoliaSearchIndex
from cdnjs_api.search.memory import MemorySearchIndex
from cdnjs_api.search.mongo import MongoSearchIndex


class Settings(BaseSettings):
	model_config = SettingsConfigDict(
			env_ignore_empty=True,
			extra="ignore"
		)

	CDNJS_SEARCH_BACKEND: Literal["algolia", "mongo", "memory"] = "algolia"

	CDNJS_ALGOLIA_APP_ID: str = Field(default="")
	CDNJS_ALGOLIA_API_KEY: str = Field(default="")
	CDNJS_ALGOLIA_INDEX: str = Field(default="libraries")

	CDNJS_MONGO_URI: str = Field(default="mongodb://localhost:27017")
	CDNJS_MONGO_DATABASE: str = Field(default="cdnjs")
	CDNJS_MONGO_COLLECTION: str = Field(default="libraries")

	CDNJS_CATALOG_PATH: Optional[str] = Field(default=None)

	# stays under the 5 second budget clients allow for a response
	CDNJS_SEARCH_TIMEOUT: float = 4.0
	CDNJS_SEARCH_PAGE_SIZE: int = Field(default=1000, gt=0)
	CDNJS_MAX_QUERY_LENGTH: int = Field(default=512, gt=0)

	CDNJS_CDN_BASE_URL: str = Field(default="https://cdnjs.cloudflare.com/ajax/libs")
	CDNJS_CACHE_MAX_AGE: int = 21600
	CDNJS_CORS_ORIGINS: List[str] = Field(default=["*"])

	CDNJS_LOG_FILE: Optional[str] = Field(default=None)
	CDNJS_LOG_LEVEL: str = Field(default="INFO")
	CDNJS_LOGFIRE_ENV: Optional[str] = Field(default=None)
	CDNJS_LOGFIRE_TOKEN: Optional[str] = Field(default=None)


class CdnjsConfig():
	def __init__(
			self,
			searchIndex: SearchIndex,
			fieldRegistry: FieldRegistry,
			cdnBaseUrl: str,
			cacheMaxAge: int
	):
		self.searchIndex = searchIndex
		self.fieldRegistry = fieldRegistry
		self.cdnBaseUrl = cdnBaseUrl
		self.cacheMaxAge = cacheMaxAge

	def __str__(self):
		return f"Backend Configuration Object:\n\tSearchIndex: {self.searchIndex}\n\tRegistry: {self.fieldRegistry}\n\tCDN: {self.cdnBaseUrl}"


def loadSettings() -> Settings:
	""" Read settings from the environment, layered over a .env file next to the source tree if one exists
	"""
	envPath = pathlib.Path(__file__).parents[2] / ".env"
	if envPath.exists():
		return Settings(_env_file=str(envPath))
	return Settings()


def buildSearchIndex(settings: Settings, registry: FieldRegistry) -> SearchIndex:
	searchable = registry.searchableFields()

	if settings.CDNJS_SEARCH_BACKEND == "memory":
		if settings.CDNJS_CATALOG_PATH:
			return MemorySearchIndex.fromFile(
				settings.CDNJS_CATALOG_PATH,
				searchable,
				maxQueryLength=settings.CDNJS_MAX_QUERY_LENGTH,
				pageSize=settings.CDNJS_SEARCH_PAGE_SIZE
			)
		return MemorySearchIndex(
			[],
			searchable,
			maxQueryLength=settings.CDNJS_MAX_QUERY_LENGTH,
			pageSize=settings.CDNJS_SEARCH_PAGE_SIZE
		)

	if settings.CDNJS_SEARCH_BACKEND == "mongo":
		# MongoClient connects lazily on first query
		mongoClient = pymongo.MongoClient(
			settings.CDNJS_MONGO_URI,
			serverSelectionTimeoutMS=int(settings.CDNJS_SEARCH_TIMEOUT * 1000)
		)
		collection = mongoClient[settings.CDNJS_MONGO_DATABASE][settings.CDNJS_MONGO_COLLECTION]
		return MongoSearchIndex(
			collection,
			searchable,
			maxQueryLength=settings.CDNJS_MAX_QUERY_LENGTH,
			pageSize=settings.CDNJS_SEARCH_PAGE_SIZE
		)

	return AlgoliaSearchIndex(
		appId=settings.CDNJS_ALGOLIA_APP_ID,
		apiKey=settings.CDNJS_ALGOLIA_API_KEY,
		indexName=settings.CDNJS_ALGOLIA_INDEX,
		timeout=settings.CDNJS_SEARCH_TIMEOUT,
		pageSize=settings.CDNJS_SEARCH_PAGE_SIZE
	)


def buildConfig(settings: Settings) -> CdnjsConfig:
	return CdnjsConfig(
		searchIndex=buildSearchIndex(settings, libraryFieldRegistry),
		fieldRegistry=libraryFieldRegistry,
		cdnBaseUrl=settings.CDNJS_CDN_BASE_URL,
		cacheMaxAge=settings.CDNJS_CACHE_MAX_AGE
	)


settings = loadSettings()

appConfig = buildConfig(settings)
