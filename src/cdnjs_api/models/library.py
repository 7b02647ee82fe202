from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List


# order of the full projection returned for fields=*
LIBRARY_FIELDS = (
	"name",
	"latest",
	"filename",
	"description",
	"version",
	"keywords",
	"alternativeNames",
	"fileType",
	"github",
	"license",
	"homepage",
	"repository",
	"author",
	"originalName",
	"sri",
	"objectID",
)

DEFAULT_PROJECTION = ("name", "latest")


class GitHubInfo(BaseModel):
	model_config = ConfigDict(extra="allow")

	user: Optional[str] = Field(default=None)
	repo: Optional[str] = Field(default=None)


class RepositoryInfo(BaseModel):
	model_config = ConfigDict(extra="allow")

	type: Optional[str] = Field(default=None)
	url: Optional[str] = Field(default=None)


class LibraryRecord(BaseModel):
	""" A library as stored in the search index.

	Optional attributes stay None when the catalog has no value for them so
	that projection can emit null instead of dropping the key.
	"""
	model_config = ConfigDict(extra="ignore")

	name: str
	latest: Optional[str] = Field(default=None)
	filename: Optional[str] = Field(default=None)
	description: Optional[str] = Field(default=None)
	version: Optional[str] = Field(default=None)
	keywords: Optional[List[str]] = Field(default=None)
	alternativeNames: List[str] = Field(default_factory=list)
	fileType: Optional[str] = Field(default=None)
	github: Optional[GitHubInfo] = Field(default=None)
	license: Optional[str] = Field(default=None)
	homepage: Optional[str] = Field(default=None)
	repository: Optional[RepositoryInfo] = Field(default=None)
	author: Optional[str] = Field(default=None)
	originalName: Optional[str] = Field(default=None)
	sri: Optional[str] = Field(default=None)
	objectID: Optional[str] = Field(default=None)

	def resolveLatest(self, cdnBaseUrl: str) -> Optional[str]:
		""" Return the CDN url of the default file, or None when there is no default file
		"""
		if self.latest:
			return self.latest

		if self.filename and self.version:
			return buildLatestUrl(cdnBaseUrl, self.name, self.version, self.filename)

		return None


def buildLatestUrl(cdnBaseUrl: str, name: str, version: str, filename: str) -> str:
	return f"{cdnBaseUrl.rstrip('/')}/{name}/{version}/{filename}"
