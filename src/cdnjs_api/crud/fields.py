from typing import FrozenSet, Sequence, Tuple

from cdnjs_api.models.library import LIBRARY_FIELDS


# dotted paths the search provider accepts as restrictSearchableAttributes
SEARCHABLE_FIELDS = (
	"name",
	"alternativeNames",
	"github.repo",
	"description",
	"keywords",
	"filename",
	"repository.url",
	"github.user",
	"author",
	"originalName",
)


class FieldRegistry():
	""" Static lookup table of the record fields that may be searched and returned.

	Searchable and projectable fields are separate axes: nested paths such as
	`github.user` can be searched without being returned on their own, and
	fields like `sri` can be returned without being searchable.
	"""

	def __init__(
			self,
			projectable: Sequence[str],
			searchable: Sequence[str]
	):
		self._projectable = tuple(projectable)
		self._searchable = tuple(searchable)
		self._projectableSet = frozenset(self._projectable)
		self._searchableSet = frozenset(self._searchable)

	def isSearchable(self, field: str) -> bool:
		return field in self._searchableSet

	def isProjectable(self, field: str) -> bool:
		return field in self._projectableSet

	def allFields(self) -> FrozenSet[str]:
		return self._projectableSet | self._searchableSet

	def projectableFields(self) -> Tuple[str, ...]:
		return self._projectable

	def searchableFields(self) -> Tuple[str, ...]:
		return self._searchable

	def __str__(self):
		return f"FieldRegistry(projectable={len(self._projectable)}, searchable={len(self._searchable)})"


libraryFieldRegistry = FieldRegistry(
	projectable=LIBRARY_FIELDS,
	searchable=SEARCHABLE_FIELDS
)
