from typing import Sequence, Tuple

from cdnjs_api.crud.fields import FieldRegistry


ALL_FIELDS = "*"


def _dedupe(fields) -> Tuple[str, ...]:
	return tuple(dict.fromkeys(fields))


def filterProjection(
	requested: Sequence[str],
	registry: FieldRegistry
) -> Tuple[str, ...]:
	""" Keep the requested output fields the registry can project, in request order.

	A `*` entry expands to every projectable field in registry order.
	"""
	if ALL_FIELDS in requested:
		return registry.projectableFields()

	return _dedupe(
		field for field in requested if registry.isProjectable(field)
	)


def filterSearch(
	requested: Sequence[str],
	registry: FieldRegistry
) -> Tuple[str, ...]:
	""" Keep the requested search attributes the registry can search.

	An empty result means the search is not restricted to any attribute,
	which is also what an all-unknown or `*` request degrades to.
	"""
	if ALL_FIELDS in requested:
		return ()

	return _dedupe(
		field for field in requested if registry.isSearchable(field)
	)
