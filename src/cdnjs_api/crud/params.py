import re
from typing import Any, List, Mapping, Optional

from cdnjs_api.models.library import DEFAULT_PROJECTION
from cdnjs_api.models.query import QueryRequest, OutputModeEnum


_POSITIVE_INT = re.compile(r"[0-9]+")

# anything larger is treated as a malformed limit
MAX_LIMIT = 2**31 - 1


def _getAll(params: Mapping[str, Any], key: str) -> List[str]:
	""" Every value given for key, for both starlette QueryParams and plain dicts
	"""
	if hasattr(params, "getlist"):
		return [str(value) for value in params.getlist(key)]

	value = params.get(key)
	if value is None:
		return []
	if isinstance(value, (list, tuple)):
		return [str(item) for item in value]
	return [str(value)]


def parseFieldList(values: List[str]) -> List[str]:
	""" Merge repeated and comma separated values into one ordered list without duplicates
	"""
	fields = []
	for value in values:
		for field in value.split(","):
			field = field.strip()
			if field and field not in fields:
				fields.append(field)
	return fields


def parseLimit(values: List[str]) -> Optional[int]:
	if not values:
		return None

	value = values[0].strip()
	if not _POSITIVE_INT.fullmatch(value):
		return None

	limit = int(value)
	if limit <= 0 or limit > MAX_LIMIT:
		return None
	return limit


def parseSearch(values: List[str]) -> Optional[str]:
	if not values or values[0] == "":
		return None
	return values[0]


def parseOutputMode(values: List[str]) -> OutputModeEnum:
	if values and values[0].strip().lower() == OutputModeEnum.HUMAN.value:
		return OutputModeEnum.HUMAN
	return OutputModeEnum.JSON


def parseQueryRequest(params: Mapping[str, Any]) -> QueryRequest:
	""" Build a QueryRequest from the raw query string mapping.

	Never raises on client input: malformed values fall back to their
	defaults (no search, default projection, no cap, JSON output).
	"""
	requestedFields = parseFieldList(_getAll(params, "fields"))
	projectionFields = list(DEFAULT_PROJECTION)
	for field in requestedFields:
		if field not in projectionFields:
			projectionFields.append(field)

	return QueryRequest(
		rawSearch=parseSearch(_getAll(params, "search")),
		searchFields=tuple(parseFieldList(_getAll(params, "search_fields"))),
		projectionFields=tuple(projectionFields),
		limit=parseLimit(_getAll(params, "limit")),
		outputMode=parseOutputMode(_getAll(params, "output"))
	)
