from pydantic import ValidationError
from typing import Any, Dict, List, Sequence, Tuple

from cdnjs_api.core.logging import searchLogger
from cdnjs_api.models.library import LibraryRecord


def projectLibrary(
	record: LibraryRecord,
	fields: Sequence[str],
	cdnBaseUrl: str
) -> Dict[str, Any]:
	""" Shape one record into exactly the requested keys.

	Unset attributes come out as null rather than being dropped or replaced
	with an empty value.
	"""
	values = record.model_dump(mode="json")
	values["latest"] = record.resolveLatest(cdnBaseUrl)

	# nested objects carry only the keys the catalog stored
	for nested in ("github", "repository"):
		nestedValue = getattr(record, nested)
		if nestedValue is not None:
			values[nested] = nestedValue.model_dump(mode="json", exclude_unset=True)

	return {field: values.get(field) for field in fields}


def projectHits(
	hits: Sequence[Dict[str, Any]],
	fields: Sequence[str],
	cdnBaseUrl: str
) -> Tuple[List[Dict[str, Any]], int]:
	""" Project raw index hits in order, returning the projected records and how many hits were dropped

	Hits without a name are not libraries and are skipped, as are hits
	whose attributes do not fit the record model.
	"""
	projected = []
	dropped = 0

	for hit in hits:
		if not hit.get("name"):
			dropped += 1
			continue

		try:
			record = LibraryRecord.model_validate(hit)
		except ValidationError as e:
			searchLogger.warning(f"Skipping malformed record {hit.get('name')}: {str(e)}")
			dropped += 1
			continue

		projected.append(projectLibrary(record, fields, cdnBaseUrl))

	return projected, dropped
