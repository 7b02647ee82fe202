from typing import Any, Dict, Iterable, List, Optional, Sequence


def resolvePath(record: Dict[str, Any], path: str) -> Any:
	""" Follow a dotted path such as github.user through nested dicts
	"""
	value = record
	for part in path.split("."):
		if not isinstance(value, dict):
			return None
		value = value.get(part)
	return value


def _texts(value: Any) -> Iterable[str]:
	if value is None:
		return
	if isinstance(value, str):
		yield value
	elif isinstance(value, (list, tuple)):
		for item in value:
			yield from _texts(item)
	elif isinstance(value, dict):
		for item in value.values():
			yield from _texts(item)
	else:
		yield str(value)


def matchesTerm(record: Dict[str, Any], needle: str, fields: Sequence[str]) -> bool:
	for field in fields:
		for text in _texts(resolvePath(record, field)):
			if needle in text.lower():
				return True
	return False


def relevance(record: Dict[str, Any], term: str, fields: Sequence[str]) -> Optional[int]:
	""" Lower is better, None when the record does not match.

	Name matches only count when name is one of the searched fields.
	"""
	needle = term.strip().lower()
	if not matchesTerm(record, needle, fields):
		return None

	if "name" in fields:
		name = str(record.get("name") or "").lower()
		if name == needle:
			return 0
		if name.startswith(needle):
			return 1
		if needle in name:
			return 2
	return 3


def rankRecords(
	records: Iterable[Dict[str, Any]],
	term: str,
	fields: Sequence[str]
) -> List[Dict[str, Any]]:
	""" Matching records ordered by relevance, ties kept in catalog order
	"""
	scored = []
	for record in records:
		score = relevance(record, term, fields)
		if score is not None:
			scored.append((score, record))

	# sorted is stable so equal scores keep their input order
	return [record for _, record in sorted(scored, key=lambda item: item[0])]
