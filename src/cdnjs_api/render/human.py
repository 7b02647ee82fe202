import html
import json
from typing import Any, Dict


def renderHuman(envelope: Dict[str, Any]) -> str:
	""" Pretty print a response body as a minimal HTML page
	"""
	body = html.escape(json.dumps(envelope, indent=2, ensure_ascii=False))
	return (
		"<!DOCTYPE html>\n"
		"<html>\n"
		"<head>\n"
		"<meta charset=\"utf-8\">\n"
		"<title>cdnjs API</title>\n"
		"</head>\n"
		"<body>\n"
		f"<pre>{body}</pre>\n"
		"</body>\n"
		"</html>\n"
	)
