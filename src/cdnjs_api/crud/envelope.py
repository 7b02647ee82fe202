from fastapi.responses import HTMLResponse, JSONResponse, Response
from typing import Any, Dict, List

from cdnjs_api.models.envelope import LibrariesEnvelope
from cdnjs_api.models.query import OutputModeEnum
from cdnjs_api.render.human import renderHuman


def buildEnvelope(
	results: List[Dict[str, Any]],
	available: int
) -> LibrariesEnvelope:
	total = len(results)
	return LibrariesEnvelope(
		results=results,
		total=total,
		available=max(available, total)
	)


def cacheControl(maxAge: int) -> str:
	return f"public, max-age={maxAge}"


def renderEnvelope(
	envelope: LibrariesEnvelope,
	outputMode: OutputModeEnum,
	cacheMaxAge: int
) -> Response:
	""" Serialize the envelope as JSON or as the human readable page, with the cache policy attached
	"""
	content = envelope.model_dump(mode="json")
	headers = {"Cache-Control": cacheControl(cacheMaxAge)}

	if outputMode == OutputModeEnum.HUMAN:
		return HTMLResponse(
			content=renderHuman(content),
			status_code=200,
			headers=headers
		)

	return JSONResponse(
		content=content,
		status_code=200,
		headers=headers
	)
