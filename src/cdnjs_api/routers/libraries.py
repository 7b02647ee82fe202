from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from typing import Annotated

from cdnjs_api.crud.envelope import renderEnvelope
from cdnjs_api.crud.libraries import CdnjsLibrariesRequest
from cdnjs_api.crud.params import parseQueryRequest
from cdnjs_api.deps import getLibrariesRequest

librariesRouter = APIRouter(prefix="", tags=['libraries'])


@librariesRouter.get(
	"/libraries",
	summary="List or search libraries",
	description=(
		"Query parameters: fields (comma separated or repeated, * for all), "
		"search, search_fields (comma separated or repeated), limit, "
		"output=human for a readable page"
	)
)
async def listLibraries(
	request: Request,
	librariesRequest: Annotated[CdnjsLibrariesRequest, Depends(getLibrariesRequest)]
):
	# parsed from the raw query string so bad values degrade instead of failing validation
	queryRequest = parseQueryRequest(request.query_params)

	response = await librariesRequest.listLibraries(queryRequest)

	if response.success:
		return renderEnvelope(
			response.model,
			queryRequest.outputMode,
			librariesRequest.config.cacheMaxAge
		)

	else:
		return JSONResponse(
			status_code=response.statusCode,
			content=response.error,
			headers={"Cache-Control": "no-store"}
		)
