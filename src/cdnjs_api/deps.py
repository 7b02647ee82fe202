from cdnjs_api.core.config import appConfig
from cdnjs_api.crud.libraries import CdnjsLibrariesRequest

librariesRequest = CdnjsLibrariesRequest(appConfig)


def getLibrariesRequest() -> CdnjsLibrariesRequest:
	""" Dependency returning the request handler bound to the process wide config
	"""
	return librariesRequest
