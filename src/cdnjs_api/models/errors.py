class SearchProviderError(Exception):
	def __init__(self, message: str, backend: str):
		self.message = message
		self.backend = backend

		super().__init__(self.message)


class SearchQueryRejected(SearchProviderError):
	""" The provider refused this particular query, e.g. a search term over its length limit
	"""
	pass


class SearchProviderUnavailable(SearchProviderError):
	def __init__(
			self,
			message: str,
			backend: str,
			statusCode: int = 503
		):
		self.statusCode = statusCode
		super().__init__(message, backend)
