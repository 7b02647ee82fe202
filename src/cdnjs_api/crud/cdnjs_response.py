class CdnjsResponse():
	def __init__(
		self,
		success: bool,
		statusCode: int,
		model=None,
		error: dict = None
	):
		self.model = model
		self.success = success
		self.statusCode = statusCode
		self.error = error or {}
