from cdnjs_api.core.config import CdnjsConfig


class CdnjsRequest():
	def __init__(
			self,
			backendConfig: CdnjsConfig
	):
		self.config = backendConfig
