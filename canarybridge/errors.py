class CanaryError(Exception):
	pass

class AuthError(CanaryError):
	pass

class NotFoundError(CanaryError):
	pass

class NotInitializedError(CanaryError):
	pass

class NetworkError(CanaryError):
	pass
