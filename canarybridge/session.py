import aiohttp
from . import api
from .errors import AuthError, NetworkError

XSRF_COOKIE = "XSRF-TOKEN"

class Session:
	"""Holds the bearer token for the Canary API.
	The token is either supplied up front or obtained via login().
	"""

	def __init__(self, http, token=None):
		self.http = http
		self.token = token

	def headers(self):
		return {"Authorization": "Bearer %s" % self.token}

	async def getXsrfToken(self):
		try:
			async with self.http.get(api.endpoint("/login")) as r:
				r.raise_for_status()
				cookie = r.cookies.get(XSRF_COOKIE)
		except aiohttp.ClientResponseError as e:
			raise AuthError(f"Login page returned {e.status}") from e
		except aiohttp.ClientError as e:
			raise NetworkError(f"Unable to fetch login page: {e}") from e
		if not cookie or not cookie.value:
			raise AuthError("Unable to log in, no XSRF token found")
		return cookie.value

	async def login(self, username, password):
		xsrfToken = await self.getXsrfToken()
		try:
			async with self.http.post(api.endpoint("/api/auth/login"),
				headers={"X-XSRF-TOKEN": xsrfToken},
				json={"username": username, "password": password},
			) as r:
				r.raise_for_status()
				body = await r.json()
		except (aiohttp.ContentTypeError, ValueError) as e:
			raise AuthError("Login response was not JSON") from e
		except aiohttp.ClientResponseError as e:
			raise AuthError(f"Login rejected with status {e.status}") from e
		except aiohttp.ClientError as e:
			raise NetworkError(f"Unable to log in: {e}") from e
		token = body.get("access_token") if isinstance(body, dict) else None
		if not token:
			raise AuthError("Login response had no access token")
		self.token = token
		return token
