import aiohttp
from .errors import NetworkError

BASE_URL = "https://my.canary.is"

def endpoint(path):
	return BASE_URL + path

class CanaryApi:
	"""Requests against the Canary cloud API.
	All requests go through one aiohttp session so that cookies set by one
	response are sent with the next.
	"""

	def __init__(self, http):
		self.http = http

	async def request(self, method, path, **kwargs):
		try:
			async with self.http.request(method, endpoint(path), **kwargs) as r:
				r.raise_for_status()
				return await r.json()
		except aiohttp.ClientError as e:
			raise NetworkError(f"{method} {path} failed: {e}") from e

	async def getLocations(self, headers):
		return await self.request("GET", "/api/locations", headers=headers)

	async def getReadings(self, headers, deviceId):
		return await self.request("GET", "/api/readings",
			params={"deviceId": str(deviceId), "type": "canary"},
			headers=headers)
