"""The Canary accessory: logs in, polls the Canary API in the background and
answers sensor reads from the values cached by the last successful poll.

Reads never touch the network. A poll that fails for any reason is logged and
otherwise ignored; the next poll is the retry.
"""

import asyncio
import aiohttp
from .api import CanaryApi
from .devices import resolveDeviceId
from .readings import (AIR_QUALITY, HUMIDITY, TEMPERATURE, SensorCache,
	airQualityCategory)
from .session import Session

DEFAULT_POLLING_INTERVAL = 300

class Canary:

	def __init__(self, config, log=print, http=None, onUpdate=None):
		self.log = log
		self.name = config.get("name", "Canary")
		self.serialNumber = config.get("serial")
		self.username = config.get("username")
		self.password = config.get("password")
		interval = config.get("pollingInterval")
		self.pollingInterval = DEFAULT_POLLING_INTERVAL if interval is None else interval
		# Called with (canary, updatedTypes) after each successful update.
		self.onUpdate = onUpdate
		self.cache = SensorCache()
		self.session = Session(http, config.get("session"))
		self.api = CanaryApi(http)
		self.http = http
		self._ownsHttp = False
		self._task = None

	async def open(self):
		if self.http is not None:
			return
		# Created here rather than in __init__ because aiohttp wants a running
		# loop. The default cookie jar carries the XSRF cookie through login.
		self.http = aiohttp.ClientSession()
		self._ownsHttp = True
		self.session.http = self.http
		self.api.http = self.http

	async def close(self):
		if self._ownsHttp and self.http:
			await self.http.close()
			self.http = None
			self._ownsHttp = False

	async def login(self):
		self.log("Logging in to Canary")
		return await self.session.login(self.username, self.password)

	def getTemperature(self):
		return self.cache.get(TEMPERATURE)

	def getHumidity(self):
		return self.cache.get(HUMIDITY)

	def getAirQuality(self):
		return airQualityCategory(self.cache.get(AIR_QUALITY))

	def getServices(self):
		return [
			{"name": f"{self.name} Temperature", "service": "TemperatureSensor",
				"characteristic": "CurrentTemperature", "sensor": TEMPERATURE,
				"getter": self.getTemperature},
			{"name": f"{self.name} Humidity", "service": "HumiditySensor",
				"characteristic": "CurrentRelativeHumidity", "sensor": HUMIDITY,
				"getter": self.getHumidity},
			{"name": f"{self.name} Air Quality", "service": "AirQualitySensor",
				"characteristic": "AirQuality", "sensor": AIR_QUALITY,
				"getter": self.getAirQuality},
		]

	def getInformation(self):
		return {
			"manufacturer": "Canary",
			"model": "Homebridge",
			"serialnumber": self.serialNumber,
		}

	def findService(self, name):
		for service in self.getServices():
			if service["name"] == name:
				return service
		return None

	def get(self, name, char):
		"""Return the cached value for an accessory characteristic.
		Returns None if this accessory doesn't provide char. Raises
		NotInitializedError if there is no reading yet.
		"""
		service = self.findService(name)
		if not service or service["characteristic"] != char:
			return None
		return service["getter"]()

	async def updateSensorValues(self):
		deviceId = await resolveDeviceId(self.api, self.session,
			self.serialNumber)
		sensors = await self.api.getReadings(self.session.headers(), deviceId)
		updated = self.cache.update(sensors)
		for sensorType in updated:
			self.log(f"Updated {sensorType} value: {self.cache.get(sensorType)}")
		return updated

	async def update(self):
		if not self.session.token:
			self.log("No session, skipping update")
			return None
		self.log("Updating sensor values")
		updated = await self.updateSensorValues()
		if self.onUpdate and updated:
			# The cache is already updated at this point.
			try:
				await self.onUpdate(self, updated)
			except Exception as e:
				self.log(f"Error pushing updated values: {e}")
		return updated

	async def poll(self):
		try:
			return await self.update()
		except Exception as e:
			self.log(f"Error on update: {e}")
			return None

	async def run(self):
		await self.open()
		if not self.session.token:
			# Only attempted once. If this fails, every poll is a no-op until
			# restart.
			try:
				await self.login()
			except Exception as e:
				self.log(f"Error on login: {e}")
		while True:
			await self.poll()
			await asyncio.sleep(self.pollingInterval)

	def start(self):
		if not self._task or self._task.done():
			self._task = asyncio.create_task(self.run())
		return self._task

	async def stop(self):
		if self._task:
			self._task.cancel()
			try:
				await self._task
			except asyncio.CancelledError:
				pass
			self._task = None
		await self.close()
