from .errors import NotInitializedError

TEMPERATURE = "temperature"
HUMIDITY = "humidity"
AIR_QUALITY = "air_quality"

# Upper bounds (inclusive) of HomeKit AirQuality 1 (excellent) to 4.
# Anything above the last is 5 (poor).
AIR_QUALITY_THRESHOLDS = (0.3, 0.4, 0.5, 0.6)

def airQualityCategory(score):
	for category, limit in enumerate(AIR_QUALITY_THRESHOLDS, 1):
		if score <= limit:
			return category
	return len(AIR_QUALITY_THRESHOLDS) + 1

class SensorCache:
	def __init__(self):
		self.values = {}

	def update(self, readings):
		updated = []
		for reading in readings:
			sensorType = reading["sensor_type"]
			value = reading.get("value")
			if value is None:
				# A null reading means the sensor has no value right now.
				self.values.pop(sensorType, None)
				continue
			self.values[sensorType] = value
			updated.append(sensorType)
		return updated

	def get(self, sensorType):
		try:
			return self.values[sensorType]
		except KeyError:
			raise NotInitializedError(f"No {sensorType} reading yet") from None
