from .errors import NotFoundError

def findDeviceId(locations, serial):
	for location in locations:
		for device in location.get("devices", ()):
			if device.get("serial_number") == serial:
				return device["id"]
	raise NotFoundError(f"Device with serial {serial} not found")

async def resolveDeviceId(api, session, serial):
	# Not cached; devices can move between locations.
	locations = await api.getLocations(session.headers())
	return findDeviceId(locations, serial)
