import asyncio
import json
import websockets
from . import config

RECONNECT_DELAY = 10

bridge = None

async def connect():
	global bridge
	bridge = await websockets.connect(config.HOMEBRIDGE_URL)

async def send(msg):
	#print("Send: %s" % msg)
	await bridge.send(json.dumps(msg))

async def updateChar(name, char, val):
	await send({"topic": "set", "payload":
		{"name": name, "characteristic": char, "value": val}})

async def onGet(canary, name, char):
	if not canary.findService(name):
		return
	try:
		val = canary.get(name, char)
	except Exception as e:
		# No callback, so Homebridge reports the read as failed.
		print("Error getting %s %s: %s" % (name, char, e))
		return
	if val is None:
		return
	reply = {"topic": "callback", "payload":
		{"name": name, "characteristic": char, "value": val}}
	await send(reply)

async def onMessage(canary, msg):
	topic = msg["topic"]
	payload = msg["payload"]
	if topic == "get":
		await onGet(canary, payload["name"], payload["characteristic"])
	# Canary sensors are read only, so set requests are ignored.

async def pushValues(canary, updated):
	"""Push freshly polled values so Homebridge doesn't have to ask."""
	if not bridge:
		return
	for service in canary.getServices():
		if service["sensor"] not in updated:
			continue
		await updateChar(service["name"], service["characteristic"],
			service["getter"]())

async def serve(canary):
	while True:
		frame = await bridge.recv()
		#print("Recv: %s" % frame)
		try:
			await onMessage(canary, json.loads(frame))
		except websockets.ConnectionClosed:
			raise
		except Exception as e:
			print("Error handling message %s: %s" % (frame, e))

async def handler(canary):
	# Keep serving across Homebridge restarts.
	while True:
		try:
			await connect()
			await serve(canary)
		except (OSError, asyncio.TimeoutError, websockets.WebSocketException) as e:
			print("Homebridge connection lost: %s" % e)
		await asyncio.sleep(RECONNECT_DELAY)

async def addAccessory(name, service, **info):
	await send({"topic": "add", "payload":
		{"name": name, "service": service, **info}})
	reply = await bridge.recv()
	print("Recv: %s" % reply)

async def setup(canary):
	await connect()
	info = canary.getInformation()
	for service in canary.getServices():
		await addAccessory(service["name"], service["service"], **info)
