# Edit these to match your Canary account and Homebridge setup.

CANARY = {
	"name": "Canary",
	"serial": "",
	"username": "",
	"password": "",
	# A pre-obtained bearer token. If set, username/password aren't used.
	"session": None,
	"pollingInterval": 300,
}

HOMEBRIDGE_URL = "ws://localhost:4050/"
