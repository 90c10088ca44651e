import asyncio
import sys
from . import canary, config, homebridge

async def main():
	acc = canary.Canary(config.CANARY, onUpdate=homebridge.pushValues)
	try:
		await asyncio.gather(
			homebridge.handler(acc),
			acc.start(),
		)
	finally:
		await acc.stop()

async def setup():
	acc = canary.Canary(config.CANARY)
	await homebridge.setup(acc)

if __name__ == "__main__":
	if sys.argv[1:] == ["setup"]:
		asyncio.run(setup())
	else:
		asyncio.run(main())
