"""Shared fixtures for canarybridge tests."""

from http.cookies import SimpleCookie
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from canarybridge.canary import Canary

LOCATIONS = [
	{"name": "Home", "devices": [{"serial_number": "A", "id": 101}]},
	{"name": "Office", "devices": [{"serial_number": "B", "id": 202}]},
]


def makeResponse(json=None, cookies=None, status=200):
	"""Build what `async with http.get(...)` yields, wrapped in a context manager."""
	response = MagicMock()
	response.status = status
	response.json = AsyncMock(return_value=json)
	response.cookies = SimpleCookie(cookies or {})
	if status >= 400:
		response.raise_for_status.side_effect = aiohttp.ClientResponseError(
			MagicMock(), (), status=status
		)
	ctx = MagicMock()
	ctx.__aenter__ = AsyncMock(return_value=response)
	ctx.__aexit__ = AsyncMock(return_value=False)
	return ctx


@pytest.fixture
def response():
	return makeResponse


@pytest.fixture
def locations():
	return LOCATIONS


@pytest.fixture
def http():
	"""Stand-in for aiohttp.ClientSession."""
	return MagicMock()


@pytest.fixture
def logs():
	return []


@pytest.fixture
def config():
	return {
		"name": "Hallway",
		"serial": "B",
		"username": "user@example.com",
		"password": "hunter2",
		"session": "token-123",
		"pollingInterval": 0,
	}


@pytest.fixture
def canary(config, http, logs):
	return Canary(config, log=logs.append, http=http)
