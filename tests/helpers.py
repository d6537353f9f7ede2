"""Small helpers shared by the test modules."""

import asyncio


def run(coro):
    """Drive a store/service coroutine to completion."""
    return asyncio.run(coro)


def valid_project(**overrides):
    body = {
        "name": "Test Project",
        "clientName": "Test Client",
        "startDate": "2026-01-01",
    }
    body.update(overrides)
    return body
