#!/usr/bin/env python3
"""
Basic SDK usage examples for the Prepr client.

Reads the access token from PREPR_ACCESS_TOKEN.
"""

import asyncio

from prepr import ApiError, PreprClient, PreprError, TransportError, setup_logging
from prepr.sync import get_sync


async def callback_style(client: PreprClient):
    """Receive the outcome through a callback."""
    print("=== Callback Style ===")

    def on_complete(error, result):
        if error is not None:
            print(f"❌ {error}")
            return
        print(f"✓ Received {len(result.get('items', []))} publications")

    await client.get("/publications", {"limit": 5}, callback=on_complete)


async def awaitable_style(client: PreprClient):
    """Await the result and handle errors as exceptions."""
    print("\n=== Awaitable Style ===")

    try:
        tag = await client.post("/tags", {"body": "example"})
        print(f"✓ Created tag {tag.get('id')}")
    except ApiError as e:
        print(f"❌ API rejected the request ({e.status_code}): {e}")
        for entry in e.entries:
            print(f"   - {entry.code}: {entry.description}")
    except TransportError as e:
        print(f"❌ Network problem: {e}")
    except PreprError as e:
        print(f"❌ Request failed: {e}")


def sync_style(client: PreprClient):
    """Call the API from synchronous code."""
    print("\n=== Sync Style ===")

    try:
        result = get_sync(client, "/publications", {"limit": 1})
        print(f"✓ Total publications: {result.get('total')}")
    except PreprError as e:
        print(f"❌ Request failed: {e}")


async def main():
    setup_logging("INFO")
    client = PreprClient.from_settings()
    print(f"A/B testing bucket: {client.bucket_value}")

    await callback_style(client)
    await awaitable_style(client)


if __name__ == "__main__":
    asyncio.run(main())
    sync_style(PreprClient.from_settings())
