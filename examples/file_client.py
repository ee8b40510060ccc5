#!/usr/bin/env python3
"""
Example client for the Webdesk file server.

Creates a folder, writes a text and a binary file into it, reads them back
and lists the folder. Start the server first:

    webdesk serve --root sample
"""

import asyncio
import base64

import httpx

BASE_URL = "http://localhost:8080"

# 1x1 transparent PNG
PIXEL = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)


async def write_file(client: httpx.AsyncClient, path: str, data: str) -> str:
    """
    Write a file through a form encoded POST.

    Args:
        client: HTTP client
        path: File path relative to the server root
        data: Text content, or base64 for binary types

    Returns:
        The server message
    """
    response = await client.post(f"/{path}", data={"data": data})
    return f"{response.status_code} {response.text}"


async def main():
    """Main function demonstrating the file endpoints."""
    print("🚀 Webdesk file client example")
    print("=" * 60)

    async with httpx.AsyncClient(base_url=BASE_URL) as client:
        response = await client.get("/create-folder", params={"folder": "demo/assets"})
        print(f"📁 {response.status_code} {response.text}")

        print(f"📝 {await write_file(client, 'demo/notes.txt', 'Hello from Webdesk')}")
        print(f"🖼️  {await write_file(client, 'demo/assets/pixel.png', base64.b64encode(PIXEL).decode())}")

        response = await client.get("/demo/notes.txt")
        print(f"📤 {response.status_code} {response.headers['content-type']}: {response.text}")

        response = await client.get("/demo/assets/pixel.png")
        print(f"📤 {response.status_code} {response.headers['content-type']}: {len(response.content)} bytes")

        for search in ["all", "*txt", "folders"]:
            response = await client.get("/query-files", params={"folder": "demo", "search": search})
            print(f"🔍 {search}: {response.text.splitlines()}")

        # Leaving the folder with up segments
        response = await client.get("/demo/up/Home.html")
        print(f"🏠 {response.status_code} {response.headers['content-type']}")

    print("=" * 60)
    print("✨ File client example completed!")


if __name__ == "__main__":
    asyncio.run(main())
