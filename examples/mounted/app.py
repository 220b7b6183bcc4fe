"""Mounted: the documentation UI inside an existing ASGI application.

A tiny hand-written API answers ``/api/pets``; ``mount()`` sends
everything under ``/doc`` to plumage and the rest to the API.

Run:
    uvicorn app:app   # or any ASGI server
"""

import json

from plumage import DocsConfig, mount

PETS = [{"id": 1, "name": "Rex"}, {"id": 2, "name": "Tom"}]

SPEC = {
    "openapi": "3.0.3",
    "info": {"title": "Pets API", "version": "1.0.0"},
    "paths": {"/api/pets": {"get": {"responses": {"200": {"description": "Pets"}}}}},
}


async def api(scope, receive, send):
    if scope["type"] == "lifespan":
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    if scope["path"] == "/api/pets":
        status, body = 200, json.dumps(PETS).encode()
    else:
        status, body = 404, b'{"error": "not found"}'
    await send(
        {
            "type": "http.response.start",
            "status": status,
            "headers": [(b"content-type", b"application/json")],
        }
    )
    await send({"type": "http.response.body", "body": body})


app = mount(api, DocsConfig(title="Pets API", doc_json=json.dumps(SPEC).encode()))
