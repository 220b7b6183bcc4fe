"""Standalone: documentation UI for an in-memory OpenAPI document.

Demonstrates the modern theme, global headers, selectable environments
and serving a specification that never touches the disk.

Run:
    python app.py   # pip install plumage[serve]
"""

import json

from plumage import DocsApp, DocsConfig, Environment, Header

SPEC = {
    "openapi": "3.0.3",
    "info": {"title": "Pets API", "version": "2.0.0"},
    "paths": {
        "/pets": {
            "get": {
                "summary": "List pets",
                "responses": {"200": {"description": "A list of pets"}},
            }
        }
    },
}

app = DocsApp(
    DocsConfig(
        title="Pets API",
        description="Everything about your pets",
        version="2.0.0",
        doc_json=json.dumps(SPEC).encode(),
        ui_theme="modern",
        global_headers=[Header("X-Client", "plumage-example")],
        environments=[
            Environment("local", "http://localhost:8080"),
            Environment("staging", "https://staging.pets.example.com"),
        ],
    )
)


if __name__ == "__main__":
    app.run()
