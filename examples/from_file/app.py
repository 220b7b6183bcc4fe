"""From file: serve a specification read from disk on every request.

The document lives next to this file. Regenerate or edit it while the
server runs and a browser refresh picks up the change.

Run:
    python app.py   # pip install plumage[serve]
"""

from pathlib import Path

from plumage import DocsApp, DocsConfig

app = DocsApp(
    DocsConfig(
        title="Inventory API",
        base_path="reference/",
        doc_path=Path(__file__).parent / "openapi.json",
        ui_theme="minimal",
        dark_mode=True,
        persist_params=False,
    )
)


if __name__ == "__main__":
    app.run()
