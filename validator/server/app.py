"""FastAPI application serving a directory of static files.

The document processor and the link checker dereference the document and its
relative assets by URL, so the working directory is exposed read-only under
``/``.  ``StaticFiles`` refuses paths that resolve outside the root.
"""

from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from validator import __version__


def create_app(root: Path) -> FastAPI:
    """Return a FastAPI application serving *root* at ``/``."""
    root = Path(root).resolve()
    if not root.is_dir():
        raise NotADirectoryError(f"Cannot serve {root}: not a directory")

    app = FastAPI(
        title="respec-validator static server",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.root = root
    # html=False: request paths map to files 1:1, no index or clean-URL rewriting.
    app.mount("/", StaticFiles(directory=root, html=False), name="static")
    return app
