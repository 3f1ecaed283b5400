"""
Static pages - a fixed allow-list served by exact path, plus a directory fallback.
"""

from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from buildstore.core.errors import NotFoundError

# URL path -> file name inside the static directory
STATIC_PAGES = {
    "/": "index.html",
    "/homepage.html": "homepage.html",
    "/na.html": "na.html",
    "/pa.html": "pa.html",
    "/c2.css": "c2.css",
    "/Krishnalanka.html": "Krishnalanka.html",
    "/Suryaraopet.html": "Suryaraopet.html",
    "/Sivalayam.html": "Sivalayam.html",
}


def _page_endpoint(path: Path):
    async def serve_page():
        if not path.is_file():
            raise NotFoundError("Not Found")
        return FileResponse(path)

    return serve_page


def mount_static(app: FastAPI, static_dir: Path) -> None:
    """Register the allow-listed pages and mount the rest of the directory."""
    for url, filename in STATIC_PAGES.items():
        app.add_api_route(url, _page_endpoint(static_dir / filename), methods=["GET"], include_in_schema=False)

    # Must be mounted last: it matches every path not claimed above
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(static_dir)), name="static")
