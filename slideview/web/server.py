"""FastAPI web server for the slideshow viewer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from slideview.navigation import NavigationRequest, resolve
from slideview.web.page import ViewerPage, render_viewer

if TYPE_CHECKING:
    from slideview.library import ImageLibrary
    from slideview.order import ShuffleStore

log = logging.getLogger(__name__)

IMAGE_CACHE_CONTROL = "max-age=31536000"


class ImageFiles(StaticFiles):
    """Static image files with a long-lived cache header."""

    def file_response(self, *args, **kwargs):
        response = super().file_response(*args, **kwargs)
        response.headers["Cache-Control"] = IMAGE_CACHE_CONTROL
        return response


def create_app(library: ImageLibrary, store: ShuffleStore) -> FastAPI:
    app = FastAPI(title="Slideview", docs_url=None, redoc_url=None,
                  openapi_url=None)

    @app.get("/", response_class=HTMLResponse)
    def viewer(request: Request):
        nav = NavigationRequest.from_query(request.query_params)
        view = resolve(nav, library, store)
        if view is None:
            return render_viewer(request, None)
        if nav.shuffle:
            log.debug("Reshuffled %d images", len(library))

        if nav.save and library.can_save:
            library.save(library.images[view.index])

        page = ViewerPage.build(view, library, nav.interval)
        return render_viewer(request, page)

    app.mount("/img", ImageFiles(directory=library.source_dir), name="img")

    return app
