"""Viewer page: every link on the page, and its HTML rendering."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from urllib.parse import quote

from fastapi import Request
from fastapi.templating import Jinja2Templates

from slideview.library import ImageLibrary
from slideview.navigation import View, compose_url

TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "templates")

# Slideshow presets offered in the dropdown: (label, milliseconds)
INTERVAL_PRESETS = [
    (".5s", 500),
    ("1s", 1000),
    ("2s", 2000),
    ("5s", 5000),
    ("10s", 10000),
]

templates = Jinja2Templates(directory=TEMPLATES_DIR)


@dataclass(frozen=True)
class ViewerPage:
    filename: str
    image_url: str
    counter: str            # "3/40"
    prev_url: str
    next_url: str
    shuffle_url: str
    save_url: str | None    # only when a save directory is configured
    stop_url: str | None    # only while a slideshow is running
    interval: int | None
    interval_links: list[tuple[str, str]] = field(default_factory=list)

    @classmethod
    def build(cls, view: View, library: ImageLibrary,
              interval: int | None) -> ViewerPage:
        order = view.order
        filename = library.images[view.index]

        if interval is None:
            stop_url = None
            interval_links = [
                (label, compose_url(None, order, 0, ms, False))
                for label, ms in INTERVAL_PRESETS
            ]
        else:
            stop_url = compose_url(None, order, view.page, None, False)
            interval_links = []

        return cls(
            filename=filename,
            image_url="/img/" + quote(filename),
            counter=f"{view.page + 1}/{len(library)}",
            prev_url=compose_url(None, order, view.prev_page, interval, False),
            next_url=compose_url(None, order, view.next_page, interval, False),
            shuffle_url=compose_url("", order, 0, interval, False),
            save_url=(compose_url(None, order, view.page, interval, True)
                      if library.can_save else None),
            stop_url=stop_url,
            interval=interval,
            interval_links=interval_links,
        )


def render_viewer(request: Request, page: ViewerPage | None):
    """Render the viewer, or the empty-library page when ``page`` is None."""
    return templates.TemplateResponse(request, "viewer.html", {"page": page})
