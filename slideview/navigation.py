"""Navigation: turn a request's query into the image to show and the links around it.

Everything here is total over client input. Bad pages wrap to 0, bad or
stale order tokens fall back to sequential browsing, and unparseable numbers
count as absent.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Mapping
from urllib.parse import urlencode

from slideview.library import ImageLibrary
from slideview.order import ShuffleStore, decode_order

_UINT = re.compile(r'\+?[0-9]{1,18}')

# Longest delay browsers honour in setInterval; larger values fire immediately
MAX_INTERVAL = 2 ** 31 - 1


class Mode(str, Enum):
    SEQUENTIAL = "sequential"
    SHUFFLED = "shuffled"


def _parse_uint(value: str | None) -> int | None:
    if value is None or not _UINT.fullmatch(value.strip()):
        return None
    return int(value)


@dataclass(frozen=True)
class NavigationRequest:
    """Query parameters of one viewer request, already coerced to types."""
    page: int | None = None
    order: str | None = None
    shuffle: bool = False
    interval: int | None = None     # auto-advance, milliseconds
    save: bool = False

    @classmethod
    def from_query(cls, params: Mapping[str, str]) -> NavigationRequest:
        """Build from raw query strings. ``shuffle`` and ``save`` count as set
        when present with any value."""
        interval = _parse_uint(params.get('interval'))
        return cls(
            page=_parse_uint(params.get('page')),
            order=params.get('order'),
            shuffle='shuffle' in params,
            interval=interval if interval and interval <= MAX_INTERVAL else None,
            save='save' in params,
        )


@dataclass(frozen=True)
class View:
    """Where a request lands: the page, its neighbours, and the image index."""
    mode: Mode
    page: int
    prev_page: int
    next_page: int
    index: int
    order: str | None    # token to carry forward in links, None when sequential


def resolve(request: NavigationRequest, library: ImageLibrary,
            store: ShuffleStore) -> View | None:
    """Resolve a request against the library. Returns None if it's empty.

    A shuffle request generates and stores a new order and ignores the
    caller's. Otherwise the caller's order is used only if it covers exactly
    the current library; anything else is dropped in favour of sequential
    browsing.
    """
    total = len(library)
    if total == 0:
        return None

    decoded = decode_order(request.order)
    if request.shuffle:
        order = store.reshuffle(total)
        decoded = decode_order(order)
    elif decoded and len(decoded) == total:
        order = request.order
    else:
        order = None

    page = request.page or 0
    if page >= total:
        page = 0

    prev_page = total - 1 if page == 0 else page - 1
    next_page = 0 if page == total - 1 else page + 1

    if order is None:
        return View(Mode.SEQUENTIAL, page, prev_page, next_page, page, None)
    index = decoded[page]
    if index >= total:
        # Right length but not a permutation of this library
        return View(Mode.SEQUENTIAL, page, prev_page, next_page, page, None)
    return View(Mode.SHUFFLED, page, prev_page, next_page, index, order)


def compose_url(shuffle: str | None, order: str | None, page: int,
                interval: int | None, save: bool) -> str:
    """Relative viewer URL (``?...``) carrying the navigation state.

    Keys that are None are left out; ``shuffle`` is a presence flag, so any
    non-None value (even '') adds ``shuffle=true``.
    """
    params: list[tuple[str, str]] = []
    if interval is not None:
        params.append(('interval', str(interval)))
    if order is not None:
        params.append(('order', order))
    if shuffle is not None:
        params.append(('shuffle', 'true'))
    if save:
        params.append(('save', 'true'))
    params.append(('page', str(page)))
    return '?' + urlencode(params)
