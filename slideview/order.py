"""Shuffle order codec and the process-wide shuffle store.

An order is a permutation of image indices. It travels inside URLs as a
token of comma-joined decimals (``3,0,2,1``) so shuffled browsing needs no
server-side session.

Usage:
    from slideview.order import ShuffleStore, decode_order

    store = ShuffleStore()
    token = store.reshuffle(4)      # '2,0,3,1'
    decode_order(token)             # [2, 0, 3, 1]
    decode_order('2,x,3')           # [] -- malformed tokens mean "no order"
"""

from __future__ import annotations

import random
import re
import threading
from typing import Iterable
from urllib.parse import quote, unquote

# Optional '+', at most 18 digits so values stay within a 64-bit index
_INDEX = re.compile(r'\+?[0-9]{1,18}')


def encode_order(permutation: Iterable[int]) -> str:
    """Encode a permutation as a URL-safe token."""
    return quote(','.join(str(i) for i in permutation), safe=',')


def decode_order(token: str | None) -> list[int]:
    """Decode a token back to a permutation.

    Total over all input: if any field isn't a non-negative integer of at
    most 18 digits the result is ``[]``, never a partial prefix.
    """
    if not token:
        return []
    fields = unquote(token, errors='replace').split(',')
    if not all(_INDEX.fullmatch(f) for f in fields):
        return []
    return [int(f) for f in fields]


class ShuffleStore:
    """Holds the most recently generated shuffle order, shared by all clients.

    This is the only mutable state of the server. The token is replaced with
    a single assignment under the lock, so readers see either the old or the
    new order, never a partial one.
    """

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng or random.Random()
        self._lock = threading.Lock()
        self._token = ''

    def reshuffle(self, n: int) -> str:
        """Replace the stored order with a fresh permutation of range(n).

        Returns the new token, so the caller renders its own shuffle even if
        another request reshuffles right after.
        """
        order = list(range(n))
        with self._lock:
            self._rng.shuffle(order)
            token = encode_order(order)
            self._token = token
        return token

    def current(self) -> str:
        """Token of the current order ('' before the first shuffle)."""
        with self._lock:
            return self._token
