"""Identifier generation for model nodes.

Identifiers are blake2b digests over a normalised seed, the node type tag,
a nanosecond timestamp and a process-wide counter. The counter keeps two
identifiers distinct even when the clock does not advance between calls.
"""

from __future__ import annotations

import itertools
import time
from collections.abc import Mapping
from datetime import date, datetime
from hashlib import blake2b
from typing import Any, Hashable

import numpy as np

_COUNTER = itertools.count()


def hash_part(part: Any) -> Hashable:
    """Normalise a seed part to a stable, hashable value.

    Mappings are sorted by key and numpy arrays are reduced to a content
    digest so that equal seeds always normalise to equal values.
    """
    if part is None:
        return None
    if isinstance(part, (str, bytes, int, float, bool)):
        return part
    if isinstance(part, (datetime, date)):
        return ("dt", part.isoformat())
    if isinstance(part, np.ndarray):
        data = np.ascontiguousarray(part)
        if data.dtype.hasobject:
            return ("nd", data.shape, data.dtype.str, tuple(hash_part(v) for v in data.ravel().tolist()))
        digest = blake2b(data.view(np.uint8), digest_size=16).hexdigest()
        return ("nd", data.shape, data.dtype.str, digest)
    if isinstance(part, np.generic):
        return hash_part(part.item())
    if isinstance(part, (list, tuple)):
        return tuple(hash_part(item) for item in part)
    if isinstance(part, (set, frozenset)):
        return tuple(sorted((hash_part(item) for item in part), key=repr))
    if isinstance(part, Mapping):
        return tuple(sorted(((str(k), hash_part(v)) for k, v in part.items()), key=lambda kv: kv[0]))
    return ("repr", repr(part))


def digest(*parts: Any) -> str:
    """Return a 32 character hex digest of ``parts``.

    Deterministic: equal parts give equal digests across runs.
    """
    normalised = tuple(hash_part(part) for part in parts)
    return blake2b(repr(normalised).encode("utf-8"), digest_size=16).hexdigest()


def gen_id(seed: Any, type_tag: str) -> str:
    """Return a unique identifier for a model node of type ``type_tag``."""
    return digest(seed, type_tag, time.time_ns(), next(_COUNTER))


def gen_element_id() -> str:
    """Return a unique identifier for one embedding of a rendered document."""
    return gen_id(None, "elementid")


__all__ = ["digest", "gen_element_id", "gen_id", "hash_part"]
