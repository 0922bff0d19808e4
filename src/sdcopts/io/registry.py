"""Reader registry for subdivision option sources."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from sdcopts.core import SubdivisionOptions

logger = logging.getLogger(__name__)


Reader = Callable[[Any], SubdivisionOptions]
_READERS: dict[str, Reader] = {}


def register_reader(name: str, reader: Reader) -> None:
    key = name.strip().lower()
    if not key:
        raise ValueError("Reader name must be non-empty.")
    if key in _READERS:
        logger.debug("Replacing options reader '%s'", key)
    _READERS[key] = reader


def get_reader(name: str) -> Reader:
    key = name.strip().lower()
    try:
        return _READERS[key]
    except KeyError as exc:
        available = ", ".join(sorted(_READERS)) or "<none>"
        raise KeyError(f"Unknown options reader '{name}'. Available readers: {available}") from exc


def list_readers() -> tuple[str, ...]:
    return tuple(sorted(_READERS.keys()))


def read_options(source: Any, reader: str) -> SubdivisionOptions:
    return get_reader(reader)(source)
