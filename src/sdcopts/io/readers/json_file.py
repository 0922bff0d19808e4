"""JSON adapter: options stored by field name."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from sdcopts.core import SubdivisionOptions
from sdcopts.io.serialize import options_from_dict

logger = logging.getLogger(__name__)


def _load_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8-sig") as fh:
        return json.load(fh)


def read_json_options(source: Any) -> SubdivisionOptions:
    """Read options from a JSON file path or an already parsed mapping.

    A top-level ``"options"`` object is unwrapped, so run configuration files
    written by the CLI template can be passed directly.
    """

    if isinstance(source, Mapping):
        payload = source
    else:
        path = Path(source)
        logger.debug("Reading subdivision options from %s", path)
        payload = _load_json(path)
    if not isinstance(payload, Mapping):
        raise ValueError("Options JSON must be an object.")
    if "options" in payload:
        payload = payload["options"]
    return options_from_dict(payload)
