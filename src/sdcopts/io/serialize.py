"""Name-based (de)serialization of subdivision options."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from sdcopts.core import OPTION_FIELDS, SubdivisionOptions

logger = logging.getLogger(__name__)


def options_to_dict(options: SubdivisionOptions) -> dict[str, str]:
    return {name: getattr(options, name).name.lower() for name in OPTION_FIELDS}


def options_from_dict(payload: Mapping[str, Any]) -> SubdivisionOptions:
    """Build options from a field -> name (or integer code) mapping.

    Missing fields keep their defaults.
    """

    if not isinstance(payload, Mapping):
        raise ValueError("Options payload must be a mapping.")
    unknown = sorted(set(payload) - set(OPTION_FIELDS))
    if unknown:
        raise ValueError(f"Unknown option fields: {', '.join(map(str, unknown))}")
    return SubdivisionOptions(**dict(payload))


def save_options_json(path: str | Path, options: SubdivisionOptions) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", encoding="utf-8") as fh:
        json.dump(options_to_dict(options), fh, indent=2, sort_keys=True)
        fh.write("\n")
    logger.debug("Wrote subdivision options to %s", out)
    return out
