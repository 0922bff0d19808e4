"""Batch packing of subdivision options into compact integer arrays."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from .options import OPTIONS_BITS, SubdivisionOptions


Array = np.ndarray
CODE_DTYPE = np.uint16


def pack_options(options: Iterable[SubdivisionOptions]) -> Array:
    """Pack options into a 1D ``uint16`` array of ``to_bits`` codes."""

    codes = [opts.to_bits() for opts in options]
    return np.asarray(codes, dtype=CODE_DTYPE).reshape(-1)


def _as_codes(codes: Array | Iterable[int]) -> Array:
    arr = np.asarray(codes)
    if arr.ndim != 1:
        raise ValueError("Options codes must be a 1D array.")
    if arr.size and not np.issubdtype(arr.dtype, np.integer):
        raise ValueError("Options codes must be integers.")
    if arr.size and (arr.min() < 0 or arr.max() >= (1 << OPTIONS_BITS)):
        raise ValueError(f"Options codes must fit in {OPTIONS_BITS} bits.")
    return arr.astype(CODE_DTYPE, copy=False)


def unpack_options(codes: Array | Iterable[int]) -> list[SubdivisionOptions]:
    arr = _as_codes(codes)
    return [SubdivisionOptions.from_bits(int(code)) for code in arr]


def group_by_options(codes: Array | Iterable[int]) -> dict[int, Array]:
    """Map each distinct options code to the (sorted) indices that carry it."""

    arr = _as_codes(codes)
    unique, inverse = np.unique(arr, return_inverse=True)
    return {int(code): np.flatnonzero(inverse.reshape(-1) == i) for i, code in enumerate(unique)}
