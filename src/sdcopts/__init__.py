from .core import (
    CreasingMethod,
    FVarLinearInterpolation,
    SchemeType,
    SubdivisionOptions,
    TriangleSubdivision,
    VtxBoundaryInterpolation,
    normalized_for_scheme,
    pack_options,
    unpack_options,
)
from .io import options_from_dict, options_to_dict, read_options

__all__ = [
    "SubdivisionOptions",
    "VtxBoundaryInterpolation",
    "FVarLinearInterpolation",
    "CreasingMethod",
    "TriangleSubdivision",
    "SchemeType",
    "normalized_for_scheme",
    "pack_options",
    "unpack_options",
    "options_to_dict",
    "options_from_dict",
    "read_options",
]
