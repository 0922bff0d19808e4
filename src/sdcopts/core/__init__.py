from .options import (
    FIELD_BITS,
    OPTION_FIELDS,
    OPTIONS_BITS,
    CreasingMethod,
    FVarLinearInterpolation,
    SubdivisionOptions,
    TriangleSubdivision,
    VtxBoundaryInterpolation,
    coerce_option,
)
from .packing import group_by_options, pack_options, unpack_options
from .schemes import SchemeType, as_scheme, normalized_for_scheme, relevant_fields

__all__ = [
    "SubdivisionOptions",
    "VtxBoundaryInterpolation",
    "FVarLinearInterpolation",
    "CreasingMethod",
    "TriangleSubdivision",
    "coerce_option",
    "OPTION_FIELDS",
    "FIELD_BITS",
    "OPTIONS_BITS",
    "pack_options",
    "unpack_options",
    "group_by_options",
    "SchemeType",
    "as_scheme",
    "relevant_fields",
    "normalized_for_scheme",
]
