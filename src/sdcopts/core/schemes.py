"""Which option fields each subdivision scheme gives meaning to."""

from __future__ import annotations

from enum import Enum

from .options import OPTION_FIELDS, SubdivisionOptions


class SchemeType(Enum):
    BILINEAR = "bilinear"
    CATMARK = "catmark"
    LOOP = "loop"


_COMMON_FIELDS = ("vtx_boundary_interpolation", "fvar_linear_interpolation")

_RELEVANT_FIELDS: dict[SchemeType, tuple[str, ...]] = {
    SchemeType.BILINEAR: _COMMON_FIELDS,
    SchemeType.CATMARK: _COMMON_FIELDS + ("creasing_method", "triangle_subdivision"),
    SchemeType.LOOP: _COMMON_FIELDS + ("creasing_method",),
}


def as_scheme(scheme: SchemeType | str) -> SchemeType:
    if isinstance(scheme, SchemeType):
        return scheme
    key = str(scheme).strip().lower()
    try:
        return SchemeType(key)
    except ValueError as exc:
        allowed = ", ".join(s.value for s in SchemeType)
        raise ValueError(f"Unknown subdivision scheme '{scheme}'. Allowed: {allowed}") from exc


def relevant_fields(scheme: SchemeType | str) -> tuple[str, ...]:
    return _RELEVANT_FIELDS[as_scheme(scheme)]


def normalized_for_scheme(options: SubdivisionOptions, scheme: SchemeType | str) -> SubdivisionOptions:
    """Copy of ``options`` with fields the scheme ignores reset to defaults.

    Options that differ only in ignored fields produce the same surface, so the
    normalized value (or its ``to_bits`` code) can key cached results. No
    cross-field checking is done; every input is accepted as-is.
    """

    keep = relevant_fields(scheme)
    defaults = SubdivisionOptions()
    out = options.copy()
    for name in OPTION_FIELDS:
        if name not in keep:
            setattr(out, name, getattr(defaults, name))
    return out
