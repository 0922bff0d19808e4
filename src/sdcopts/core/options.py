"""Option value type for subdivision schemes.

``SubdivisionOptions`` bundles one choice from each of four closed option
domains. It is meant to be set up once per mesh (or evaluation context) and
handed down to the code that interprets it.
"""

from __future__ import annotations

import numbers
import operator
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any


class VtxBoundaryInterpolation(Enum):
    """Sharpening rule for boundary edges and corners of the vertex data."""

    NONE = 0  # boundaries left unsharpened (legacy, still supported)
    EDGE_ONLY = 1
    EDGE_AND_CORNER = 2


class FVarLinearInterpolation(Enum):
    """Linear interpolation rule for face-varying data (e.g. UVs)."""

    NONE = 0  # smooth everywhere ("edge only")
    CORNERS_ONLY = 1  # corners only, never boundary edges
    CORNERS_PLUS1 = 2  # "edge corner"
    CORNERS_PLUS2 = 3  # "edge and corner + propagate corner"
    BOUNDARIES = 4  # "always sharp"
    ALL = 5  # bilinear


class CreasingMethod(Enum):
    """Rule for fractional crease sharpness."""

    UNIFORM = 0
    CHAIKIN = 1


class TriangleSubdivision(Enum):
    """Weights applied to triangular faces (Catmark scheme only)."""

    CATMARK = 0
    SMOOTH = 1


OptionValue = Enum | int | str


def coerce_option(enum_cls: type[Enum], value: Any) -> Enum:
    """Return ``value`` as a member of ``enum_cls``.

    Members of ``enum_cls`` pass through. Integer codes and member names
    (case-insensitive, ``-`` or spaces for ``_``) are converted.
    """

    if isinstance(value, enum_cls):
        return value
    if isinstance(value, (Enum, bool)):
        raise ValueError(f"{value!r} is not a {enum_cls.__name__} value.")
    if isinstance(value, numbers.Integral):
        try:
            return enum_cls(int(value))
        except ValueError as exc:
            raise ValueError(f"Invalid {enum_cls.__name__} code: {value}.") from exc
    if isinstance(value, str):
        key = value.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return enum_cls[key]
        except KeyError as exc:
            allowed = ", ".join(m.name.lower() for m in enum_cls)
            raise ValueError(f"Unknown {enum_cls.__name__} '{value}'. Allowed: {allowed}") from exc
    raise ValueError(f"{value!r} is not a {enum_cls.__name__} value.")


@dataclass
class SubdivisionOptions:
    """Options that shape the limit surface of a subdivision scheme.

    Every field always holds a member of its own enum: assignments go
    through :func:`coerce_option`, so codes and names are accepted and
    anything else raises ``ValueError``.
    """

    vtx_boundary_interpolation: VtxBoundaryInterpolation = VtxBoundaryInterpolation.NONE
    fvar_linear_interpolation: FVarLinearInterpolation = FVarLinearInterpolation.ALL
    creasing_method: CreasingMethod = CreasingMethod.UNIFORM
    triangle_subdivision: TriangleSubdivision = TriangleSubdivision.CATMARK

    def __setattr__(self, name: str, value: Any) -> None:
        enum_cls = OPTION_FIELDS.get(name)
        if enum_cls is not None:
            value = coerce_option(enum_cls, value)
        super().__setattr__(name, value)

    def get_vtx_boundary_interpolation(self) -> VtxBoundaryInterpolation:
        return self.vtx_boundary_interpolation

    def set_vtx_boundary_interpolation(self, value: OptionValue) -> None:
        self.vtx_boundary_interpolation = value

    def get_fvar_linear_interpolation(self) -> FVarLinearInterpolation:
        return self.fvar_linear_interpolation

    def set_fvar_linear_interpolation(self, value: OptionValue) -> None:
        self.fvar_linear_interpolation = value

    def get_creasing_method(self) -> CreasingMethod:
        return self.creasing_method

    def set_creasing_method(self, value: OptionValue) -> None:
        self.creasing_method = value

    def get_triangle_subdivision(self) -> TriangleSubdivision:
        """Triangle weighting rule; only the Catmark scheme reads it."""
        return self.triangle_subdivision

    def set_triangle_subdivision(self, value: OptionValue) -> None:
        self.triangle_subdivision = value

    def copy(self) -> SubdivisionOptions:
        return replace(self)

    def to_bits(self) -> int:
        """Pack into the stable integer code described by ``FIELD_BITS``."""

        code = 0
        shift = 0
        for name, width in FIELD_BITS:
            code |= getattr(self, name).value << shift
            shift += width
        return code

    @classmethod
    def from_bits(cls, code: int) -> SubdivisionOptions:
        """Inverse of :meth:`to_bits`; rejects codes with undefined sub-fields."""

        code = operator.index(code)
        if code < 0 or code >> OPTIONS_BITS:
            raise ValueError(f"Options code must fit in {OPTIONS_BITS} bits, got {code}.")
        values: dict[str, Enum] = {}
        shift = 0
        for name, width in FIELD_BITS:
            values[name] = coerce_option(OPTION_FIELDS[name], (code >> shift) & ((1 << width) - 1))
            shift += width
        return cls(**values)


OPTION_FIELDS: dict[str, type[Enum]] = {
    "vtx_boundary_interpolation": VtxBoundaryInterpolation,
    "fvar_linear_interpolation": FVarLinearInterpolation,
    "creasing_method": CreasingMethod,
    "triangle_subdivision": TriangleSubdivision,
}

# Least-significant field first.
FIELD_BITS: tuple[tuple[str, int], ...] = (
    ("vtx_boundary_interpolation", 2),
    ("fvar_linear_interpolation", 3),
    ("creasing_method", 2),
    ("triangle_subdivision", 2),
)
OPTIONS_BITS = sum(width for _, width in FIELD_BITS)
