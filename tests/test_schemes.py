import pytest

from sdcopts import SchemeType, SubdivisionOptions, normalized_for_scheme
from sdcopts.core import (
    CreasingMethod,
    FVarLinearInterpolation,
    TriangleSubdivision,
    VtxBoundaryInterpolation,
    relevant_fields,
)


def _custom() -> SubdivisionOptions:
    return SubdivisionOptions(
        vtx_boundary_interpolation=VtxBoundaryInterpolation.EDGE_ONLY,
        fvar_linear_interpolation=FVarLinearInterpolation.BOUNDARIES,
        creasing_method=CreasingMethod.CHAIKIN,
        triangle_subdivision=TriangleSubdivision.SMOOTH,
    )


def test_relevant_fields_per_scheme() -> None:
    assert "triangle_subdivision" in relevant_fields(SchemeType.CATMARK)
    assert "triangle_subdivision" not in relevant_fields(SchemeType.LOOP)
    assert "creasing_method" in relevant_fields("loop")
    assert relevant_fields("Bilinear") == ("vtx_boundary_interpolation", "fvar_linear_interpolation")


def test_catmark_keeps_everything() -> None:
    opts = _custom()
    assert normalized_for_scheme(opts, SchemeType.CATMARK) == opts


def test_loop_resets_triangle_rule_only() -> None:
    opts = _custom()
    out = normalized_for_scheme(opts, SchemeType.LOOP)
    assert out.triangle_subdivision is TriangleSubdivision.CATMARK
    assert out.creasing_method is CreasingMethod.CHAIKIN
    assert out.fvar_linear_interpolation is FVarLinearInterpolation.BOUNDARIES
    # input untouched
    assert opts.triangle_subdivision is TriangleSubdivision.SMOOTH


def test_bilinear_shares_cache_key_across_ignored_fields() -> None:
    a = _custom()
    b = _custom()
    b.set_creasing_method(CreasingMethod.UNIFORM)
    b.set_triangle_subdivision(TriangleSubdivision.CATMARK)
    assert a != b
    assert normalized_for_scheme(a, "bilinear").to_bits() == normalized_for_scheme(b, "bilinear").to_bits()


def test_unknown_scheme() -> None:
    with pytest.raises(ValueError):
        normalized_for_scheme(SubdivisionOptions(), "doo-sabin")
