"""UsdGeomMesh subdivision attributes to and from subdivision options."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pxr import Usd, UsdGeom

from sdcopts.core import (
    FVarLinearInterpolation,
    SubdivisionOptions,
    TriangleSubdivision,
    VtxBoundaryInterpolation,
)

logger = logging.getLogger(__name__)


USD_INTERPOLATE_BOUNDARY: dict[VtxBoundaryInterpolation, str] = {
    VtxBoundaryInterpolation.NONE: UsdGeom.Tokens.none,
    VtxBoundaryInterpolation.EDGE_ONLY: UsdGeom.Tokens.edgeOnly,
    VtxBoundaryInterpolation.EDGE_AND_CORNER: UsdGeom.Tokens.edgeAndCorner,
}
USD_FVAR_LINEAR: dict[FVarLinearInterpolation, str] = {
    FVarLinearInterpolation.NONE: UsdGeom.Tokens.none,
    FVarLinearInterpolation.CORNERS_ONLY: UsdGeom.Tokens.cornersOnly,
    FVarLinearInterpolation.CORNERS_PLUS1: UsdGeom.Tokens.cornersPlus1,
    FVarLinearInterpolation.CORNERS_PLUS2: UsdGeom.Tokens.cornersPlus2,
    FVarLinearInterpolation.BOUNDARIES: UsdGeom.Tokens.boundaries,
    FVarLinearInterpolation.ALL: UsdGeom.Tokens.all,
}
USD_TRIANGLE_RULE: dict[TriangleSubdivision, str] = {
    TriangleSubdivision.CATMARK: UsdGeom.Tokens.catmullClark,
    TriangleSubdivision.SMOOTH: UsdGeom.Tokens.smooth,
}


def _from_token(table: dict[Any, str], attr: Usd.Attribute) -> Any:
    # Get() returns the schema fallback when nothing is authored.
    token = attr.Get()
    for value, name in table.items():
        if name == token:
            return value
    allowed = ", ".join(table.values())
    raise ValueError(f"Invalid {attr.GetName()} token '{token}' on {attr.GetPrimPath()}. Allowed: {allowed}")


def _find_mesh(stage: Usd.Stage) -> UsdGeom.Mesh:
    default_prim = stage.GetDefaultPrim()
    if default_prim and default_prim.IsA(UsdGeom.Mesh):
        return UsdGeom.Mesh(default_prim)
    for prim in stage.Traverse():
        if prim.IsA(UsdGeom.Mesh):
            return UsdGeom.Mesh(prim)
    raise ValueError("USD stage contains no Mesh prim.")


def _as_mesh(source: Any) -> UsdGeom.Mesh:
    if isinstance(source, UsdGeom.Mesh):
        return source
    if isinstance(source, Usd.Prim):
        if not source.IsA(UsdGeom.Mesh):
            raise ValueError(f"Prim {source.GetPath()} is not a UsdGeom.Mesh.")
        return UsdGeom.Mesh(source)
    if isinstance(source, Usd.Stage):
        return _find_mesh(source)
    path = Path(source)
    logger.debug("Opening USD stage %s", path)
    stage = Usd.Stage.Open(str(path))
    if stage is None:
        raise ValueError(f"Could not open USD stage '{path}'.")
    return _find_mesh(stage)


def read_usd_options(source: Any) -> SubdivisionOptions:
    """Read options from a ``UsdGeom.Mesh``, a mesh prim, a stage or a stage path.

    For a stage, the default prim is used when it is a mesh, otherwise the
    first mesh in traversal order. USD has no creasing-method attribute, so
    it keeps its default.
    """

    mesh = _as_mesh(source)
    return SubdivisionOptions(
        vtx_boundary_interpolation=_from_token(USD_INTERPOLATE_BOUNDARY, mesh.GetInterpolateBoundaryAttr()),
        fvar_linear_interpolation=_from_token(USD_FVAR_LINEAR, mesh.GetFaceVaryingLinearInterpolationAttr()),
        triangle_subdivision=_from_token(USD_TRIANGLE_RULE, mesh.GetTriangleSubdivisionRuleAttr()),
    )


def options_to_usd_tokens(options: SubdivisionOptions) -> dict[str, str]:
    return {
        "interpolateBoundary": USD_INTERPOLATE_BOUNDARY[options.vtx_boundary_interpolation],
        "faceVaryingLinearInterpolation": USD_FVAR_LINEAR[options.fvar_linear_interpolation],
        "triangleSubdivisionRule": USD_TRIANGLE_RULE[options.triangle_subdivision],
    }


def write_usd_options(mesh: UsdGeom.Mesh, options: SubdivisionOptions) -> UsdGeom.Mesh:
    """Author the three subdivision attributes of ``mesh``."""

    mesh.CreateInterpolateBoundaryAttr().Set(USD_INTERPOLATE_BOUNDARY[options.vtx_boundary_interpolation])
    mesh.CreateFaceVaryingLinearInterpolationAttr().Set(USD_FVAR_LINEAR[options.fvar_linear_interpolation])
    mesh.CreateTriangleSubdivisionRuleAttr().Set(USD_TRIANGLE_RULE[options.triangle_subdivision])
    return mesh
