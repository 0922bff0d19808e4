import json
from pathlib import Path

import pytest
from pxr import Usd, UsdGeom

from sdcopts import SubdivisionOptions
from sdcopts.workflows.options_cli import main


def test_write_template_then_run(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    template = tmp_path / "opts.json"
    assert main(["--write-template", str(template)]) == 0
    payload = json.loads(template.read_text(encoding="utf-8"))
    assert payload["options"]["fvar_linear_interpolation"] == "all"

    out_path = tmp_path / "resolved.json"
    rc = main(
        [
            "--input",
            str(template),
            "--creasing",
            "chaikin",
            "--scheme",
            "bilinear",
            "--usd",
            "--output",
            str(out_path),
        ]
    )
    assert rc == 0
    lines = capsys.readouterr().out.splitlines()
    assert "creasing_method=chaikin" in lines
    assert "bilinear.creasing_method=uniform" in lines
    assert f"bilinear.bits={SubdivisionOptions().to_bits()}" in lines
    assert "usd.faceVaryingLinearInterpolation=all" in lines
    assert json.loads(out_path.read_text(encoding="utf-8"))["creasing_method"] == "chaikin"


def test_defaults_without_input(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "vtx_boundary_interpolation=none" in lines
    assert "bits=20" in lines


def test_bad_override_raises() -> None:
    with pytest.raises(ValueError):
        main(["--triangle-subdivision", "loop"])


def test_usd_stage_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    stage_path = tmp_path / "mesh.usda"
    stage = Usd.Stage.CreateNew(str(stage_path))
    mesh = UsdGeom.Mesh.Define(stage, "/Body")
    mesh.CreateInterpolateBoundaryAttr().Set(UsdGeom.Tokens.edgeOnly)
    stage.GetRootLayer().Save()

    assert main(["--input", str(stage_path), "--reader", "usd", "--usd"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "vtx_boundary_interpolation=edge_only" in lines
    assert "fvar_linear_interpolation=corners_plus1" in lines
    assert "usd.interpolateBoundary=edgeOnly" in lines
