"""Resolve, inspect and save subdivision options from the command line."""

from __future__ import annotations

import argparse
import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from sdcopts.core import SubdivisionOptions, normalized_for_scheme
from sdcopts.io import options_to_dict, options_to_usd_tokens, read_options, save_options_json


# CLI flag -> option field.
OVERRIDE_FLAGS: dict[str, str] = {
    "vtx_boundary": "vtx_boundary_interpolation",
    "fvar_linear": "fvar_linear_interpolation",
    "creasing": "creasing_method",
    "triangle_subdivision": "triangle_subdivision",
}


def _default_template() -> dict[str, Any]:
    return {"options": options_to_dict(SubdivisionOptions())}


def write_input_template(path: str | Path) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", encoding="utf-8") as fh:
        json.dump(_default_template(), fh, indent=2, sort_keys=True)
        fh.write("\n")
    return out


def resolve_options(
    source: Any = None,
    reader: str = "json",
    overrides: dict[str, str | None] | None = None,
) -> SubdivisionOptions:
    options = SubdivisionOptions() if source is None else read_options(source, reader=reader)
    for name, value in (overrides or {}).items():
        if value is not None:
            setattr(options, name, value)
    return options


def _print_options(options: SubdivisionOptions, label: str | None = None) -> None:
    prefix = f"{label}." if label else ""
    for name, value in options_to_dict(options).items():
        print(f"{prefix}{name}={value}")
    print(f"{prefix}bits={options.to_bits()}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--input", type=Path, default=None, help="Options source (JSON file by default).")
    parser.add_argument("--reader", default="json", help="Reader used for --input.")
    parser.add_argument("--write-template", type=Path, default=None, help="Write template config and exit.")
    parser.add_argument("--output", type=Path, default=None, help="Save resolved options as JSON.")
    parser.add_argument("--vtx-boundary", default=None, help="none, edge_only, edge_and_corner")
    parser.add_argument(
        "--fvar-linear",
        default=None,
        help="none, corners_only, corners_plus1, corners_plus2, boundaries, all",
    )
    parser.add_argument("--creasing", default=None, help="uniform, chaikin")
    parser.add_argument("--triangle-subdivision", default=None, help="catmark, smooth")
    parser.add_argument("--scheme", default=None, help="Also report options normalized for this scheme.")
    parser.add_argument("--usd", action="store_true", help="Also report USD mesh attribute tokens.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.write_template is not None:
        out = write_input_template(args.write_template)
        print(f"Wrote template: {out}")
        return 0

    overrides = {field: getattr(args, flag) for flag, field in OVERRIDE_FLAGS.items()}
    options = resolve_options(args.input, reader=args.reader, overrides=overrides)
    _print_options(options)

    if args.scheme is not None:
        _print_options(normalized_for_scheme(options, args.scheme), label=str(args.scheme).lower())
    if args.usd:
        for attr, token in options_to_usd_tokens(options).items():
            print(f"usd.{attr}={token}")
    if args.output is not None:
        out = save_options_json(args.output, options)
        print(f"Wrote options: {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
