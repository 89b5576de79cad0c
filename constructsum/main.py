# constructsum/main.py
"""
constructsum command-line entrypoint.

Usage examples:
    constructsum checksum walls.yaml
    constructsum checksum walls.yaml --materials library.csv --out runs/walls --debug
    constructsum add 1 2 --precision 1
    constructsum planes 100 200 300 --width 16 --png planes.png
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence
import argparse

from .checksum.bits import add_floats, fixed_point_round
from .io.config import build_constructions, build_settings, load_config
from .io.materials_csv import load_materials
from .io.results import write_checksums
from .postprocess.report import checksum_table, unique_count
from .utils import logger
from .utils.constants import PRECISION, REGISTER_WIDTH

__all__ = ["main"]


# --------------------------- checksum subcommand ----------------------------


@dataclass(slots=True)
class _ChecksumArgs:
    config: Path
    materials_csv: Path | None
    out_dir: Path | None
    debug: bool


def _add_checksum_subparser(
    subparsers: argparse._SubParsersAction,
) -> argparse.ArgumentParser:
    p = subparsers.add_parser(
        "checksum", help="Checksum every construction in a YAML run file"
    )
    p.add_argument("config", type=Path, help="YAML run file")
    p.add_argument(
        "--materials", type=Path, default=None,
        help="CSV material library (name,conductivity,density,specific_heat)"
    )
    p.add_argument("--out", type=Path, default=None, help="Directory for checksums.json/.csv")
    p.add_argument("--debug", action="store_true", help="Print per-input diagnostics")
    p.set_defaults(cmd="checksum")
    return p


def _run_checksum(args: _ChecksumArgs) -> None:
    logger.set_verbose(args.debug)
    cfg = load_config(args.config)
    library = load_materials(args.materials_csv) if args.materials_csv else None
    settings = build_settings(cfg)
    named = build_constructions(cfg, library)
    logger.debug(f"{len(named)} constructions from {args.config} | {settings}")
    if not named:
        logger.warn(f"no constructions in {args.config}")
        return

    table = checksum_table(named, settings, debug=args.debug)
    for name, cs in zip(table["name"], table["checksum"]):
        print(f"{name}\t{cs}")
    n_unique = unique_count(table["checksum"])
    print(f"Unique values: {n_unique}")
    if n_unique < len(table):
        dups = ", ".join(table.loc[table["duplicate"], "name"])
        logger.warn(f"checksum collisions among: {dups}")

    if args.out_dir is not None:
        out = write_checksums(args.out_dir, table)
        logger.info(f"wrote {out}")


# ------------------------------ add / planes --------------------------------


def _add_add_subparser(subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
    p = subparsers.add_parser("add", help="Bit-plane sum of real values at a fixed precision")
    p.add_argument("values", type=float, nargs="+")
    p.add_argument("--precision", type=float, default=PRECISION, help="Fixed-point factor")
    p.add_argument("--width", type=int, default=REGISTER_WIDTH, help="Register width [bits]")
    p.add_argument("--strict", action="store_true", help="Fail on overflow instead of wrapping")
    p.add_argument("--debug", action="store_true")
    p.set_defaults(cmd="add")
    return p


def _add_planes_subparser(subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
    p = subparsers.add_parser("planes", help="Plot the bit planes of an addition")
    p.add_argument("values", type=float, nargs="+")
    p.add_argument("--precision", type=float, default=1.0, help="Fixed-point factor")
    p.add_argument("--width", type=int, default=REGISTER_WIDTH, help="Register width [bits]")
    p.add_argument("--png", default="bit_planes.png", help="PNG output path")
    p.set_defaults(cmd="planes")
    return p


def _run_planes(values: Sequence[float], precision: float, width: int, png: str) -> None:
    from .postprocess.visualization import plot_bit_planes

    ints = [fixed_point_round(v, precision) for v in values]
    fig, _ax = plot_bit_planes(ints, width)
    fig.savefig(png, dpi=180)
    logger.info(f"wrote {png}")


# --------------------------------- main() ------------------------------------


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="constructsum — construction checksums")
    sub = parser.add_subparsers(dest="cmd")
    _add_checksum_subparser(sub)
    _add_add_subparser(sub)
    _add_planes_subparser(sub)

    ns = parser.parse_args(argv)
    try:
        if ns.cmd == "checksum":
            _run_checksum(_ChecksumArgs(
                config=ns.config,
                materials_csv=ns.materials,
                out_dir=ns.out,
                debug=bool(ns.debug),
            ))
            return
        if ns.cmd == "add":
            print(add_floats(ns.values, ns.precision, ns.width, strict=ns.strict, debug=ns.debug))
            return
        if ns.cmd == "planes":
            _run_planes(ns.values, ns.precision, ns.width, ns.png)
            return
    except (ValueError, KeyError) as exc:
        msg = exc.args[0] if isinstance(exc, KeyError) and exc.args else exc
        logger.error(f"{ns.cmd}: {msg}")
        raise SystemExit(1) from None

    parser.error("Unknown command (try: checksum, add, planes)")


if __name__ == "__main__":
    main()
