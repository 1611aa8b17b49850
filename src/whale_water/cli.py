from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from whale_water.config import settings
from whale_water.contracts.water_contract import InvalidCoordinateError
from whale_water.core.ingest import resolve_sightings
from whale_water.core.resolver import is_in_water, resolve_coordinates
from whale_water.geo.boundary import WaterBoundary
from whale_water.geo.regions import describe_regions


def _read_rows(path: Path) -> List[dict]:
    return json.loads(path.read_text(encoding="utf-8"))


def _save_json(path: Path, obj) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(obj, indent=2), encoding="utf-8")


def _cmd_check(args, console: Console) -> int:
    in_water = is_in_water(args.lat, args.lon)
    console.print(f"({args.lat:.5f}, {args.lon:.5f}) in water: {in_water}")
    return 0


def _cmd_resolve(args, console: Console) -> int:
    result = resolve_coordinates(
        args.lat,
        args.lon,
        args.desc,
        args.method,
        max_snap_distance_km=args.max_snap_km,
    )

    table = Table(title="Coordinate resolution")
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Input", f"{args.lat:.5f}, {args.lon:.5f}")
    table.add_row("Output", f"{result.lat:.5f}, {result.lon:.5f}")
    table.add_row("Adjustment", result.adjustment_type)
    table.add_row("Adjusted", str(result.was_adjusted))
    snap = result.snap_distance_km
    table.add_row("Snap km", f"{snap:.3f}" if snap is not None else "")
    console.print(table)
    return 0


def _cmd_batch(args, console: Console) -> int:
    rows = _read_rows(Path(args.path))
    report = resolve_sightings(
        rows,
        max_workers=args.workers,
        drop_unresolved=not args.keep_unresolved,
        land_prefilter=True if args.land_prefilter else None,
    )

    table = Table(title=f"Sightings — {Path(args.path).name}")
    table.add_column("#")
    table.add_column("Species")
    table.add_column("Lat")
    table.add_column("Lon")
    table.add_column("Adjustment")
    table.add_column("Snap km")
    table.add_column("Conf")

    for s in report.sightings:
        table.add_row(
            str(s.sighting_index),
            s.species,
            f"{s.lat:.5f}",
            f"{s.lon:.5f}",
            s.adjustment_type or "",
            f"{s.snap_distance_km:.3f}" if s.snap_distance_km is not None else "",
            f"{s.confidence:.2f}",
        )
    console.print(table)

    summary = report.summary()
    console.print(", ".join(f"{k}={v}" for k, v in summary.items()))

    out_path = Path(args.out)
    _save_json(out_path, [s.model_dump() for s in report.sightings])
    console.print(f"Saved: {out_path.resolve()}")
    return 0


def _cmd_regions(args, console: Console) -> int:
    table = Table(title="Water regions")
    table.add_column("Name")
    table.add_column("Role")
    table.add_column("Vertices")
    table.add_column("Area deg²")
    table.add_column("Validity")

    for row in describe_regions(WaterBoundary.get()):
        table.add_row(
            row["name"],
            row["role"],
            str(row["vertices"]),
            f"{row['area_deg2']:.4f}",
            row["validity"],
        )
    console.print(table)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="whale-water")
    ap.add_argument("--log-level", default=settings.log_level)
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("check", help="Is a point in modeled water?")
    p.add_argument("--lat", type=float, required=True)
    p.add_argument("--lon", type=float, required=True)
    p.set_defaults(func=_cmd_check)

    p = sub.add_parser("resolve", help="Resolve one reported position")
    p.add_argument("--lat", type=float, required=True)
    p.add_argument("--lon", type=float, required=True)
    p.add_argument("--desc", default="", help="Free-text location description")
    p.add_argument("--method", default="", help="How the position was derived")
    p.add_argument("--max-snap-km", type=float, default=None)
    p.set_defaults(func=_cmd_resolve)

    p = sub.add_parser("batch", help="Resolve a JSON array of sighting records")
    p.add_argument("path")
    p.add_argument("--out", default="sightings_resolved.json")
    p.add_argument("--workers", type=int, default=None)
    p.add_argument("--keep-unresolved", action="store_true")
    p.add_argument("--land-prefilter", action="store_true", help="Drop obviously inland reports first")
    p.set_defaults(func=_cmd_batch)

    p = sub.add_parser("regions", help="Summarize the water polygons")
    p.set_defaults(func=_cmd_regions)

    args = ap.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s [whale_water] %(levelname)s %(message)s",
    )

    console = Console()
    try:
        return args.func(args, console)
    except InvalidCoordinateError as exc:
        console.print(f"[red]Invalid coordinate:[/red] {exc}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
