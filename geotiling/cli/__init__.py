"""
GeoTiling CLI Entry Points

Provides command-line interface for:
- counts: Tile counts at a level
- bounds: Geographic bounds of a tile
- locate: Tile containing a position
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        prog="geotiling",
        description="GeoTiling - Geographic tile addressing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  geotiling counts 3                               Tile counts at level 3
  geotiling bounds 5 2 3                           Bounds of tile x=5 y=2 at level 3
  geotiling locate 127.05 37.55 10                 Tile containing Seoul at level 10
  geotiling --tile-info tianditu.json locate 116.4 39.9 8
        """,
    )

    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument(
        "--tile-info", help="Tile matrix JSON (ArcGIS REST tileInfo) for matrix mode"
    )
    parser.add_argument(
        "--level-zero-tiles",
        nargs=2,
        type=int,
        metavar=("X", "Y"),
        help="Level-zero tile counts (default: 2 1; ignored with --tile-info)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Counts command
    counts_parser = subparsers.add_parser("counts", help="Show tile counts at a level")
    counts_parser.add_argument("level", type=int, help="Level-of-detail")

    # Bounds command
    bounds_parser = subparsers.add_parser("bounds", help="Show the bounds of a tile in degrees")
    bounds_parser.add_argument("x", type=int, help="Tile column")
    bounds_parser.add_argument("y", type=int, help="Tile row")
    bounds_parser.add_argument("level", type=int, help="Level-of-detail")

    # Locate command
    locate_parser = subparsers.add_parser("locate", help="Find the tile containing a position")
    locate_parser.add_argument("lon", type=float, help="Longitude in degrees")
    locate_parser.add_argument("lat", type=float, help="Latitude in degrees")
    locate_parser.add_argument("level", type=int, help="Level-of-detail")

    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level, format="%(message)s" if not args.verbose else "%(levelname)s: %(message)s"
    )

    if args.command == "counts":
        from geotiling.cli.tiles import run_counts

        return run_counts(args)
    elif args.command == "bounds":
        from geotiling.cli.tiles import run_bounds

        return run_bounds(args)
    elif args.command == "locate":
        from geotiling.cli.tiles import run_locate

        return run_locate(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
