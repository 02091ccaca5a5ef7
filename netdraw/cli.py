"""Command-line entry point: draws networks, flow patterns and travel demand."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from .adapters.canvas.matplotlib_canvas import SUPPORTED_FORMATS, MatplotlibCanvas
from .adapters.demand.od_pairs import import_od_pairs
from .adapters.geo.osm_poly import read_osm_poly
from .adapters.importers.csv_importer import CsvNetworkImporter
from .config import AppConfig, ObservabilityConfig, get_config
from .domain.errors import ConfigurationError, NetDrawError
from .domain.models import LatLng, Rectangle
from .flow.flow_file import read_flow_samples
from .graph.cleanup import remove_stuttgart_outliers
from .graph.load_graph import build_graph
from .services.draw_network import NetworkDrawingService

logger = logging.getLogger(__name__)

PROG = "draw-network"

USAGE = """\
Usage: draw-network [-c <file>] -o <file> -g <dir>
       draw-network [-c <file>] -o <file> -g <dir> -b <file>
       draw-network [-c <file>] -o <file> -g <dir> -b <file> -d <file>
       draw-network [-c <file>] -o <file> -g <dir> -f <file>
Visualizes networks, flow patterns throughout networks and travel demand data.
  -stuttgart          remove outliers in the network of Stuttgart
  -i                  draw all intermediate flow patterns
  -p <hrs>            analysis period in hours (defaults to 1.0)
  -import-period <hrs>
                      analysis period used when importing capacities
  -w <cm>             width in centimeters of the graphic (defaults to 14.0)
  -h <cm>             height in centimeters of the graphic (defaults to 14.0)
  -fmt <fmt>          file format of the graphic
                        possible values: PDF PNG (default) SVG
  -c <file>           clip the graphic to the specified OSM POLY file
  -g <dir>            draw the network in <dir> (vertices.csv, edges.csv)
  -b <file>           draw the boundaries in the specified OSM POLY file
  -d <file>           draw the travel demand in <file>
  -f <file>           draw the flow patterns in <file>
  -o <file>           place output in <file>
  -help               display this help and exit
"""


class _UsageParser(argparse.ArgumentParser):
    def format_usage(self) -> str:
        return USAGE

    def format_help(self) -> str:
        return USAGE


def build_parser(config: AppConfig) -> argparse.ArgumentParser:
    parser = _UsageParser(prog=PROG, add_help=False, allow_abbrev=False)
    parser.add_argument("-help", action="store_true", dest="help")
    parser.add_argument("-stuttgart", action="store_true")
    parser.add_argument(
        "-i", action="store_true", dest="draw_intermediates",
        default=config.render.draw_intermediates,
    )
    parser.add_argument("-p", type=float, dest="period", default=1.0)
    parser.add_argument(
        "-import-period", type=float, dest="import_period",
        default=config.importing.analysis_period,
    )
    parser.add_argument("-w", type=float, dest="width", default=config.render.width_cm)
    parser.add_argument("-h", type=float, dest="height", default=config.render.height_cm)
    parser.add_argument("-fmt", dest="format", default=config.render.format)
    parser.add_argument("-c", dest="viewport")
    parser.add_argument("-g", dest="graph")
    parser.add_argument("-b", dest="boundaries")
    parser.add_argument("-d", dest="demand")
    parser.add_argument("-f", dest="flows")
    parser.add_argument("-o", dest="output")
    return parser


def configure_logging(config: ObservabilityConfig) -> None:
    logging.basicConfig(level=config.level.upper(), format=config.format)


def _check_options(args: argparse.Namespace) -> None:
    args.format = args.format.upper()
    if args.format not in SUPPORTED_FORMATS:
        raise ConfigurationError(
            f"unrecognized file format -- '{args.format}'",
            setting_name="fmt",
            expected_type=" | ".join(SUPPORTED_FORMATS),
        )
    for name, value in (("p", args.period), ("import-period", args.import_period)):
        if not value > 0:
            raise ConfigurationError(
                f"analysis period must be positive -- '{value}'",
                setting_name=name,
                expected_type="float > 0",
            )
    for name, value in (("w", args.width), ("h", args.height)):
        if not value > 0:
            raise ConfigurationError(
                f"graphic size must be positive -- '{value}'",
                setting_name=name,
                expected_type="float > 0",
            )


def run(args: argparse.Namespace, config: AppConfig) -> None:
    """Draw the graphic described by the parsed command-line options."""
    _check_options(args)

    logger.info("Reading network", extra={"path": args.graph})
    with CsvNetworkImporter(
        args.graph,
        analysis_period=args.import_period,
        vertices_file=config.importing.vertices_file,
        edges_file=config.importing.edges_file,
    ) as importer:
        graph = build_graph(importer)
    num_edges = graph.num_edges
    origin_coordinates = [
        graph.lat_lng(v).web_mercator_projection() for v in graph.vertices()
    ]

    if args.stuttgart:
        remove_stuttgart_outliers(graph)

    # Compute the bounding box to which the graphic is clipped.
    bounding_box = Rectangle()
    if args.viewport is None:
        for v in graph.vertices():
            bounding_box.extend(graph.lat_lng(v).web_mercator_projection())
    else:
        (min_lon, min_lat), (max_lon, max_lat) = read_osm_poly(args.viewport).bounding_box()
        bounding_box.extend(LatLng(min_lat, min_lon).web_mercator_projection())
        bounding_box.extend(LatLng(max_lat, max_lon).web_mercator_projection())

    with MatplotlibCanvas(
        args.output,
        args.format,
        args.width,
        args.height,
        bounding_box,
        dpi=config.render.dpi,
    ) as canvas:
        service = NetworkDrawingService(canvas=canvas, graph=graph)
        if args.flows is None:
            boundaries = read_osm_poly(args.boundaries) if args.boundaries else None
            od_pairs = import_od_pairs(args.demand) if args.demand else None
            service.draw_network(boundaries, od_pairs, origin_coordinates)
        else:
            samples = read_flow_samples(args.flows, num_edges)
            service.draw_flow_patterns(samples, args.period, args.draw_intermediates)


def _report(error: NetDrawError) -> int:
    sys.stderr.write(f"{PROG}: {error}\n")
    sys.stderr.write(f"Try '{PROG} -help' for more information.\n")
    return 1


def load_config() -> AppConfig:
    """Load settings from the environment.

    Raises:
        ConfigurationError: If a setting is missing or out of range.
    """
    try:
        return get_config()
    except ValidationError as e:
        errors = e.errors()
        setting = ".".join(str(part) for part in errors[0]["loc"]) if errors else ""
        raise ConfigurationError(
            "invalid configuration in environment", cause=e, setting_name=setting
        ) from e


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        config = load_config()
    except ConfigurationError as e:
        return _report(e)
    parser = build_parser(config)
    args = parser.parse_args(argv)
    if args.help:
        sys.stdout.write(USAGE)
        return 0
    if args.graph is None or args.output is None:
        parser.error("both -g and -o are required")

    configure_logging(config.observability)
    try:
        run(args, config)
    except NetDrawError as e:
        return _report(e)
    logger.info("Done", extra={"output": str(Path(args.output))})
    return 0


if __name__ == "__main__":
    sys.exit(main())
