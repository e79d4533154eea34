"""True Size Report - CLI entry point.

Loads boundaries from a GeoJSON file, places one as an overlay, moves it to a
target position and/or rotates it, then reports how large Mercator draws it
there compared to its home latitude.

Usage:
    truesize-report <geojson> <name> [--to-lat LAT] [--to-lng LNG]
                    [--offset DLNG DLAT] [--rotate DEG] [-o OUTPUT]

Examples:
    truesize-report us_states.geojson Texas --to-lat 60
    truesize-report india.geojson Kerala --country IN --offset 10 30 --rotate 45
    truesize-report us_states.geojson Alaska --to-lat 0 -o alaska_equator.geojson
"""

import sys
import os
import argparse
import json
import logging
import math

# Add editor/src to path so imports work
_src_dir = os.path.dirname(os.path.abspath(__file__))
if _src_dir not in sys.path:
    sys.path.insert(0, _src_dir)

from models.overlay_registry import OverlayRegistry
from services.boundary_loader import find_boundary, load_boundaries
from utils.geo_utils import format_area, get_bounds
from version import get_version


def _target_offset(original_centroid, args):
    """Offset that moves the centroid to the requested place.

    --offset is added on top of any --to-lat/--to-lng target.
    """
    lng, lat = original_centroid
    d_lng = 0.0 if args.to_lng is None else args.to_lng - lng
    d_lat = 0.0 if args.to_lat is None else args.to_lat - lat
    if args.offset:
        d_lng += args.offset[0]
        d_lat += args.offset[1]
    return [d_lng, d_lat]


def format_report(snapshot, original_centroid) -> str:
    """Human-readable summary of an overlay's size distortion."""
    area = format_area(snapshot.area_km2)
    percent = round(snapshot.mercator_scale * 100)
    degrees = round(math.degrees(snapshot.rotation))
    bounds = get_bounds(snapshot.geometry)
    lines = [
        f"{snapshot.name} ({snapshot.code}, {snapshot.country or '?'})",
        f"  True area:      {area['km2']} km² ({area['mi2']} mi²)",
        f"  Centroid:       [{original_centroid[0]:.4f}, {original_centroid[1]:.4f}]"
        f" -> [{snapshot.centroid[0]:.4f}, {snapshot.centroid[1]:.4f}]",
        f"  Mercator scale: {snapshot.mercator_scale:.3f}x (drawn at {percent}% of its home size)",
        f"  Rotation:       {degrees}°",
        f"  Extent:         lng [{bounds.min_lng:.2f}, {bounds.max_lng:.2f}],"
        f" lat [{bounds.min_lat:.2f}, {bounds.max_lat:.2f}]",
    ]
    return '\n'.join(lines)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Report how Mercator distorts a boundary moved to another latitude.',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {get_version()}')
    parser.add_argument('geojson', help='GeoJSON FeatureCollection of boundaries.')
    parser.add_argument('name', help='Boundary name (exact, code, or prefix; case-insensitive).')
    parser.add_argument('--country', help='Country tag for every loaded boundary (e.g. US).')
    parser.add_argument('--to-lat', type=float, help='Move the centroid to this latitude.')
    parser.add_argument('--to-lng', type=float, help='Move the centroid to this longitude.')
    parser.add_argument('--offset', type=float, nargs=2, metavar=('DLNG', 'DLAT'),
                        help='Additional offset in degrees.')
    parser.add_argument('--rotate', type=float, default=0.0,
                        help='Rotation in degrees, counter-clockwise.')
    parser.add_argument('-o', '--output', help='Write the transformed boundary as a GeoJSON Feature.')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging.')
    args = parser.parse_args(argv)

    # Logging
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    input_path = os.path.abspath(args.geojson)
    if not os.path.isfile(input_path):
        print(f"Error: Input file not found: {input_path}")
        return 1

    features = load_boundaries(input_path, args.country)
    feature = find_boundary(features, args.name)
    if feature is None:
        print(f"No boundary matching '{args.name}' in {input_path} ({len(features)} loaded).")
        return 1

    registry = OverlayRegistry()
    overlay_id = registry.add_overlay(feature)
    overlay = registry.get_overlay(overlay_id)
    original_centroid = overlay.original_centroid

    offset = _target_offset(original_centroid, args)
    registry.apply_transform(overlay_id, offset, math.radians(args.rotate))
    snapshot = registry.snapshot(overlay_id)

    print(format_report(snapshot, original_centroid))

    if args.output:
        output_path = os.path.abspath(args.output)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(snapshot.to_geojson(), f, indent=2)
        print(f"\nWrote {output_path}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
