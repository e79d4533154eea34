"""
True Size Overlay - Boundary Loader

Reads subdivision boundaries from a local GeoJSON FeatureCollection and
normalizes their properties to {name, code, country, area_km2}:
- name from 'name', 'NAME_1' or 'NAME' (Chinese province names translated)
- code from the known code tables, else the first two letters upper-cased
- area_km2 from the feature, else the reference table, else a per-country default

Features without a name are skipped silently; features with broken geometry
are logged and skipped. An unreadable file is an error.
"""

import json
import logging
from typing import Iterable, List, Optional

from models.boundary import BoundaryFeature
from services.reference_areas import default_area, english_name, get_code, get_reference_area
from utils.geo_utils import InvalidGeometryError, calculate_centroid
from utils.logger import loggerRaise

logger = logging.getLogger(__name__)

NAME_PROPERTIES = ('name', 'NAME_1', 'NAME')


def _feature_name(props: dict) -> Optional[str]:
    for key in NAME_PROPERTIES:
        if props.get(key):
            return english_name(str(props[key]))
    return None


def normalize_feature(feature: dict, country: Optional[str] = None) -> Optional[BoundaryFeature]:
    """Normalize one GeoJSON Feature.

    Returns:
        BoundaryFeature, or None if the feature has no name

    Raises:
        InvalidGeometryError: If the geometry is missing, empty or malformed
    """
    props = feature.get('properties') or {}
    name = _feature_name(props)
    if not name:
        return None

    geometry = feature.get('geometry')
    if not isinstance(geometry, dict) or 'coordinates' not in geometry:
        raise InvalidGeometryError(f"Feature '{name}' has no geometry")
    calculate_centroid(geometry['coordinates'])

    country = country or props.get('country') or None
    code = props.get('code') or get_code(name, country)
    area = props.get('area_km2') or props.get('areaKm2')
    if not area:
        area = get_reference_area(name, country) or default_area(country)

    return BoundaryFeature(geometry=geometry, name=name, code=code, country=country or '', area_km2=area)


def load_boundaries(path: str, country: Optional[str] = None) -> List[BoundaryFeature]:
    """Load a GeoJSON FeatureCollection from disk.

    Args:
        path: GeoJSON file
        country: Country tag applied to every feature (overrides properties)

    Returns:
        Normalized features in file order
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        loggerRaise(e, f"Error loading boundaries from {path}")

    if not isinstance(data, dict) or data.get('type') != 'FeatureCollection':
        raise ValueError(f"{path} is not a GeoJSON FeatureCollection")

    features = []
    skipped = 0
    for index, raw in enumerate(data.get('features') or []):
        try:
            feature = normalize_feature(raw, country)
        except InvalidGeometryError as e:
            logger.warning(f"Skipping feature #{index} in {path}: {e}")
            skipped += 1
            continue
        if feature is None:
            skipped += 1
            continue
        features.append(feature)

    logger.info(f"Loaded {len(features)} boundaries from {path} ({skipped} skipped)")
    return features


def find_boundary(features: Iterable[BoundaryFeature], query: str) -> Optional[BoundaryFeature]:
    """Find a boundary by name: exact match first, then code, then name prefix (case-insensitive)"""
    features = list(features)
    needle = query.strip().lower()
    if not needle:
        return None
    for feature in features:
        if feature.name.lower() == needle:
            return feature
    for feature in features:
        if feature.code.lower() == needle:
            return feature
    for feature in features:
        if feature.name.lower().startswith(needle):
            return feature
    return None
