"""
Shared fixtures for True Size Overlay tests.

Provides boundary features, a registry, a map viewport and a gesture
controller wired together the way the app wires them.
"""
import sys
import os
import json
import pytest

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))

# Widgets are created without a display
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')


# ── Sample boundaries ───────────────────────────────────────────────────

def make_square(lng, lat, half=1.0):
    """Open square ring around (lng, lat); its vertex mean is exactly (lng, lat)"""
    return [[
        [lng - half, lat - half],
        [lng + half, lat - half],
        [lng + half, lat + half],
        [lng - half, lat + half],
    ]]


def make_feature(name, lng, lat, half=1.0, code=None, country='US', area_km2=1000):
    """Normalized GeoJSON Feature with a square Polygon"""
    return {
        'type': 'Feature',
        'properties': {
            'name': name,
            'code': code or name[:2].upper(),
            'country': country,
            'area_km2': area_km2,
        },
        'geometry': {'type': 'Polygon', 'coordinates': make_square(lng, lat, half)},
    }


@pytest.fixture
def equator_feature():
    """Square centered on (0, 0)"""
    return make_feature('Equatoria', 0.0, 0.0, code='EQ')


@pytest.fixture
def london_feature():
    """Square centered on (0, 51.5)"""
    return make_feature('Londonia', 0.0, 51.5, code='LO')


@pytest.fixture
def registry():
    from models.overlay_registry import OverlayRegistry
    return OverlayRegistry()


@pytest.fixture
def map_adapter():
    """800x600 viewport at zoom 2 centered on (0, 30): latitudes 0..60 are on screen"""
    from services.map_adapter import WebMercatorMapAdapter
    return WebMercatorMapAdapter(800, 600, center=(0.0, 30.0), zoom=2)


@pytest.fixture
def settings():
    from services.settings import Settings
    return Settings()


@pytest.fixture
def controller(qapp, registry, map_adapter, settings):
    from components.gesture_controller import GestureController
    ctrl = GestureController(registry, map_adapter, settings)
    yield ctrl
    ctrl.edge_panner.stop()


@pytest.fixture
def editable_overlay(registry, equator_feature):
    """Selected, edit-enabled overlay at the equator"""
    overlay_id = registry.add_overlay(equator_feature)
    registry.set_edit_enabled(overlay_id, True)
    return overlay_id


@pytest.fixture
def boundaries_file(tmp_path):
    """GeoJSON FeatureCollection in raw dataset form (unnormalized properties)"""
    collection = {
        'type': 'FeatureCollection',
        'features': [
            {'type': 'Feature', 'properties': {'name': 'Texas'},
             'geometry': {'type': 'Polygon', 'coordinates': make_square(-99.0, 31.0, 3.0)}},
            {'type': 'Feature', 'properties': {'NAME_1': 'Alaska'},
             'geometry': {'type': 'Polygon', 'coordinates': make_square(-150.0, 64.0, 5.0)}},
            {'type': 'Feature', 'properties': {'NAME': 'Nowhere Land'},
             'geometry': {'type': 'Polygon', 'coordinates': make_square(10.0, 10.0)}},
            {'type': 'Feature', 'properties': {'id': 7},
             'geometry': {'type': 'Polygon', 'coordinates': make_square(0.0, 0.0)}},
            {'type': 'Feature', 'properties': {'name': 'Broken'},
             'geometry': {'type': 'Polygon', 'coordinates': []}},
        ],
    }
    path = tmp_path / 'states.geojson'
    path.write_text(json.dumps(collection), encoding='utf-8')
    return str(path)
