"""
True Size Overlay - Constants and Configuration

This module contains all constant values used throughout the application:
- Mercator projection limits
- Area unit conversion
- Overlay color palette
- Edge-pan and gesture tuning
- Map viewport defaults
"""

# ======================================================================
# PROJECTION LIMITS
# ======================================================================
# Latitude clamp used for the Mercator scale factor (sec(lat) -> inf at 90)
MERCATOR_SCALE_LAT_LIMIT = 85.0

# Latitude limit of the Web Mercator square world (atan(sinh(pi)))
WEB_MERCATOR_MAX_LAT = 85.0511287798066

# Web Mercator tile edge in pixels
TILE_SIZE = 256

# ======================================================================
# AREA CONVERSION
# ======================================================================
KM2_TO_MI2 = 0.386102

# ======================================================================
# OVERLAY COLOR PALETTE
# ======================================================================
# Colors are handed out in this order and wrap around
OVERLAY_COLORS = [
    '#e6194b',  # red
    '#3cb44b',  # green
    '#4363d8',  # blue
    '#f58231',  # orange
    '#911eb4',  # purple
    '#42d4f4',  # cyan
    '#f032e6',  # magenta
    '#bfef45',  # lime
    '#fabed4',  # pink
    '#469990',  # teal
    '#9a6324',  # brown
    '#800000',  # maroon
]

# ======================================================================
# OVERLAY DEFAULTS
# ======================================================================
DEFAULT_OFFSET = (0.0, 0.0)
DEFAULT_ROTATION = 0.0
DEFAULT_MERCATOR_SCALE = 1.0

# Reference area fallbacks (km²) when a boundary is missing from the table
DEFAULT_AREA_KM2 = 100000
DEFAULT_AREA_KM2_SMALL_COUNTRIES = 50000
SMALL_AREA_DEFAULT_COUNTRIES = ('IN', 'PK', 'CN')

# ======================================================================
# EDGE PAN
# ======================================================================
EDGE_PAN_THRESHOLD = 50     # pixels from viewport edge to start panning
EDGE_PAN_SPEED = 15         # pixels to pan per tick
EDGE_PAN_INTERVAL_MS = 16   # ~60fps

# ======================================================================
# GESTURES
# ======================================================================
# 'live': every move commits to the registry
# 'on_release': moves only update a preview transform, committed at release
COMMIT_MODE_LIVE = 'live'
COMMIT_MODE_ON_RELEASE = 'on_release'
COMMIT_MODES = (COMMIT_MODE_LIVE, COMMIT_MODE_ON_RELEASE)
DEFAULT_COMMIT_MODE = COMMIT_MODE_LIVE

# Track atan2 winding so two-finger rotation never jumps by 2*pi
DEFAULT_UNWRAP_ROTATION = True

# Modifier that turns a single-pointer press into a rotation
ROTATE_MODIFIER = 'shift'

# ======================================================================
# MAP VIEWPORT
# ======================================================================
DEFAULT_MAP_CENTER = (0.0, 30.0)  # (lng, lat)
DEFAULT_MAP_ZOOM = 3
MIN_MAP_ZOOM = 2
MAX_MAP_ZOOM = 18

# ======================================================================
# RENDERING
# ======================================================================
OVERLAY_FILL_OPACITY = 0.4
OVERLAY_FILL_OPACITY_SELECTED = 0.6
OVERLAY_OUTLINE_WIDTH = 2
OVERLAY_OUTLINE_WIDTH_SELECTED = 3
OVERLAY_OUTLINE_COLOR_SELECTED = '#333333'
MAP_BACKGROUND_COLOR = '#aad3df'

# ======================================================================
# CONFIG FILE
# ======================================================================
CONFIG_DIR_NAME = '.truesize_overlay'
CONFIG_FILE_NAME = 'config.json'
