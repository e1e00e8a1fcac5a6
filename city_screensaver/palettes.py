"""
Scene Palettes - Fixed glyph, color and style tables.

Everything random in the scene is a uniform pick from one of these tables,
plus the tuning constants for generation and per-tick updates.
"""

from .colors import Colors
from .models import VehicleStyle

STAR_CHARS = ('.', '*', '+', "'")
SNOWFLAKE_CHARS = ('*', '.', 'o')
ANTENNA_CHARS = ('|', 'Y', 'i')
CLOUD_SHAPES = ('_.-^-._', ' ~~~', '(-.-)')

BUILDING_COLORS = (
    Colors.BUILDING_1,
    Colors.BUILDING_2,
    Colors.BUILDING_3,
    Colors.BUILDING_4,
)

# (glyph, color, signed speed) - positive speeds drive left to right
VEHICLE_STYLES = (
    VehicleStyle('─=≡(°o°)', Colors.VEHICLE_YELLOW, 5.0),
    VehicleStyle('[\\__\\_]', Colors.VEHICLE_GREEN, -3.0),
    VehicleStyle('o-o-o', Colors.VEHICLE_CYAN, 4.0),
    VehicleStyle('[##-##]', Colors.VEHICLE_MAGENTA, -2.5),
    VehicleStyle('<(o.o)>', Colors.VEHICLE_RED, 2.0),
    VehicleStyle('🚚', Colors.VEHICLE_BLUE, -2.0),
    VehicleStyle('🚓', Colors.VEHICLE_WHITE, 3.5),
    VehicleStyle('🚑', Colors.VEHICLE_RED, -4.0),
    VehicleStyle('🚌', Colors.VEHICLE_GREEN, 2.8),
)

MOON_ART = (
    "  ,'.'.",
    " ,'. ..'.",
    ".' .. '. '.",
)
MOON_OFFSET = 15     # Columns in from the right edge
MOON_TOP = 1

BUILDING_CHAR = '█'
WINDOW_CHAR = '■'
ROAD_CHAR = '='
RAIN_CHAR = '|'

# Generation ranges (half-open, like range())
BUILDING_WIDTH_RANGE = (5, 15)
BUILDING_MIN_HEIGHT = 5
BUILDING_HEIGHT_MARGIN = 5   # Tallest building leaves this many rows free
BUILDING_GAP_RANGE = (1, 5)
RAINDROP_SPEED_RANGE = (1, 3)
SNOWFLAKE_SPEED_RANGE = (1, 2)
SNOWFLAKE_DRIFT_RANGE = (-1, 2)
CLOUD_SPEED_RANGE = (0.5, 1.5)

# Probabilities
WINDOW_LIT_CHANCE = 0.3
ANTENNA_CHANCE = 0.3
WINDOW_TOGGLE_CHANCE = 0.01
STAR_TWINKLE_CHANCE = 0.05
VEHICLE_SPAWN_CHANCE = 0.1

# Horizontal movement per tick is speed * MOTION_SCALE
MOTION_SCALE = 0.1
