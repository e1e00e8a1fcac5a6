"""
Color Definitions - Curses color pair management for the city scene.

Pair ids are plain ints so scene entities can carry them without touching
curses; only init_colors() talks to the terminal.
"""

# Handle curses import for Windows compatibility
try:
    import curses
    CURSES_AVAILABLE = True
except ImportError:
    curses = None
    CURSES_AVAILABLE = False


class Colors:
    """Color pairs for curses."""
    NORMAL = 0
    # Sky
    STAR = 1
    MOON = 2
    CLOUD = 3
    # Buildings (four grey tones, darkest first)
    BUILDING_1 = 4
    BUILDING_2 = 5
    BUILDING_3 = 6
    BUILDING_4 = 7
    WINDOW_ON = 8        # Lit window - yellow
    WINDOW_OFF = 9       # Dark window
    ROAD = 10
    # Weather
    RAIN = 11            # Blue-grey rain
    SNOW = 12            # Light grey snow
    # Vehicles
    VEHICLE_YELLOW = 13
    VEHICLE_GREEN = 14
    VEHICLE_CYAN = 15
    VEHICLE_MAGENTA = 16
    VEHICLE_RED = 17
    VEHICLE_BLUE = 18
    VEHICLE_WHITE = 19

    # Custom color slots used when the terminal can redefine colors.
    # (slot, r, g, b) with components scaled 0-1000 for curses.init_color
    _CUSTOM_RGB = {
        BUILDING_1: (100, 235, 235, 235),
        BUILDING_2: (101, 275, 275, 275),
        BUILDING_3: (102, 314, 314, 314),
        BUILDING_4: (103, 353, 353, 353),
        WINDOW_OFF: (104, 157, 157, 157),
        ROAD: (105, 78, 78, 78),
        RAIN: (106, 392, 392, 588),
        SNOW: (107, 784, 784, 784),
        CLOUD: (108, 588, 588, 588),
        MOON: (109, 941, 941, 941),
    }

    @staticmethod
    def init_colors():
        """Initialize curses color pairs."""
        if not CURSES_AVAILABLE or curses is None:
            return
        curses.start_color()
        curses.use_default_colors()

        # Fixed-hue pairs work on any color terminal
        curses.init_pair(Colors.STAR, curses.COLOR_WHITE, -1)
        curses.init_pair(Colors.WINDOW_ON, curses.COLOR_YELLOW, -1)
        curses.init_pair(Colors.VEHICLE_YELLOW, curses.COLOR_YELLOW, -1)
        curses.init_pair(Colors.VEHICLE_GREEN, curses.COLOR_GREEN, -1)
        curses.init_pair(Colors.VEHICLE_CYAN, curses.COLOR_CYAN, -1)
        curses.init_pair(Colors.VEHICLE_MAGENTA, curses.COLOR_MAGENTA, -1)
        curses.init_pair(Colors.VEHICLE_RED, curses.COLOR_RED, -1)
        curses.init_pair(Colors.VEHICLE_BLUE, curses.COLOR_BLUE, -1)
        curses.init_pair(Colors.VEHICLE_WHITE, curses.COLOR_WHITE, -1)

        if curses.can_change_color() and curses.COLORS >= 256:
            for pair, (slot, r, g, b) in Colors._CUSTOM_RGB.items():
                curses.init_color(slot, r, g, b)
                curses.init_pair(pair, slot, -1)
        else:
            Colors._init_fallback_colors()

    @staticmethod
    def _init_fallback_colors():
        """Basic 8-color approximations of the grey/blue tones."""
        curses.init_pair(Colors.BUILDING_1, curses.COLOR_BLACK, -1)
        curses.init_pair(Colors.BUILDING_2, curses.COLOR_BLACK, -1)
        curses.init_pair(Colors.BUILDING_3, curses.COLOR_WHITE, -1)
        curses.init_pair(Colors.BUILDING_4, curses.COLOR_WHITE, -1)
        curses.init_pair(Colors.WINDOW_OFF, curses.COLOR_BLACK, -1)
        curses.init_pair(Colors.ROAD, curses.COLOR_BLACK, -1)
        curses.init_pair(Colors.RAIN, curses.COLOR_BLUE, -1)
        curses.init_pair(Colors.SNOW, curses.COLOR_WHITE, -1)
        curses.init_pair(Colors.CLOUD, curses.COLOR_WHITE, -1)
        curses.init_pair(Colors.MOON, curses.COLOR_WHITE, -1)
