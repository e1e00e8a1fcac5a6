"""Allow running as: python -m city_screensaver"""

import sys

from .cli import main

sys.exit(main())
