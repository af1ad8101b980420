"""Environment-driven settings for the command line front end."""

from __future__ import annotations

import os

LOG_LEVEL = os.getenv("GEOLOCATION_UTILS_LOG_LEVEL", "WARNING").upper()

# Only the CLI reads this; library defaults stay in miles
DEFAULT_UNIT = os.getenv("GEOLOCATION_UTILS_DEFAULT_UNIT", "Miles")
