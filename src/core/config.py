"""
Configuration constants and environment setup.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# PATHS
# =============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent
DB_PATH = Path(
    os.environ.get("CALENDAR_DB_PATH", str(PROJECT_ROOT / "data" / "db" / "calendar.db"))
)

# =============================================================================
# CALENDAR CONFIGURATION
# =============================================================================

# Python weekday numbering: Monday=0 ... Sunday=6
WEEKDAY_NAMES = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
WEEK_START = WEEKDAY_NAMES.index(os.environ.get("CALENDAR_WEEK_START", "sunday").lower())

WEEK_PIXELS_PER_HOUR = int(os.environ.get("CALENDAR_WEEK_PIXELS_PER_HOUR", "60"))
DAY_PIXELS_PER_HOUR = int(os.environ.get("CALENDAR_DAY_PIXELS_PER_HOUR", "80"))
EVENT_BLOCK_INSET = 2  # px gap above and below a placed event

# Event blocks, in px: minimum height, and the raw height a block must exceed
# before its time or description is shown. None means never shown.
WEEK_MIN_EVENT_HEIGHT = 20
WEEK_TIME_LABEL_MIN_HEIGHT = 30
WEEK_DESCRIPTION_MIN_HEIGHT = None
DAY_MIN_EVENT_HEIGHT = 30
DAY_TIME_LABEL_MIN_HEIGHT = 40
DAY_DESCRIPTION_MIN_HEIGHT = 60
MONTH_PREVIEW_LIMIT = 3  # events shown per month cell before "+N more"

# =============================================================================
# EVENT DEFAULTS
# =============================================================================

DEFAULT_DURATION = 60
DEFAULT_COLOR = "#3B82F6"
COLOR_PALETTE = ["#3B82F6", "#10B981", "#F59E0B", "#EF4444", "#8B5CF6", "#EC4899"]
DURATION_OPTIONS = [15, 30, 45, 60, 90, 120, 180, 240, 480]
ALL_DAY_DURATION = 480

# =============================================================================
# API CONFIGURATION
# =============================================================================

API_HOST = os.environ.get("API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("API_PORT", "8000"))
API_DEBUG = os.environ.get("API_DEBUG", "false").lower() == "true"
API_VERSION = "1.0.0"

# =============================================================================
# STORE CLIENT CONFIGURATION
# =============================================================================

CALENDAR_API_URL = os.environ.get("CALENDAR_API_URL", f"http://localhost:{API_PORT}")
CALENDAR_API_TIMEOUT = float(os.environ.get("CALENDAR_API_TIMEOUT", "10"))
