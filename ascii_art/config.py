import os

# ----------------------------
# Grid bounds
# ----------------------------
MIN_DIMENSION = 10
MAX_DIMENSION = 200
DEFAULT_DIMENSION = 200

# ----------------------------
# Defaults
# ----------------------------
DEFAULT_RAMP = "simple"
DEFAULT_DISPLAY_COLOR = "green"
DEFAULT_EXPORT_NAME = "ascii-art.txt"

LOG_LEVEL = os.environ.get("ASCII_ART_LOG_LEVEL", "info")
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
