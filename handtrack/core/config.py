"""
Configuration constants for the hand position solver
"""

# Camera settings
CAMERA_FPS = 30

# Scale settings
# CM_IN_PIXELS: how many pixels one centimetre covers at the subject's distance
# A 15.7 cm wide face is roughly 80 px wide in a 640x480 webcam frame at 1.5 m
CM_IN_PIXELS = 5.0

# MAX_HAND_VELOCITY: fastest plausible hand movement in cm/s
# With the defaults above a hand may jump 2 * 150 * 5 / 30 = 50 px per frame
MAX_HAND_VELOCITY = 150.0

# FACE_COVERAGE_THRESHOLD: image row (px) below which a hand is no longer
# considered to be covering the face
FACE_COVERAGE_THRESHOLD = 160

# History settings
HISTORY_SIZE = 10
HISTORY_AVERAGE = 5  # must be lower or equal to HISTORY_SIZE

# Quality gate: minimum coverage before a candidate point is trusted
QUALITY_THRESHOLD = 0.2

# Default radius of the point quality disc (cm)
QUALITY_RADIUS_CM = 5.0

# Area search (recovery from the last known / predicted position)
AREA_SEARCH_ITERATIONS = 10
AREA_SEARCH_STEP = 4
AREA_SEARCH_RADIUS_CM = 8.5

# Coverage refinement
COVERAGE_SEARCH_ITERATIONS = 5
COVERAGE_SEARCH_STEP = 3
COVERAGE_SEARCH_RADIUS_CM = 5.0

# Blob based search mode selection (cm)
COMPACT_BLOB_HEIGHT_CM = 15.0
TALL_BLOB_HEIGHT_CM = 40.0

# Motion weighted smoothing
MOTION_RADIUS = 30  # px
# (motion coverage upper bound, weight of the history average)
MOTION_TIERS = (
    (0.001, 0.95),  # near static: trust history
    (0.05, 0.8),
    (0.2, 0.5),
)

# Intersection handling
INTERSECTION_DISTANCE_CM = 8.0
INTERSECTION_ITERATIONS = 20
INTERSECTION_NUDGE_ITERATIONS = 5

# Drawing settings
HAND_MARKER_RADIUS = 25
LEFT_HAND_COLOR = (255, 150, 0)   # BGR
RIGHT_HAND_COLOR = (0, 255, 0)    # BGR

# File paths
SOLVER_CONFIG_FILE = "hand_solver_config.json"
LOG_FILENAME = "handtrack.log"
LOG_MAX_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 3
