ROW_COUNT = 5
LINE_COUNT = 2
SQUARES_PER_LINE = 2

# Progress stepping: per-frame gap and the divisor that picks between the two rates.
SCALE_GAP = 0.05
SCALE_DIVISOR = 0.51

# Geometry: stroke width is min(width, height) / STROKE_FACTOR, element size is slot gap / SIZE_FACTOR.
STROKE_FACTOR = 90
SIZE_FACTOR = 2.9

FORE_COLOR = (0x31, 0x1B, 0x92)  # #311B92
BACK_COLOR = (0xBD, 0xBD, 0xBD)  # #BDBDBD

# Seconds between animation frames while the clock runs.
TICK_DELAY = 0.02
# Upper bound on frames emitted for a single host tick (long stalls drop the excess).
MAX_CATCH_UP_FRAMES = 4

WINDOW_WIDTH = 480
WINDOW_HEIGHT = 800
WINDOW_TITLE = "Vertical Line To Square"
