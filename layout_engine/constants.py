"""
Fixed layout constants (pixels unless noted).
These are the visual contract of the default theme; changing one changes
every chart's output.
"""

# Area reduction, in the order it is applied
Y_LABELS_WIDTH = 30          # value-axis labels
Y_TITLE_WIDTH = 20           # value-axis title
X_LABELS_END_PAD = 10        # category-axis end padding (and left pad without y labels/title)
X_LABELS_HEIGHT = 20         # category-axis labels
X_TITLE_HEIGHT = 25          # category-axis title
Y_LABELS_TOP_PAD = 10        # keeps the top value label from being clipped
GRAPH_TITLE_HEIGHT = 25
GRAPH_SUBTITLE_HEIGHT = 10
KEY_RIGHT_WIDTH = 150        # legend column on the right
KEY_BOTTOM_HEIGHT = 50       # legend band at the bottom

# Value domain
TOP_PAD_DIVISOR = 20         # headroom above the max value = span / 20
FLAT_TOP_PAD = 10            # headroom when max == start (value units)
DEFAULT_TICK_DIVISOR = 10    # default tick interval = max / 10
WHOLE_TICK_THRESHOLD = 10    # max above this -> whole-number tick interval

# Shapes and labels
BAR_MARGIN = 10              # band size minus bar width
DATA_LABEL_OFFSET = 5        # gap between a bar's far edge and its value label
POINT_LABEL_OFFSET = 6       # gap between a line point and its value label
DATA_POINT_RADIUS = 2.5
CATEGORY_LABEL_OFFSET = 15   # category labels below (or left of) the axis
VALUE_LABEL_OFFSET = 15      # horizontal value labels below the base line
VALUE_LABEL_GAP = 5          # vertical value labels left of the axis
X_TITLE_OFFSET = 35          # below the base line when category labels are shown
X_TITLE_OFFSET_BARE = 15
Y_TITLE_X = 10
TITLE_Y = 15
SUBTITLE_Y = 30

# Pie
PIE_PADDING = 10             # radius = min(w, h) / 2 - padding
PIE_LABEL_RADIUS = 0.7       # label distance as a fraction of the radius

# Legend
KEY_BOX_SIZE = 12
KEY_PADDING = 5
KEY_RIGHT_OFFSET = 20        # gap between the plot area and a right legend
KEY_BOTTOM_LABELS_GAP = 20   # bottom legend start below the base line with category labels
KEY_BOTTOM_TITLE_GAP = 25    # ... with a category title
KEY_COLUMN_RISE = KEY_BOX_SIZE * 4 + 2  # upward shift of each new bottom legend column
