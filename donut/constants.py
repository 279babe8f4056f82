"""Named layout, styling and limit constants.

All lengths in abstract viewport units.
"""
import math

# Responsive breakpoints (viewport width)
MOBILE_BREAKPOINT = 300
TABLET_BREAKPOINT = 600

# Margins
MARGIN_MOBILE = 10
MARGIN_TABLET = 15
MARGIN_DESKTOP = 20
EXTERNAL_LABEL_MARGIN = 60
EXTERNAL_LABEL_MARGIN_CAP = 15     # allowance = min(15, 60 * 0.2) = 12

# Donut sizing
MIN_SIZE_RATIO = 0.6               # floor: 60% of the smaller viewport side
DIAMETER_RATIO = 0.9
OUTER_RADIUS_RATIO = 0.98
MINIMUM_THICKNESS_RATIO = 0.01
CENTER_LIFT = 15                   # donut sits 15 units above the chart-area center

# Vertical offset breakpoints (viewport height)
SHORT_HEIGHT = 200
MEDIUM_HEIGHT = 400
VERTICAL_OFFSET_SHORT = 5
VERTICAL_OFFSET_MEDIUM = 10
VERTICAL_OFFSET_TALL = 15

# Legend
LEGEND_WIDTH = 160
LEGEND_GAP = 30                    # space between legend and donut when shifting the center
LEGEND_PADDING = 10
LEGEND_ITEM_HEIGHT = 20
LEGEND_ESTIMATED_HEIGHT = 20
LEGEND_LIFT = 15
LEGEND_CIRCLE_RADIUS = 6
LEGEND_TEXT_OFFSET = 15
MAX_LEGEND_TEXT_LENGTH = 18
ELLIPSIS = "..."

# Leader lines for outside labels
LINE_START_OFFSET = 5
LINE_BEND_RATIO = 0.15
HORIZONTAL_LINE_RATIO = 0.12
LABEL_OFFSET = 8

# Styling
STROKE_COLOR = "#ffffff"
STROKE_WIDTH = 2
LEADER_COLOR = "#CCCCCC"
LEADER_WIDTH = 1.5
MORE_COLOR = "#999"
MESSAGE_COLOR = "#666"
MESSAGE_FONT_SIZE = 14
FONT_FAMILY = "Segoe UI, sans-serif"

# Limits
MIN_VIEWPORT_SIZE = 50
MIN_INNER_RADIUS = 1
MAX_INNER_RADIUS = 99
MIN_PERCENT_DECIMALS = 0
MAX_PERCENT_DECIMALS = 3
FADE_OPACITY = 0.3
FULL_OPACITY = 1.0
FULL_CIRCLE_THRESHOLD = 0.001

# Angles
START_ANGLE = -math.pi / 2         # 12 o'clock, angles grow clockwise on screen
TAU = 2 * math.pi

PLACEHOLDER_MESSAGE = "Add data to categories and values"
