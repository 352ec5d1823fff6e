"""Named constants for sketch styling and pen-tool interaction.

Distances marked "screen px" are divided by the view scale before being
compared against world coordinates.
"""

# Endpoint caps
CAP_NONE = "none"
CAP_KINDS = ("arrow", "open-arrow", "circle", "square")
ENDPOINT_ROLES = ("start", "end")

# Default stroke style (matches the sketch toolbar defaults)
DEFAULT_STROKE = "#333333"
DEFAULT_STROKE_WIDTH = 2.0
DEFAULT_STROKE_DASH = ""          # solid
DEFAULT_FILLET = 0.0              # no corner rounding

# Pen tool
HIT_RADIUS = 8.0                  # screen px, anchor/handle pick distance
CLOSE_TOLERANCE = 5.0             # screen px, click on first anchor closes the path
NODE_SIZE = 3                     # points per bezier node: anchor, handle-in, handle-out
