from __future__ import annotations

# ============================================================================
# Layout constants -- fixed sizes shared by the layout engine and renderer.
# ============================================================================

# Left and right canvas margin (px)
MARGIN = 20

# Defaults for the overridable options
DEFAULT_DISTANCE = 180
DEFAULT_STEP_HEIGHT = 50
DEFAULT_COLOR = "#000000"
DEFAULT_CANVAS_SIZE = "100%"

# Actor label font size; also sets the top origin of the first step
ACTOR_FONT_SIZE = 16
STEP_ORIGIN_Y = ACTOR_FONT_SIZE + 2

# Lifeline dash unit. The canvas height is rounded up to a multiple of it
# so the dashed lifelines end on a full dash.
DASH_ARRAY_SIZE = ACTOR_FONT_SIZE // 2

# Description text sits this far above the step line
DESCRIPTION_OFFSET = 7
# Each extra description line moves up by DESCRIPTION_OFFSET * this factor
DESCRIPTION_OFFSET_FACTOR = 2

# Sections start slightly negative so adjacent boxes don't touch
SECTION_HEIGHT_OFFSET = -10

# ============================================================================
# Drawing constants
# ============================================================================

FONT_SIZES = {
    "actor_label": ACTOR_FONT_SIZE,
    "section_label": 10,
    "description": 10,
}

COLORS = {
    "background": "#FFFFFF",
    "lifeline": "#CCCCCC",
    "actor_label": "#000000",
}

STROKE_WIDTHS = {
    "lifeline": 2,
    "section": 1,
    "step": 2,
}

SECTION_FILL_OPACITY = 0.1
SELF_CALL_RADIUS = 4
# Arrows stop short of the target lane so the head doesn't cover it
ARROW_END_GAP = 5


def line_count(description: str) -> int:
    """Number of rendered lines in a description (empty counts as one)."""
    return len(description.split("\n"))


def extra_height(description: str) -> int:
    """Extra vertical space a multi-line description needs beyond one line."""
    return DESCRIPTION_OFFSET * DESCRIPTION_OFFSET_FACTOR * (line_count(description) - 1)
