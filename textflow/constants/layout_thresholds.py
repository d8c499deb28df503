"""
Layout heuristics used by the text-run grouping engine.

Values are expressed either in page units (fixed jitter allowances that do
not depend on type size) or as multipliers of a run's font size (geometry
that should scale with the text). All of them are defaults for the matching
fields on ``GroupingOptions``.
"""

# Ordering: baselines closer than this sort as one visual row (x ascending)
READING_ORDER_Y_TOLERANCE = 5.0

# Same-line test: |dy| < max(SAME_LINE_MIN_TOLERANCE, fontSize * SAME_LINE_FONT_RATIO)
SAME_LINE_MIN_TOLERANCE = 2.0
SAME_LINE_FONT_RATIO = 0.25

# Font size deltas accepted as "same style"; looser on a shared baseline
SAME_LINE_FONT_SIZE_TOLERANCE = 2.0
NEXT_LINE_FONT_SIZE_TOLERANCE = 1.0

# Horizontal gap (page units) past which a same-baseline run is another column
COLUMN_GAP_THRESHOLD = 100.0

# Next-line test: 0 < dy < fontSize * NEXT_LINE_MAX_GAP_RATIO
NEXT_LINE_MAX_GAP_RATIO = 2.5

# Left edge drift allowed between a paragraph's first run and a new line
LEFT_ALIGN_TOLERANCE = 20.0
# Wider drift when both runs carry the same semantic group id
SEMANTIC_LEFT_ALIGN_FONT_RATIO = 4.0

# Edge tolerance for CENTER / RIGHT classification
ALIGNMENT_TOLERANCE = 5.0

DEFAULT_FONT_SIZE = 12.0
DEFAULT_FONT_WEIGHT = "normal"
DEFAULT_FONT_STYLE = "normal"
