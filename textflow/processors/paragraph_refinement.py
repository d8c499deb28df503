"""Line height and alignment inference for grouped paragraphs."""

import logging
from typing import List, Optional, Sequence

from textflow.constants.layout_thresholds import ALIGNMENT_TOLERANCE
from textflow.engine.config import GroupingOptions
from textflow.models.text_types import Line, Paragraph, TextAlign

logger = logging.getLogger(__name__)


def estimate_line_height(lines: Sequence[Line]) -> Optional[float]:
    """Mean baseline distance between consecutive lines.

    Uses the first run of each line. Non-positive distances (out-of-order
    artifacts) are skipped; returns None when no positive distance exists.
    """
    diffs = [
        upper[0].y - lower[0].y
        for upper, lower in zip(lines, lines[1:])
    ]
    positive = [diff for diff in diffs if diff > 0]
    if not positive:
        return None
    return sum(positive) / len(positive)


def classify_text_align(
    lines: Sequence[Line],
    paragraph_x: float,
    paragraph_width: float,
    tolerance: float = ALIGNMENT_TOLERANCE,
) -> TextAlign:
    """Classify horizontal alignment from per-line extents.

    CENTER when every line's left offset matches the offset that would
    centre it in the paragraph box; otherwise RIGHT when every line ends at
    the box's right edge; otherwise LEFT (which also covers justified text).
    Center is tested first.
    """
    paragraph_right = paragraph_x + paragraph_width
    is_centered = True
    is_right = True

    for line in lines:
        line_left = line[0].x
        line_right = line[-1].right
        line_width = line_right - line_left

        expected_center_offset = (paragraph_width - line_width) / 2
        actual_left_offset = line_left - paragraph_x
        if abs(expected_center_offset - actual_left_offset) > tolerance:
            is_centered = False

        if abs(paragraph_right - line_right) > tolerance:
            is_right = False

    if is_centered:
        return TextAlign.CENTER
    if is_right:
        return TextAlign.RIGHT
    return TextAlign.LEFT


def refine_paragraph(paragraph: Paragraph, options: Optional[GroupingOptions] = None) -> Paragraph:
    """Return a copy with lineHeight, textAlign and height filled in.

    Single-line paragraphs are returned as-is: alignment is only
    meaningful for multi-line blocks.
    """
    if paragraph.line_count <= 1:
        return paragraph

    options = options or GroupingOptions.default()
    updates = {
        'textAlign': classify_text_align(
            paragraph.lines, paragraph.x, paragraph.width, options.alignment_tolerance
        ),
    }

    line_height = estimate_line_height(paragraph.lines)
    if line_height is not None:
        updates['lineHeight'] = line_height
        updates['height'] = paragraph.line_count * line_height

    return paragraph.model_copy(update=updates)


def refine_paragraphs(paragraphs: List[Paragraph], options: Optional[GroupingOptions] = None) -> List[Paragraph]:
    refined = [refine_paragraph(paragraph, options) for paragraph in paragraphs]
    multi_line = sum(1 for p in refined if p.textAlign is not None)
    logger.debug(f"Refined {multi_line} multi-line paragraphs of {len(refined)}")
    return refined
