"""Reading-order sorting for text runs.

Page space is bottom-up, so reading order is ``y`` descending (top of the
page first) and then ``x`` ascending. Baselines within a small band are
treated as one row so kerning jitter does not reorder a visual line.
"""

import logging
from functools import cmp_to_key
from typing import Iterable, List

from textflow.constants.layout_thresholds import READING_ORDER_Y_TOLERANCE
from textflow.models.text_types import TextRun

logger = logging.getLogger(__name__)


def compare_reading_order(a: TextRun, b: TextRun, y_tolerance: float = READING_ORDER_Y_TOLERANCE) -> float:
    """Comparator: negative if ``a`` reads before ``b``"""
    y_diff = b.y - a.y
    if abs(y_diff) > y_tolerance:
        return y_diff
    return a.x - b.x


def sort_reading_order(runs: Iterable[TextRun], y_tolerance: float = READING_ORDER_Y_TOLERANCE) -> List[TextRun]:
    """Return runs in top-to-bottom, left-to-right order.

    The sort is stable, so runs with identical keys keep their input order
    and identical input always produces identical output.
    """
    run_list = list(runs)
    if not run_list:
        return []

    ordered = sorted(run_list, key=cmp_to_key(lambda a, b: compare_reading_order(a, b, y_tolerance)))
    logger.debug(f"Ordered {len(ordered)} runs (y tolerance {y_tolerance})")
    return ordered
