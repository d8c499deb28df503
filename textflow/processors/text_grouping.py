"""Text Run Grouping Engine

Turns the flat list of positioned, styled text runs of one page into
paragraphs with lines, a reading order, a line height and an alignment.

Pipeline:
    1. Ordering   - sort runs top-to-bottom, left-to-right
    2. Grouping   - single pass paragraph-merge state machine
    3. Refinement - line height and alignment for multi-line paragraphs
"""

import logging
import time
from typing import Iterable, List, Optional, Union

from textflow.engine.config import GroupingOptions, resolve_options
from textflow.models.text_types import Paragraph, TextRun
from textflow.processors.paragraph_grouping import ParagraphGrouper
from textflow.processors.paragraph_refinement import refine_paragraphs
from textflow.processors.reading_order import sort_reading_order

logger = logging.getLogger(__name__)


# ==============================================================================
# Public API Function
# ==============================================================================

def group_text_runs(
    runs: Iterable[TextRun],
    options: Optional[Union[GroupingOptions, dict]] = None,
) -> List[Paragraph]:
    """Group text runs into paragraphs

    Args:
        runs: TextRun objects of a single page, in any order
        options: GroupingOptions (or a dict of its fields) to override thresholds

    Returns:
        Paragraphs in the reading order of their first run
    """
    run_list = list(runs)
    if not run_list:
        return []

    grouping_options = resolve_options(options)
    started = time.perf_counter()

    ordered = sort_reading_order(run_list, grouping_options.reading_order_y_tolerance)
    paragraphs = ParagraphGrouper(ordered, grouping_options).group()
    refined = refine_paragraphs(paragraphs, grouping_options)

    _validate_grouping_results(ordered, refined)
    logger.debug(
        f"Grouped {len(refined)} paragraphs from {len(run_list)} runs "
        f"in {(time.perf_counter() - started) * 1000:.1f}ms"
    )
    return refined


# ==============================================================================
# Module-Private Utility Functions (Stateless)
# ==============================================================================

def _validate_grouping_results(input_runs: List[TextRun], paragraphs: List[Paragraph]) -> None:
    """Log how many input runs are accounted for by the output"""
    input_count = sum(1 for run in input_runs if not run.is_blank())
    output_count = sum(1 for paragraph in paragraphs for _ in paragraph.runs)
    logger.debug(f"Grouping validation: input={input_count}, output_accounted={output_count}")


def summarize_paragraphs(paragraphs: List[Paragraph]) -> List[dict]:
    """Compact per-paragraph summary for debug output"""
    summary: List[dict] = []
    for paragraph in paragraphs:
        entry: dict = {
            'text': paragraph.text[:50],
            'lines': paragraph.line_count,
            'x': round(paragraph.x, 2),
            'y': round(paragraph.y, 2),
            'width': round(paragraph.width, 2),
        }
        if paragraph.textAlign is not None:
            entry['textAlign'] = paragraph.textAlign.value
        if paragraph.lineHeight is not None:
            entry['lineHeight'] = round(paragraph.lineHeight, 2)
        summary.append(entry)
    return summary
