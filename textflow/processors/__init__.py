"""
Text Grouping Components

Stages of the grouping pipeline. All of them are pure with respect to
their inputs; per-call state lives in the objects each call creates.

- sort_reading_order: Ordering stage (top-to-bottom, left-to-right)
- ParagraphGrouper: Paragraph-merge state machine
- refine_paragraph(s): Line height and alignment inference
- group_text_runs: The full pipeline for one page
"""

from textflow.processors.reading_order import compare_reading_order, sort_reading_order
from textflow.processors.paragraph_grouping import ParagraphGrouper, classify_run
from textflow.processors.paragraph_refinement import (
    classify_text_align,
    estimate_line_height,
    refine_paragraph,
    refine_paragraphs,
)
from textflow.processors.text_grouping import group_text_runs

__all__ = [
    'compare_reading_order',
    'sort_reading_order',
    'ParagraphGrouper',
    'classify_run',
    'classify_text_align',
    'estimate_line_height',
    'refine_paragraph',
    'refine_paragraphs',
    'group_text_runs',
]
