"""
textflow - reconstructs paragraphs, lines, reading order and alignment
from positioned text runs extracted from page-description documents.
"""

__version__ = "1.0.0"

from textflow.models.text_types import Line, MergeDecision, Paragraph, TextAlign, TextRun
from textflow.engine.config import EngineConfig, GroupingOptions
from textflow.processors.text_grouping import group_text_runs
from textflow.engine.text_processor import TextProcessor
from textflow.utils.validation import GroupingValidationError

__all__ = [
    'Line',
    'MergeDecision',
    'Paragraph',
    'TextAlign',
    'TextRun',
    'EngineConfig',
    'GroupingOptions',
    'group_text_runs',
    'TextProcessor',
    'GroupingValidationError',
]
