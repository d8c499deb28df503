"""
Text Grouping Engine

Configuration and the page-level TextProcessor that wraps the pure
grouping pipeline with input validation and logging.

Import TextProcessor from ``textflow.engine.text_processor`` (or the
top-level ``textflow`` package); the processors package imports this
config module.
"""

from textflow.engine.config import EngineConfig, GroupingOptions, resolve_options

__all__ = [
    'EngineConfig',
    'GroupingOptions',
    'resolve_options',
]
