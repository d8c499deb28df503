"""
Configuration system for the text grouping engine.

Provides structured configuration using dataclasses with clear defaults,
validation, and round-tripping through plain dicts.
"""

import logging
import math
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional

from textflow.constants.layout_thresholds import (
    ALIGNMENT_TOLERANCE,
    COLUMN_GAP_THRESHOLD,
    LEFT_ALIGN_TOLERANCE,
    NEXT_LINE_FONT_SIZE_TOLERANCE,
    NEXT_LINE_MAX_GAP_RATIO,
    READING_ORDER_Y_TOLERANCE,
    SAME_LINE_FONT_RATIO,
    SAME_LINE_FONT_SIZE_TOLERANCE,
    SAME_LINE_MIN_TOLERANCE,
    SEMANTIC_LEFT_ALIGN_FONT_RATIO,
)

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class GroupingOptions:
    """
    Tunable thresholds for ordering, paragraph merging and refinement.

    Page-unit values absorb renderer jitter; ratio values are multiplied
    by the run's font size.

    Example:
        >>> options = GroupingOptions(column_gap_threshold=80.0)
        >>> paragraphs = group_text_runs(runs, options)
    """

    # Ordering
    reading_order_y_tolerance: float = READING_ORDER_Y_TOLERANCE

    # Same-line test
    same_line_min_tolerance: float = SAME_LINE_MIN_TOLERANCE
    same_line_font_ratio: float = SAME_LINE_FONT_RATIO
    same_line_font_size_tolerance: float = SAME_LINE_FONT_SIZE_TOLERANCE
    column_gap_threshold: float = COLUMN_GAP_THRESHOLD

    # Next-line test
    next_line_font_size_tolerance: float = NEXT_LINE_FONT_SIZE_TOLERANCE
    next_line_max_gap_ratio: float = NEXT_LINE_MAX_GAP_RATIO
    left_align_tolerance: float = LEFT_ALIGN_TOLERANCE
    semantic_left_align_font_ratio: float = SEMANTIC_LEFT_ALIGN_FONT_RATIO

    # Refinement
    alignment_tolerance: float = ALIGNMENT_TOLERANCE

    def validate(self) -> bool:
        """
        Validate threshold values.

        Returns:
            True if every threshold is a finite, non-negative number
        """
        for option in fields(self):
            value = getattr(self, option.name)
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                logger.error(f"{option.name} must be a number, got {value!r}")
                return False
            if not math.isfinite(value) or value < 0:
                logger.error(f"{option.name} must be finite and non-negative, got {value}")
                return False
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {option.name: getattr(self, option.name) for option in fields(self)}

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> 'GroupingOptions':
        """
        Create GroupingOptions from dictionary.

        Unknown keys are ignored with a warning.
        """
        valid_keys = {option.name for option in fields(cls)}

        filtered_config = {}
        for key, value in config.items():
            if key in valid_keys:
                filtered_config[key] = value
            else:
                logger.warning(f"Unknown grouping option '{key}' will be ignored")

        return cls(**filtered_config)

    @classmethod
    def default(cls) -> 'GroupingOptions':
        """Create options with default values."""
        return cls()


@dataclass
class EngineConfig:
    """
    Central configuration for TextProcessor.

    Example:
        >>> config = EngineConfig(strict_mode=True)
        >>> processor = TextProcessor(config)
    """

    # Input validation
    validate_input: bool = True
    strict_mode: bool = False  # raise on invalid runs instead of dropping them

    # Logging
    log_level: str = "INFO"
    enable_debug_logging: bool = False

    grouping: GroupingOptions = field(default_factory=GroupingOptions)

    def validate(self) -> bool:
        """
        Validate configuration values.

        Returns:
            True if all values are valid, False otherwise
        """
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            logger.error(f"log_level must be one of {sorted(VALID_LOG_LEVELS)}, got {self.log_level!r}")
            return False

        if not isinstance(self.grouping, GroupingOptions):
            logger.error("grouping must be a GroupingOptions instance")
            return False

        return self.grouping.validate()

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert configuration to dictionary.

        Useful for serialization, logging, and debugging.
        """
        return {
            'validate_input': self.validate_input,
            'strict_mode': self.strict_mode,
            'log_level': self.log_level,
            'enable_debug_logging': self.enable_debug_logging,
            'grouping': self.grouping.to_dict(),
        }

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> 'EngineConfig':
        """
        Create EngineConfig from dictionary.

        A nested ``grouping`` dict is converted to GroupingOptions.
        Unknown keys are ignored with a warning.

        Args:
            config: Dictionary of configuration values

        Returns:
            EngineConfig instance
        """
        valid_keys = {
            'validate_input', 'strict_mode',
            'log_level', 'enable_debug_logging',
            'grouping',
        }

        filtered_config: Dict[str, Any] = {}
        for key, value in config.items():
            if key in valid_keys:
                filtered_config[key] = value
            else:
                logger.warning(f"Unknown config key '{key}' will be ignored")

        grouping = filtered_config.get('grouping')
        if isinstance(grouping, dict):
            filtered_config['grouping'] = GroupingOptions.from_dict(grouping)

        return cls(**filtered_config)

    @classmethod
    def default(cls) -> 'EngineConfig':
        """Create configuration with default values."""
        return cls()

    def effective_log_level(self) -> str:
        return "DEBUG" if self.enable_debug_logging else self.log_level.upper()

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"EngineConfig("
            f"validate_input={self.validate_input}, "
            f"strict={self.strict_mode}, "
            f"log_level={self.effective_log_level()})"
        )


def resolve_options(options: Optional[Any]) -> GroupingOptions:
    """Accept GroupingOptions, a plain dict, or None."""
    if options is None:
        return GroupingOptions.default()
    if isinstance(options, GroupingOptions):
        return options
    if isinstance(options, dict):
        return GroupingOptions.from_dict(options)
    raise TypeError(f"Unsupported grouping options type: {type(options).__name__}")
