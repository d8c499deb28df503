"""
Text Run Validation Utilities

Precondition checks applied before runs reach the grouping engine. The
engine itself assumes finite, non-negative geometry; runs that violate
that contract are rejected here.
"""

import logging
import math
from typing import Iterable, List, Optional, Tuple

from textflow.models.text_types import TextRun

logger = logging.getLogger(__name__)

# Validation constants
VALIDATION_CONSTANTS = {
    'MAX_FONT_SIZE': 10_000.0,
    'MAX_COORDINATE': 1_000_000.0,
}


class GroupingValidationError(Exception):
    """Custom exception for invalid runs or engine configuration"""
    pass


def validate_text_run(run: TextRun) -> Tuple[bool, Optional[str]]:
    """
    Validate run geometry and font size

    Args:
        run: Text run to check

    Returns:
        Tuple of (is_valid, error_message)
    """
    for name in ('x', 'y'):
        value = getattr(run, name)
        if not math.isfinite(value):
            return False, f"Non-finite {name}: {value}"
        if abs(value) > VALIDATION_CONSTANTS['MAX_COORDINATE']:
            return False, f"{name} out of range: {value}"

    for name in ('width', 'height', 'fontSize'):
        value = getattr(run, name)
        if not math.isfinite(value):
            return False, f"Non-finite {name}: {value}"
        if value < 0:
            return False, f"Negative {name}: {value}"

    if run.fontSize > VALIDATION_CONSTANTS['MAX_FONT_SIZE']:
        return False, f"fontSize out of range: {run.fontSize}"

    return True, None


def filter_valid_runs(runs: Iterable[TextRun], strict: bool = False) -> List[TextRun]:
    """
    Keep runs that satisfy the engine's input contract, in input order

    Args:
        runs: Candidate runs
        strict: Raise on the first invalid run instead of dropping it

    Returns:
        Valid runs

    Raises:
        GroupingValidationError: If strict and a run is invalid
    """
    valid: List[TextRun] = []
    dropped = 0

    for index, run in enumerate(runs):
        is_valid, error = validate_text_run(run)
        if is_valid:
            valid.append(run)
            continue

        if strict:
            raise GroupingValidationError(f"Invalid text run at index {index} ({run.text[:30]!r}): {error}")

        dropped += 1
        logger.warning(f"Dropping text run at index {index} ({run.text[:30]!r}): {error}")

    if dropped:
        logger.info(f"Input validation dropped {dropped} runs, kept {len(valid)}")

    return valid


__all__ = [
    'validate_text_run',
    'filter_valid_runs',
    'GroupingValidationError',
    'VALIDATION_CONSTANTS',
]
