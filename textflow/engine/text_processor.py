"""Text Processor for the grouping engine

Page-level entry point: validates the runs a parser produced for a page,
groups them into paragraphs and logs a per-document summary.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from textflow.engine.config import EngineConfig
from textflow.models.text_types import Paragraph, TextRun
from textflow.processors.text_grouping import group_text_runs, summarize_paragraphs
from textflow.utils.logging_config import PACKAGE_LOGGER
from textflow.utils.validation import GroupingValidationError, filter_valid_runs

DEFAULT_START_PAGE = 1

logger = logging.getLogger(__name__)


class TextProcessor:
    """
    Paragraph reconstruction processor.

    Each call owns its own grouping state, so one processor can serve
    several pages (or threads) at once.

    Example:
        >>> processor = TextProcessor(EngineConfig(strict_mode=True))
        >>> pages = processor.process_pages([page_one_runs, page_two_runs])
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        """
        Initialize text processor.

        Args:
            config: EngineConfig or None for defaults. Its effective log
                level is applied to the package logger.

        Raises:
            GroupingValidationError: If configuration is invalid
        """
        self.config = config or EngineConfig.default()

        if not self.config.validate():
            raise GroupingValidationError("Invalid engine configuration")

        logging.getLogger(PACKAGE_LOGGER).setLevel(self.config.effective_log_level())
        logger.debug(f"TextProcessor created with {self.config!r}")

    def prepare_runs(self, runs: Iterable[TextRun]) -> List[TextRun]:
        """Apply input validation according to config."""
        if not self.config.validate_input:
            return list(runs)
        return filter_valid_runs(runs, strict=self.config.strict_mode)

    def process_page(self, runs: Iterable[TextRun], page_num: Optional[int] = None) -> List[Paragraph]:
        """
        Group one page of runs into paragraphs.

        Args:
            runs: Text runs of the page in any order
            page_num: 1-based page number, for logging only

        Returns:
            Paragraphs in reading order
        """
        page_label = f"Page {page_num}" if page_num is not None else "Page"
        prepared = self.prepare_runs(runs)
        if not prepared:
            logger.debug(f"{page_label}: no text runs")
            return []

        paragraphs = group_text_runs(prepared, self.config.grouping)

        logger.debug(f"{page_label}: {len(prepared)} runs -> {len(paragraphs)} paragraphs")
        if logger.isEnabledFor(logging.DEBUG):
            for entry in summarize_paragraphs(paragraphs):
                logger.debug(f"{page_label}: {entry}")

        return paragraphs

    def process_pages(self, pages: Sequence[Iterable[TextRun]]) -> List[List[Paragraph]]:
        """
        Group every page independently.

        Args:
            pages: One run sequence per page, first page first

        Returns:
            One paragraph list per page
        """
        pages_data: List[List[Paragraph]] = []
        for page_num, runs in enumerate(pages, start=DEFAULT_START_PAGE):
            pages_data.append(self.process_page(runs, page_num))

        total_paragraphs = sum(len(page) for page in pages_data)
        logger.info(f"Grouping complete: {total_paragraphs} paragraphs across {len(pages_data)} pages")
        return pages_data

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"TextProcessor({self.config!r})"
