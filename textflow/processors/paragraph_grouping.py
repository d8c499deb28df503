"""Paragraph Grouping State Machine

Consumes runs in reading order exactly once and accumulates them into
paragraphs. Each run either extends the current line, opens a new line in
the current paragraph, or closes the paragraph and starts the next one.
The decision combines baseline proximity, horizontal gap, left alignment,
style equality and an optional semantic-group veto.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from textflow.engine.config import GroupingOptions
from textflow.models.text_types import Line, MergeDecision, Paragraph, TextRun


@dataclass
class ParagraphAccumulator:
    """Mutable paragraph state while the grouping pass is running."""
    anchor: TextRun
    lines: List[Line]
    text: str
    width: float

    @classmethod
    def start(cls, run: TextRun) -> 'ParagraphAccumulator':
        return cls(anchor=run, lines=[[run]], text=run.text, width=run.width)

    @property
    def x(self) -> float:
        return self.anchor.x

    def append_to_line(self, run: TextRun) -> None:
        """Extend the current line; width grows to the run's right edge."""
        self.text = _join_text(self.text, run.text)
        self.width = max(self.width, run.right - self.x)
        self.lines[-1].append(run)

    def append_line(self, run: TextRun) -> None:
        """Open a new line starting with ``run``."""
        self.text = _join_text(self.text, run.text)
        self.width = max(self.width, run.width)
        self.lines.append([run])

    def to_paragraph(self) -> Paragraph:
        anchor = self.anchor
        return Paragraph(
            text=self.text,
            lines=self.lines,
            x=anchor.x,
            y=anchor.y,
            width=self.width,
            height=anchor.height,
            fontSize=anchor.fontSize,
            fontFamily=anchor.fontFamily,
            fontWeight=anchor.fontWeight,
            fontStyle=anchor.fontStyle,
            color=anchor.color,
            letterSpacing=anchor.letterSpacing,
            lineHeight=anchor.lineHeight,
        )


class ParagraphGrouper:
    """Groups reading-ordered runs into paragraphs.

    One instance handles one invocation; nothing is shared between
    instances, so pages can be grouped concurrently.
    """

    def __init__(self, ordered_runs: Sequence[TextRun], options: Optional[GroupingOptions] = None):
        self.ordered_runs = ordered_runs
        self.options = options or GroupingOptions.default()

        self.paragraphs: List[Paragraph] = []
        self._current: Optional[ParagraphAccumulator] = None
        self._last: Optional[TextRun] = None

    def group(self) -> List[Paragraph]:
        """Run the single forward pass and return closed paragraphs."""
        for run in self.ordered_runs:
            if run.is_blank():
                continue
            self._consume(run)

        if self._current is not None:
            self._close_current()

        return self.paragraphs

    def _consume(self, run: TextRun) -> None:
        if self._current is None or self._last is None:
            self._current = ParagraphAccumulator.start(run)
            self._last = run
            return

        decision = classify_run(run, self._last, self._current.anchor, self.options)

        if decision is MergeDecision.SAME_LINE:
            self._current.append_to_line(run)
        elif decision is MergeDecision.NEXT_LINE:
            self._current.append_line(run)
        else:
            self._close_current()
            self._current = ParagraphAccumulator.start(run)

        self._last = run

    def _close_current(self) -> None:
        self.paragraphs.append(self._current.to_paragraph())
        self._current = None


def classify_run(
    run: TextRun,
    last: TextRun,
    anchor: TextRun,
    options: Optional[GroupingOptions] = None,
) -> MergeDecision:
    """Decide how ``run`` relates to the open paragraph.

    Args:
        run: Candidate run
        last: Previously accepted run of the open paragraph
        anchor: First run of the open paragraph (position and style reference)
        options: Thresholds, defaults if omitted

    Returns:
        SAME_LINE, NEXT_LINE or NEW_PARAGRAPH
    """
    options = options or GroupingOptions.default()

    if semantic_ids_conflict(run, last):
        return MergeDecision.NEW_PARAGRAPH

    if is_same_line(run, last, options):
        if is_column_gap(run, last, options):
            return MergeDecision.NEW_PARAGRAPH
        if is_style_compatible(run, anchor, options.same_line_font_size_tolerance):
            return MergeDecision.SAME_LINE
        return MergeDecision.NEW_PARAGRAPH

    if (
        is_next_line(run, last, options)
        and is_left_aligned(run, last, anchor, options)
        and is_style_compatible(run, anchor, options.next_line_font_size_tolerance)
    ):
        return MergeDecision.NEXT_LINE

    return MergeDecision.NEW_PARAGRAPH


# ==============================================================================
# Merge Predicates (Stateless)
# ==============================================================================

def is_style_compatible(run: TextRun, anchor: TextRun, font_size_tolerance: float) -> bool:
    """Exact equality on family/weight/style/colour, tolerance on size."""
    return (
        run.fontFamily == anchor.fontFamily
        and abs(run.fontSize - anchor.fontSize) < font_size_tolerance
        and run.fontWeight == anchor.fontWeight
        and run.fontStyle == anchor.fontStyle
        and run.color == anchor.color
    )


def is_same_line(run: TextRun, last: TextRun, options: GroupingOptions) -> bool:
    """Baselines within a font-scaled jitter band."""
    tolerance = max(options.same_line_min_tolerance, run.fontSize * options.same_line_font_ratio)
    return abs(run.y - last.y) < tolerance


def horizontal_gap(run: TextRun, last: TextRun) -> float:
    return run.x - last.right


def is_column_gap(run: TextRun, last: TextRun, options: GroupingOptions) -> bool:
    """A gap this wide on one baseline separates two columns."""
    return horizontal_gap(run, last) > options.column_gap_threshold


def is_next_line(run: TextRun, last: TextRun, options: GroupingOptions) -> bool:
    """Run sits below ``last`` within plausible single/double spacing."""
    vertical_gap = last.y - run.y
    return 0 < vertical_gap < run.fontSize * options.next_line_max_gap_ratio


def is_left_aligned(run: TextRun, last: TextRun, anchor: TextRun, options: GroupingOptions) -> bool:
    """Run starts close to the paragraph's left edge."""
    tolerance = options.left_align_tolerance
    if shares_semantic_group(run, last):
        tolerance = max(tolerance, run.fontSize * options.semantic_left_align_font_ratio)
    return abs(run.x - anchor.x) < tolerance


def shares_semantic_group(run: TextRun, other: TextRun) -> bool:
    return run.semanticGroupId is not None and run.semanticGroupId == other.semanticGroupId


def semantic_ids_conflict(run: TextRun, other: TextRun) -> bool:
    """Different non-null semantic tags never merge."""
    return (
        run.semanticGroupId is not None
        and other.semanticGroupId is not None
        and run.semanticGroupId != other.semanticGroupId
    )


def _join_text(text: str, addition: str) -> str:
    """Space-join unless the addition already starts with whitespace."""
    if addition[:1].isspace():
        return text + addition
    return f"{text} {addition}"
