"""
Pydantic models for the text-run grouping engine.

TextRun is the positioned, styled fragment handed over by the document
parser; Paragraph is the reconstructed block handed to the renderer.
Coordinates are in bottom-up page space: ``y`` grows upward and is the
run's baseline.
"""

from enum import Enum
from typing import Any, Iterator, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, field_validator

from textflow.constants.layout_thresholds import (
    DEFAULT_FONT_SIZE,
    DEFAULT_FONT_STYLE,
    DEFAULT_FONT_WEIGHT,
)
from textflow.utils.style_tokens import canonical_color_token

FontWeight = Union[int, float, str]


class TextAlign(str, Enum):
    """Horizontal alignment inferred for multi-line paragraphs"""
    LEFT = "LEFT"
    CENTER = "CENTER"
    RIGHT = "RIGHT"


class MergeDecision(str, Enum):
    """How a run relates to the paragraph being accumulated"""
    SAME_LINE = "same-line"
    NEXT_LINE = "next-line"
    NEW_PARAGRAPH = "new-paragraph"


class TextRun(BaseModel):
    """Individual positioned text run with resolved styling"""
    model_config = ConfigDict(frozen=True)

    text: str

    # Position (left edge, baseline) and extent
    x: float
    y: float
    width: float = 0.0
    height: float = 0.0

    # Font styling properties
    fontSize: float = DEFAULT_FONT_SIZE
    fontFamily: Optional[str] = None
    fontWeight: FontWeight = DEFAULT_FONT_WEIGHT
    fontStyle: str = DEFAULT_FONT_STYLE
    color: Optional[str] = None

    # Structural tag from the source document (marked content id etc.)
    semanticGroupId: Optional[str] = None

    # Renderer hints, not used for grouping
    letterSpacing: Optional[float] = None
    lineHeight: Optional[float] = None

    @field_validator("color", mode="before")
    @classmethod
    def _canonical_color(cls, value: Any) -> Optional[str]:
        return canonical_color_token(value)

    @property
    def origin(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @property
    def size(self) -> Tuple[float, float]:
        return (self.width, self.height)

    @property
    def right(self) -> float:
        return self.x + self.width

    def is_blank(self) -> bool:
        """True for runs that carry only whitespace"""
        return not self.text.strip()


# A line is an ordered, non-empty run sequence sharing one baseline
Line = List[TextRun]


class Paragraph(BaseModel):
    """Reconstructed paragraph: one or more lines in reading flow"""
    model_config = ConfigDict(frozen=True)

    type: Literal["paragraph"] = "paragraph"
    text: str
    lines: List[Line]

    # Bounding box anchored at the first run of the first line
    x: float
    y: float
    width: float
    height: float

    # Representative style (first run)
    fontSize: float
    fontFamily: Optional[str] = None
    fontWeight: FontWeight = DEFAULT_FONT_WEIGHT
    fontStyle: str = DEFAULT_FONT_STYLE
    color: Optional[str] = None
    letterSpacing: Optional[float] = None

    lineHeight: Optional[float] = None
    textAlign: Optional[TextAlign] = None

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def runs(self) -> Iterator[TextRun]:
        """All runs in line-then-run order"""
        return (run for line in self.lines for run in line)
