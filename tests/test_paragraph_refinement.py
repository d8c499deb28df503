"""Unit tests for :mod:`textflow.processors.paragraph_refinement`."""
from __future__ import annotations

from typing import List

import pytest

from textflow.models.text_types import Paragraph, TextAlign, TextRun
from textflow.processors.paragraph_refinement import (
    classify_text_align,
    estimate_line_height,
    refine_paragraph,
)
from textflow.processors.text_grouping import group_text_runs


def _run(x: float, y: float = 100.0, width: float = 40.0, text: str = "word") -> TextRun:
    return TextRun(text=text, x=x, y=y, width=width, height=12, fontSize=12, color="#000000")


def _lines(*extents) -> List[List[TextRun]]:
    """One single-run line per (x, width) pair, stacked 15 units apart."""
    return [[_run(x, 100 - 15 * index, width)] for index, (x, width) in enumerate(extents)]


def _paragraph(lines: List[List[TextRun]], width: float) -> Paragraph:
    anchor = lines[0][0]
    return Paragraph(
        text=" ".join(run.text for line in lines for run in line),
        lines=lines,
        x=anchor.x,
        y=anchor.y,
        width=width,
        height=anchor.height,
        fontSize=anchor.fontSize,
        color=anchor.color,
    )


def test_two_line_paragraph_gets_line_height_and_height() -> None:
    paragraphs = group_text_runs([_run(0, 100, text="Hello"), _run(3, 82, text="world")])

    assert len(paragraphs) == 1
    paragraph = paragraphs[0]
    assert paragraph.lineHeight == pytest.approx(18)
    assert paragraph.height == pytest.approx(36)
    assert paragraph.textAlign is not None


def test_centered_lines_through_grouping() -> None:
    first = _run(0, 100, width=100)
    second = _run(10, 85, width=80)

    paragraph = group_text_runs([first, second])[0]

    assert paragraph.width == 100
    assert paragraph.textAlign is TextAlign.CENTER


def test_classify_center() -> None:
    lines = _lines((0, 300), (50.5, 199), (100, 101))

    assert classify_text_align(lines, 0, 300) is TextAlign.CENTER


def test_classify_falls_back_to_left_when_one_line_is_off() -> None:
    lines = _lines((0, 300), (50.5, 199), (150, 101))

    assert classify_text_align(lines, 0, 300) is TextAlign.LEFT


def test_classify_right() -> None:
    lines = _lines((0, 300), (100, 200), (250, 50))

    assert classify_text_align(lines, 0, 300) is TextAlign.RIGHT


def test_center_wins_over_right_for_full_width_lines() -> None:
    lines = _lines((0, 300), (1, 298), (0.5, 300))

    assert classify_text_align(lines, 0, 300) is TextAlign.CENTER


def test_classify_left() -> None:
    lines = _lines((0, 300), (0, 150))

    assert classify_text_align(lines, 0, 300) is TextAlign.LEFT


def test_classify_uses_full_line_extent() -> None:
    # right edge is taken from the last run of the line
    lines = [
        [_run(0, 100, 300)],
        [_run(200, 85, 40), _run(260, 85, 40)],
    ]

    assert classify_text_align(lines, 0, 300) is TextAlign.RIGHT


def test_custom_alignment_tolerance() -> None:
    lines = _lines((0, 300), (58, 199))  # 7.5 off centre

    assert classify_text_align(lines, 0, 300) is TextAlign.LEFT
    assert classify_text_align(lines, 0, 300, tolerance=8) is TextAlign.CENTER


def test_estimate_line_height_regular_spacing() -> None:
    lines = [[_run(0, 100)], [_run(0, 85)], [_run(0, 70)]]

    assert estimate_line_height(lines) == pytest.approx(15)


def test_estimate_line_height_skips_non_positive_gaps() -> None:
    lines = [[_run(0, 100)], [_run(0, 110)], [_run(0, 95)]]

    assert estimate_line_height(lines) == pytest.approx(15)


def test_estimate_line_height_without_positive_gap() -> None:
    lines = [[_run(0, 100)], [_run(0, 100)]]

    assert estimate_line_height(lines) is None
    assert estimate_line_height(lines[:1]) is None


def test_refine_keeps_single_line_paragraph() -> None:
    paragraph = _paragraph([[_run(0), _run(45)]], width=85)

    assert refine_paragraph(paragraph) is paragraph


def test_refine_without_line_height_keeps_height() -> None:
    lines = [[_run(0, 100)], [_run(0, 100)]]
    paragraph = _paragraph(lines, width=40)

    refined = refine_paragraph(paragraph)

    assert refined.lineHeight is None
    assert refined.height == paragraph.height
    assert refined.textAlign is TextAlign.CENTER
    assert paragraph.textAlign is None
