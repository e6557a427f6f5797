"""Rendering utilities for displaying quiz questions and result summaries."""

from __future__ import annotations

from collections.abc import Sequence
from html import escape

from quiz_challenge.core.markdown_renderer import renderer
from quiz_challenge.core.models import DetailedResult
from quiz_challenge.core.services.quiz_session import RecordedAnswer


def option_label(index: int) -> str:
    return chr(ord("A") + index)


def render_question(question_text: str, font_size: int = 14) -> str:
    """Render the question text as rich text for a ``QLabel``.

    Args:
        question_text: The question text (supports Markdown)
        font_size: Font size in points for the question text (default 14)

    Returns:
        HTML string ready for display in a rich-text label
    """
    fragment = renderer.render_fragment(question_text)
    return f'<div style="font-size: {font_size}pt; font-weight: bold;">{fragment}</div>'


def render_option(index: int, option_text: str) -> str:
    return f"{option_label(index)}. {option_text or '(empty)'}"


def render_answer_summary(
    answers: Sequence[RecordedAnswer],
    question_count: int,
    details: Sequence[DetailedResult] = (),
) -> str:
    """Build the per-question correctness list shown on the result page."""
    detail_by_id = {detail.question_id: detail for detail in details}
    rows: list[str] = []
    for index in range(question_count):
        answer = answers[index] if index < len(answers) else None
        if answer is None or answer.correct is None:
            mark, color = "?", "#666666"
        elif answer.correct:
            mark, color = "✓", "#107C10"
        else:
            mark, color = "✗", "#D13438"

        note = ""
        detail = detail_by_id.get(answer.question_id) if answer else None
        if detail is not None and not detail.correct:
            correct_text = detail.options[detail.correct_answer]
            note = f", correct answer: {option_label(detail.correct_answer)}. {escape(correct_text)}"
        elif answer is not None and answer.answer is None:
            note = ", no answer"

        rows.append(
            f'<div><span style="color: {color}; font-weight: bold;">{mark}</span> '
            f"Question {index + 1}{note}</div>"
        )
    return "\n".join(rows)
