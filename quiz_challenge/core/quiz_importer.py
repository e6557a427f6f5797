"""Utilities for importing quizzes from human-friendly text files.

File format (header first, then question blocks separated by blank lines
or '---'):

    QUIZ: general
    TITLE: General Knowledge Quiz

    Q: Question text (supports markdown). Additional lines until the
       next marker are treated as part of the question.
    A: First option text
    B: Second option text
    C: Third option text   (two or more options, lettered in order)
    CORRECT: A|B|C|...

Example:

    QUIZ: maths
    TITLE: Quick Maths

    Q: What is 2 + 2?
    A: 3
    B: 4
    CORRECT: B

Question ids are assigned 1..n in file order. A catalog directory holds one
quiz per ``*.txt`` file and is loaded in file name order.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
import string

from quiz_challenge.core.models import Quiz, QuizQuestion

logger = logging.getLogger(__name__)


class QuizImportError(Exception):
    """Raised when a quiz definition cannot be parsed."""


@dataclass(slots=True)
class ImportedQuiz:
    """Container for an imported quiz and where it came from."""

    source_path: Path
    quiz: Quiz


_OPTION_LETTERS = string.ascii_uppercase


def load_quiz_from_file(file_path: Path) -> ImportedQuiz:
    text = file_path.read_text(encoding="utf-8")
    try:
        quiz = parse_quiz_text(text)
    except QuizImportError as exc:
        raise QuizImportError(f"{file_path.name}: {exc}") from exc
    return ImportedQuiz(source_path=file_path, quiz=quiz)


def load_catalog_from_directory(directory: Path) -> list[Quiz]:
    """Load every ``*.txt`` quiz file in ``directory`` sorted by name."""
    if not directory.is_dir():
        raise QuizImportError(f"Catalog directory '{directory}' does not exist.")

    quizzes: list[Quiz] = []
    seen_ids: set[str] = set()
    for file_path in sorted(directory.glob("*.txt")):
        imported = load_quiz_from_file(file_path)
        if imported.quiz.id in seen_ids:
            raise QuizImportError(f"{file_path.name}: duplicate quiz id '{imported.quiz.id}'.")
        seen_ids.add(imported.quiz.id)
        quizzes.append(imported.quiz)
        logger.info(
            "Loaded quiz '%s' (%d questions) from %s",
            imported.quiz.id,
            imported.quiz.question_count,
            imported.source_path,
        )

    if not quizzes:
        raise QuizImportError(f"Catalog directory '{directory}' contains no quiz files.")
    return quizzes


def parse_quiz_text(text: str) -> Quiz:
    blocks = _split_blocks(text)
    if not blocks:
        raise QuizImportError("Quiz file is empty.")

    quiz_id, title, first_block = _parse_header(blocks[0])
    question_blocks = ([first_block] if first_block else []) + blocks[1:]
    if not question_blocks:
        raise QuizImportError("Quiz file did not contain any questions.")

    questions = [
        _parse_block(block, question_id=index)
        for index, block in enumerate(question_blocks, start=1)
    ]
    return Quiz(id=quiz_id, title=title, questions=tuple(questions))


def _split_blocks(text: str) -> list[str]:
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped == "---":
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        if stripped:
            current_block.append(raw_line)
        elif current_block:
            # Blank line encountered after content - finalize current block
            blocks.append("\n".join(current_block).strip())
            current_block = []
    if current_block:
        blocks.append("\n".join(current_block).strip())
    return [block for block in blocks if block]


def _parse_header(block: str) -> tuple[str, str, str]:
    """Read QUIZ/TITLE lines; return any remaining lines as a question block."""
    quiz_id: str | None = None
    title: str | None = None
    lines = block.splitlines()
    consumed = 0
    for raw_line in lines:
        line = raw_line.strip()
        upper = line.upper()
        if upper.startswith("QUIZ:"):
            quiz_id = line.split(":", 1)[1].strip()
        elif upper.startswith("TITLE:"):
            title = line.split(":", 1)[1].strip()
        else:
            break
        consumed += 1

    if not quiz_id:
        raise QuizImportError("Quiz id missing (QUIZ: ...)")
    if not title:
        raise QuizImportError("Quiz title missing (TITLE: ...)")
    return quiz_id, title, "\n".join(lines[consumed:]).strip()


def _parse_block(block: str, question_id: int) -> QuizQuestion:
    question_lines: list[str] = []
    options: dict[str, str] = {}
    correct_letter: str | None = None
    current_section: str | None = None

    for raw_line in block.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        upper = line.upper()
        if upper.startswith("Q:"):
            question_lines = [line[2:].strip()]
            current_section = "Q"
            continue

        if upper.startswith("CORRECT:"):
            correct_letter = line.split(":", 1)[1].strip().upper()
            current_section = None
            continue

        if len(line) > 2 and line[0].upper() in _OPTION_LETTERS and line[1] == ":":
            letter = line[0].upper()
            options[letter] = line[2:].strip()
            current_section = letter
            continue

        if current_section == "Q":
            question_lines.append(line)
        elif current_section in options:
            options[current_section] = options[current_section] + f"\n{line}"
        else:
            raise QuizImportError(
                f"Encountered text outside of a known section: '{line}'."
            )

    if not question_lines:
        raise QuizImportError(f"Question {question_id}: text missing (Q: ...)")
    if len(options) < 2:
        raise QuizImportError(f"Question {question_id}: at least two options (A, B, ...) are required.")

    expected_letters = _OPTION_LETTERS[: len(options)]
    if sorted(options) != list(expected_letters):
        raise QuizImportError(
            f"Question {question_id}: options must be lettered consecutively from A."
        )

    option_list = [options[letter].strip() for letter in expected_letters]
    if any(not opt for opt in option_list):
        raise QuizImportError(f"Question {question_id}: option text cannot be empty.")

    if correct_letter is None:
        raise QuizImportError(f"Question {question_id}: CORRECT is required.")
    if correct_letter not in expected_letters:
        raise QuizImportError(
            f"Question {question_id}: CORRECT must be one of {', '.join(expected_letters)}."
        )

    question_text = "\n".join(question_lines).strip()
    if not question_text:
        raise QuizImportError(f"Question {question_id}: text cannot be empty.")

    return QuizQuestion(
        id=question_id,
        question_text=question_text,
        options=tuple(option_list),
        correct_option_index=expected_letters.index(correct_letter),
    )
