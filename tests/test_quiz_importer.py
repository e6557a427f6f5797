import logging
from pathlib import Path

import pytest

from quiz_challenge.core.quiz_importer import (
    QuizImportError,
    load_catalog_from_directory,
    load_quiz_from_file,
    parse_quiz_text,
)
from quiz_challenge.core.quiz_manager import QuizManager

SAMPLE_DIR = Path(__file__).resolve().parent.parent / "sample_quizzes"

MATHS_QUIZ = """\
QUIZ: maths
TITLE: Quick Maths

Q: What is 2 + 2?
A: 3
B: 4
CORRECT: B

Q: Which number is prime?
   Pick one.
A: 4
B: 6
C: 7
CORRECT: c
"""


def test_parse_quiz_text():
    quiz = parse_quiz_text(MATHS_QUIZ)
    assert quiz.id == "maths"
    assert quiz.title == "Quick Maths"
    assert [q.id for q in quiz.questions] == [1, 2]
    assert quiz.questions[0].options == ("3", "4")
    assert quiz.questions[0].correct_option_index == 1
    assert quiz.questions[1].question_text == "Which number is prime?\nPick one."
    assert quiz.questions[1].correct_option_index == 2


def test_header_may_share_block_with_first_question():
    quiz = parse_quiz_text("QUIZ: x\nTITLE: X\nQ: One?\nA: yes\nB: no\nCORRECT: A\n---\nQ: Two?\nA: yes\nB: no\nCORRECT: B")
    assert quiz.question_count == 2
    assert quiz.questions[1].correct_option_index == 1


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "empty"),
        ("TITLE: No id\n\nQ: a?\nA: 1\nB: 2\nCORRECT: A", "Quiz id missing"),
        ("QUIZ: x\n\nQ: a?\nA: 1\nB: 2\nCORRECT: A", "Quiz title missing"),
        ("QUIZ: x\nTITLE: X", "did not contain any questions"),
        ("QUIZ: x\nTITLE: X\n\nQ: a?\nA: 1\nCORRECT: A", "at least two options"),
        ("QUIZ: x\nTITLE: X\n\nQ: a?\nA: 1\nC: 2\nCORRECT: A", "lettered consecutively"),
        ("QUIZ: x\nTITLE: X\n\nQ: a?\nA: 1\nB: 2", "CORRECT is required"),
        ("QUIZ: x\nTITLE: X\n\nQ: a?\nA: 1\nB: 2\nCORRECT: D", "CORRECT must be one of A, B"),
        ("QUIZ: x\nTITLE: X\n\nA: 1\nB: 2\nCORRECT: A", "text missing"),
    ],
)
def test_parse_errors(text, message):
    with pytest.raises(QuizImportError, match=message):
        parse_quiz_text(text)


def test_load_quiz_from_file_prefixes_file_name(tmp_path):
    path = tmp_path / "broken.txt"
    path.write_text("QUIZ: x\nTITLE: X\n\nQ: a?\nA: 1\nB: 2", encoding="utf-8")
    with pytest.raises(QuizImportError, match=r"^broken\.txt: "):
        load_quiz_from_file(path)


def test_load_catalog_sorted_by_file_name(tmp_path):
    (tmp_path / "b.txt").write_text(MATHS_QUIZ, encoding="utf-8")
    (tmp_path / "a.txt").write_text(MATHS_QUIZ.replace("maths", "algebra"), encoding="utf-8")
    (tmp_path / "notes.md").write_text("ignored", encoding="utf-8")

    quizzes = load_catalog_from_directory(tmp_path)
    assert [quiz.id for quiz in quizzes] == ["algebra", "maths"]


def test_load_catalog_rejects_duplicate_ids(tmp_path):
    (tmp_path / "a.txt").write_text(MATHS_QUIZ, encoding="utf-8")
    (tmp_path / "b.txt").write_text(MATHS_QUIZ, encoding="utf-8")
    with pytest.raises(QuizImportError, match="duplicate quiz id 'maths'"):
        load_catalog_from_directory(tmp_path)


def test_load_catalog_requires_quiz_files(tmp_path):
    with pytest.raises(QuizImportError, match="contains no quiz files"):
        load_catalog_from_directory(tmp_path)
    with pytest.raises(QuizImportError, match="does not exist"):
        load_catalog_from_directory(tmp_path / "missing")


def test_sample_catalog_serves_through_manager():
    manager = QuizManager.from_catalog_dir(SAMPLE_DIR)
    quiz = manager.get_quiz("space")
    assert quiz.title == "Space Quiz"
    assert [q.correct_option_index for q in quiz.questions] == [1, 2, 0]
    assert [len(q.options) for q in quiz.questions] == [3, 4, 2]


def test_loaded_quiz_keeps_its_source(tmp_path, caplog):
    path = tmp_path / "maths.txt"
    path.write_text(MATHS_QUIZ, encoding="utf-8")

    imported = load_quiz_from_file(path)
    assert imported.source_path == path
    assert imported.quiz.id == "maths"

    with caplog.at_level(logging.INFO, logger="quiz_challenge.core.quiz_importer"):
        load_catalog_from_directory(tmp_path)
    assert str(path) in caplog.text
