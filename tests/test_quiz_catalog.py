import pytest

from quiz_challenge.core.errors import QuizNotFoundError
from quiz_challenge.core.models import Quiz, QuizQuestion
from quiz_challenge.core.services.quiz_catalog import QuizCatalog


def _question(question_id=1, text="Question?", options=("A", "B"), correct=0):
    return QuizQuestion(id=question_id, question_text=text, options=options, correct_option_index=correct)


def _quiz(quiz_id="q", title="Title", questions=None):
    return Quiz(id=quiz_id, title=title, questions=(_question(),) if questions is None else questions)


def test_catalog_preserves_order_and_lookup():
    catalog = QuizCatalog([_quiz("b"), _quiz("a")])
    assert [quiz.id for quiz in catalog.list_quizzes()] == ["b", "a"]
    assert catalog.get_quiz("a").id == "a"
    assert len(catalog) == 2


def test_unknown_quiz_raises():
    catalog = QuizCatalog([_quiz()])
    with pytest.raises(QuizNotFoundError, match="Quiz not found"):
        catalog.get_quiz("missing")


def test_text_is_trimmed():
    catalog = QuizCatalog([_quiz(title="  Spaced  ", questions=(_question(text=" Why? ", options=(" x ", "y")),))])
    quiz = catalog.get_quiz("q")
    assert quiz.title == "Spaced"
    assert quiz.questions[0].question_text == "Why?"
    assert quiz.questions[0].options == ("x", "y")


@pytest.mark.parametrize(
    "quizzes, message",
    [
        ([_quiz("a"), _quiz("a")], "Duplicate quiz id"),
        ([_quiz(" ")], "Quiz id must not be empty"),
        ([_quiz(title="")], "must have a title"),
        ([_quiz(questions=())], "at least one question"),
        ([_quiz(questions=(_question(1), _question(1)))], "duplicate question id"),
        ([_quiz(questions=(_question(options=("only",)),))], "at least two options"),
        ([_quiz(questions=(_question(options=("A", " ")),))], "cannot be empty"),
        ([_quiz(questions=(_question(correct=2),))], "Correct option index"),
        ([_quiz(questions=(_question(text=""),))], "text must not be empty"),
    ],
)
def test_invalid_quizzes_are_rejected(quizzes, message):
    with pytest.raises(ValueError, match=message):
        QuizCatalog(quizzes)
