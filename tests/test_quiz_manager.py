from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone

import pytest

from quiz_challenge.core.errors import QuizNotFoundError
from quiz_challenge.core.models import SubmittedAnswer
from quiz_challenge.core.quiz_manager import QuizManager, format_timestamp


def test_format_timestamp_uses_milliseconds_and_z():
    moment = datetime(2024, 5, 6, 7, 8, 9, 123456, tzinfo=timezone.utc)
    assert format_timestamp(moment) == "2024-05-06T07:08:09.123Z"


def test_format_timestamp_converts_to_utc():
    moment = datetime(2024, 5, 6, 9, 0, 0, tzinfo=timezone(timedelta(hours=2)))
    assert format_timestamp(moment) == "2024-05-06T07:00:00.000Z"


def test_default_catalog_is_loaded():
    manager = QuizManager()
    assert [quiz.id for quiz in manager.list_quizzes()] == ["general", "science"]
    assert manager.get_quiz("general").question_count == 10


def test_custom_quizzes_replace_defaults(small_quiz):
    manager = QuizManager([small_quiz])
    assert [quiz.id for quiz in manager.list_quizzes()] == ["mini"]
    with pytest.raises(QuizNotFoundError):
        manager.get_quiz("general")


def test_submit_unknown_quiz_leaves_log_untouched(quiz_manager):
    with pytest.raises(QuizNotFoundError) as excinfo:
        quiz_manager.submit_answers("nonexistent", [SubmittedAnswer(question_id=1, answer=0)])
    assert excinfo.value.quiz_id == "nonexistent"
    assert quiz_manager.get_attempt_count() == 0


def test_submit_records_attempt(small_quiz):
    manager = QuizManager([small_quiz], clock=lambda: datetime(2024, 1, 1, tzinfo=timezone.utc))
    result = manager.submit_answers(
        "mini",
        [SubmittedAnswer(question_id=1, answer=1), SubmittedAnswer(question_id=2, answer=2)],
        time_spent=7,
    )
    assert result.score == 1
    assert result.percentage == "50.00"
    assert result.timestamp == "2024-01-01T00:00:00.000Z"
    assert manager.get_attempt_count() == 1
    assert manager.get_leaderboard("mini") == [result]


def test_stats_are_per_quiz(quiz_manager):
    quiz_manager.submit_answers("general", [SubmittedAnswer(question_id=1, answer=2)])
    stats = quiz_manager.get_stats("science")
    assert stats.total_attempts == 0
    assert stats.average_score == 0
    assert quiz_manager.get_stats("general").average_score == "1.00"


def test_from_catalog_dir_without_directory_uses_defaults():
    manager = QuizManager.from_catalog_dir(None)
    assert len(manager.list_quizzes()) == 2


def test_concurrent_submissions_are_all_recorded(quiz_manager):
    submissions = 200

    def submit(index):
        return quiz_manager.submit_answers(
            "science",
            [SubmittedAnswer(question_id=1, answer=2)],
            time_spent=index,
        )

    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(submit, range(submissions)))

    assert len(results) == submissions
    assert quiz_manager.get_attempt_count() == submissions
    stats = quiz_manager.get_stats("science")
    assert stats.total_attempts == submissions
    assert stats.average_score == "1.00"
    board = quiz_manager.get_leaderboard("science")
    assert [r.time_spent for r in board] == list(range(10))
