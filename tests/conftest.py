from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from quiz_challenge.core.models import Quiz, QuizQuestion
from quiz_challenge.core.quiz_manager import QuizManager
from quiz_challenge.server.api_server import create_api_app

FIXED_MOMENT = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)
FIXED_TIMESTAMP = "2024-01-02T03:04:05.678Z"


@pytest.fixture
def quiz_manager():
    """QuizManager over the built-in quizzes with a frozen clock."""
    return QuizManager(clock=lambda: FIXED_MOMENT)


@pytest.fixture
def client(quiz_manager):
    """Fixture for FastAPI test client wired to ``quiz_manager``."""
    with TestClient(create_api_app(quiz_manager)) as test_client:
        yield test_client


@pytest.fixture
def small_quiz():
    """Two-question quiz for scoring tests."""
    return Quiz(
        id="mini",
        title="Mini Quiz",
        questions=(
            QuizQuestion(id=1, question_text="1 + 1?", options=("1", "2"), correct_option_index=1),
            QuizQuestion(id=2, question_text="Sky colour?", options=("Blue", "Green", "Red"), correct_option_index=0),
        ),
    )
