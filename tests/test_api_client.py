from unittest.mock import MagicMock

import pytest
import requests

from quiz_challenge.client.api_client import ApiClientError, QuizApiClient
from quiz_challenge.core.models import SubmittedAnswer


def _response(status_code=200, body=None):
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.ok = status_code < 400
    if body is None:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = body
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api_client(session):
    return QuizApiClient("http://quiz.test/", timeout=5.0, session=session)


def test_list_quizzes(api_client, session):
    session.request.return_value = _response(
        body={"quizzes": [{"id": "general", "title": "General Knowledge Quiz", "questionCount": 10}]}
    )
    quizzes = api_client.list_quizzes()
    assert quizzes[0].id == "general"
    assert quizzes[0].question_count == 10
    session.request.assert_called_once_with("GET", "http://quiz.test/api/quizzes", json=None, timeout=5.0)


def test_get_questions(api_client, session):
    session.request.return_value = _response(
        body={"id": "q", "title": "Q", "questions": [{"id": 1, "question": "Why?", "options": ["a", "b"]}]}
    )
    questions = api_client.get_questions("q")
    assert questions[0].question_text == "Why?"
    assert questions[0].options == ("a", "b")


def test_submit_answers_posts_camel_case(api_client, session):
    session.request.return_value = _response(
        body={
            "quizId": "q",
            "score": 1,
            "totalQuestions": 2,
            "percentage": "50.00",
            "timeSpent": 9,
            "timestamp": "2024-01-01T00:00:00.000Z",
            "detailedResults": [
                {
                    "questionId": 1,
                    "question": "Why?",
                    "userAnswer": 0,
                    "correctAnswer": 0,
                    "correct": True,
                    "options": ["a", "b"],
                }
            ],
        }
    )
    result = api_client.submit_answers(
        "q",
        [SubmittedAnswer(question_id=1, answer=0), SubmittedAnswer(question_id=2, answer=None)],
        time_spent=9,
    )
    session.request.assert_called_once_with(
        "POST",
        "http://quiz.test/api/quiz/q/submit",
        json={
            "answers": [{"questionId": 1, "answer": 0}, {"questionId": 2, "answer": None}],
            "timeSpent": 9,
        },
        timeout=5.0,
    )
    assert result.percentage == "50.00"
    assert result.detailed_results[0].correct is True


def test_stats_and_leaderboard(api_client, session):
    session.request.side_effect = [
        _response(body={"quizId": "q", "totalAttempts": 0, "averageScore": 0, "highestScore": 0}),
        _response(body={"leaderboard": []}),
    ]
    assert api_client.get_stats("q").average_score == 0
    assert api_client.get_leaderboard("q") == []


def test_http_error_uses_server_message(api_client, session):
    session.request.return_value = _response(404, body={"error": "Quiz not found"})
    with pytest.raises(ApiClientError, match="Quiz not found") as excinfo:
        api_client.get_questions("missing")
    assert excinfo.value.status_code == 404


def test_http_error_without_json_body(api_client, session):
    session.request.return_value = _response(500)
    with pytest.raises(ApiClientError, match="status 500"):
        api_client.list_quizzes()


def test_connection_error(api_client, session):
    session.request.side_effect = requests.ConnectionError("refused")
    with pytest.raises(ApiClientError, match="Unable to reach the quiz server") as excinfo:
        api_client.list_quizzes()
    assert excinfo.value.status_code is None


def test_invalid_json_on_success(api_client, session):
    session.request.return_value = _response(200)
    with pytest.raises(ApiClientError, match="Invalid response"):
        api_client.get_stats("q")


def test_check_health(api_client, session):
    session.request.return_value = _response(body={"status": "OK", "timestamp": "x"})
    assert api_client.check_health() is True
    session.request.side_effect = requests.Timeout("slow")
    assert api_client.check_health() is False
