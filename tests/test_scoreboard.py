from quiz_challenge.core.models import AttemptResult, SubmittedAnswer
from quiz_challenge.core.services.scoreboard import compute_stats, format_two_decimals, rank_results
from quiz_challenge.core.services.scoring import score_submission


def _result(score, time_spent, timestamp="t"):
    return AttemptResult(
        quiz_id="q",
        score=score,
        total_questions=10,
        percentage=format_two_decimals(score * 10),
        time_spent=time_spent,
        timestamp=timestamp,
    )


def test_format_two_decimals():
    assert format_two_decimals(20) == "20.00"
    assert format_two_decimals(200 / 3) == "66.67"
    assert format_two_decimals(0) == "0.00"


def test_compute_stats_empty():
    stats = compute_stats("q", [])
    assert stats.to_dict() == {"quizId": "q", "totalAttempts": 0, "averageScore": 0, "highestScore": 0}


def test_compute_stats_average_and_highest():
    stats = compute_stats("q", [_result(1, 10), _result(2, 10), _result(2, 10)])
    assert stats.total_attempts == 3
    assert stats.average_score == "1.67"
    assert stats.highest_score == 2


def test_rank_results_is_stable_for_full_ties():
    first = _result(5, 12, timestamp="first")
    second = _result(5, 12, timestamp="second")
    ranked = rank_results([_result(3, 1), first, second, _result(5, 30)])
    assert [r.timestamp for r in ranked[:2]] == ["first", "second"]
    assert [r.score for r in ranked] == [5, 5, 5, 3]
    assert ranked[2].time_spent == 30


def test_rank_results_respects_limit():
    ranked = rank_results([_result(i % 4, i) for i in range(20)], limit=3)
    assert len(ranked) == 3
    assert all(r.score == 3 for r in ranked)
    assert [r.time_spent for r in ranked] == [3, 7, 11]


def test_score_submission_keeps_order_and_counts_full_quiz(small_quiz):
    result = score_submission(
        small_quiz,
        [SubmittedAnswer(question_id=2, answer=0), SubmittedAnswer(question_id=1, answer=None)],
        time_spent=3.5,
        timestamp="now",
    )
    assert result.score == 1
    assert result.total_questions == 2
    assert result.percentage == "50.00"
    assert result.time_spent == 3.5
    assert [d.question_id for d in result.detailed_results] == [2, 1]
    assert result.detailed_results[1].correct is False
