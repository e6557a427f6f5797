"""Quiz-related constants shared across UI and core layers."""

QUESTION_TIME_LIMIT_SECONDS: int = 15
TIME_LIMIT_WARNING_SECONDS: int = 5
ANSWER_FEEDBACK_DELAY_MS: int = 1500
COUNTDOWN_TICK_INTERVAL_MS: int = 1000
LEADERBOARD_SIZE: int = 10
